"""Typed document model for ampdoc.

All nodes are frozen dataclasses with slots for:
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Span (inline, styled text run)
Block (block-level elements)
├── Paragraph
├── Heading
├── Quote
├── ListBlock
├── ListItem
├── Image
├── CodeBlock
├── ThematicBreak
└── CustomBlock
Document (frontmatter + blocks)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal


class Style(Enum):
    """Externally visible style of a span.

    Values are the lowercase tags used on the wire.
    """

    PLAIN = "plain"
    STRONG = "strong"
    ITALIC = "italic"
    CODE = "code"


# =============================================================================
# Inline
# =============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """One contiguous, typed run of inline text.

    Attributes:
        style: Span style
        value: Text content with closing delimiters stripped

    """

    style: Style
    value: str


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True, slots=True)
class Paragraph(Block):
    """Single line of body text."""

    body: tuple[Span, ...]


@dataclass(frozen=True, slots=True)
class Heading(Block):
    """ATX-style heading (# through ######)."""

    body: tuple[Span, ...]
    level: Literal[1, 2, 3, 4, 5, 6]


@dataclass(frozen=True, slots=True)
class Quote(Block):
    """Block quote; lines are joined with newlines before tokenizing."""

    body: tuple[Span, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Block):
    """Single list item."""

    body: tuple[Span, ...]


@dataclass(frozen=True, slots=True)
class ListBlock(Block):
    """Ordered (1.) or unordered (-) list.

    Attributes:
        items: List items in source order
        ordered: True only when every item is numbered

    """

    items: tuple[ListItem, ...]
    ordered: bool


@dataclass(frozen=True, slots=True)
class Image(Block):
    """Standalone image: ![alt](url) with optional caption."""

    url: str
    alt_text: str
    caption: str


@dataclass(frozen=True, slots=True)
class CodeBlock(Block):
    """Fenced code block. Content is kept verbatim."""

    lang: str | None
    body: str


@dataclass(frozen=True, slots=True)
class ThematicBreak(Block):
    """Horizontal rule (---)."""


@dataclass(frozen=True, slots=True)
class CustomBlock(Block):
    """Block produced by a user-registered block rule.

    Attributes:
        custom_type: Type tag chosen by the rule (e.g. "strikeThrough")
        data: Extra JSON-compatible fields carried by the block

    """

    custom_type: str
    data: dict[str, Any] = field(default_factory=dict, hash=False, compare=True)


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document:
    """Parse result for one source document.

    Attributes:
        frontmatter: Header key/value pairs (empty when no header)
        blocks: Block nodes in document order

    """

    frontmatter: dict[str, str] = field(default_factory=dict, hash=False)
    blocks: tuple[Block, ...] = ()


__all__ = [
    "Style",
    "Span",
    "Block",
    "Paragraph",
    "Heading",
    "Quote",
    "ListItem",
    "ListBlock",
    "Image",
    "CodeBlock",
    "ThematicBreak",
    "CustomBlock",
    "Document",
]
