"""Block segmentation for ampdoc.

Splits body text into blocks with an ordered table of rules. Each rule
pairs a pattern anchored at the head of the remaining input with a
parser that turns the matched text into a Block. The first matching rule
wins; its match is consumed and the remainder is trimmed.

Built-in rule order:
    heading, quote, list, image, code, thematic break, paragraph

Custom rules from the active ParseConfig are tried before the built-ins.

Thread Safety:
Rule tables are module-level tuples of compiled patterns, never mutated.

"""

import re
from collections.abc import Callable, Sequence
from typing import Literal, NamedTuple, cast

from ampdoc.config import get_parse_config
from ampdoc.errors import BlockRuleError, ParseError
from ampdoc.nodes import (
    Block,
    CodeBlock,
    Heading,
    Image,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
    Span,
    ThematicBreak,
)
from ampdoc.parsing.inline import merge_spans, tokenize
from ampdoc.utils.logger import get_logger

logger = get_logger(__name__)

# PEP 695 type alias for block parser callables
type BlockParser = Callable[[str], Block]

_HEADING_PATTERN = re.compile(r"(#{1,6})\s(.+)")
_QUOTE_PATTERN = re.compile(r"(?:>\s.*\n?)+")
_LIST_PATTERN = re.compile(r"(?:(?:-|\d+\.)\s(.+)\n?)+")
_IMAGE_PATTERN = re.compile(r"!\[(.*)\]\((.+?)\)(.*)")
_CODE_PATTERN = re.compile(r"```(\w+)?\n([\s\S]*?)\n```")
_THEMATIC_BREAK_PATTERN = re.compile(r"-{3,}")
_PARAGRAPH_PATTERN = re.compile(r"([\s\S]+?)(?:\n|$)")

_QUOTE_CONTINUATION = re.compile(r"\n>[ ]?")
_QUOTE_LEAD = re.compile(r"^>\s")
_ORDERED_MARKER = re.compile(r"\d+\.")
_CAPTION_PARENS = re.compile(r"^\((.+)\)$")
_LINE_SPLIT = re.compile(r"\n+")


class BlockRule(NamedTuple):
    """Pattern/parser pair used by the block segmenter.

    Attributes:
        name: Rule name, used in logs and errors.
        pattern: Compiled pattern matched at the head of remaining input.
        parser: Callable turning the trimmed match into a Block.

    """

    name: str
    pattern: re.Pattern[str]
    parser: BlockParser

    @classmethod
    def create(
        cls, name: str, pattern: re.Pattern[str] | str, parser: BlockParser
    ) -> "BlockRule":
        """Build a validated rule, compiling string patterns.

        Raises:
            BlockRuleError: If the pattern is invalid or parser is not callable
        """
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise BlockRuleError(name, f"invalid pattern: {e}") from e
        elif not isinstance(pattern, re.Pattern):
            msg = f"pattern must be str or re.Pattern, got {type(pattern).__name__}"
            raise BlockRuleError(name, msg)
        if not callable(parser):
            raise BlockRuleError(name, "parser must be callable")
        return cls(name, pattern, parser)


def _inline(text: str) -> tuple[Span, ...]:
    spans = tokenize(text)
    if get_parse_config().merge_adjacent_spans:
        spans = merge_spans(spans)
    return tuple(spans)


def _require(pattern: re.Pattern[str], text: str, block_type: str) -> re.Match[str]:
    match = pattern.match(text)
    if match is None:
        raise ParseError(f"Invalid {block_type} block: {text!r}", block_type=block_type)
    return match


# =============================================================================
# Block parsers
# =============================================================================


def parse_heading_block(text: str) -> Heading:
    """Parse ``# text`` through ``###### text``."""
    match = _require(_HEADING_PATTERN, text, "heading")
    level = cast(Literal[1, 2, 3, 4, 5, 6], len(match.group(1)))
    return Heading(body=_inline(match.group(2)), level=level)


def parse_quote_block(text: str) -> Quote:
    """Parse consecutive ``> `` lines into one quote.

    Continuation prefixes are removed and the lines joined with newlines
    before inline tokenizing, so a bare ``>`` line becomes an empty line.
    """
    match = _require(_QUOTE_PATTERN, text, "quote")
    inner = _QUOTE_CONTINUATION.sub("\n", match.group(0))
    inner = _QUOTE_LEAD.sub("", inner, count=1)
    return Quote(body=_inline(inner))


def parse_list_block(text: str) -> ListBlock:
    """Parse ``- item`` / ``1. item`` lines. Ordered only if every line is numbered."""
    lines = [line for line in _LINE_SPLIT.split(text) if line.strip()]
    items: list[ListItem] = []
    ordered = bool(lines)
    for line in lines:
        match = _require(_LIST_PATTERN, line, "list")
        if not _ORDERED_MARKER.match(match.group(0)):
            ordered = False
        items.append(ListItem(body=_inline(match.group(1))))
    return ListBlock(items=tuple(items), ordered=ordered)


def parse_image_block(text: str) -> Image:
    """Parse ``![alt](url)`` with an optional trailing caption.

    A caption wrapped in parentheses is unwrapped.
    """
    match = _require(_IMAGE_PATTERN, text, "image")
    caption = _CAPTION_PARENS.sub(r"\1", match.group(3))
    return Image(url=match.group(2), alt_text=match.group(1), caption=caption)


def parse_code_block(text: str) -> CodeBlock:
    match = _require(_CODE_PATTERN, text, "code")
    return CodeBlock(lang=match.group(1) or None, body=match.group(2))


def parse_thematic_break_block(text: str) -> ThematicBreak:
    _require(_THEMATIC_BREAK_PATTERN, text, "thematicBreak")
    return ThematicBreak()


def parse_paragraph_block(text: str) -> Paragraph:
    match = _require(_PARAGRAPH_PATTERN, text, "paragraph")
    return Paragraph(body=_inline(match.group(1)))


BUILTIN_BLOCK_RULES: tuple[BlockRule, ...] = (
    BlockRule("heading", _HEADING_PATTERN, parse_heading_block),
    BlockRule("quote", _QUOTE_PATTERN, parse_quote_block),
    BlockRule("list", _LIST_PATTERN, parse_list_block),
    BlockRule("image", _IMAGE_PATTERN, parse_image_block),
    BlockRule("code", _CODE_PATTERN, parse_code_block),
    BlockRule("thematicBreak", _THEMATIC_BREAK_PATTERN, parse_thematic_break_block),
    BlockRule("paragraph", _PARAGRAPH_PATTERN, parse_paragraph_block),
)


# =============================================================================
# Segmentation
# =============================================================================


def active_block_rules() -> tuple[BlockRule, ...]:
    """Custom rules from the active config followed by the built-ins."""
    return get_parse_config().block_rules + BUILTIN_BLOCK_RULES


def parse_blocks(body: str, rules: Sequence[BlockRule] | None = None) -> tuple[Block, ...]:
    """Segment body text into blocks.

    Args:
        body: Body text with any frontmatter already removed
        rules: Rule table to use (defaults to active_block_rules())

    Returns:
        Blocks in document order; empty for blank input

    Raises:
        ParseError: If no rule matches the remaining input
    """
    if rules is None:
        rules = active_block_rules()

    blocks: list[Block] = []
    remaining = body.strip()

    while remaining:
        for rule in rules:
            match = rule.pattern.match(remaining)
            # Empty matches would never consume input
            if match is None or not match.group(0):
                continue
            blocks.append(rule.parser(match.group(0).strip()))
            logger.debug("Block rule %r consumed %d chars", rule.name, match.end())
            remaining = remaining[match.end() :].strip()
            break
        else:
            raise ParseError(f"No matching block found for input: {remaining[:40]!r}")

    return tuple(blocks)


__all__ = [
    "BUILTIN_BLOCK_RULES",
    "BlockParser",
    "BlockRule",
    "active_block_rules",
    "parse_blocks",
    "parse_code_block",
    "parse_heading_block",
    "parse_image_block",
    "parse_list_block",
    "parse_paragraph_block",
    "parse_quote_block",
    "parse_thematic_break_block",
]
