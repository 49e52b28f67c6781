"""
ampdoc — Lightweight markup to typed document model

Parses a document made of an optional ``---`` frontmatter header and a
markdown-style body into immutable, typed nodes: blocks (paragraphs,
headings, quotes, lists, images, code blocks, thematic breaks) whose text
is split into styled spans (plain, strong, italic, code).

Quick Start:
    >>> from ampdoc import parse
    >>> doc = parse("---\\ntitle: Hello\\n---\\nSome **bold** text")
    >>> doc.frontmatter
    {'title': 'Hello'}
    >>> [(s.style.value, s.value) for s in doc.blocks[0].body]
    [('plain', 'Some '), ('strong', 'bold'), ('plain', ' text')]

    >>> # Inline tokenizer on its own
    >>> from ampdoc import tokenize
    >>> tokenize("*unclosed")
    [Span(style=<Style.PLAIN: 'plain'>, value='*unclosed')]

Custom Blocks:
    >>> from ampdoc import Amp, CustomBlock
    >>> amp = Amp().extend([(r"~~(.+?)~~", lambda s: CustomBlock("strikeThrough", {"body": s[2:-2]}))])
    >>> amp.parse("~~gone~~").blocks[0].custom_type
    'strikeThrough'

Installation:
    pip install ampdoc              # zero runtime dependencies
"""

import re
from collections.abc import Iterable

from ampdoc.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from ampdoc.errors import AmpdocError, BlockRuleError, ParseError
from ampdoc.nodes import (
    Block,
    CodeBlock,
    CustomBlock,
    Document,
    Heading,
    Image,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
    Span,
    Style,
    ThematicBreak,
)
from ampdoc.parser import Parser
from ampdoc.parsing.blocks import BUILTIN_BLOCK_RULES, BlockParser, BlockRule, parse_blocks
from ampdoc.parsing.frontmatter import SplitResult, parse_frontmatter, split
from ampdoc.parsing.inline import (
    Extraction,
    RawDelimiterKind,
    classify,
    extract,
    merge_spans,
    tokenize,
)
from ampdoc.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"

type RuleSpec = BlockRule | tuple[re.Pattern[str] | str, BlockParser]


def parse(
    source: str,
    *,
    source_file: str | None = None,
    block_rules: Iterable[RuleSpec] | None = None,
) -> Document:
    """Parse a document into the typed document model.

    Args:
        source: Raw document text (optional frontmatter header + body)
        source_file: Optional source file path for error messages
        block_rules: Extra block rules, tried before the built-in ones

    Returns:
        Document with frontmatter mapping and blocks

    Example:
        >>> doc = parse("# Hello *World*")
        >>> doc.blocks[0].level
        1
    """
    config = ParseConfig(block_rules=_to_block_rules(block_rules or ()))
    with parse_config_context(config):
        return Parser(source, source_file=source_file).parse()


def _to_block_rules(rules: Iterable[RuleSpec], offset: int = 0) -> tuple[BlockRule, ...]:
    """Normalize rules given as BlockRule or (pattern, parser) pairs."""
    result: list[BlockRule] = []
    for index, rule in enumerate(rules, start=offset):
        if isinstance(rule, BlockRule):
            result.append(rule)
            continue
        name = f"custom{index}"
        try:
            pattern, parser = rule
        except (TypeError, ValueError) as e:
            msg = "expected a BlockRule or a (pattern, parser) pair"
            raise BlockRuleError(name, msg) from e
        result.append(BlockRule.create(name, pattern, parser))
    return tuple(result)


class Amp:
    """High-level document processor with extensible block rules.

    Usage:
        >>> amp = Amp()
        >>> doc = amp.parse("- one\\n- two")
        >>> doc.blocks[0].ordered
        False

        >>> # Custom blocks are tried before the built-in rules
        >>> amp.extend([(r"==(.+?)==", lambda s: CustomBlock("highlight", {"body": s[2:-2]}))])
        <ampdoc.Amp object at ...>

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to parse
        concurrently once extended; extend() itself is not synchronized.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        block_rules: Iterable[RuleSpec] | None = None,
        merge_adjacent_spans: bool = False,
    ) -> None:
        """Initialize processor.

        Args:
            block_rules: Custom block rules, tried before the built-in rules
            merge_adjacent_spans: Merge consecutive same-style spans in bodies
        """
        self._config = ParseConfig(
            block_rules=_to_block_rules(block_rules or ()),
            merge_adjacent_spans=merge_adjacent_spans,
        )

    @property
    def config(self) -> ParseConfig:
        return self._config

    def extend(self, rules: Iterable[RuleSpec]) -> "Amp":
        """Register additional custom block rules.

        New rules are tried after previously registered custom rules and
        before the built-in rules.

        Args:
            rules: BlockRule instances or (pattern, parser) pairs

        Returns:
            self, for chaining

        Raises:
            BlockRuleError: If a rule is malformed
        """
        existing = self._config.block_rules
        added = _to_block_rules(rules, offset=len(existing))
        self._config = ParseConfig(
            block_rules=existing + added,
            merge_adjacent_spans=self._config.merge_adjacent_spans,
        )
        return self

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source into a Document.

        Thread Safety:
            Sets config via ContextVar (thread-local). Safe for concurrent use.

        """
        set_parse_config(self._config)
        try:
            return Parser(source, source_file=source_file).parse()
        finally:
            reset_parse_config()

    def parse_many(self, sources: Iterable[str]) -> list[Document]:
        """Parse multiple sources; sets config once for the whole batch.

        Example:
            >>> docs = Amp().parse_many(["# Doc 1", "# Doc 2"])
            >>> len(docs)
            2
        """
        set_parse_config(self._config)
        try:
            return [Parser(source).parse() for source in sources]
        finally:
            reset_parse_config()

    __call__ = parse


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "Amp",
    "Parser",
    # Inline tokenizer
    "classify",
    "extract",
    "tokenize",
    "merge_spans",
    "Extraction",
    "RawDelimiterKind",
    # Frontmatter
    "split",
    "parse_frontmatter",
    "SplitResult",
    # Blocks
    "parse_blocks",
    "BlockRule",
    "BUILTIN_BLOCK_RULES",
    # Nodes
    "Style",
    "Span",
    "Block",
    "Paragraph",
    "Heading",
    "Quote",
    "ListBlock",
    "ListItem",
    "Image",
    "CodeBlock",
    "ThematicBreak",
    "CustomBlock",
    "Document",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "AmpdocError",
    "ParseError",
    "BlockRuleError",
]
