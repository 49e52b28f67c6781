"""Document parser producing the typed document model.

Runs the three document stages in order:
- split: separate the ``---`` frontmatter header from the body
- parse_frontmatter: header lines into a key/value mapping
- parse_blocks: body into blocks, each block's text tokenized into spans

Thread Safety:
- Parser produces an immutable Document (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from ampdoc.errors import ParseError
from ampdoc.nodes import Document
from ampdoc.parsing.blocks import parse_blocks
from ampdoc.parsing.frontmatter import parse_frontmatter, split
from ampdoc.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Parser for one source document.

    Usage:
        >>> doc = Parser("---\\ntitle: Hi\\n---\\n# Hello **World**").parse()
        >>> doc.frontmatter
        {'title': 'Hi'}

    Block rules come from the active ParseConfig (see ampdoc.config).

    """

    __slots__ = ("_source", "_source_file")

    def __init__(self, source: str, *, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Raw document text (optional header + body)
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file

    def parse(self) -> Document:
        """Parse source into a Document.

        Raises:
            ParseError: If a block rule fails on the body
        """
        head, body = split(self._source)
        frontmatter = parse_frontmatter(head) if head else {}

        try:
            blocks = parse_blocks(body)
        except ParseError as e:
            if e.source_file is not None or self._source_file is None:
                raise
            raise ParseError(
                e.message, block_type=e.block_type, source_file=self._source_file
            ) from e

        logger.debug(
            "Parsed %s: %d frontmatter keys, %d blocks",
            self._source_file or "<string>",
            len(frontmatter),
            len(blocks),
        )
        return Document(frontmatter=frontmatter, blocks=blocks)
