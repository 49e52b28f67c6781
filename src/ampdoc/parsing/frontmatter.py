"""Frontmatter handling for ampdoc.

Splits a raw document into its ``---`` delimited header and the body text,
and extracts ``key: value`` pairs from the header.

Example:
    >>> head, body = split("---\\ntitle: Hi\\n---\\n# Heading")
    >>> parse_frontmatter(head)
    {'title': 'Hi'}
    >>> body
    '# Heading'

"""

import re
from typing import NamedTuple

from ampdoc.parsing.charsets import QUOTE_CHARS
from ampdoc.utils.logger import get_logger

logger = get_logger(__name__)

_HEAD_PATTERN = re.compile(r"(---\n[\s\S]*?^---)\n*", re.MULTILINE)
_CONTENT_PATTERN = re.compile(r"---\n+([\s\S]+?)^---", re.MULTILINE)
_LINE_SPLIT_PATTERN = re.compile(r"\n+")
_PAIR_PATTERN = re.compile(r"(.+?):\s(.*)")


class SplitResult(NamedTuple):
    """Header and body of a document.

    Attributes:
        head: The header block including both ``---`` lines, or "".
        body: Trimmed text after the header.

    """

    head: str
    body: str


def split(source: str) -> SplitResult:
    """Split a document into its frontmatter header and body.

    The header must open the (trimmed) document with a ``---`` line and
    ends at the next ``---``. Without one the head is empty and the whole
    trimmed source is the body.
    """
    trimmed = source.strip()
    match = _HEAD_PATTERN.match(trimmed)
    head = match.group(1) if match else ""
    body = trimmed[len(head) :].strip()
    return SplitResult(head, body)


def parse_frontmatter(head: str) -> dict[str, str]:
    """Extract key/value pairs from a frontmatter header.

    Only lines shaped ``key: value`` (a colon followed by whitespace)
    count. Keys and values are trimmed, one pair of surrounding quotes is
    removed from values, and lines with a blank key are skipped. A header
    with no content, or no closing ``---``, yields an empty mapping.

    Args:
        head: Header block as returned by split()

    Returns:
        Mapping of key to string value, in header order
    """
    match = _CONTENT_PATTERN.search(head.strip())
    if match is None:
        return {}

    result: dict[str, str] = {}
    for line in _LINE_SPLIT_PATTERN.split(match.group(1)):
        if not line.strip():
            continue
        pair = _PAIR_PATTERN.match(line)
        if pair is None:
            logger.debug("Ignoring frontmatter line without separator: %r", line)
            continue
        key = pair.group(1).strip()
        if not key:
            logger.debug("Ignoring frontmatter line with blank key: %r", line)
            continue
        result[key] = _unquote(pair.group(2).strip())
    return result


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return value


__all__ = ["SplitResult", "parse_frontmatter", "split"]
