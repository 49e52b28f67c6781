"""Span extraction for inline tokenization.

Given a slice and the delimiter kind classified at its head, produces one
span plus the unconsumed remainder. Two pattern families exist per
delimiter kind:

- Closed: ``<open><content><close>``. Emphasis content may not contain any
  marker character; code content may contain anything but a backtick.
- Unclosed: the opening delimiter plus text up to the next marker
  character, emitted as literal Plain text with the delimiter kept.
  An unclosed code span swallows the rest of the slice.

Extraction never raises for a non-empty slice: a markup interpretation
that does not close degrades to Plain text.

Thread Safety:
Patterns are compiled once at import and only read afterwards.

"""

import re
from typing import NamedTuple

from ampdoc.nodes import Span, Style
from ampdoc.parsing.charsets import MARKER_CLASS
from ampdoc.parsing.inline.classifier import RawDelimiterKind

_NOT_MARKER = f"[^{MARKER_CLASS}]"

_CLOSED_PATTERNS: dict[RawDelimiterKind, re.Pattern[str]] = {
    RawDelimiterKind.STRONG: re.compile(rf"\*\*({_NOT_MARKER}+)\*\*"),
    RawDelimiterKind.ASTERISK_ITALIC: re.compile(rf"\*({_NOT_MARKER}+)\*"),
    RawDelimiterKind.UNDERSCORE_ITALIC: re.compile(rf"_({_NOT_MARKER}+)_"),
    RawDelimiterKind.CODE: re.compile(r"`([^`]+)`"),
}

_UNCLOSED_PATTERNS: dict[RawDelimiterKind, re.Pattern[str]] = {
    RawDelimiterKind.STRONG: re.compile(rf"\*\*{_NOT_MARKER}*"),
    RawDelimiterKind.ASTERISK_ITALIC: re.compile(rf"\*{_NOT_MARKER}*"),
    RawDelimiterKind.UNDERSCORE_ITALIC: re.compile(rf"_{_NOT_MARKER}*"),
    # No marker-seeking: an unterminated code span runs to the end
    RawDelimiterKind.CODE: re.compile(r"`.*", re.DOTALL),
}

_PLAIN_PATTERN = re.compile(rf"{_NOT_MARKER}+")


class Extraction(NamedTuple):
    """Result of one extraction step.

    Attributes:
        span: The emitted span.
        rest: Unconsumed remainder, always shorter than the input slice.

    """

    span: Span
    rest: str


def extract(text: str, kind: RawDelimiterKind) -> Extraction:
    """Extract one span from the head of text.

    Args:
        text: Non-empty slice to consume from
        kind: Delimiter kind classified at the head of text

    Returns:
        Extraction with the span and the remainder after it

    Raises:
        ValueError: If text is empty (nothing can be consumed)

    Example:
        >>> extract("**bold** rest", RawDelimiterKind.STRONG)
        Extraction(span=Span(style=<Style.STRONG: 'strong'>, value='bold'), rest=' rest')
        >>> extract("**open _x", RawDelimiterKind.STRONG)
        Extraction(span=Span(style=<Style.PLAIN: 'plain'>, value='**open '), rest='_x')
    """
    if not text:
        msg = "Cannot extract a span from an empty slice"
        raise ValueError(msg)

    if kind is RawDelimiterKind.PLAIN:
        match = _PLAIN_PATTERN.match(text)
        if match:
            return _consume_plain(text, match.end())
        return _consume_plain(text, 1)

    closed = _CLOSED_PATTERNS[kind].match(text)
    if closed:
        return Extraction(Span(kind.style, closed.group(1)), text[closed.end() :])

    unclosed = _UNCLOSED_PATTERNS[kind].match(text)
    if unclosed:
        return _consume_plain(text, unclosed.end())

    # Kind does not describe the head of text; take one literal character
    return _consume_plain(text, 1)


def _consume_plain(text: str, end: int) -> Extraction:
    return Extraction(Span(Style.PLAIN, text[:end]), text[end:])


__all__ = ["Extraction", "extract"]
