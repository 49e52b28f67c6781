"""Delimiter classification for inline spans.

Looks at the head of a text slice and decides which markup style, if any,
opens there. This is the first stage of inline tokenization; the span
extractor dispatches on its result.

Thread Safety:
Pure functions over immutable input. Safe to call from any thread.

"""

from enum import Enum, auto

from ampdoc.nodes import Style
from ampdoc.parsing.charsets import ASTERISK, BACKTICK, UNDERSCORE


class RawDelimiterKind(Enum):
    """Fine-grained opening delimiter kind used during extraction.

    Strong and AsteriskItalic share a leading character and must be told
    apart before matching; Code has different interior rules than the
    emphasis kinds. Both italic kinds collapse to Style.ITALIC.

    """

    PLAIN = auto()
    STRONG = auto()  # **
    ASTERISK_ITALIC = auto()  # *
    UNDERSCORE_ITALIC = auto()  # _
    CODE = auto()  # `

    @property
    def style(self) -> Style:
        """Externally visible style for a closed span of this kind."""
        return _KIND_STYLES[self]


_KIND_STYLES: dict[RawDelimiterKind, Style] = {
    RawDelimiterKind.PLAIN: Style.PLAIN,
    RawDelimiterKind.STRONG: Style.STRONG,
    RawDelimiterKind.ASTERISK_ITALIC: Style.ITALIC,
    RawDelimiterKind.UNDERSCORE_ITALIC: Style.ITALIC,
    RawDelimiterKind.CODE: Style.CODE,
}

_STRONG_OPEN = ASTERISK * 2


def classify(text: str) -> RawDelimiterKind:
    """Classify the opening delimiter at the head of text.

    Checked in priority order: ``**`` before ``*``, so ``"**x"`` is always
    Strong and never two stacked italic opens. Total over all inputs,
    including the empty string (Plain).

    Args:
        text: Slice to inspect

    Returns:
        RawDelimiterKind for the head of the slice

    Example:
        >>> classify("**bold**")
        <RawDelimiterKind.STRONG: 2>
        >>> classify("")
        <RawDelimiterKind.PLAIN: 1>
    """
    if text.startswith(_STRONG_OPEN):
        return RawDelimiterKind.STRONG
    if text.startswith(ASTERISK):
        return RawDelimiterKind.ASTERISK_ITALIC
    if text.startswith(UNDERSCORE):
        return RawDelimiterKind.UNDERSCORE_ITALIC
    if text.startswith(BACKTICK):
        return RawDelimiterKind.CODE
    return RawDelimiterKind.PLAIN


__all__ = ["RawDelimiterKind", "classify"]
