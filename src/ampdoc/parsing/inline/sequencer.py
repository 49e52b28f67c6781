"""Inline span sequencing.

Drives classification and extraction over a text run until it is
exhausted. One left-to-right scan with a single lookahead decision per
step; spans are final once emitted.

Written as a loop rather than recursion: a run of thousands of stray
marker characters yields one span per character.

Thread Safety:
Stateless. Each call allocates its own result list.

"""

from collections.abc import Iterable

from ampdoc.nodes import Span
from ampdoc.parsing.inline.classifier import classify
from ampdoc.parsing.inline.extractor import extract


def tokenize(text: str) -> list[Span]:
    """Split a text run into an ordered sequence of styled spans.

    Malformed markup degrades to Plain text; this function never raises
    for any string input. Empty input yields an empty list.

    Args:
        text: One block's worth of inline text

    Returns:
        Spans in document order

    Example:
        >>> [(s.style.value, s.value) for s in tokenize("a **b** `c`")]
        [('plain', 'a '), ('strong', 'b'), ('plain', ' '), ('code', 'c')]
    """
    spans: list[Span] = []
    spans_append = spans.append
    remaining = text

    while remaining:
        span, rest = extract(remaining, classify(remaining))
        assert len(rest) < len(remaining), f"No progress tokenizing {remaining!r}"
        spans_append(span)
        remaining = rest

    return spans


def merge_spans(spans: Iterable[Span]) -> list[Span]:
    """Merge adjacent spans that share a style.

    Values of consecutive same-style spans are concatenated. Spans of
    different styles are never reordered or combined.

    Example:
        >>> merge_spans(tokenize("**a _b"))
        [Span(style=<Style.PLAIN: 'plain'>, value='**a _b')]
    """
    merged: list[Span] = []
    for span in spans:
        if merged and merged[-1].style is span.style:
            merged[-1] = Span(span.style, merged[-1].value + span.value)
        else:
            merged.append(span)
    return merged


__all__ = ["merge_spans", "tokenize"]
