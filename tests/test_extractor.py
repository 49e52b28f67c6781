"""Tests for single-step span extraction."""

import pytest

from ampdoc.nodes import Span, Style
from ampdoc.parsing.inline import Extraction, RawDelimiterKind, extract

K = RawDelimiterKind


class TestClosedMatch:
    """Closed spans strip their delimiters and return the rest untouched."""

    def test_strong(self) -> None:
        assert extract("**bold** rest", K.STRONG) == Extraction(Span(Style.STRONG, "bold"), " rest")

    def test_asterisk_italic(self) -> None:
        assert extract("*it*x", K.ASTERISK_ITALIC) == (Span(Style.ITALIC, "it"), "x")

    def test_underscore_italic(self) -> None:
        assert extract("_it_ _y_", K.UNDERSCORE_ITALIC) == (Span(Style.ITALIC, "it"), " _y_")

    def test_code_keeps_markers_literally(self) -> None:
        assert extract("`a*b_c` d", K.CODE) == (Span(Style.CODE, "a*b_c"), " d")

    def test_code_single_space(self) -> None:
        assert extract("` `", K.CODE) == (Span(Style.CODE, " "), "")

    def test_content_may_span_lines(self) -> None:
        assert extract("*a\nb*", K.ASTERISK_ITALIC) == (Span(Style.ITALIC, "a\nb"), "")


class TestUnclosedFallback:
    """Unclosed delimiters become literal Plain text up to the next marker."""

    def test_strong_cut_at_next_marker(self) -> None:
        assert extract("**open _x", K.STRONG) == (Span(Style.PLAIN, "**open "), "_x")

    def test_italic_cut_at_own_marker_kind(self) -> None:
        span, rest = extract("*a `b", K.ASTERISK_ITALIC)
        assert span == Span(Style.PLAIN, "*a ")
        assert rest == "`b"

    def test_strong_to_end_of_input(self) -> None:
        assert extract("**unclosed", K.STRONG) == (Span(Style.PLAIN, "**unclosed"), "")

    def test_nested_marker_rejects_closed_match(self) -> None:
        span, rest = extract("**a _b_ c**", K.STRONG)
        assert span == Span(Style.PLAIN, "**a ")
        assert rest == "_b_ c**"

    def test_empty_content_is_not_closed(self) -> None:
        # "****" has no content between the delimiters
        assert extract("****", K.STRONG) == (Span(Style.PLAIN, "**"), "**")

    def test_code_swallows_rest(self) -> None:
        assert extract("`never *closed* _x_", K.CODE) == (
            Span(Style.PLAIN, "`never *closed* _x_"),
            "",
        )

    def test_empty_code_swallows_rest(self) -> None:
        assert extract("``x", K.CODE) == (Span(Style.PLAIN, "``x"), "")

    @pytest.mark.parametrize(
        ("text", "kind"),
        [("*", K.ASTERISK_ITALIC), ("_", K.UNDERSCORE_ITALIC), ("`", K.CODE), ("**", K.STRONG)],
    )
    def test_lone_marker(self, text: str, kind: RawDelimiterKind) -> None:
        assert extract(text, kind) == (Span(Style.PLAIN, text), "")


class TestPlainKind:
    """Plain runs stop at the next marker character."""

    def test_up_to_marker(self) -> None:
        assert extract("plain *x", K.PLAIN) == (Span(Style.PLAIN, "plain "), "*x")

    def test_whole_slice(self) -> None:
        assert extract("no markers here", K.PLAIN) == (Span(Style.PLAIN, "no markers here"), "")


class TestExtractPreconditions:
    """Degenerate calls still make progress or fail loudly."""

    def test_empty_slice_raises(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            extract("", K.PLAIN)

    def test_mismatched_kind_takes_one_character(self) -> None:
        assert extract("abc", K.STRONG) == (Span(Style.PLAIN, "a"), "bc")

    def test_plain_kind_on_marker_takes_one_character(self) -> None:
        assert extract("*x", K.PLAIN) == (Span(Style.PLAIN, "*"), "x")

    def test_extraction_is_a_tuple(self) -> None:
        span, rest = extract("x", K.PLAIN)
        assert span.value == "x"
        assert rest == ""
