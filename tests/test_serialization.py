"""Tests for ampdoc.serialization — wire shape and JSON round-trip."""

import json

import pytest

from ampdoc import parse
from ampdoc.nodes import (
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
from ampdoc.serialization import from_dict, from_json, to_dict, to_json


def _doc(*blocks) -> Document:  # type: ignore[no-untyped-def]
    return Document(frontmatter={"title": "T"}, blocks=tuple(blocks))


def _text(value: str, style: Style = Style.PLAIN) -> Span:
    return Span(style, value)


class TestWireShape:
    """Serialized dicts use lowercase style tags and camelCase type tags."""

    @pytest.mark.parametrize(
        ("style", "tag"),
        [(Style.PLAIN, "plain"), (Style.STRONG, "strong"), (Style.ITALIC, "italic"), (Style.CODE, "code")],
    )
    def test_span(self, style: Style, tag: str) -> None:
        assert to_dict(Span(style, "v")) == {"type": "textBody", "style": tag, "value": "v"}

    def test_heading(self) -> None:
        assert to_dict(Heading(body=(_text("Hi"),), level=2)) == {
            "type": "heading",
            "body": [{"type": "textBody", "style": "plain", "value": "Hi"}],
            "level": 2,
        }

    def test_list(self) -> None:
        block = ListBlock(items=(ListItem(body=(_text("a"),)),), ordered=True)
        assert to_dict(block) == {
            "type": "list",
            "items": [{"type": "listItem", "body": [{"type": "textBody", "style": "plain", "value": "a"}]}],
            "ordered": True,
        }

    def test_image_camel_case(self) -> None:
        assert to_dict(Image(url="u.png", alt_text="alt", caption="c")) == {
            "type": "image",
            "url": "u.png",
            "altText": "alt",
            "caption": "c",
        }

    def test_code_without_lang(self) -> None:
        assert to_dict(CodeBlock(lang=None, body="x")) == {"type": "code", "lang": None, "body": "x"}

    def test_thematic_break(self) -> None:
        assert to_dict(ThematicBreak()) == {"type": "thematicBreak"}

    def test_custom_block_flattens_data(self) -> None:
        block = CustomBlock("strikeThrough", {"body": "gone"})
        assert to_dict(block) == {"type": "custom", "customType": "strikeThrough", "body": "gone"}

    def test_document(self) -> None:
        assert to_dict(_doc(ThematicBreak())) == {
            "frontmatter": {"title": "T"},
            "blocks": [{"type": "thematicBreak"}],
        }

    def test_unknown_object(self) -> None:
        with pytest.raises(TypeError):
            to_dict(object())  # type: ignore[arg-type]


class TestRoundTrip:
    """Verify round-trip serialization for all node types."""

    @pytest.mark.parametrize(
        "block",
        [
            Paragraph(body=(_text("a"), _text("b", Style.STRONG))),
            Heading(body=(_text("h", Style.ITALIC),), level=6),
            Quote(body=(_text("q\nr"),)),
            ListBlock(items=(ListItem(body=(_text("x"),)), ListItem(body=())), ordered=False),
            Image(url="u", alt_text="", caption=""),
            CodeBlock(lang="py", body="print(1)"),
            CodeBlock(lang=None, body=""),
            ThematicBreak(),
            CustomBlock("highlight", {"body": "x", "count": 2}),
        ],
    )
    def test_block(self, block) -> None:  # type: ignore[no-untyped-def]
        doc = _doc(block)
        assert from_dict(to_dict(doc)) == doc

    def test_parsed_document_via_json(self) -> None:
        source = "---\ntitle: Hi\n---\n# A *b*\n\n- `c`\n\n![d](e.png)\n\n```js\nf\n```\n\n---\n\n> **g**"
        doc = parse(source)
        assert from_json(to_json(doc)) == doc

    def test_json_is_deterministic(self) -> None:
        doc = parse("# Title\n\nBody **bold**")
        assert to_json(doc) == to_json(doc)
        assert json.loads(to_json(doc, indent=2)) == to_dict(doc)

    def test_non_ascii_preserved(self) -> None:
        doc = parse("日本語 **太字**")
        assert "太字" in to_json(doc)
        assert from_json(to_json(doc)) == doc


class TestDeserializationErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing 'type'"):
            from_dict({"value": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"type": "table"})

    def test_invalid_style(self) -> None:
        with pytest.raises(ValueError, match="Invalid span style"):
            from_dict({"type": "textBody", "style": "bold", "value": "x"})

    def test_from_json_requires_document(self) -> None:
        with pytest.raises(ValueError, match="Expected Document"):
            from_json('{"type": "thematicBreak"}')

    def test_from_json_rejects_list(self) -> None:
        with pytest.raises(ValueError):
            from_json("[]")
