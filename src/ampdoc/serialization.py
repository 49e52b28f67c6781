"""Document serialization — JSON round-trip for ampdoc nodes.

Converts typed nodes to/from JSON-compatible dicts in the wire shape
consumers pattern-match on:

- Blocks carry a camelCase ``type`` tag (``paragraph``, ``heading``,
  ``quote``, ``list``, ``listItem``, ``image``, ``code``,
  ``thematicBreak``, ``custom``) and camelCase field names.
- Spans are ``{"type": "textBody", "style": "<lowercase>", "value": ...}``.
- Custom blocks place their data beside ``customType``.
- A Document is ``{"frontmatter": {...}, "blocks": [...]}``.

JSON output is deterministic (sorted keys) for cache-key stability.

Example:
    from ampdoc import parse
    from ampdoc.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

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

type Node = Document | Block | Span

_SPAN_TYPE = "textBody"
_CUSTOM_TYPE = "custom"

# Registry of wire type tags to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "paragraph": Paragraph,
    "heading": Heading,
    "quote": Quote,
    "list": ListBlock,
    "listItem": ListItem,
    "image": Image,
    "code": CodeBlock,
    "thematicBreak": ThematicBreak,
    _CUSTOM_TYPE: CustomBlock,
}

_TYPE_TAGS: dict[type, str] = {cls: tag for tag, cls in _NODE_TYPES.items()}

# Fields that contain child node tuples
_CHILDREN_FIELDS = {"body", "items", "blocks"}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Args:
        node: Document, Block or Span.

    Returns:
        Dict in the wire shape described in the module docstring.

    Raises:
        TypeError: If node is not an ampdoc node.

    """
    if isinstance(node, Span):
        return {"type": _SPAN_TYPE, "style": node.style.value, "value": node.value}
    if isinstance(node, Document):
        return {
            "frontmatter": dict(node.frontmatter),
            "blocks": [to_dict(block) for block in node.blocks],
        }
    if isinstance(node, CustomBlock):
        return {**node.data, "type": _CUSTOM_TYPE, "customType": node.custom_type}

    tag = _TYPE_TAGS.get(type(node))
    if tag is None:
        msg = f"Cannot serialize {type(node).__name__}"
        raise TypeError(msg)

    result: dict[str, Any] = {"type": tag}
    for f in fields(node):
        result[_camel(f.name)] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, (Span, Block)):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Uses the ``type`` discriminator to determine the node class. A dict
    without ``type`` but with ``blocks`` is read as a Document.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``type`` is missing or unknown, or a span style is invalid.

    """
    if not isinstance(data, dict):
        msg = f"Expected dict, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("type")
    if type_name is None:
        if "blocks" in data:
            return Document(
                frontmatter=dict(data.get("frontmatter") or {}),
                blocks=tuple(_deserialize_value(item) for item in data["blocks"]),
            )
        msg = "Missing 'type' field in serialized node"
        raise ValueError(msg)

    if type_name == _SPAN_TYPE:
        try:
            style = Style(data["style"])
        except (KeyError, ValueError) as e:
            msg = f"Invalid span style: {data.get('style')!r}"
            raise ValueError(msg) from e
        return Span(style=style, value=data.get("value", ""))

    if type_name == _CUSTOM_TYPE:
        extra = {k: v for k, v in data.items() if k not in ("type", "customType")}
        return CustomBlock(custom_type=data.get("customType", ""), data=extra)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        key = _camel(f.name)
        if key not in data:
            continue
        raw = data[key]
        if f.name in _CHILDREN_FIELDS and isinstance(raw, list):
            kwargs[f.name] = tuple(_deserialize_value(item) for item in raw)
        else:
            kwargs[f.name] = raw

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single child value."""
    if isinstance(value, dict):
        return from_dict(value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
