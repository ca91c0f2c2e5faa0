"""Tree serialization: JSON round-trip for bbtree segments.

Converts segments to/from JSON-compatible dicts. Useful for:
- Caching parsed trees next to the source they came from
- Debugging and inspection

Spans are stored as ``[start, end]`` offsets, never as text, so the
source is needed again to rebuild a tree.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from bbtree import parse
    from bbtree.serialization import to_json, from_json

    segments = parse("[b]Hello[/b]")
    json_str = to_json(segments)
    assert from_json(json_str, "[b]Hello[/b]") == segments

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from bbtree.nodes import (
    Bold,
    Center,
    Code,
    Color,
    Decorated,
    Image,
    Italic,
    Link,
    List,
    ListStyle,
    Node,
    Quote,
    Segment,
    Size,
    Text,
    Underline,
)
from bbtree.span import Span

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Text": Text,
    "Decorated": Decorated,
    "Quote": Quote,
    "Code": Code,
    "List": List,
    "Link": Link,
    "Image": Image,
}

_STYLE_TYPES: dict[str, type] = {
    "Bold": Bold,
    "Italic": Italic,
    "Underline": Underline,
    "Center": Center,
    "Color": Color,
    "Size": Size,
}
_STYLE_CLASSES = tuple(_STYLE_TYPES.values())

# Fields holding a Span (attribution may also be None)
_SPAN_FIELDS = {"location", "body", "src", "target", "attribution"}


def to_dict(node: Segment) -> dict[str, Any]:
    """Convert a segment to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes children, spans and styles.

    Args:
        node: Any bbtree segment.

    Returns:
        Dict with ``_type`` and all segment fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        value = getattr(node, f.name)
        result[f.name] = _serialize_value(value)

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, Span):
        return [value.start, value.end]
    if isinstance(value, ListStyle):
        return value.value
    if isinstance(value, _STYLE_CLASSES):
        return {"_type": type(value).__name__, **{f.name: getattr(value, f.name) for f in fields(value)}}
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any], source: str) -> Segment:
    """Reconstruct a typed segment from a dict.

    Args:
        data: Dict with ``_type`` and segment fields (as produced by to_dict).
        source: The source the tree was parsed from; spans point into it.

    Returns:
        Typed segment (frozen dataclass).

    Raises:
        ValueError: If a ``_type`` is missing or unknown, or a span does not
            fit the source.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized segment"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown segment type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_field(f.name, data[f.name], node_cls, source)

    return node_cls(**kwargs)


def _deserialize_field(name: str, value: Any, node_cls: type, source: str) -> Any:
    """Deserialize a single field value."""
    if name in _SPAN_FIELDS:
        if value is None:
            return None
        start, end = value
        return Span(source, start, end)
    if name == "children":
        return tuple(from_dict(child, source) for child in value)
    if name == "items":
        return tuple(tuple(from_dict(child, source) for child in item) for item in value)
    if name == "style":
        if node_cls is List:
            return ListStyle(value)
        return _style_from_dict(value)
    return value


def _style_from_dict(data: dict[str, Any]) -> Any:
    type_name = data.get("_type")
    style_cls = _STYLE_TYPES.get(type_name) if type_name is not None else None
    if style_cls is None:
        msg = f"Unknown decoration style: {type_name!r}"
        raise ValueError(msg)
    return style_cls(**{k: v for k, v in data.items() if k != "_type"})


def to_json(segments: tuple[Segment, ...], *, indent: int | None = None) -> str:
    """Serialize top-level segments to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        segments: Segments to serialize, e.g. the result of ``parse``.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string holding a list of segment dicts.

    """
    return json.dumps([to_dict(s) for s in segments], sort_keys=True, indent=indent)


def from_json(data: str, source: str) -> tuple[Segment, ...]:
    """Deserialize top-level segments from a JSON string.

    Args:
        data: JSON string (as produced by to_json).
        source: The source the segments were parsed from.

    Returns:
        Top-level segments.

    Raises:
        ValueError: If the JSON isn't a list of segments.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list of segments, got {type(raw).__name__}"
        raise ValueError(msg)
    return tuple(from_dict(item, source) for item in raw)
