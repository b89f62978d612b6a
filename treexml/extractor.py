"""Split raw document nodes into text, comments, attributes and children."""

from typing import Any

from treexml import schema
from treexml.types import Child, Extraction, Leaf, Repeated, Single


def extract(node: dict[str, Any] | None) -> Extraction:
    """Extract the roles of a document node.

    Args:
        node: A document node, None is handled as an empty node

    Returns:
        Extraction with text, comments, attribute keys and child keys in
        declaration order

    Example:
        >>> e = extract({"@id": "1", "#text": "hello", "child": {}})
        >>> e.text, e.attributes, e.children
        ('hello', ['@id'], ['child'])
    """
    raw = node if node is not None else {}
    attributes = []
    children = []
    for key in raw:
        if schema.is_attribute(key):
            attributes.append(key)
        elif key not in schema.RESERVED:
            children.append(key)

    comments = raw.get(schema.COMMENTS)
    meta = raw.get(schema.META)
    return Extraction(
        raw=raw,
        text=raw.get(schema.TEXT),
        comments=comments if comments is not None else [],
        attributes=attributes,
        children=children,
        meta=meta if meta is not None else {},
    )


def classify(value: Any) -> Child:
    """Map a raw child value onto its variant.

    Lists become Repeated (items classified recursively), mappings become
    Single, anything else is a Leaf wrapped as a text-only element.
    """
    if isinstance(value, (list, tuple)):
        return Repeated([classify(item) for item in value])
    elif isinstance(value, dict):
        return Single(value)
    else:
        return Leaf(value)
