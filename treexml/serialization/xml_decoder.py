"""Read XML strings into document nodes."""

import xml.etree.ElementTree as ET
from typing import Any

from treexml import schema
from treexml.exceptions import DocumentError


def xml_to_document(xml_string: str) -> dict[str, Any]:
    """Parse XML into a document node.

    Attributes become ``@name`` keys, text becomes ``#text``, comments are
    collected under ``#comments`` and repeated tags become lists. Elements
    holding nothing but text collapse to that text, empty elements to None.
    The XML declaration and doctype are not kept.

    Args:
        xml_string: XML string to parse

    Returns:
        Document node with the root tag as its single key

    Raises:
        DocumentError: If the XML is malformed

    Example:
        >>> xml_to_document('<root><child id="1">a</child><child>b</child></root>')
        {'root': {'child': [{'@id': '1', '#text': 'a'}, 'b']}}
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        root = ET.fromstring(xml_string, parser=parser)
    except ET.ParseError as e:
        raise DocumentError(f"Malformed XML: {e}", raw_input=xml_string) from e

    return {root.tag: _element_to_value(root)}


def _element_to_value(element: ET.Element) -> Any:
    """Convert an XML element to a node, a string, or None.

    Args:
        element: The XML element to convert

    Returns:
        Node mapping, the element's text for text-only elements, None for
        empty elements
    """
    node = {}

    # Attributes keep their document order
    for name, value in element.attrib.items():
        node[f"{schema.ATTRIBUTE_PREFIX}{name}"] = value

    text = element.text.strip() if element.text else ""
    if text:
        node[schema.TEXT] = text

    comments = []
    for child in element:
        if child.tag is ET.Comment:
            comments.append((child.text or "").strip())
            continue

        field_name = child.tag
        value = _element_to_value(child)

        # Handle duplicate tags (convert to list)
        if field_name in node:
            if not isinstance(node[field_name], list):
                node[field_name] = [node[field_name]]
            node[field_name].append(value)
        else:
            node[field_name] = value

    if comments:
        node[schema.COMMENTS] = comments

    if not node:
        return None
    if list(node) == [schema.TEXT]:
        return node[schema.TEXT]
    return node
