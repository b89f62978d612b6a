"""Convert Pydantic models to document nodes."""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from treexml import schema


def model_to_document(
    model: BaseModel,
    root_tag: str = "input",
    include_descriptions: bool = True,
    description_format: str = "attribute",  # "attribute" or "comment"
) -> dict[str, Any]:
    """Convert a Pydantic model to a document node.

    Args:
        model: The Pydantic model instance to convert
        root_tag: The tag name for the root element
        include_descriptions: Whether to include field descriptions
        description_format: How to include descriptions ("attribute" or "comment")

    Returns:
        Document node ready for :func:`treexml.stringify`

    Example:
        >>> from pydantic import BaseModel
        >>> class Person(BaseModel):
        ...     name: str
        ...     age: int
        >>> model_to_document(Person(name="Alice", age=30))
        {'input': {'name': 'Alice', 'age': 30}}
    """
    if not isinstance(model, BaseModel):
        raise TypeError(f"Expected Pydantic BaseModel instance, got {type(model)}")

    return {root_tag: _model_to_node(model, include_descriptions, description_format)}


def _model_to_node(model: BaseModel, include_descriptions: bool, description_format: str) -> dict[str, Any]:
    """Convert a Pydantic model to a node mapping.

    Comment descriptions are collected on the parent node, so they are
    written before its children.
    """
    node = {}
    comments = []
    for field_name, field_info in type(model).model_fields.items():
        value = getattr(model, field_name)

        # Skip None values for optional fields (but not empty lists)
        if value is None:
            continue

        child = _value_to_child(value, include_descriptions, description_format)

        if include_descriptions and field_info.description:
            if description_format == "attribute":
                description = {f"{schema.ATTRIBUTE_PREFIX}description": field_info.description}
                if isinstance(child, dict):
                    child = {**description, **child}
                else:
                    child = {**description, schema.TEXT: child}
            elif description_format == "comment":
                comments.append(field_info.description)

        node[field_name] = child

    if comments:
        node = {schema.COMMENTS: comments, **node}
    return node


def _value_to_child(value: Any, include_descriptions: bool, description_format: str) -> Any:
    """Convert a value to the content of a child element."""
    if value is None:
        # Empty element for None
        return None

    elif isinstance(value, BaseModel):
        # Nested Pydantic model
        return _model_to_node(value, include_descriptions, description_format)

    elif isinstance(value, dict):
        # Dictionary - each key becomes a sub-element
        return {str(key): _value_to_child(val, include_descriptions, description_format) for key, val in value.items()}

    elif isinstance(value, (list, tuple)):
        # List/tuple - each item becomes an <item> sub-element
        if not value:
            return {}
        return {"item": [_value_to_child(item, include_descriptions, description_format) for item in value]}

    elif isinstance(value, (datetime, date)):
        # ISO format for datetime and date
        return value.isoformat()

    elif isinstance(value, Enum):
        return value.value

    elif isinstance(value, (bool, int, float, str)):
        # Primitives are escaped and written as-is
        return value

    else:
        # Fallback to string representation
        return str(value)
