"""Core data types for treexml."""

from dataclasses import dataclass, field
from typing import Any, Union

from treexml import schema


Scalar = Union[str, int, float, bool, None]


@dataclass
class Extraction:
    """A document node split into its roles.

    Attributes:
        raw: The node the extraction was computed from
        text: Text content, or None when the node has none
        comments: Comments attached to the node, in order
        attributes: Attribute and property key names, in declaration order
        children: Child element key names, in declaration order
        meta: Parser metadata carried under the metadata marker
    """
    raw: dict[str, Any]
    text: Any = None
    comments: list = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)
    meta: dict = field(default_factory=dict)

    @property
    def self_closing(self) -> bool:
        """Whether the element has no text, comments or children."""
        return self.text is None and not self.comments and not self.children

    @property
    def properties(self) -> dict[str, Any]:
        """Attribute values keyed by their stripped name."""
        return {schema.strip_attribute(key): self.raw[key] for key in self.attributes}


@dataclass
class Leaf:
    """A scalar (or None) child, emitted as a text-only element."""
    value: Scalar


@dataclass
class Single:
    """A nested element."""
    node: dict[str, Any]


@dataclass
class Repeated:
    """Same-named sibling elements, in list order."""
    items: list["Child"]


Child = Union[Leaf, Single, Repeated]


@dataclass
class ReplaceEvent:
    """Handed to the replacer hook for every emitted value.

    Attributes:
        key: Key the value was read from (attribute key, text or comment marker)
        tag: Name of the owning element
        properties: Stripped attribute name to raw value when replacing a
            tag's own text, None for attributes and comments
        value: The escaped string about to be written
    """
    key: str
    tag: str
    properties: dict[str, Any] | None
    value: str
