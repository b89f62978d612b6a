"""Reserved keys, entities and tokens of the document object model."""

TEXT = "#text"
COMMENTS = "#comments"
ATTRIBUTE_PREFIX = "@"
PROPERTY_PREFIX = "@"
PROLOG = "xml"
DOCTYPE = "doctype"
META = "$XML"

# Reserved keys that never become child elements
RESERVED = (TEXT, COMMENTS, PROLOG, DOCTYPE, META)

# Order matters: "&" must go first so later entities are not re-encoded
ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

TAG_START = "<"
TAG_END = ">"
TAG_SELF_CLOSE = "/"
TAG_CLOSE_START = "</"

COMMENT_START = "<!--"
COMMENT_END = "-->"

PROLOG_START = "<?xml"
PROLOG_END = "?>"

DOCTYPE_START = "<!DOCTYPE"
DOCTYPE_END = ">"
DOCTYPE_ELEMENTS_START = "["
DOCTYPE_ELEMENTS_END = "]"
DOCTYPE_ELEMENT_START = "<!ELEMENT"
DOCTYPE_ELEMENT_END = ">"
DOCTYPE_VALUE_START = "("
DOCTYPE_VALUE_END = ")"


def is_attribute(key: str) -> bool:
    """Check whether a key names an attribute or a property."""
    return key.startswith(ATTRIBUTE_PREFIX) or key.startswith(PROPERTY_PREFIX)


def strip_attribute(key: str) -> str:
    """Remove the attribute prefix from a key."""
    return key[len(ATTRIBUTE_PREFIX):]


def strip_property(key: str) -> str:
    """Remove the property prefix from a key."""
    return key[len(PROPERTY_PREFIX):]
