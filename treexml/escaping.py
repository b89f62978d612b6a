"""Entity escaping, quoting and the replacer pipeline."""

import re
from typing import Any

from treexml import schema
from treexml.options import StringifierOptions
from treexml.types import ReplaceEvent


_WORD = re.compile(r"[\w_]+", re.IGNORECASE | re.ASCII)


def to_text(value: Any) -> str:
    """Convert a scalar to the text written in the document."""
    if isinstance(value, bool):
        # Boolean as lowercase string
        return str(value).lower()
    return str(value)


def escape(value: Any) -> str:
    """Stringify a value and escape the XML entities it contains.

    Example:
        >>> escape("a & <b>")
        'a &amp; &lt;b&gt;'
    """
    text = to_text(value)
    for char, entity in schema.ENTITIES:
        text = text.replace(char, entity)
    return text


def quote(content: Any, optional: bool = False) -> str:
    """Wrap content in double quotes.

    Args:
        content: Value to quote
        optional: Leave word-only content (letters, digits, underscores) bare

    Returns:
        The quoted (or bare) content, with backslashes and double quotes
        backslash-escaped inside the quotes
    """
    text = to_text(content)
    if optional and _WORD.fullmatch(text):
        return text
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class Replacer:
    """Run values through null handling, escaping and the user hook.

    Args:
        options: Stringifier options providing ``null_to_empty`` and ``replacer``
    """

    def __init__(self, options: StringifierOptions):
        self.null_to_empty = options.null_to_empty
        self.hook = options.replacer

    def replace(self, key: str, value: Any, tag: str, properties: dict | None) -> str:
        """Produce the string written for a value.

        Args:
            key: Key the value was read from
            value: Raw value
            tag: Owning element name
            properties: Attribute values of the owning element when replacing
                its text, None otherwise

        Returns:
            The hook's result as a string
        """
        if self.null_to_empty and value is None:
            escaped = ""
        else:
            escaped = escape(value)
        event = ReplaceEvent(key=key, tag=tag, properties=properties, value=escaped)
        return to_text(self.hook(event))
