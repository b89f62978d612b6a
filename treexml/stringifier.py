"""Write document object models as XML text."""

import logging
from typing import Any

from treexml import schema
from treexml.escaping import Replacer, quote, to_text
from treexml.extractor import classify, extract
from treexml.formatter import Formatter
from treexml.options import StringifierOptions, make_options
from treexml.types import Child, Extraction, Repeated, Single

logger = logging.getLogger(__name__)


def stringify(document: dict[str, Any], options: StringifierOptions | dict | None = None, **overrides) -> str:
    """Convert a document node to an XML string.

    Args:
        document: Top-level node, optionally carrying ``xml`` and ``doctype``
            keys next to its root element key
        options: StringifierOptions instance or mapping of options
        **overrides: Individual options, e.g. ``indent_size=4``

    Returns:
        XML text with surrounding whitespace removed

    Raises:
        OptionsError: If the options are invalid

    Example:
        >>> print(stringify({"root": {"child": [{"#text": 1}, {"#text": 2}]}}))
        <root>
          <child>1</child>
          <child>2</child>
        </root>
    """
    return Stringifier(document, options, **overrides).stringify()


class Stringifier:
    """XML writer for a single document.

    The instance only holds the document and its options; every call to
    :meth:`stringify` uses a fresh :class:`Formatter`, so the same instance
    can be stringified repeatedly.

    Args:
        document: Top-level document node
        options: StringifierOptions instance or mapping of options
        **overrides: Individual options taking precedence over ``options``
    """

    def __init__(self, document: dict[str, Any], options: StringifierOptions | dict | None = None, **overrides):
        self.document = document
        self.options = make_options(options, **overrides)
        self.replacer = Replacer(self.options)

    def stringify(self) -> str:
        """Write the document and return the XML text."""
        out = Formatter(self.options.indent_size)
        document = extract(self.document)

        # Prolog and doctype
        if document.raw.get(schema.PROLOG) is not None:
            self._prolog(out, document)
        if document.raw.get(schema.DOCTYPE) is not None:
            self._doctype(out, document)

        # Root element
        self._tag(out, [], "", document)

        return out.getvalue()

    def _debug(self, path: list[str], message: str) -> None:
        if self.options.debug:
            logger.debug(f"{' > '.join(path)} | {message}".strip())

    def _prolog(self, out: Formatter, document: Extraction) -> None:
        self._debug([], "stringifying prolog")
        prolog = extract(document.raw[schema.PROLOG])
        attributes = self._attributes(prolog, "prolog")
        out.write(f"{schema.PROLOG_START}{attributes}{schema.PROLOG_END}")

    def _doctype(self, out: Formatter, document: Extraction) -> None:
        self._debug([], "stringifying doctype")
        doctype = extract(document.raw[schema.DOCTYPE])
        elements = doctype.children

        out.write(f"{schema.DOCTYPE_START}{self._properties(doctype)}", newline=bool(elements))

        if elements:
            self._debug([], "stringifying doctype elements")
            out.down()
            out.write(schema.DOCTYPE_ELEMENTS_START)
            out.down()
            for key in elements:
                self._debug([], f"stringifying doctype element {key}")
                value = f"{schema.DOCTYPE_VALUE_START}{to_text(doctype.raw[key])}{schema.DOCTYPE_VALUE_END}"
                out.write(f"{schema.DOCTYPE_ELEMENT_START} {quote(key, optional=True)} {value}{schema.DOCTYPE_ELEMENT_END}")
            out.up()
            out.write(schema.DOCTYPE_ELEMENTS_END)
            out.up()

        out.write(schema.DOCTYPE_END)

    def _tag(self, out: Formatter, path: list[str], name: str, node: Extraction) -> None:
        """Write an element, its content and its closing tag.

        The root call has an empty name: it writes no tag of its own but
        still visits the document's children at depth 0.
        """
        if name:
            self._debug(path, f"stringifying tag {name}")

        # Open tag
        self_closing = node.self_closing
        inline = False
        if name:
            close = schema.TAG_SELF_CLOSE if self_closing else ""
            out.write(f"{schema.TAG_START}{name}{self._attributes(node, name)}{close}{schema.TAG_END}")
            out.down()

        if self.options.progress is not None:
            self.options.progress(out.length)

        if not self_closing:
            nested = bool(node.comments or node.children)

            # Text content, the nameless root only carries text the document declares
            if (name or node.text is not None) and not isinstance(node.text, (dict, list, tuple)):
                self._debug(path, "stringifying text content")
                inline = self._text(out, node.text, name, node.properties)
                if inline and nested:
                    out.write("\n", newline=False, indent=False)

            # Comments
            if node.comments:
                self._debug(path, "stringifying comments")
                for comment in node.comments:
                    self._comment(out, comment, name)

            # Children, in declaration order
            if node.children:
                self._debug(path, "stringifying children")
                for key in node.children:
                    self._child(out, [*path, key], key, classify(node.raw[key]))

            # Closing tag only shares the line with text when nothing follows it
            inline = inline and not nested

        # Close tag
        if name:
            out.up()
            if not self_closing:
                out.write(f"{schema.TAG_CLOSE_START}{name}{schema.TAG_END}", indent=not inline)

    def _child(self, out: Formatter, path: list[str], name: str, child: Child) -> None:
        if isinstance(child, Repeated):
            for item in child.items:
                self._child(out, path, name, item)
        elif isinstance(child, Single):
            self._tag(out, path, name, extract(child.node))
        else:
            self._tag(out, path, name, extract({schema.TEXT: child.value}))

    def _comment(self, out: Formatter, text: Any, tag: str) -> None:
        comment = self.replacer.replace(schema.COMMENTS, text, tag, None)
        out.write(f"{schema.COMMENT_START} {comment} {schema.COMMENT_END}")

    def _text(self, out: Formatter, text: Any, tag: str, properties: dict[str, Any]) -> bool:
        """Write text content and report whether it fit on a single line.

        Single-line text is pulled back onto the line of the opening tag.
        Multi-line text is written as an indented block, one line at a time.
        """
        lines = self.replacer.replace(schema.TEXT, text, tag, properties).split("\n")
        inline = len(lines) == 1
        if inline:
            out.trim()
        for line in lines:
            out.write(line.lstrip(), newline=not inline, indent=not inline)
        return inline

    def _attributes(self, node: Extraction, tag: str) -> str:
        pairs = [
            f"{schema.strip_attribute(key)}={quote(self.replacer.replace(key, node.raw[key], tag, None))}"
            for key in node.attributes
        ]
        return f" {' '.join(pairs)}" if pairs else ""

    def _properties(self, node: Extraction) -> str:
        tokens = [quote(schema.strip_property(key), optional=True) for key in node.attributes]
        return f" {' '.join(tokens)}" if tokens else ""
