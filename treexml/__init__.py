"""treexml - write XML documents from plain Python object models.

Documents are nested mappings using a reserved-key schema: ``#text`` for
text content, ``#comments`` for comments, ``@``-prefixed keys for
attributes, and any other key for child elements.
"""

from treexml._version import __version__
from treexml.types import Extraction, ReplaceEvent
from treexml.exceptions import TreeXMLError, OptionsError, DocumentError
from treexml.options import StringifierOptions
from treexml.extractor import extract
from treexml.stringifier import Stringifier, stringify
from treexml.serialization import model_to_document, xml_to_document

__all__ = [
    "__version__",
    "Stringifier",
    "stringify",
    "StringifierOptions",
    "ReplaceEvent",
    "Extraction",
    "extract",
    "TreeXMLError",
    "OptionsError",
    "DocumentError",
    "model_to_document",
    "xml_to_document",
]
