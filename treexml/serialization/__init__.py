"""Boundary adapters building document nodes from XML text and Pydantic models."""

from treexml.serialization.xml_encoder import model_to_document
from treexml.serialization.xml_decoder import xml_to_document

__all__ = [
    "model_to_document",
    "xml_to_document",
]
