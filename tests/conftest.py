"""Shared test configuration and fixtures."""

import pytest


@pytest.fixture
def note_document():
    """A document with prolog, doctype, attributes, comments and repeated children."""
    return {
        "xml": {"@version": "1.0", "@encoding": "UTF-8"},
        "doctype": {"@note": "", "note": "to,from,body"},
        "note": {
            "@id": "n1",
            "#comments": ["draft"],
            "to": "Tove",
            "from": "Jani",
            "body": {"line": ["one", "two"]},
        },
    }
