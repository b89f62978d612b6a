"""Tests for splitting nodes into text, comments, attributes and children."""

from treexml.extractor import classify, extract
from treexml.types import Leaf, Repeated, Single


def test_extract_text_and_attributes():
    """Test text and attribute keys are separated from children."""
    e = extract({"@id": "1", "#text": "hello", "child": {}})

    assert e.text == "hello"
    assert e.attributes == ["@id"]
    assert e.children == ["child"]
    assert e.comments == []


def test_extract_preserves_declaration_order():
    """Test attribute and child keys keep their insertion order."""
    e = extract({"@z": 1, "b": 1, "@a": 2, "a": 2, "@m": 3})

    assert e.attributes == ["@z", "@a", "@m"]
    assert e.children == ["b", "a"]


def test_extract_excludes_reserved_keys():
    """Test prolog, doctype, markers and metadata never become children."""
    e = extract({
        "xml": {"@version": "1.0"},
        "doctype": {},
        "#text": None,
        "#comments": ["c"],
        "$XML": {"parent": None},
        "root": {},
    })

    assert e.children == ["root"]
    assert e.comments == ["c"]
    assert e.meta == {"parent": None}


def test_extract_missing_text_is_none():
    """Test a node without text reports None."""
    assert extract({"child": "x"}).text is None


def test_extract_none_node():
    """Test None is handled as an empty node."""
    e = extract(None)

    assert e.raw == {}
    assert e.text is None
    assert e.self_closing


def test_self_closing_ignores_attributes():
    """Test attributes alone do not prevent self-closing."""
    assert extract({"@a": "1", "@b": "2"}).self_closing
    assert not extract({"#text": ""}).self_closing
    assert not extract({"#comments": ["c"]}).self_closing
    assert not extract({"child": None}).self_closing


def test_properties_strip_prefix():
    """Test properties map stripped attribute names to raw values."""
    e = extract({"@id": 7, "@flag": None, "#text": "x"})

    assert e.properties == {"id": 7, "flag": None}


def test_classify_variants():
    """Test raw child values map onto exactly one variant."""
    assert classify("text") == Leaf("text")
    assert classify(None) == Leaf(None)
    assert classify(3) == Leaf(3)
    assert classify({"#text": "a"}) == Single({"#text": "a"})


def test_classify_list_recursively():
    """Test list items are classified one by one, in order."""
    result = classify([{"a": 1}, "b", [None]])

    assert result == Repeated([Single({"a": 1}), Leaf("b"), Repeated([Leaf(None)])])
