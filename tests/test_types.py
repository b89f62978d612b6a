"""Tests for core data types."""

from treexml.types import Extraction, Leaf, Repeated, ReplaceEvent, Single


def test_extraction_defaults():
    """Test Extraction instantiation with only a raw node."""
    e = Extraction(raw={})
    assert e.text is None
    assert e.comments == []
    assert e.attributes == []
    assert e.children == []
    assert e.meta == {}
    assert e.self_closing is True


def test_extraction_with_children_is_not_self_closing():
    """Test an extraction with children is not self-closing."""
    e = Extraction(raw={"child": "x"}, children=["child"])
    assert e.self_closing is False


def test_extraction_properties():
    """Test properties strip the attribute prefix."""
    e = Extraction(raw={"@a": 1, "@b": "two"}, attributes=["@a", "@b"])
    assert e.properties == {"a": 1, "b": "two"}


def test_replace_event_creation():
    """Test ReplaceEvent instantiation."""
    event = ReplaceEvent(key="#text", tag="item", properties={"id": "1"}, value="x")
    assert event.key == "#text"
    assert event.tag == "item"
    assert event.properties == {"id": "1"}
    assert event.value == "x"


def test_child_variants():
    """Test child variants compare by value."""
    assert Leaf("a") == Leaf("a")
    assert Single({"a": 1}) != Single({"a": 2})
    assert Repeated([Leaf(1), Leaf(2)]).items == [Leaf(1), Leaf(2)]
