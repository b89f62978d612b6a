"""Tests for stringifier options."""

import pytest

from treexml.exceptions import OptionsError, TreeXMLError
from treexml.options import StringifierOptions, identity, make_options
from treexml.types import ReplaceEvent


def test_defaults():
    """Test default option values."""
    options = make_options()

    assert options.indent_size == 2
    assert options.debug is False
    assert options.progress is None
    assert options.null_to_empty is True
    assert options.replacer is identity


def test_identity_replacer():
    """Test the default replacer returns the escaped value."""
    event = ReplaceEvent(key="#text", tag="a", properties={}, value="x &amp; y")

    assert identity(event) == "x &amp; y"


def test_mapping_and_overrides():
    """Test keyword overrides take precedence over the mapping."""
    options = make_options({"indent_size": 4, "debug": True}, indent_size=1)

    assert options.indent_size == 1
    assert options.debug is True


def test_camel_case_aliases():
    """Test the camelCase option names are accepted."""
    options = make_options({"indentSize": 4, "nullToEmpty": False})

    assert options.indent_size == 4
    assert options.null_to_empty is False


def test_instance_is_reused():
    """Test an options instance without overrides is returned as-is."""
    options = StringifierOptions(indent_size=3)

    assert make_options(options) is options
    assert make_options(options, debug=True).indent_size == 3


def test_none_replacer_uses_identity():
    """Test an explicit None replacer falls back to the default."""
    assert make_options(replacer=None).replacer is identity


def test_negative_indent_rejected():
    """Test a negative indent size raises OptionsError."""
    with pytest.raises(OptionsError) as exc_info:
        make_options(indent_size=-1)

    assert isinstance(exc_info.value, TreeXMLError)
    assert exc_info.value.errors


def test_unknown_option_rejected():
    """Test unknown options raise OptionsError."""
    with pytest.raises(OptionsError):
        make_options(indent=2)


def test_non_callable_replacer_rejected():
    """Test a non-callable replacer raises OptionsError."""
    with pytest.raises(OptionsError):
        make_options(replacer="upper")
