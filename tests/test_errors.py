"""Tests for yaml2lua.errors."""

from yaml2lua.errors import ParseError, UnrepresentableKeyError, Yaml2LuaError
from yaml2lua.model import LSequence


class _Mark:
    def __init__(self, line, column):
        self.line = line
        self.column = column


def test_hierarchy():
    assert issubclass(ParseError, Yaml2LuaError)
    assert issubclass(UnrepresentableKeyError, Yaml2LuaError)

def test_parse_error_without_position():
    err = ParseError("bad root")
    assert str(err) == "bad root"
    assert err.line is None and err.column is None

def test_parse_error_with_position():
    err = ParseError("bad", 3, 7)
    assert str(err) == "bad at line 3 column 7"

def test_parse_error_at_mark_is_one_based():
    err = ParseError.at("bad", _Mark(0, 4))
    assert (err.line, err.column) == (1, 5)
    assert err.message == "bad"

def test_parse_error_at_no_mark():
    assert ParseError.at("bad", None).line is None

def test_unrepresentable_key_message():
    key = LSequence([])
    err = UnrepresentableKeyError(key)
    assert err.key is key
    assert "LSequence" in str(err)
