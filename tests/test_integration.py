"""End-to-end tests: YAML text in, Lua table literal out."""

import pytest

from yaml2lua import ParseError, RenderOptions, UnrepresentableKeyError, parse


def _table(*lines: str) -> str:
    """Build a root table from already-indented entry lines."""
    return "{\n" + "".join(f"{line}\n" for line in lines) + "}"


# ---------------------------------------------------------------------------
# Literal scenarios
# ---------------------------------------------------------------------------

def test_flat_mapping():
    assert parse("string: a\nint: 1\nbool: true\n") == (
        '{\n\t["string"] = "a",\n\t["int"] = 1,\n\t["bool"] = true,\n}'
    )

def test_root_sequence():
    assert parse("- a\n- b\n") == '{\n\t"a",\n\t"b",\n}'

def test_embedded_newline_is_escaped():
    out = parse('k: "line1\\nline2"')
    assert '["k"] = "line1\\nline2"' in out
    assert "line1\nline2" not in out

def test_nested_mapping():
    assert parse("nested:\n  x: 1\n") == (
        '{\n\t["nested"] = {\n\t\t["x"] = 1,\n\t},\n}'
    )

def test_tagged_value():
    assert parse("test: !Tag\n  x: 5\n") == (
        '{\n\t["test"] = {\n\t\t["Tag"] = {\n\t\t\t["x"] = 5,\n\t\t},\n\t},\n}'
    )

def test_tagged_flow_mapping():
    assert parse("test: !SomeTag { x: 5 }") == (
        '{\n\t["test"] = {\n\t\t["SomeTag"] = {\n\t\t\t["x"] = 5,\n\t\t},\n\t},\n}'
    )


# ---------------------------------------------------------------------------
# Whole documents
# ---------------------------------------------------------------------------

def test_all_values():
    yaml = (
        "string: str\n"
        "int: 420\n"
        "float: 4.2\n"
        "bool: true\n"
        "nil: null\n"
        "array:\n"
        "  - string\n"
        "  - 12345\n"
        "  - false\n"
        "  - k: v\n"
        "object:\n"
        "  key: value"
    )
    assert parse(yaml) == _table(
        '\t["string"] = "str",',
        '\t["int"] = 420,',
        '\t["float"] = 4.2,',
        '\t["bool"] = true,',
        '\t["nil"] = nil,',
        '\t["array"] = {',
        '\t\t"string",',
        '\t\t12345,',
        '\t\tfalse,',
        '\t\t{',
        '\t\t\t["k"] = "v",',
        '\t\t},',
        '\t},',
        '\t["object"] = {',
        '\t\t["key"] = "value",',
        '\t},',
    )

def test_malformed_strings():
    yaml = (
        r"1: ..\n.." "\n"
        r"2: ..\t.." "\n"
        r"3: ..\r.." "\n"
        r"4: ..\\.." "\n"
        r'5: ..\"..' "\n"
        r'6: "..\n.."' "\n"
        r'7: "..\t.."' "\n"
        r'8: "..\r.."' "\n"
        r'9: "..\\.."' "\n"
        r'10: "..\".."' "\n"
    )
    assert parse(yaml) == _table(
        "\t" r'[1] = "..\n..",',
        "\t" r'[2] = "..\t..",',
        "\t" r'[3] = "..\r..",',
        "\t" r'[4] = "..\\..",',
        "\t" r'[5] = "..\"..",',
        "\t" r'[6] = "..\n..",',
        "\t" r'[7] = "..\t..",',
        "\t" r'[8] = "..\r..",',
        "\t" r'[9] = "..\\..",',
        "\t" r'[10] = "..\"..",',
    )

def test_root_array():
    assert parse("\n- a\n- b\n- c") == _table('\t"a",', '\t"b",', '\t"c",')

def test_aliases_render_every_reference():
    out = parse("base: &b {x: 1}\ncopy: *b\n")
    assert out.count('["x"] = 1,') == 2


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

def test_deterministic():
    yaml = "b: [1, 2.5, ~]\na: {c: !T d}\n"
    assert parse(yaml) == parse(yaml)

def test_order_preserved():
    out = parse("zeta: 1\nalpha: 2\nmid: 3\n")
    assert out.index('"zeta"') < out.index('"alpha"') < out.index('"mid"')

def test_duplicate_keys_kept_in_order():
    out = parse("a: 1\na: 2\n")
    assert out == '{\n\t["a"] = 1,\n\t["a"] = 2,\n}'

def test_scalar_keys():
    assert parse("true: yes\n1: one\n1.5: x\n") == _table(
        '\t[true] = "yes",',
        '\t[1] = "one",',
        '\t[1.5] = "x",',
    )

UNUSABLE_KEYS_DOC = (
    "? [1, 2]\n"
    ": seq\n"
    "? {a: 1}\n"
    ": map\n"
    "~: nothing\n"
    "!T tagged: key\n"
    "ok: 1\n"
)

def test_unusable_keys_leave_no_trace():
    assert parse(UNUSABLE_KEYS_DOC) == '{\n\t["ok"] = 1,\n}'

def test_unusable_keys_strict():
    with pytest.raises(UnrepresentableKeyError):
        parse(UNUSABLE_KEYS_DOC, RenderOptions(strict_keys=True))

def test_empty_collections():
    assert parse("a: []\nb: {}\n") == _table(
        '\t["a"] = {', '\t},', '\t["b"] = {', '\t},'
    )


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("yaml", ["plain string", "42", "", "a: [1, 2", "a: b: c"])
def test_parse_errors(yaml):
    with pytest.raises(ParseError):
        parse(yaml)

def test_control_character_is_parse_error():
    with pytest.raises(ParseError):
        parse("a: \x00\n")

def test_zip_code_keeps_leading_zero():
    assert parse("zip: 01234\n") == '{\n\t["zip"] = "01234",\n}'

def test_nan_key_dropped():
    assert parse(".nan: x\nok: 1\n") == '{\n\t["ok"] = 1,\n}'
