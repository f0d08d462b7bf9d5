"""String escaping for Lua double-quoted literals."""

from __future__ import annotations


# Backslash pairs that are already valid Lua escapes and are kept as typed.
_KEPT_ESCAPES = frozenset('ntr\\"')

# Raw characters that cannot appear inside a double-quoted Lua string.
_UNSAFE = frozenset('\n\t\r"')

_NAMED_ESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def escape_string(string: str) -> str:
    """Return *string* ready to be placed between Lua double quotes.

    The decision is all-or-nothing: a string whose backslashes all start a
    valid escape (``\\n``, ``\\t``, ``\\r``, ``\\\\``, ``\\"``) and which
    holds no raw newline, tab, carriage return or double quote is returned
    unchanged. Anything else is passed through :func:`canonical_escape` as
    a whole, already-typed escapes included.
    """
    chars = iter(string)
    for char in chars:
        if char == "\\":
            if next(chars, None) not in _KEPT_ESCAPES:
                return canonical_escape(string)
        elif char in _UNSAFE:
            return canonical_escape(string)
    return string


def canonical_escape(string: str) -> str:
    """Escape every character that cannot appear raw in a Lua string.

    Control characters without a named escape become ``\\ddd`` (three
    decimal digits, so a following digit is never absorbed). Non-ASCII
    text is kept verbatim; Lua strings carry UTF-8 bytes as-is.
    """
    return "".join(_escape_char(c) for c in string)


def _escape_char(char: str) -> str:
    named = _NAMED_ESCAPES.get(char)
    if named is not None:
        return named
    if char < " " or char == "\x7f":
        return f"\\{ord(char):03d}"
    return char
