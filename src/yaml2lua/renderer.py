"""Renderer: writes a yaml2lua value tree as a Lua table constructor."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .errors import ParseError, UnrepresentableKeyError
from .escaping import escape_string
from .model import (
    LBool,
    LMapping,
    LNull,
    LNumber,
    LSequence,
    LString,
    LTagged,
    Value,
)
from .reader import load

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Knobs for :func:`render`. The defaults give the reference output."""

    strict_keys: bool = False  # raise instead of dropping unusable keys
    indent: str = "\t"


DEFAULT_OPTIONS = RenderOptions()


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(yaml: str, options: RenderOptions | None = None) -> str:
    """Convert one YAML document to a Lua table literal.

    ``parse("string: abc\\nint: 123\\n")`` returns::

        {
            ["string"] = "abc",
            ["int"] = 123,
        }

    with one tab per level in place of the spaces shown here.

    Raises :class:`~yaml2lua.errors.ParseError` when the text is not YAML or
    its root is not a sequence or a mapping.
    """
    return render(load(yaml), options)


def render(root: LSequence | LMapping, options: RenderOptions | None = None) -> str:
    """Render an already-read value tree. The result has no trailing newline."""
    options = options or DEFAULT_OPTIONS
    if isinstance(root, LSequence):
        pairs = [(None, item) for item in root.items]
    elif isinstance(root, LMapping):
        pairs = root.entries
    else:
        raise ParseError(
            f"document root must be a sequence or a mapping, not {type(root).__name__}"
        )

    parts = ["{\n"]
    for key, value in pairs:
        parts.append(walk(key, value, 1, options))
    parts.append("}")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Recursive walk
# ---------------------------------------------------------------------------

def walk(
    key: Value | None,
    value: Value,
    depth: int,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render one ``[key] = value,`` line (or ``value,`` when *key* is None).

    The result starts with the indent for *depth* and ends with ``",\\n"``.
    Entries whose key is not a string, number or bool render as ``""``
    unless ``options.strict_keys`` is set.
    """
    parts = [get_indent(depth, options.indent)]

    if key is not None:
        prefix = _key_prefix(key)
        if prefix is None:
            if options.strict_keys:
                raise UnrepresentableKeyError(key)
            logger.debug(
                "dropping entry with %s key at depth %d", type(key).__name__, depth
            )
            return ""
        parts.append(prefix)

    parts.append(_render_value(value, depth, options))
    parts.append(",\n")
    return "".join(parts)


def _key_prefix(key: Value) -> str | None:
    if isinstance(key, LString):
        return f'["{escape_string(key.value)}"] = '
    if isinstance(key, LBool):
        return f"[{key}] = "
    # NaN is not a valid Lua table index
    if isinstance(key, LNumber) and not math.isnan(key.value):
        return f"[{key}] = "
    return None


def _render_value(value: Value, depth: int, options: RenderOptions) -> str:
    if isinstance(value, (LNull, LBool, LNumber)):
        return str(value)
    if isinstance(value, LString):
        return f'"{escape_string(value.value)}"'

    close = get_indent(depth, options.indent) + "}"

    if isinstance(value, LSequence):
        body = "".join(walk(None, item, depth + 1, options) for item in value.items)
        return "{\n" + body + close

    if isinstance(value, LMapping):
        body = "".join(walk(k, v, depth + 1, options) for k, v in value.entries)
        return "{\n" + body + close

    if isinstance(value, LTagged):
        # Single-entry table keyed by the tag name; the wrapped value is
        # spliced in after the key, so its own leading indent is dropped.
        inner_indent = get_indent(depth + 1, options.indent)
        inner = walk(None, value.value, depth + 1, options)
        name = escape_string(_tag_name(value.tag))
        entry = f'{inner_indent}["{name}"] = {inner[len(inner_indent):]}'
        return "{\n" + entry + close

    raise TypeError(f"not a yaml2lua value node: {value!r}")


def _tag_name(tag: str) -> str:
    if not tag.startswith("!"):
        raise ParseError(f"malformed tag {tag!r}: expected a leading '!'")
    return tag[1:]


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def get_indent(depth: int, unit: str = "\t") -> str:
    """Return the indent for *depth* nesting levels."""
    return unit * depth
