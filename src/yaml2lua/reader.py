"""Reader layer: converts YAML text into the yaml2lua value tree.

PyYAML does the scanning, parsing and alias resolution; this module only
turns its composed node graph into :mod:`yaml2lua.model` values. Tags are
resolved with the YAML 1.2 core schema, so ``yes``/``no``/``on``/``off``
and timestamps stay plain strings.
"""

from __future__ import annotations

import logging
import re

import yaml

from .errors import ParseError
from .model import (
    LBool,
    LMapping,
    LNumber,
    LSequence,
    LString,
    LTagged,
    Nil,
    Value,
)

logger = logging.getLogger(__name__)

_CORE = "tag:yaml.org,2002:"
_NULL_TAG = _CORE + "null"
_BOOL_TAG = _CORE + "bool"
_INT_TAG = _CORE + "int"
_FLOAT_TAG = _CORE + "float"
_STR_TAG = _CORE + "str"

_NULL_RE = re.compile(r"^(?:~|null|Null|NULL|)$")
# Leading zeros are not a YAML 1.2 int; such digit runs stay strings.
_ZERO_PADDED_RE = re.compile(r"^[-+]?0[0-9]+$")
_BOOL_RE = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
_INT_RE = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
_FLOAT_RE = re.compile(
    r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?\.(?:inf|Inf|INF)"
    r"|\.(?:nan|NaN|NAN))$"
)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader whose plain scalars resolve per the YAML 1.2 core schema."""

    yaml_implicit_resolvers: dict = {}


CoreSchemaLoader.add_implicit_resolver(_STR_TAG, _ZERO_PADDED_RE, list("-+0"))
CoreSchemaLoader.add_implicit_resolver(_BOOL_TAG, _BOOL_RE, list("tTfF"))
CoreSchemaLoader.add_implicit_resolver(_INT_TAG, _INT_RE, list("-+0123456789"))
CoreSchemaLoader.add_implicit_resolver(
    _FLOAT_TAG, _FLOAT_RE, list("-+.0123456789")
)
CoreSchemaLoader.add_implicit_resolver(_NULL_TAG, _NULL_RE, ["~", "n", "N", ""])


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def load(text: str) -> LSequence | LMapping:
    """Read one YAML document whose root is a sequence or a mapping.

    Raises :class:`ParseError` for malformed YAML, an empty stream, more
    than one document, a scalar or tagged root, a tag without the ``!``
    sentinel, and aliases that refer to themselves.
    """
    loader = None
    try:
        # the constructor already rejects non-printable characters
        loader = CoreSchemaLoader(text)
        root = loader.get_single_node()
    except yaml.MarkedYAMLError as exc:
        logger.debug("YAML error: %s", exc)
        raise ParseError.at(_problem(exc), exc.problem_mark) from exc
    except yaml.YAMLError as exc:
        logger.debug("YAML error: %s", exc)
        raise ParseError(str(exc)) from exc
    finally:
        if loader is not None:
            loader.dispose()

    if root is None:
        raise ParseError("empty document: expected a sequence or a mapping")
    if isinstance(root, yaml.ScalarNode):
        raise ParseError.at(
            "document root must be a sequence or a mapping, not a scalar",
            root.start_mark,
        )
    if not root.tag.startswith(_CORE):
        raise ParseError.at(
            f"document root must be an untagged sequence or mapping, got {root.tag}",
            root.start_mark,
        )
    return _read_collection(loader, root, set())


def _problem(exc: yaml.MarkedYAMLError) -> str:
    if exc.context and exc.problem:
        return f"{exc.context}: {exc.problem}"
    return exc.problem or exc.context or "invalid YAML"


# ---------------------------------------------------------------------------
# Node conversion
# ---------------------------------------------------------------------------

def _read_node(loader: CoreSchemaLoader, node: yaml.Node, active: set[int]) -> Value:
    tag = node.tag
    if tag.startswith("!"):
        return LTagged(tag, _read_untagged(loader, node, active))
    if not tag.startswith(_CORE):
        raise ParseError.at(f"malformed tag {tag!r}: expected a leading '!'", node.start_mark)
    if isinstance(node, yaml.ScalarNode):
        return _read_scalar(node.value, tag, node)
    return _read_collection(loader, node, active)


def _read_untagged(loader: CoreSchemaLoader, node: yaml.Node, active: set[int]) -> Value:
    """Read the node wrapped by a custom tag as if the tag were absent."""
    if isinstance(node, yaml.ScalarNode):
        tag = loader.resolve(yaml.ScalarNode, node.value, (node.style is None, False))
        return _read_scalar(node.value, tag, node)
    return _read_collection(loader, node, active)


def _read_collection(
    loader: CoreSchemaLoader, node: yaml.Node, active: set[int]
) -> LSequence | LMapping:
    # Aliases share node objects, so a node already on the path is a cycle.
    if id(node) in active:
        raise ParseError.at("recursive alias", node.start_mark)
    active.add(id(node))
    try:
        if isinstance(node, yaml.SequenceNode):
            return LSequence([_read_node(loader, item, active) for item in node.value])
        return LMapping(
            [
                (_read_node(loader, k, active), _read_node(loader, v, active))
                for k, v in node.value
            ]
        )
    finally:
        active.discard(id(node))


def _read_scalar(text: str, tag: str, node: yaml.Node) -> Value:
    """Convert scalar text according to its resolved core-schema tag."""
    if tag == _NULL_TAG:
        if not _NULL_RE.match(text):
            raise ParseError.at(f"cannot read {text!r} as null", node.start_mark)
        return Nil
    if tag == _BOOL_TAG:
        if not _BOOL_RE.match(text):
            raise ParseError.at(f"cannot read {text!r} as a bool", node.start_mark)
        return LBool(text.lower() == "true")
    if tag == _INT_TAG:
        if not _INT_RE.match(text):
            raise ParseError.at(f"cannot read {text!r} as an int", node.start_mark)
        return LNumber(_to_int(text))
    if tag == _FLOAT_TAG:
        if not _FLOAT_RE.match(text):
            raise ParseError.at(f"cannot read {text!r} as a float", node.start_mark)
        return LNumber(_to_float(text))
    # str, timestamp, binary and any other standard scalar tag
    return LString(text)


def _to_int(text: str) -> int:
    if text.startswith("0o"):
        return int(text[2:], 8)
    if text.startswith("0x"):
        return int(text[2:], 16)
    return int(text, 10)


def _to_float(text: str) -> float:
    lowered = text.lower()
    if lowered.endswith(".inf"):
        return float("-inf") if lowered.startswith("-") else float("inf")
    if lowered == ".nan":
        return float("nan")
    return float(text)
