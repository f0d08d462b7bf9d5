"""yaml2lua — convert YAML documents to Lua table literals."""

from .errors import ParseError, UnrepresentableKeyError, Yaml2LuaError
from .escaping import canonical_escape, escape_string
from .model import (
    LBool,
    LMapping,
    LNull,
    LNumber,
    LSequence,
    LString,
    LTagged,
    Nil,
    Value,
)
from .reader import CoreSchemaLoader, load
from .renderer import RenderOptions, get_indent, parse, render, walk

__all__ = [
    "parse",
    "load",
    "render",
    "walk",
    "get_indent",
    "escape_string",
    "canonical_escape",
    "RenderOptions",
    "CoreSchemaLoader",
    "LBool",
    "LMapping",
    "LNull",
    "LNumber",
    "LSequence",
    "LString",
    "LTagged",
    "Nil",
    "Value",
    "Yaml2LuaError",
    "ParseError",
    "UnrepresentableKeyError",
]
