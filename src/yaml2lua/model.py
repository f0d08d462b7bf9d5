"""Value model for yaml2lua: the typed tree read from one YAML document."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union


# ---------------------------------------------------------------------------
# Nil — singleton for the YAML null value
# ---------------------------------------------------------------------------

class LNull:
    """YAML ``null``; rendered as Lua ``nil``."""

    _instance: LNull | None = None

    def __new__(cls) -> LNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nil"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "nil"


Nil = LNull()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class LBool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(slots=True)
class LNumber:
    value: int | float

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, int):
            return str(v)
        # Lua has no literals for infinities or NaN
        if math.isnan(v):
            return "0/0"
        if math.isinf(v):
            return "math.huge" if v > 0 else "-math.huge"
        return repr(v)


@dataclass(slots=True)
class LString:
    value: str


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class LSequence:
    items: list[Value] = field(default_factory=list)


@dataclass(slots=True)
class LMapping:
    """Ordered key/value pairs.

    Keys may be any node kind and duplicates are kept, so this is a list of
    pairs rather than a dict.
    """

    entries: list[tuple[Value, Value]] = field(default_factory=list)


@dataclass(slots=True)
class LTagged:
    tag: str  # raw tag text, e.g. "!Point"
    value: Value


Value = Union[LNull, LBool, LNumber, LString, LSequence, LMapping, LTagged]
