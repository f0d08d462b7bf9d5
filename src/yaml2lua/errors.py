"""Exceptions raised by yaml2lua."""

from __future__ import annotations


class Yaml2LuaError(Exception):
    """Base class for every error raised by this package."""


class ParseError(Yaml2LuaError):
    """The input could not be read as a YAML sequence or mapping.

    ``line`` and ``column`` are 1-based and ``None`` when the problem has no
    position in the source text.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._describe())

    @classmethod
    def at(cls, message: str, mark) -> ParseError:
        """Build an error positioned at a PyYAML ``Mark`` (0-based)."""
        if mark is None:
            return cls(message)
        return cls(message, mark.line + 1, mark.column + 1)

    def _describe(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} at line {self.line}"
        return f"{self.message} at line {self.line} column {self.column}"


class UnrepresentableKeyError(Yaml2LuaError):
    """A mapping key cannot be written as a Lua table key (strict mode only)."""

    def __init__(self, key) -> None:
        self.key = key
        super().__init__(
            f"{type(key).__name__} cannot be used as a Lua table key"
        )
