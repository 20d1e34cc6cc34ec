"""A minimal template format: ``this is an {interpolated} string``.

Variable names may contain ``-``, ``_``, ``0-9``, ``a-z`` and ``A-Z``.
A backslash escapes ``{`` or another backslash.
"""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping

__all__ = [
    "Interpolation",
    "ParseError",
    "UnclosedIdentifierError",
    "InvalidCharInIdentifierError",
    "InvalidEscapeError",
    "UnknownVariablesError",
]

_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_ESCAPABLE = frozenset("{\\")


class ParseError(ValueError):
    """A template could not be compiled. ``position`` is zero-based."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class UnclosedIdentifierError(ParseError):
    """An identifier opened with ``{`` was never closed."""

    def __init__(self, position: int) -> None:
        super().__init__(
            f"Unclosed identifier (mismatched pair at {position + 1})", position
        )


class InvalidCharInIdentifierError(ParseError):
    """An identifier contains a character outside the allowed set."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            f"Invalid character `{char!r}` in identifier at {position + 1}", position
        )
        self.char = char


class InvalidEscapeError(ParseError):
    """A backslash escaped something other than ``{`` or ``\\``."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            f"`{char!r}` at position {position + 1} cannot be escaped, "
            "only `{` and `\\` can",
            position,
        )
        self.char = char


class UnknownVariablesError(LookupError):
    """Rendering referenced variables that were not supplied."""

    def __init__(self, variables: list[str]) -> None:
        super().__init__("Unknown variables used: " + ", ".join(variables))
        self.variables = list(variables)


class Interpolation:
    """A compiled template that can be rendered with string variables."""

    __slots__ = ("_parts", "_end")

    def __init__(self, template: str) -> None:
        self._parts, self._end = _compile(template)

    def __repr__(self) -> str:
        return f"Interpolation({self.input_value()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interpolation):
            return NotImplemented
        return self._parts == other._parts and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._parts, self._end))

    def render(self, args: Mapping[str, str]) -> str:
        """Render the template; missing variables become empty strings."""
        pieces: list[str] = []
        for raw, key in self._parts:
            pieces.append(raw)
            pieces.append(args.get(key, ""))
        pieces.append(self._end)
        return "".join(pieces)

    def try_render(self, args: Mapping[str, str]) -> str:
        """Render the template, raising UnknownVariablesError for missing variables."""
        missing = [key for _, key in self._parts if key not in args]
        if missing:
            raise UnknownVariablesError(missing)
        return self.render(args)

    def variables_used(self) -> Iterator[str]:
        """Yield each variable reference in order of appearance."""
        return (key for _, key in self._parts)

    def input_value(self) -> str:
        """Rebuild template source that compiles to this interpolation."""
        pieces = [f"{_escape(text)}{{{key}}}" for text, key in self._parts]
        pieces.append(_escape(self._end))
        return "".join(pieces)


def _escape(text: str) -> str:
    return "".join("\\" + ch if ch in _ESCAPABLE else ch for ch in text)


def _compile(template: str) -> tuple[tuple[tuple[str, str], ...], str]:
    parts: list[tuple[str, str]] = []
    buffer: list[str] = []
    escaped = False
    index = 0
    length = len(template)
    while index < length:
        ch = template[index]
        if escaped:
            if ch not in _ESCAPABLE:
                raise InvalidEscapeError(ch, index)
            buffer.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "{":
            start = index + 1
            end = start
            while True:
                if end >= length:
                    raise UnclosedIdentifierError(start)
                part = template[end]
                if part == "}":
                    break
                if part not in _IDENT_CHARS:
                    raise InvalidCharInIdentifierError(part, end)
                end += 1
            parts.append(("".join(buffer), template[start:end]))
            buffer.clear()
            index = end
        else:
            buffer.append(ch)
        index += 1
    return tuple(parts), "".join(buffer)