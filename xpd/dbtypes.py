"""Result and error types used by the levelling store."""

from __future__ import annotations

import enum

from xpd.interpolation import ParseError

__all__ = [
    "OnCooldown",
    "DatabaseError",
    "InterpolationDatabaseError",
    "UnspecifiedDeleteError",
]


class OnCooldown(enum.Enum):
    """Whether a message arrived while its author was still on cooldown."""

    YES = "yes"
    NO = "no"

    def was_on_cooldown(self) -> bool:
        """Return True if the author was on cooldown."""
        return self is OnCooldown.YES


class DatabaseError(Exception):
    """Base class for failures while reading or writing stored data."""


class InterpolationDatabaseError(DatabaseError):
    """A stored level-up template could not be compiled."""

    def __init__(self, source: ParseError) -> None:
        super().__init__(str(source))
        self.source = source
        self.__cause__ = source


class UnspecifiedDeleteError(DatabaseError):
    """A delete was requested without any constraint to delete by."""

    def __init__(self) -> None:
        super().__init__("No constraints specified to delete by.")