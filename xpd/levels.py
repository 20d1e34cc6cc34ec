"""Level calculations on the classic quadratic XP curve."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LevelInfo", "xp_needed_for_level"]


def xp_needed_for_level(level: int) -> int:
    """Return the total XP needed to reach ``level``.

    The value is ``(5 / 6) * level * (2 * level**2 + 27 * level + 91)``,
    computed in floating point and truncated toward zero.
    """
    if level < 0:
        raise ValueError(f"level must not be negative, got {level}")
    lvl = float(level)
    return int((5.0 / 6.0) * lvl * (2.0 * lvl * lvl + 27.0 * lvl + 91.0))


@dataclass(frozen=True, order=True)
class LevelInfo:
    """The level reached with a given amount of XP and the progress to the next one."""

    xp: int
    level: int
    percentage: float

    @classmethod
    def from_xp(cls, xp: int) -> LevelInfo:
        """Compute the level and the fraction of the way to the next level for ``xp``."""
        if xp < 0:
            raise ValueError(f"xp must not be negative, got {xp}")
        level = 0
        needed = 0
        while xp >= needed:
            level += 1
            needed = xp_needed_for_level(level)
        level -= 1

        last = xp_needed_for_level(level)
        following = xp_needed_for_level(level + 1)
        percentage = (float(xp) - float(last)) / (float(following) - float(last))
        return cls(xp=xp, level=level, percentage=percentage)