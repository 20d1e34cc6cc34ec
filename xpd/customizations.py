"""Colours and style settings for rank cards."""

from __future__ import annotations

import string
from dataclasses import dataclass

__all__ = ["Color", "InvalidLengthError", "Customizations"]

_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidLengthError(ValueError):
    """A hex colour did not have exactly six digits."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid length! Color hex data length must be exactly 6 characters!"
        )


@dataclass(frozen=True)
class Color:
    """An RGB colour with one byte per channel."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    @classmethod
    def from_hex(cls, hex_value: object) -> Color:
        """Parse ``RRGGBB`` with any number of leading ``#``.

        Raises InvalidLengthError for the wrong length and ValueError for
        characters that are not hex digits.
        """
        digits = str(hex_value).lstrip("#")
        if len(digits) != 6:
            raise InvalidLengthError()
        if not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"invalid hex color digits: {digits!r}")
        return cls(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
        )

    def __str__(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


@dataclass(frozen=True)
class Customizations:
    """The colours, font, toy image and layout used to draw a rank card."""

    username: Color = Color(255, 255, 255)
    rank: Color = Color(255, 255, 255)
    level: Color = Color(143, 202, 92)
    border: Color = Color(133, 79, 43)
    background: Color = Color(97, 55, 31)
    progress_foreground: Color = Color(71, 122, 30)
    progress_background: Color = Color(143, 202, 92)
    background_xp_count: Color = Color(0, 0, 0)
    foreground_xp_count: Color = Color(255, 255, 255)
    font: str = "Mojang"
    toy: str | None = None
    card: str = "classic.svg"

    @classmethod
    def vertical_default(cls) -> Customizations:
        """The default settings for the vertical layout."""
        return cls(
            username=Color(255, 255, 255),
            rank=Color(255, 255, 255),
            level=Color(251, 72, 196),
            border=Color(0, 0, 0),
            background=Color(10, 10, 10),
            progress_foreground=Color(251, 72, 196),
            progress_background=Color(199, 58, 157),
            background_xp_count=Color(255, 255, 255),
            foreground_xp_count=Color(255, 255, 255),
            font="Roboto",
            toy=None,
            card="vertical.svg",
        )

    @classmethod
    def default_for_card(cls, card: str) -> Customizations:
        """The default settings for the named card layout."""
        if card == "vertical.svg":
            return cls.vertical_default()
        return cls()

    def default_customizations(self) -> Customizations:
        """The default settings for this customization's card layout."""
        return self.default_for_card(self.card)

    def to_dict(self) -> dict[str, str | None]:
        """Serialize to plain values, colours as ``#RRGGBB`` strings."""
        return {
            "username": str(self.username),
            "rank": str(self.rank),
            "level": str(self.level),
            "border": str(self.border),
            "background": str(self.background),
            "progress_foreground": str(self.progress_foreground),
            "progress_background": str(self.progress_background),
            "background_xp_count": str(self.background_xp_count),
            "foreground_xp_count": str(self.foreground_xp_count),
            "font": self.font,
            "toy": self.toy,
            "card": self.card,
        }

    def __str__(self) -> str:
        defaults = self.default_customizations()
        entries = [
            ("Important text", self.username, defaults.username),
            ("Rank", self.rank, defaults.rank),
            ("Level", self.level, defaults.level),
            ("Border", self.border, defaults.border),
            ("Background", self.background, defaults.background),
            (
                "Progress bar completed",
                self.progress_foreground,
                defaults.progress_foreground,
            ),
            (
                "Progress bar remaining",
                self.progress_background,
                defaults.progress_background,
            ),
            (
                "Progress bar foreground overlay",
                self.foreground_xp_count,
                defaults.foreground_xp_count,
            ),
            (
                "Progress bar background overlay",
                self.background_xp_count,
                defaults.background_xp_count,
            ),
            ("Font", self.font, defaults.font),
        ]
        lines = [_line(name, value, default) for name, value, default in entries]
        lines.append(f"Toy: `{'None' if self.toy is None else self.toy}`\n")
        lines.append(_line("Card", self.card, defaults.card))
        return "".join(lines)


def _line(name: str, value: object, default: object) -> str:
    suffix = " (default)" if value == default else ""
    return f"{name}: `{value}`{suffix}\n"