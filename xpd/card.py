"""Rank-card resources manifest, template context and number formatting."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

from xpd.customizations import Customizations

__all__ = [
    "ConfigItem",
    "Config",
    "load_config",
    "integer_humanize",
    "Context",
]

MANIFEST_NAME = "manifest.toml"

_ITEM_KEYS = ("file", "internal_name", "display_name")
_SECTIONS = ("fonts", "toys", "cards")

# (lower bound inclusive, upper bound exclusive, divisor, suffix, precision)
_HUMANIZE_RANGES = (
    (1_000.0, 1_000_000.0, 1_000.0, "k", 1),
    (1_000_000.0, 1_000_000_000.0, 1_000_000.0, "m", 3),
    (1_000_000_000.0, 1_000_000_000_000.0, 1_000_000_000.0, "b", 3),
)


@dataclass(frozen=True)
class ConfigItem:
    """One resource named in the manifest: a font, toy image or card template."""

    file: Path
    internal_name: str
    display_name: str


@dataclass(frozen=True)
class Config:
    """The manifest of fonts, toy images and card templates."""

    fonts: tuple[ConfigItem, ...] = ()
    toys: tuple[ConfigItem, ...] = ()
    cards: tuple[ConfigItem, ...] = ()


def _parse_item(section: str, position: int, raw: object) -> ConfigItem:
    if not isinstance(raw, dict):
        raise ValueError(f"{section}[{position}] must be a table")
    missing = [key for key in _ITEM_KEYS if key not in raw]
    if missing:
        raise ValueError(
            f"{section}[{position}] is missing field(s): {', '.join(missing)}"
        )
    for key in _ITEM_KEYS:
        if not isinstance(raw[key], str):
            raise ValueError(f"{section}[{position}].{key} must be a string")
    return ConfigItem(
        file=Path(raw["file"]),
        internal_name=raw["internal_name"],
        display_name=raw["display_name"],
    )


def _parse_section(document: dict[str, Any], section: str) -> tuple[ConfigItem, ...]:
    if section not in document:
        raise ValueError(f"manifest is missing the `{section}` list")
    raw_items = document[section]
    if not isinstance(raw_items, list):
        raise ValueError(f"`{section}` must be a list of tables")
    return tuple(
        _parse_item(section, position, raw) for position, raw in enumerate(raw_items)
    )


def load_config(data_dir: str | PathLike[str]) -> Config:
    """Read ``manifest.toml`` from ``data_dir``.

    Raises OSError if the file cannot be read, tomllib.TOMLDecodeError if it
    is not TOML, and ValueError if its structure is wrong.
    """
    manifest = Path(data_dir) / MANIFEST_NAME
    with manifest.open("rb") as handle:
        document = tomllib.load(handle)
    fonts, toys, cards = (_parse_section(document, name) for name in _SECTIONS)
    return Config(fonts=fonts, toys=toys, cards=cards)


def integer_humanize(value: object) -> object:
    """Shorten a number with a ``k``, ``m`` or ``b`` suffix.

    Thousands keep one decimal, millions and billions three; trailing zeros
    and a trailing point are dropped. Anything that is not a number is
    returned unchanged.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    number = float(value)
    suffix, scaled, precision = "", number, 1
    for low, high, divisor, range_suffix, range_precision in _HUMANIZE_RANGES:
        if low <= number < high:
            suffix, scaled, precision = range_suffix, number / divisor, range_precision
            break
    text = f"{scaled:.{precision}f}".rstrip("0").rstrip(".")
    return f"{text}{suffix}"


@dataclass(frozen=True)
class Context:
    """Everything a card template is rendered with."""

    level: int
    rank: int
    name: str
    percentage: int
    current: int
    needed: int
    avatar: str
    customizations: Customizations = field(default_factory=Customizations)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain values for a template engine."""
        return {
            "level": self.level,
            "rank": self.rank,
            "name": self.name,
            "percentage": self.percentage,
            "current": self.current,
            "needed": self.needed,
            "customizations": self.customizations.to_dict(),
            "avatar": self.avatar,
        }