"""Rows read from and updates written to the levelling store."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from xpd.common import GuildConfig
from xpd.dbtypes import InterpolationDatabaseError
from xpd.ids import db_to_id
from xpd.interpolation import Interpolation, ParseError

__all__ = [
    "UpdateGuildConfig",
    "CardUpdate",
    "RawCustomizations",
    "RawGuildConfig",
]


@dataclass(frozen=True)
class UpdateGuildConfig:
    """A partial guild configuration; ``None`` leaves a stored value untouched."""

    level_up_message: str | None = None
    level_up_channel: int | None = None
    ping_users: bool | None = None
    max_xp_per_message: int | None = None
    min_xp_per_message: int | None = None
    message_cooldown: int | None = None
    one_at_a_time: bool | None = None

    def with_values(self, **kwargs: object) -> UpdateGuildConfig:
        """Return a copy with every given non-``None`` value set.

        Values passed as ``None`` keep what this update already holds.
        Unknown field names raise TypeError.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"unknown guild config fields: {', '.join(unknown)}")
        changes = {name: value for name, value in kwargs.items() if value is not None}
        return replace(self, **changes)


@dataclass(frozen=True)
class CardUpdate:
    """A partial rank-card customization; ``None`` leaves a stored value untouched.

    ``card_layout_default`` is used for the layout when neither the update nor
    the stored card names one.
    """

    card_layout_default: str
    username: str | None = None
    rank: str | None = None
    level: str | None = None
    border: str | None = None
    background: str | None = None
    progress_background: str | None = None
    progress_foreground: str | None = None
    foreground_xp_count: str | None = None
    background_xp_count: str | None = None
    font: str | None = None
    toy_image: str | None = None
    card_layout: str | None = None


@dataclass(frozen=True)
class RawCustomizations:
    """A stored rank-card customization as read from the store."""

    card_layout: str
    username: str | None = None
    rank: str | None = None
    level: str | None = None
    border: str | None = None
    background: str | None = None
    progress_foreground: str | None = None
    progress_background: str | None = None
    background_xp_count: str | None = None
    foreground_xp_count: str | None = None
    font: str | None = None
    toy_image: str | None = None


@dataclass(frozen=True)
class RawGuildConfig:
    """A guild configuration row before its template and ids are decoded."""

    one_at_a_time: bool | None = None
    level_up_message: str | None = None
    level_up_channel: int | None = None
    ping_on_level_up: bool | None = None
    min_xp_per_message: int | None = None
    max_xp_per_message: int | None = None
    message_cooldown: int | None = None

    def cook(self) -> GuildConfig:
        """Decode this row into a GuildConfig.

        Raises InterpolationDatabaseError if the stored template does not compile.
        """
        template = None
        if self.level_up_message is not None:
            try:
                template = Interpolation(self.level_up_message)
            except ParseError as error:
                raise InterpolationDatabaseError(error) from error
        channel = (
            None if self.level_up_channel is None else db_to_id(self.level_up_channel)
        )
        return GuildConfig(
            one_at_a_time=self.one_at_a_time,
            level_up_message=template,
            level_up_channel=channel,
            ping_on_level_up=self.ping_on_level_up,
            min_xp_per_message=self.min_xp_per_message,
            max_xp_per_message=self.max_xp_per_message,
            cooldown=self.message_cooldown,
        )