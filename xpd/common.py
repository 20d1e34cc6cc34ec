"""Shared data types and constants for guild levelling."""

from __future__ import annotations

from dataclasses import dataclass, replace

from xpd.interpolation import Interpolation

__all__ = [
    "DISCORD_EPOCH_MS",
    "DISCORD_EPOCH_SECS",
    "TEMPLATE_VARIABLES",
    "DEFAULT_MAX_XP_PER_MESSAGE",
    "DEFAULT_MIN_XP_PER_MESSAGE",
    "DEFAULT_MESSAGE_COOLDOWN",
    "MAX_MESSAGE_COOLDOWN",
    "MemberDisplayInfo",
    "GuildConfig",
    "UserStatus",
    "RoleReward",
    "compare_rewards_requirement",
    "InvalidateRewards",
    "UpdateConfig",
    "EventBusMessage",
]

DISCORD_EPOCH_MS = 1_420_070_400_000
DISCORD_EPOCH_SECS = DISCORD_EPOCH_MS // 1000

TEMPLATE_VARIABLES: tuple[str, ...] = (
    "user_id",
    "user_mention",
    "user_username",
    "user_display_name",
    "user_nickname",
    "old_level",
    "level",
    "old_xp",
    "xp",
)

DEFAULT_MAX_XP_PER_MESSAGE = 25
DEFAULT_MIN_XP_PER_MESSAGE = 15
DEFAULT_MESSAGE_COOLDOWN = 60
MAX_MESSAGE_COOLDOWN = 28800


@dataclass(frozen=True)
class MemberDisplayInfo:
    """What is needed to show a guild member: names, avatars and bot flag."""

    id: int
    name: str
    global_name: str | None = None
    nick: str | None = None
    avatar: str | None = None
    local_avatar: str | None = None
    bot: bool = False

    def display_name(self) -> str:
        """Return the nickname, else the global name, else the username."""
        if self.nick is not None:
            return self.nick
        if self.global_name is not None:
            return self.global_name
        return self.name

    def with_nick(self, nick: str | None) -> MemberDisplayInfo:
        """Return a copy with the nickname replaced."""
        return replace(self, nick=nick)


def _flag(value: bool | None) -> str:
    if value is None:
        return "unset"
    return "true" if value else "false"


@dataclass
class GuildConfig:
    """Per-guild settings; ``None`` means the setting was never set."""

    one_at_a_time: bool | None = None
    level_up_message: Interpolation | None = None
    level_up_channel: int | None = None
    ping_on_level_up: bool | None = None
    min_xp_per_message: int | None = None
    max_xp_per_message: int | None = None
    cooldown: int | None = None

    def __str__(self) -> str:
        message = (
            "unset"
            if self.level_up_message is None
            else f"`{self.level_up_message.input_value()}`"
        )
        channel = (
            "unset"
            if self.level_up_channel is None
            else f"`<#{self.level_up_channel}>`"
        )
        max_xp = (
            DEFAULT_MAX_XP_PER_MESSAGE
            if self.max_xp_per_message is None
            else self.max_xp_per_message
        )
        min_xp = (
            DEFAULT_MIN_XP_PER_MESSAGE
            if self.min_xp_per_message is None
            else self.min_xp_per_message
        )
        cooldown = DEFAULT_MESSAGE_COOLDOWN if self.cooldown is None else self.cooldown
        return "\n".join(
            [
                f"One reward role at a time: {_flag(self.one_at_a_time)}",
                f"Level-up message: {message}",
                f"Level-up channel: {channel}",
                f"Maximum XP per message: {max_xp}",
                f"Minimum XP per message: {min_xp}",
                f"Cooldown (seconds): {cooldown}",
            ]
        )


@dataclass(frozen=True)
class UserStatus:
    """A user's XP total in one guild."""

    id: int
    guild: int
    xp: int


@dataclass(frozen=True)
class RoleReward:
    """A role granted once a user reaches ``requirement``."""

    id: int
    requirement: int


def compare_rewards_requirement(a: RoleReward, b: RoleReward) -> int:
    """Order two rewards by requirement: negative, zero or positive."""
    return (a.requirement > b.requirement) - (a.requirement < b.requirement)


@dataclass(frozen=True)
class InvalidateRewards:
    """Ask listeners to reload the rewards of a guild."""

    guild: int


@dataclass(frozen=True)
class UpdateConfig:
    """Hand listeners a fresh configuration for a guild."""

    guild: int
    config: GuildConfig


EventBusMessage = InvalidateRewards | UpdateConfig