"""Decide which reward roles a member gains or loses and what a level-up message says."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import chain

from xpd.common import GuildConfig, RoleReward

__all__ = [
    "RoleChangeList",
    "get_reward_idx",
    "get_role_changes",
    "congratulation_variables",
]


@dataclass(frozen=True)
class RoleChangeList:
    """The member's full role list after an update and the roles that changed."""

    total_roles: tuple[int, ...]
    changed_roles: tuple[int, ...]


def get_reward_idx(rewards: Iterable[RoleReward], user_level: int) -> int | None:
    """Return the index of the highest reward earned at ``user_level``.

    ``rewards`` must be sorted by requirement. Returns None when no reward
    has been earned.
    """
    reward_idx = None
    for idx, reward in enumerate(rewards):
        if reward.requirement > user_level:
            break
        reward_idx = idx
    return reward_idx


def get_role_changes(
    guild_config: GuildConfig,
    member_roles: Sequence[int],
    rewards: Sequence[RoleReward],
    reward_idx: int,
) -> RoleChangeList:
    """Work out the member's new roles once the reward at ``reward_idx`` is earned.

    With one-at-a-time enabled only the earned reward is added and the
    previous reward role is removed; otherwise every reward up to and
    including ``reward_idx`` is added and nothing is removed.
    """
    if not 0 <= reward_idx < len(rewards):
        raise IndexError(f"reward index {reward_idx} out of range")

    one_at_a_time = guild_config.one_at_a_time is True
    current = list(member_roles)
    previous_role = rewards[max(reward_idx - 1, 0)].id
    achieved = (
        rewards[reward_idx : reward_idx + 1]
        if one_at_a_time
        else rewards[: reward_idx + 1]
    )
    roles_to_add = (reward.id for reward in achieved if reward.id not in current)

    total: list[int] = []
    changed: list[int] = []
    for role in chain(current, roles_to_add):
        keep = not one_at_a_time or reward_idx == 0 or role != previous_role
        if not keep or role not in current:
            changed.append(role)
        if keep:
            total.append(role)

    return RoleChangeList(total_roles=tuple(total), changed_roles=tuple(changed))


def congratulation_variables(
    author_id: int,
    username: str,
    display_name: str,
    nickname: str | None,
    old_level: int,
    level: int,
    xp: int,
    old_xp: int,
) -> dict[str, str]:
    """Build the variables available to a level-up message template.

    A missing nickname falls back to the display name. The ``old_xp`` variable
    carries ``xp`` and the ``xp`` variable carries ``old_xp``, as level-up
    messages have always been rendered.
    """
    return {
        "user_id": str(author_id),
        "user_mention": f"<@{author_id}>",
        "user_username": username,
        "user_display_name": display_name,
        "user_nickname": display_name if nickname is None else nickname,
        "old_level": str(old_level),
        "level": str(level),
        "old_xp": str(xp),
        "xp": str(old_xp),
    }