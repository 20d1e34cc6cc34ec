from functools import cmp_to_key

import pytest

from xpd.common import (
    DEFAULT_MAX_XP_PER_MESSAGE,
    DEFAULT_MESSAGE_COOLDOWN,
    DEFAULT_MIN_XP_PER_MESSAGE,
    GuildConfig,
    InvalidateRewards,
    MemberDisplayInfo,
    RoleReward,
    UpdateConfig,
    UserStatus,
    compare_rewards_requirement,
)
from xpd.interpolation import Interpolation


def test_display_name_prefers_nick():
    info = MemberDisplayInfo(id=1, name="user", global_name="Global", nick="Nick")
    assert info.display_name() == "Nick"


def test_display_name_falls_back_to_global_name():
    info = MemberDisplayInfo(id=1, name="user", global_name="Global")
    assert info.display_name() == "Global"


def test_display_name_falls_back_to_username():
    info = MemberDisplayInfo(id=1, name="user")
    assert info.display_name() == "user"


def test_with_nick_returns_modified_copy():
    info = MemberDisplayInfo(id=7, name="user", global_name="Global")
    changed = info.with_nick("Nick")
    assert changed.nick == "Nick"
    assert changed.display_name() == "Nick"
    assert info.nick is None
    assert changed.id == info.id and changed.name == info.name


def test_with_nick_none_clears():
    info = MemberDisplayInfo(id=7, name="user", nick="Nick")
    assert info.with_nick(None).display_name() == "user"


def test_default_guild_config_str():
    text = str(GuildConfig())
    lines = text.split("\n")
    assert lines[0] == "One reward role at a time: unset"
    assert lines[1] == "Level-up message: unset"
    assert lines[2] == "Level-up channel: unset"
    assert lines[3] == f"Maximum XP per message: {DEFAULT_MAX_XP_PER_MESSAGE}"
    assert lines[4] == f"Minimum XP per message: {DEFAULT_MIN_XP_PER_MESSAGE}"
    assert lines[5] == f"Cooldown (seconds): {DEFAULT_MESSAGE_COOLDOWN}"
    assert not text.endswith("\n")


@pytest.mark.parametrize("flag,word", [(True, "true"), (False, "false")])
def test_guild_config_str_one_at_a_time(flag, word):
    text = str(GuildConfig(one_at_a_time=flag))
    assert text.split("\n")[0] == f"One reward role at a time: {word}"


def test_guild_config_str_with_values():
    template = "Congrats {user_mention} \\{not}"
    config = GuildConfig(
        level_up_message=Interpolation(template),
        level_up_channel=123,
        max_xp_per_message=40,
        min_xp_per_message=5,
        cooldown=10,
    )
    lines = str(config).split("\n")
    assert lines[1] == f"Level-up message: `{template}`"
    assert lines[2] == "Level-up channel: `<#123>`"
    assert lines[3] == "Maximum XP per message: 40"
    assert lines[4] == "Minimum XP per message: 5"
    assert lines[5] == "Cooldown (seconds): 10"


def test_compare_rewards_requirement_sorts():
    rewards = [RoleReward(3, 10), RoleReward(1, 2), RoleReward(2, 4)]
    ordered = sorted(rewards, key=cmp_to_key(compare_rewards_requirement))
    assert [r.id for r in ordered] == [1, 2, 3]


def test_compare_rewards_requirement_signs():
    low, high = RoleReward(1, 2), RoleReward(2, 5)
    assert compare_rewards_requirement(low, high) < 0
    assert compare_rewards_requirement(high, low) > 0
    assert compare_rewards_requirement(low, RoleReward(9, 2)) == 0


def test_user_status_is_immutable():
    status = UserStatus(id=1, guild=2, xp=3)
    with pytest.raises(AttributeError):
        status.xp = 5  # type: ignore[misc]
    assert status == UserStatus(1, 2, 3)


def test_event_bus_messages_carry_payload():
    config = GuildConfig(cooldown=30)
    update = UpdateConfig(guild=5, config=config)
    assert update.config.cooldown == 30
    assert update.guild == 5
    assert InvalidateRewards(5) == InvalidateRewards(guild=5)