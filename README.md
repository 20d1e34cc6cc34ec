# xpd

The core logic of a chat leveling bot, as a plain Python library with no
runtime dependencies. It needs Python 3.11 or later.

## Modules

- `xpd.levels` holds the level curve.
  - `xp_needed_for_level(level)` returns the total XP that a level needs.
  - `LevelInfo.from_xp(xp)` returns a frozen `LevelInfo`. It holds `xp`,
    the `level` reached, and `percentage`, the fraction of the way from that
    level to the next one, between 0 and 1.
  - Negative inputs raise `ValueError`.
- `xpd.interpolation` holds a small template format, for example
  `Congrats {user_mention}, you reached level {level}!`.
  - Variable names may contain letters, digits, `-` and `_`.
  - `\{` writes a literal brace and `\\` writes a literal backslash.
  - `Interpolation(template)` compiles a template. A bad template raises a
    `ParseError` subclass: `UnclosedIdentifierError`,
    `InvalidCharInIdentifierError` or `InvalidEscapeError`. Each carries a
    zero-based `position`.
  - `render(args)` puts an empty string where a variable is missing.
  - `try_render(args)` raises `UnknownVariablesError`, which lists every
    missing variable in `variables`.
  - `variables_used()` yields the variable references in the order they
    appear.
  - `input_value()` rebuilds template text that compiles to the same
    interpolation.
- `xpd.ids` converts between ID forms.
  - `id_to_db` turns a non-zero unsigned 64-bit snowflake ID into the signed
    64-bit form used for storage.
  - `db_to_id` turns the signed form back into the snowflake ID.
  - Values out of range, and zero, raise `ValueError`.
- `xpd.common` holds the shared records and defaults.
  - Records: `GuildConfig`, `MemberDisplayInfo`, `UserStatus`, `RoleReward`.
  - `compare_rewards_requirement` compares two rewards by requirement.
  - Event-bus messages: `InvalidateRewards` and `UpdateConfig`.
  - Constants: the default and maximum XP and cooldown values, and
    `TEMPLATE_VARIABLES`.
  - `str(GuildConfig)` gives a readable summary in which unset values are
    filled in with their defaults.
- `xpd.dbtypes` holds types for storage results.
  - `OnCooldown` is an enum with a `was_on_cooldown()` method.
  - The error classes are `DatabaseError`, `InterpolationDatabaseError` and
    `UnspecifiedDeleteError`.
- `xpd.records` holds row and update records.
  - `UpdateGuildConfig.with_values(**kwargs)` returns a copy with the given
    fields set. Values given as `None` are ignored.
  - `CardUpdate` and `RawCustomizations` are the other records.
  - `RawGuildConfig.cook()` decodes a stored row into a `GuildConfig`.
- `xpd.rewards` decides which reward roles a member holds.
  - `get_reward_idx(rewards, level)` gives the index of the highest reward
    earned. The rewards must be sorted by requirement.
  - `get_role_changes(config, member_roles, rewards, idx)` returns a
    `RoleChangeList` with the member's new roles and the roles that changed.
  - With `one_at_a_time` set, the previous reward role is removed.
  - `congratulation_variables(...)` builds the variables for a level-up
    message template.
- `xpd.customizations` holds rank card styling.
  - `Color.from_hex("#RRGGBB")` parses a colour. `str(color)` gives
    `#RRGGBB` in upper case. A string of the wrong length raises
    `InvalidLengthError`.
  - `Customizations` holds the colours, font, toy image and card layout.
    `Customizations.vertical_default()` and `default_for_card(card)` give the
    defaults for a layout.
  - `to_dict()` serializes a `Customizations`.
  - `str(customizations)` lists each setting and marks the ones that equal
    the default.
- `xpd.card` holds rank card resources and formatting.
  - `load_config(data_dir)` reads `manifest.toml` into a `Config` of
    `ConfigItem` fonts, toys and cards.
  - `Context` holds the values a card template is rendered with.
    `to_dict()` serializes it.
  - `integer_humanize` shortens numbers, for example `1500` becomes `"1.5k"`.

## Example

```python
from xpd.levels import LevelInfo
from xpd.interpolation import Interpolation

info = LevelInfo.from_xp(3255)
print(info.level)  # 8

template = Interpolation("GG {user_mention}, you are now level {level}!")
print(template.render({"user_mention": "<@1>", "level": "8"}))
```

## What this package does not do

This package only holds the logic and data types. It does not include:

- a chat connection or gateway client;
- a database or any storage layer. The record and error types are provided,
  but no queries run against them;
- a renderer for SVG or PNG rank cards. `Context.to_dict()` produces template
  input, but nothing renders it;
- a command-line program.

## Installing

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```