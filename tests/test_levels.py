import sys

import pytest

from xpd.levels import LevelInfo, xp_needed_for_level


def test_level():
    assert LevelInfo.from_xp(3255).level == 8


def test_xp():
    assert LevelInfo.from_xp(3255).xp == 3255


def test_percentage():
    info = LevelInfo.from_xp(3255)
    assert abs(info.percentage - 0.43) > sys.float_info.epsilon


def test_zero_xp_is_level_zero():
    info = LevelInfo.from_xp(0)
    assert info.level == 0
    assert info.percentage == 0.0


def test_level_zero_needs_no_xp():
    assert xp_needed_for_level(0) == 0


@pytest.mark.parametrize("xp", [0, 1, 99, 100, 3255, 12345, 999_999])
def test_level_brackets_xp(xp):
    info = LevelInfo.from_xp(xp)
    assert xp_needed_for_level(info.level) <= xp < xp_needed_for_level(info.level + 1)
    assert 0.0 <= info.percentage < 1.0


@pytest.mark.parametrize("level", [1, 2, 5, 8, 20, 100])
def test_exact_threshold_reaches_level(level):
    info = LevelInfo.from_xp(xp_needed_for_level(level))
    assert info.level == level
    assert info.percentage == 0.0


def test_requirements_strictly_increase():
    values = [xp_needed_for_level(n) for n in range(50)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_negative_xp_rejected():
    with pytest.raises(ValueError):
        LevelInfo.from_xp(-1)


def test_negative_level_rejected():
    with pytest.raises(ValueError):
        xp_needed_for_level(-3)