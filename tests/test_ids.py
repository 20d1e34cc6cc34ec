import pytest

from xpd.ids import db_to_id, id_to_db


@pytest.mark.parametrize("snowflake", [1, 42, 1_420_070_400_000, 2**63 - 1])
def test_small_ids_unchanged(snowflake):
    assert id_to_db(snowflake) == snowflake


@pytest.mark.parametrize("snowflake", [1, 12345, 2**63 - 1, 2**63, 2**64 - 1])
def test_roundtrip_from_id(snowflake):
    assert db_to_id(id_to_db(snowflake)) == snowflake


@pytest.mark.parametrize("value", [1, 99, -1, -(2**63), 2**63 - 1])
def test_roundtrip_from_db(value):
    assert id_to_db(db_to_id(value)) == value


def test_high_bit_becomes_negative():
    assert id_to_db(2**63) == -(2**63)
    assert id_to_db(2**64 - 1) == -1


def test_db_values_fit_signed_range():
    for snowflake in (1, 2**62, 2**63, 2**64 - 1):
        assert -(2**63) <= id_to_db(snowflake) <= 2**63 - 1


@pytest.mark.parametrize("bad", [0, -1, 2**64])
def test_id_out_of_range(bad):
    with pytest.raises(ValueError):
        id_to_db(bad)


@pytest.mark.parametrize("bad", [0, 2**63, -(2**63) - 1])
def test_db_value_out_of_range(bad):
    with pytest.raises(ValueError):
        db_to_id(bad)