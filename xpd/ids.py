"""Conversion between unsigned 64-bit snowflake ids and signed database integers."""

from __future__ import annotations

__all__ = ["id_to_db", "db_to_id"]

_U64_LIMIT = 1 << 64
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def id_to_db(snowflake: int) -> int:
    """Reinterpret a non-zero unsigned 64-bit id as a signed 64-bit integer."""
    if not 0 < snowflake < _U64_LIMIT:
        raise ValueError(f"id must be a non-zero unsigned 64-bit integer, got {snowflake}")
    return snowflake - _U64_LIMIT if snowflake > _I64_MAX else snowflake


def db_to_id(value: int) -> int:
    """Reinterpret a signed 64-bit database integer as a non-zero unsigned id."""
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"value must be a signed 64-bit integer, got {value}")
    if value == 0:
        raise ValueError("id must not be zero")
    return value + _U64_LIMIT if value < 0 else value