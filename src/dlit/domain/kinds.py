"""Literal kinds and the 64-bit numeric bounds they are checked against."""

from __future__ import annotations

from enum import StrEnum

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Kind(StrEnum):
    """Discriminant for the payload a Literal holds."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    ERROR = "error"


def in_int64_range(value: int) -> bool:
    """Check whether *value* fits a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def narrow_to_int64(value: int) -> int:
    """Wrap *value* into the signed 64-bit range (two's complement)."""
    return ((value - INT64_MIN) % 2**64) + INT64_MIN
