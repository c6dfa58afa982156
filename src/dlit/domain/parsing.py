"""Text parsing and formatting rules shared by the Literal accessors.

All helpers are pure and return ``None`` when the text does not parse,
leaving the ``(value, ok)`` reporting to the caller.

Accepted syntax:
- Integers: optional sign, ASCII digits. No whitespace, no underscores.
- Floats: optional sign, decimal mantissa, optional exponent, or one of
  ``inf``/``infinity``/``nan`` in any case.
- Booleans: a fixed, case-sensitive set of spellings.
"""

from __future__ import annotations

import math
import re

from dlit.domain.kinds import in_int64_range

INT_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")

FLOAT_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

NON_FINITE_WORDS = frozenset({"inf", "infinity", "nan"})

TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Longest magnitude that can still fit int64, in significant digits.
_INT64_MAX_DIGITS = 19


def is_int_syntax(text: str) -> bool:
    """Check whether *text* is a plain base-10 integer literal."""
    return INT_PATTERN.fullmatch(text) is not None


def parse_int(text: str) -> int | None:
    """Parse a strict base-10 integer that fits int64.

    Returns None for anything that is not integer syntax or lies outside
    the signed 64-bit range.
    """
    if not is_int_syntax(text):
        return None
    # Avoid int() on huge digit runs; they are out of range anyway.
    if len(text.lstrip("+-").lstrip("0")) > _INT64_MAX_DIGITS:
        return None
    value = int(text)
    if not in_int64_range(value):
        return None
    return value


def parse_float(text: str) -> float | None:
    """Parse a decimal or scientific-notation float spanning all of *text*.

    A finite literal that overflows to infinity (``"1e400"``) is rejected.
    """
    if FLOAT_PATTERN.fullmatch(text) is None:
        return None
    value = float(text)
    if math.isinf(value) and text.lstrip("+-").lower() not in NON_FINITE_WORDS:
        return None
    return value


def float_to_int(value: float) -> int | None:
    """Convert an integral, in-range float to int; None otherwise."""
    if not value.is_integer():
        return None
    result = int(value)
    if not in_int64_range(result):
        return None
    return result


def parse_bool(text: str) -> bool | None:
    """Match *text* against the canonical true/false spellings."""
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    return None


def format_float(value: float) -> str:
    """Shortest text that parses back to *value*, without a trailing ``.0``.

    Examples:
        >>> format_float(124.0)
        '124'
        >>> format_float(124.56728482274629)
        '124.56728482274629'
        >>> format_float(1e16)
        '1e+16'
    """
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text
