"""Literal — an immutable scalar that can be viewed as other scalar types.

A Literal holds exactly one payload of one :class:`Kind`. Accessors never
raise on a failed coercion; they return ``(placeholder, False)`` and leave
the decision to the caller:

- ``to_int()``    -> ``(int, ok)``
- ``to_float()``  -> ``(float, ok)``
- ``to_bool()``   -> ``(bool, ok)``
- ``to_string()`` -> ``str`` (total)
- ``as_error()``  -> ``(exception | None, is_error)``

INVARIANT: The payload type always matches ``kind``, and neither changes
after construction. String payloads are stored verbatim and re-parsed by
every accessor; no parsed value is cached on the model.
"""

from __future__ import annotations

import math
from typing import Any, Self

from pydantic import (
    BaseModel,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_serializer,
    model_validator,
)

from dlit.domain import parsing
from dlit.domain.kinds import Kind, in_int64_range

_PAYLOAD_TYPES: dict[Kind, type] = {
    Kind.INT: int,
    Kind.FLOAT: float,
    Kind.STRING: str,
    Kind.BOOL: bool,
    Kind.ERROR: BaseException,
}


class Literal(BaseModel):
    """Immutable tagged scalar with explicit coercion accessors.

    Build instances with :func:`dlit.new` or :func:`dlit.must_new`, which
    classify arbitrary input. Direct construction is validated: a payload
    that does not belong to ``kind`` raises ``pydantic.ValidationError``.

    Attributes:
        kind: Which payload type the literal holds.
        value: The payload. Errors are stored as the exception instance.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    kind: Kind
    value: StrictBool | StrictInt | StrictFloat | StrictStr | BaseException

    @model_validator(mode="after")
    def _check_payload(self) -> Self:
        value = self.value
        matches = isinstance(value, _PAYLOAD_TYPES[self.kind])
        # bool is an int subclass; only BOOL literals may hold one.
        if isinstance(value, bool) and self.kind != Kind.BOOL:
            matches = False
        if not matches:
            msg = f"{self.kind} literal cannot hold a {type(value).__name__} payload"
            raise ValueError(msg)
        if self.kind == Kind.INT and not in_int64_range(value):
            msg = f"int literal payload out of 64-bit range: {value}"
            raise ValueError(msg)
        return self

    @field_serializer("value", when_used="json")
    def _serialize_value(self, value: Any) -> Any:
        if isinstance(value, BaseException):
            return str(value)
        # JSON has no inf/nan; use the to_string() text instead of null.
        if isinstance(value, float) and not math.isfinite(value):
            return parsing.format_float(value)
        return value

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def to_int(self) -> tuple[int, bool]:
        """View the literal as a signed 64-bit integer.

        Floats must be integral and in range. Strings are parsed as a
        strict integer first; text that is not integer syntax falls back
        to a float parse whose result must be integral and in range.
        Integer text outside the int64 range fails without a fallback.
        """
        if self.kind == Kind.INT:
            return self.value, True
        if self.kind == Kind.FLOAT:
            return _int_result(parsing.float_to_int(self.value))
        if self.kind == Kind.STRING:
            if parsing.is_int_syntax(self.value):
                return _int_result(parsing.parse_int(self.value))
            parsed = parsing.parse_float(self.value)
            if parsed is None:
                return 0, False
            return _int_result(parsing.float_to_int(parsed))
        return 0, False

    def to_float(self) -> tuple[float, bool]:
        """View the literal as a 64-bit float.

        Integers beyond 2**53 lose precision; that is not a failure.
        """
        if self.kind == Kind.INT:
            return float(self.value), True
        if self.kind == Kind.FLOAT:
            return self.value, True
        if self.kind == Kind.STRING:
            parsed = parsing.parse_float(self.value)
            if parsed is None:
                return 0.0, False
            return parsed, True
        return 0.0, False

    def to_bool(self) -> tuple[bool, bool]:
        """View the literal as a boolean.

        Numbers convert only from exactly 0 or 1. Strings must be one of
        the canonical spellings in :data:`dlit.domain.parsing.TRUE_STRINGS`
        or :data:`dlit.domain.parsing.FALSE_STRINGS`.
        """
        if self.kind == Kind.BOOL:
            return self.value, True
        if self.kind in (Kind.INT, Kind.FLOAT):
            if self.value == 0:
                return False, True
            if self.value == 1:
                return True, True
            return False, False
        if self.kind == Kind.STRING:
            parsed = parsing.parse_bool(self.value)
            if parsed is None:
                return False, False
            return parsed, True
        return False, False

    def to_string(self) -> str:
        """Render the literal as text. Never fails."""
        if self.kind == Kind.FLOAT:
            return parsing.format_float(self.value)
        if self.kind == Kind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)

    def as_error(self) -> tuple[BaseException | None, bool]:
        """Return the stored exception for ERROR literals."""
        if self.kind == Kind.ERROR:
            return self.value, True
        return None, False


def _int_result(value: int | None) -> tuple[int, bool]:
    if value is None:
        return 0, False
    return value, True
