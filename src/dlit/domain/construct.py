"""Classification of raw input into a Literal.

The accepted input is a closed set of shapes, checked in order:

1. ``bool``                      -> BOOL
2. ``numbers.Integral``          -> INT (narrowed to int64)
3. ``numbers.Real``              -> FLOAT
4. ``str``                       -> STRING (stored unparsed)
5. ``BaseException`` instance    -> ERROR

Anything else is a classification failure. :func:`new` reports it and
still returns an ERROR literal; :func:`must_new` raises it.
"""

from __future__ import annotations

import logging
import math
import numbers

from dlit.domain.errors import InvalidKindError
from dlit.domain.kinds import Kind, in_int64_range, narrow_to_int64
from dlit.domain.literal import Literal

logger = logging.getLogger(__name__)

LiteralInput = bool | int | float | str | BaseException


def new(value: object) -> tuple[Literal, InvalidKindError | None]:
    """Classify *value* and wrap it in a Literal.

    Returns:
        ``(literal, None)`` on success. For unsupported input, returns
        ``(error_literal, err)`` where *error_literal* is an ERROR literal
        holding *err*.
    """
    if isinstance(value, bool):
        return Literal(kind=Kind.BOOL, value=value), None
    if isinstance(value, numbers.Integral):
        number = int(value)
        if not in_int64_range(number):
            logger.debug("Narrowing integer %d to 64 bits", number)
            number = narrow_to_int64(number)
        return Literal(kind=Kind.INT, value=number), None
    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            # Saturate like a float64 does.
            logger.debug("Saturating %s to infinity", type(value).__name__)
            number = math.inf if value > 0 else -math.inf
        return Literal(kind=Kind.FLOAT, value=number), None
    if isinstance(value, str):
        # Exact str content, even for str subclasses such as enums.
        return Literal(kind=Kind.STRING, value=str.__str__(value)), None
    if isinstance(value, BaseException):
        return Literal(kind=Kind.ERROR, value=value), None

    err = InvalidKindError(type(value).__name__)
    logger.debug("Rejected literal input: %s", err)
    return Literal(kind=Kind.ERROR, value=err), err


def must_new(value: object) -> Literal:
    """Like :func:`new`, but raise :class:`InvalidKindError` on unsupported input.

    For call sites where an unsupported value is a programming error.
    """
    literal, err = new(value)
    if err is not None:
        raise err
    return literal
