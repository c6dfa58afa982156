"""dlit — dynamically-typed literal values with explicit coercion.

Usage::

    import dlit

    lit, err = dlit.new("6.0")
    n, ok = lit.to_int()        # (6, True)
    b, ok = lit.to_bool()       # (False, False)
"""

from __future__ import annotations

from dlit.domain.construct import LiteralInput, must_new, new
from dlit.domain.errors import InvalidKindError, LiteralError
from dlit.domain.kinds import INT64_MAX, INT64_MIN, Kind
from dlit.domain.literal import Literal

__version__ = "0.1.0"

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "InvalidKindError",
    "Kind",
    "Literal",
    "LiteralError",
    "LiteralInput",
    "__version__",
    "must_new",
    "new",
]
