"""Exceptions raised (or returned) by Literal construction."""

from __future__ import annotations


class LiteralError(Exception):
    """Base class for dlit errors."""


class InvalidKindError(LiteralError, TypeError):
    """Input value has no Literal representation.

    Attributes:
        kind: Name of the rejected input type (e.g. ``"complex"``).
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"can't create Literal from type: {kind}")
