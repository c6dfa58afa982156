"""Shared pytest fixtures for dlit tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
import structlog


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any ``DLIT_*`` variables so settings fall back to defaults."""
    for name in list(os.environ):
        if name.startswith("DLIT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root/dlit logger state and structlog defaults after a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dlit_logger = logging.getLogger("dlit")
    dlit_level = dlit_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dlit_logger.setLevel(dlit_level)
    structlog.reset_defaults()
