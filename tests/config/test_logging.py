"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

import dlit
from dlit.config.logging import configure_logging

pytestmark = pytest.mark.usefixtures("restore_logging")


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("dlit").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("dlit").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=True, log_json=False, stream=buf)
        log = structlog.get_logger("dlit.test")
        log.warning("hello world", key="val")
        output = buf.getvalue()
        assert "hello world" in output
        assert "key" in output

    def test_json_mode_output(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)
        log = structlog.get_logger("dlit.test")
        log.warning("json test", answer=42)
        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dlit.test"
        assert "timestamp" in parsed

    def test_defaults_to_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("dlit.test").warning("to stderr")
        captured = capfd.readouterr()
        assert json.loads(captured.err.strip())["event"] == "to stderr"

    def test_stdlib_dlit_logger_gets_structured_fields(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)

        dlit.new(1j)

        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "Rejected literal input: can't create Literal from type: complex"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "dlit.domain.construct"
        assert "timestamp" in parsed

    def test_debug_suppressed_when_not_verbose(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=buf)

        dlit.new(1j)

        assert buf.getvalue() == ""

    def test_third_party_debug_is_suppressed(self) -> None:
        buf = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)

        logging.getLogger("pydantic").debug("validation noise")

        assert buf.getvalue() == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1
