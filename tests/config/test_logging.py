"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from datetime import datetime

import pytest
import structlog

from zoneresolve.config.logging import configure_logging
from zoneresolve.domain.values import Discontinuity
from zoneresolve.resolvers.factory import push_forward


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the package logger state after each test."""
    pkg = logging.getLogger("zoneresolve")
    handlers = pkg.handlers[:]
    level = pkg.level
    propagate = pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        logger = configure_logging(verbose=True, log_json=False)
        assert logger is logging.getLogger("zoneresolve")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("zoneresolve").level == logging.WARNING

    def test_human_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("zoneresolve.test")
        log.warning("hello world", key="val")
        captured = capfd.readouterr()
        assert "hello world" in captured.err
        assert "key" in captured.err
        assert "val" in captured.err

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("zoneresolve.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "zoneresolve.test"
        assert "timestamp" in parsed

    def test_resolver_decision_is_structured(
        self, capfd: pytest.CaptureFixture[str], gap: Discontinuity, gap_local: datetime
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        push_forward().handle_gap("Europe/Paris", gap, gap_local)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip().splitlines()[-1])
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "zoneresolve.resolvers.builtins"
        assert parsed["event"] == (
            "push_forward resolved gap at 2024-03-31T01:30:00 to 2024-03-31T02:30:00+02:00"
        )

    def test_quiet_by_default(
        self, capfd: pytest.CaptureFixture[str], gap: Discontinuity, gap_local: datetime
    ) -> None:
        configure_logging(verbose=False, log_json=True)
        push_forward().handle_gap("Europe/Paris", gap, gap_local)
        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        before = len(logging.getLogger("zoneresolve").handlers)
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger("zoneresolve").handlers) == before + 1

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        try:
            handlers = root.handlers[:]
            level = root.level
            configure_logging(verbose=True, log_json=True)
            assert root.handlers == handlers
            assert root.level == level
        finally:
            root.removeHandler(host_handler)

