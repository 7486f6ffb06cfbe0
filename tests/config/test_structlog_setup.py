"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from ooplab.config.logging import configure_logging
from ooplab.infrastructure.outbox import Outbox
from ooplab.notifiers import EmailNotifier


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ool = logging.getLogger("ooplab")
    ool_level = ool.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ool.setLevel(ool_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("ooplab").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("ooplab").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("ooplab.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "ooplab.test"
        assert "timestamp" in parsed

    def test_send_logs_channel_and_message(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        EmailNotifier(Outbox()).send("Sistema atualizado!")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "notification sent"
        assert parsed["channel"] == "email"
        assert parsed["recipient"] == "admin@localhost"
        assert parsed["text"] == "Sistema atualizado!"

    def test_send_is_quiet_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        EmailNotifier(Outbox()).send("hi")
        assert capfd.readouterr().err == ""

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("ooplab.plugins.manager").debug("Registered plugin: audit-builtin")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Registered plugin: audit-builtin"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "ooplab.plugins.manager"

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestUnconfiguredLibrary:
    def test_send_writes_nothing_to_stdout(self, capfd: pytest.CaptureFixture[str]) -> None:
        logging.getLogger().handlers = []
        EmailNotifier(Outbox()).send("hi")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger("ooplab").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
