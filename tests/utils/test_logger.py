# -*- coding: utf-8 -*-
"""
Logging setup tests: dated default file, console-only mode, configure-once.
"""
# Standard library
import logging
from datetime import datetime

# Third-party
import pytest

# Local imports
from config.intake_config import LOGS_PATH
from dv_intake.utils import logger as logger_module
from dv_intake.utils.logger import default_log_file, setup_logging


@pytest.fixture
def captured_config(monkeypatch):
    """Record basicConfig calls instead of replacing the root handlers."""
    calls = []
    monkeypatch.setattr(logger_module, "_logging_configured", False)
    monkeypatch.setattr(logger_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    yield calls
    for kwargs in calls:
        for handler in kwargs["handlers"]:
            handler.close()


class TestLogger:
    """Tests for setup_logging / default_log_file."""

    def test_default_log_file_is_dated_under_logs(self):
        path = default_log_file(datetime(2024, 9, 5))

        assert path == LOGS_PATH / "intake_20240905.log"

    def test_default_log_file_used_when_omitted(self, captured_config, monkeypatch, tmp_path):
        monkeypatch.setattr(logger_module, "LOGS_PATH", tmp_path / "logs")

        log_path = setup_logging()

        assert log_path.parent == tmp_path / "logs"
        assert log_path.name.startswith("intake_")
        handlers = captured_config[0]["handlers"]
        assert any(isinstance(h, logging.FileHandler) for h in handlers)

    def test_console_only(self, captured_config):
        assert setup_logging(log_file=None) is None

        handlers = captured_config[0]["handlers"]
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_explicit_file_and_thread_name(self, captured_config, tmp_path):
        log_path = setup_logging(level=logging.DEBUG, log_file=tmp_path / "run.log")

        assert log_path == tmp_path / "run.log"
        assert log_path.exists()
        assert captured_config[0]["level"] == logging.DEBUG
        assert "%(threadName)s" in captured_config[0]["handlers"][0].formatter._fmt

    def test_configures_once(self, captured_config):
        setup_logging(log_file=None)
        setup_logging(log_file=None)

        assert len(captured_config) == 1
