"""Tests for the component logger wrapper."""

import io
import logging
import sys

from scripts.tanfmt.logger import ROOT_LOGGER_NAME, ComponentLogger, Logger, StderrHandler


class TestComponentLogger:
    def test_wraps_namespaced_logger(self):
        logger = Logger({"name": "lexer"}).logger
        assert isinstance(logger, ComponentLogger)
        assert logger.logger.name == "tanfmt.lexer"

    def test_switch_is_per_instance(self):
        on = Logger({"name": "parser", "is_enabled": True}).logger
        off = Logger({"name": "parser", "is_enabled": False}).logger
        assert on.isEnabledFor(logging.WARNING)
        assert not off.isEnabledFor(logging.CRITICAL)
        assert not logging.getLogger("tanfmt.parser").disabled

    def test_min_level_is_per_instance(self):
        quiet = Logger({"name": "parser", "level": logging.ERROR}).logger
        assert not quiet.isEnabledFor(logging.WARNING)
        assert quiet.isEnabledFor(logging.ERROR)


class TestStderrHandler:
    def test_handler_installed_once(self):
        Logger({"name": "lexer"})
        Logger({"name": "formatter"})
        handlers = [h for h in logging.getLogger(ROOT_LOGGER_NAME).handlers if isinstance(h, StderrHandler)]
        assert len(handlers) == 1

    def test_writes_to_current_stderr(self, monkeypatch):
        handler = StderrHandler()
        first = io.StringIO()
        monkeypatch.setattr(sys, "stderr", first)
        assert handler.stream is first
        second = io.StringIO()
        monkeypatch.setattr(sys, "stderr", second)
        handler.emit(logging.makeLogRecord({"msg": "hello", "levelno": logging.WARNING}))
        assert first.getvalue() == ""
        assert "hello" in second.getvalue()
