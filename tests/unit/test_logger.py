"""Tests for logging setup and ContextualLogger."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler

from quoteboard.log_config.logger import ContextualLogger, setup_logging


@contextmanager
def _isolated_root():
    """Undo whatever setup_logging() does to the root logger."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


class TestSetupLogging:
    def test_console_and_file_handlers(self, tmp_path):
        with _isolated_root() as root:
            setup_logging("DEBUG", str(tmp_path))
            assert root.level == logging.DEBUG
            assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert (tmp_path / "quoteboard.log").exists()

    def test_idempotent(self, tmp_path):
        with _isolated_root() as root:
            setup_logging("INFO", str(tmp_path))
            setup_logging("INFO", str(tmp_path))
            assert len(root.handlers) == 2

    def test_file_handler_optional(self):
        with _isolated_root() as root:
            setup_logging("WARNING", None)
            assert len(root.handlers) == 1
            assert not any(isinstance(h, RotatingFileHandler) for h in root.handlers)

    def test_quiets_urllib3(self, tmp_path):
        with _isolated_root():
            setup_logging("DEBUG", str(tmp_path))
            assert logging.getLogger("urllib3").level == logging.WARNING


class TestContextualLogger:
    def test_prefix(self, caplog):
        log = ContextualLogger(logging.getLogger("quoteboard.test"), endpoint="x")
        with caplog.at_level(logging.INFO, logger="quoteboard.test"):
            log.info("hello %s", "world")
        assert "[endpoint=x] hello world" in caplog.text

    def test_bind_extends_context(self, caplog):
        log = ContextualLogger(logging.getLogger("quoteboard.test"), controller="c1").bind(cycle=3)
        with caplog.at_level(logging.WARNING, logger="quoteboard.test"):
            log.warning("failed")
        assert "[controller=c1] [cycle=3] failed" in caplog.text

    def test_bind_overrides_existing_key(self, caplog):
        log = ContextualLogger(logging.getLogger("quoteboard.test"), cycle=1).bind(cycle=2)
        with caplog.at_level(logging.DEBUG, logger="quoteboard.test"):
            log.debug("retrying")
        assert "[cycle=2] retrying" in caplog.text
        assert "cycle=1" not in caplog.text
