"""Root logging setup and a context-prefixing logger for fetch cycles."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any


_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO/DEBUG.
_NOISY_LOGGERS = ("urllib3", "httpx", "watchfiles")


def _make_handlers(
    log_dir: str | None, log_file: str, max_bytes: int, backup_count: int
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                os.path.join(log_dir, log_file),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )
    return handlers


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = "logs",
    log_file: str = "quoteboard.log",
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 3,
) -> None:
    """Send all records to the console and, unless *log_dir* is ``None``, to a rotating file.

    Calling it again replaces the handlers installed by the previous call.
    Unknown level names fall back to INFO.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()

    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)
    for handler in _make_handlers(log_dir, log_file, max_bytes, backup_count):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


class ContextualLogger:
    """Prefix every message with ``[key=value]`` tags.

    Usage::

        log = ContextualLogger(logging.getLogger(__name__), endpoint=url)
        log.bind(cycle=3).info("Fetching")  # => "[endpoint=…] [cycle=3] Fetching"
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        self._logger = logger
        self._context = context
        self._prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def bind(self, **context: Any) -> "ContextualLogger":
        """Return a logger with *context* appended; later keys override earlier ones."""
        return ContextualLogger(self._logger, **{**self._context, **context})

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if self._prefix:
            msg = f"{self._prefix} {msg}"
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)
