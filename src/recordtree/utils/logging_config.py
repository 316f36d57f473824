"""Logging configuration shared by the library and the server."""

from __future__ import annotations

import logging
import sys

from recordtree.config import RECORDTREE_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

_configured = False


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        if not extras:
            return message
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} | {rendered}"


def configure_logging(level: str | int = RECORDTREE_LOG_LEVEL) -> None:
    """Attach a single stderr handler to the ``recordtree`` and ``server`` loggers."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
    for name in ("recordtree", "server", "uvicorn"):
        named = logging.getLogger(name)
        named.addHandler(handler)
        named.setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for ``name``."""
    configure_logging()
    return logging.getLogger(name)
