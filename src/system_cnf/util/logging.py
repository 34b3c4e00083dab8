"""Indented log output for nested codec steps.

Line scanning runs one level deep and per-field details (such as stripping
the ``;1`` session suffix from ``BOOT2``) run one level below that. The depth
lives in a context variable so concurrent decodes on different threads or
tasks keep their own indentation.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator
import logging

INDENT_UNIT = "  "
LOG_FORMAT = "%(levelname)s %(indent)s%(message)s"

_CODEC_DEPTH: ContextVar[int] = ContextVar("system_cnf_log_depth", default=0)


def current_depth() -> int:
    return _CODEC_DEPTH.get()


class IndentFilter(logging.Filter):
    """Stamp ``depth`` and ``indent`` on every record passing through."""

    def filter(self, record: logging.LogRecord) -> bool:
        depth = current_depth()
        record.depth = depth
        record.indent = INDENT_UNIT * depth
        return True


@contextmanager
def log_indent() -> Iterator[None]:
    token = _CODEC_DEPTH.set(current_depth() + 1)
    try:
        yield
    finally:
        _CODEC_DEPTH.reset(token)


def configure_logging(level: int = logging.INFO) -> None:
    """Install indented formatting on the root handlers.

    Meant for the embedding application; importing the package never touches
    logging configuration.
    """
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        if not any(isinstance(f, IndentFilter) for f in handler.filters):
            handler.addFilter(IndentFilter())
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
