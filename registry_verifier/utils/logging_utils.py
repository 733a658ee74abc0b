import logging
import sys
from typing import Optional, TextIO


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below ``level``."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def _stream_handler(
    stream: TextIO,
    level: int,
    formatter: logging.Formatter,
    below: Optional[int] = None,
) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    if below is not None:
        handler.addFilter(_BelowLevelFilter(below))
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Route root logging to two streams.

    Records below ``stderr_level`` go to stdout, the rest to stderr. Verification
    errors are logged at ERROR and the success summary at INFO, so CI output
    keeps failures on stderr.
    """
    if formatter is None:
        formatter = logging.Formatter("%(message)s")
    stderr_level = max(stderr_level, logging.DEBUG)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(_stream_handler(sys.stdout, logging.DEBUG, formatter, below=stderr_level))
    root.addHandler(_stream_handler(sys.stderr, stderr_level, formatter))
