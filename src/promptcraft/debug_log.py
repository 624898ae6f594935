"""Session logging with an in-app viewer.

Messages from ``log`` and from Python's ``logging`` module land in one ring
buffer, which the TUI shows in the debug log modal (F12).
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any

from textual import log as textual_log


class LogSource(Enum):
    """Where a log entry came from."""

    SESSION = "SESSION"
    LOGGING = "LOGGING"


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    level: str
    message: str
    timestamp: float
    source: LogSource

    def format(self) -> str:
        stamp = time.strftime("%H:%M:%S", time.localtime(self.timestamp))
        return f"{stamp} {self.level:<7} {self.message}"


MAX_LOG_LINES = 1000
log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


class SessionLogger:
    """Structured logger: positional parts plus ``key=value`` pairs."""

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        output = " ".join(str(arg) for arg in args)
        if kwargs:
            key_values = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            output = f"{output} {key_values}" if output else key_values

        log_buffer.append(
            LogEntry(level=level, message=output, timestamp=time.time(), source=LogSource.SESSION)
        )
        # No-op outside a running app; shows up in `textual console` otherwise.
        textual_log(output)

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("ERROR", *args, **kwargs)


class DebugLogHandler(logging.Handler):
    """Logging handler that copies records into the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            log_buffer.append(
                LogEntry(
                    level=record.levelname,
                    message=msg,
                    timestamp=record.created,
                    source=LogSource.LOGGING,
                )
            )
        except Exception:
            self.handleError(record)


_debug_logging_initialized: bool = False


def setup_debug_logging() -> None:
    """Attach the buffer handler to the root logger. Idempotent."""
    global _debug_logging_initialized

    if _debug_logging_initialized:
        return

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logging.getLogger().addHandler(handler)
    _debug_logging_initialized = True

    log.debug("Debug logging initialized")


def clear_log_buffer() -> None:
    log_buffer.clear()


log = SessionLogger()
