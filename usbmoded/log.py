"""Leveled logging to stderr or syslog with optional timestamps and level tags."""

from __future__ import annotations

import enum
import inspect
import os
import re
import sys
import time
from typing import Optional, TextIO

_LINEINFO_MAX = 127
_MESSAGE_MAX = 511

_WHITESPACE_RUN = re.compile(r"[\x01-\x20]+")


class LogLevel(enum.IntEnum):
    """Syslog compatible priority levels."""

    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def min(cls) -> "LogLevel":
        return cls.CRIT

    @classmethod
    def max(cls) -> "LogLevel":
        return cls.DEBUG


class LogTarget(enum.IntEnum):
    """Where log messages are sent."""

    STDERR = 0
    SYSLOG = 1
    NONE = 2


_LEVEL_TAGS = {
    LogLevel.CRIT: "C:",
    LogLevel.ERR: "E:",
    LogLevel.WARNING: "W:",
    LogLevel.NOTICE: "N:",
    LogLevel.INFO: "I:",
    LogLevel.DEBUG: "D:",
}


def squeeze_whitespace(text: str) -> str:
    """Drop leading/trailing control and space characters, collapse inner runs to one space."""
    text = text.split("\0", 1)[0]
    return _WHITESPACE_RUN.sub(" ", text).strip(" ")


class Log:
    """A configurable logger emitting single, whitespace-squeezed lines."""

    def __init__(
        self,
        name: str = "<unset>",
        level: int = LogLevel.WARNING,
        target: LogTarget = LogTarget.STDERR,
        lineinfo: bool = False,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.name = name
        self.level = int(level)
        self.target = target
        self.lineinfo = lineinfo
        self.stream = stream
        self._begin = 0.0

    @property
    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stderr

    def reset_clock(self) -> None:
        """Use the current moment as the zero point of timestamps."""
        self._begin = time.time()

    def enabled(self, level: int) -> bool:
        """Return True if messages at ``level`` pass the current threshold."""
        return int(level) <= self.level

    def _timestamp(self) -> str:
        elapsed = max(time.time() - self._begin, 0.0)
        seconds = int(elapsed)
        millis = int((elapsed - seconds) * 1000)
        return f"{seconds:3d}.{millis:03d} "

    def format(
        self,
        level: int,
        message: str,
        file: Optional[str] = None,
        func: Optional[str] = None,
        line: Optional[int] = None,
    ) -> str:
        """Build the text line written to the stream, without the newline."""
        if self.lineinfo:
            prefix = f"{file or '?'}:{line if line is not None else 0}: {func or '?'}(): "
        else:
            prefix = f"{self.name}: "
        prefix = prefix[:_LINEINFO_MAX]
        tag = _LEVEL_TAGS.get(int(level), "U:")
        body = squeeze_whitespace(message[:_MESSAGE_MAX])
        return f"{prefix}{self._timestamp()}{tag} {body}"

    def _emit(self, level: int, message: str, args: tuple, depth: int) -> None:
        if not self.enabled(level):
            return
        text = message % args if args else message
        if self.target == LogTarget.SYSLOG:
            import syslog

            syslog.syslog(int(level), text)
        elif self.target == LogTarget.STDERR:
            file = func = None
            line = None
            if self.lineinfo:
                frame = inspect.currentframe()
                for _ in range(depth):
                    if frame is None:
                        break
                    frame = frame.f_back
                if frame is not None:
                    file = os.path.basename(frame.f_code.co_filename)
                    func = frame.f_code.co_name
                    line = frame.f_lineno
                del frame
            out = self._out
            out.write(self.format(level, text, file, func, line) + "\n")
            out.flush()

    def emit(self, level: int, message: str, *args) -> None:
        """Log ``message % args`` at ``level``."""
        self._emit(level, message, args, 2)

    def debugf(self, fmt: str, *args) -> None:
        """Write raw, unprefixed debug text to the stream."""
        if self.target == LogTarget.STDERR and self.enabled(LogLevel.DEBUG):
            out = self._out
            out.write(fmt % args if args else fmt)
            out.flush()

    def critical(self, message: str, *args) -> None:
        self._emit(LogLevel.CRIT, message, args, 2)

    def error(self, message: str, *args) -> None:
        self._emit(LogLevel.ERR, message, args, 2)

    def warning(self, message: str, *args) -> None:
        self._emit(LogLevel.WARNING, message, args, 2)

    def notice(self, message: str, *args) -> None:
        self._emit(LogLevel.NOTICE, message, args, 2)

    def info(self, message: str, *args) -> None:
        self._emit(LogLevel.INFO, message, args, 2)

    def debug(self, message: str, *args) -> None:
        self._emit(LogLevel.DEBUG, message, args, 2)


_default_log = Log()


def get_log() -> Log:
    """Return the process-wide logger."""
    return _default_log