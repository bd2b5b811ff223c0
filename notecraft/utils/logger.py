# notecraft/utils/logger.py
import datetime
import sys
from typing import TextIO

from notecraft.config import LOG_LEVEL

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

_LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT",
}

class Logger:
    """
    Process-wide console logger.
    Every line carries the emitting subsystem: [TIME] [LEVEL] [Source] Message
    """
    _level = LOG_LEVEL
    _stream: TextIO = sys.stdout

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_stream(cls, stream: TextIO):
        """Redirects output, e.g. to a buffer while testing."""
        cls._stream = stream

    @classmethod
    def is_enabled(cls, level: int) -> bool:
        return level >= cls._level

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if not cls.is_enabled(level):
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = _LEVEL_NAMES.get(level, "LOG")
        print(f"[{timestamp}] [{level_name:<5}] [{source}] {message}", file=cls._stream)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
