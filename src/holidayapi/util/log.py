"""Tagged structured logging to stderr.

Output is off until the host application calls ``Log.configure``; the
client only emits debug lines, one per request.
"""

import json
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def priority(self) -> int:
        return list(LogLevel).index(self)

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        if value is None:
            return cls.INFO
        text = value.strip().upper()
        if text == "WARNING":
            text = "WARN"
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid log level: {value}") from None


class LogFormat(str, Enum):
    KV = "kv"
    JSON = "json"

    @classmethod
    def parse(cls, value: str | None) -> "LogFormat":
        if value is None:
            return cls.KV
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"invalid log format: {value}") from None


@dataclass
class LogConfig:
    """Process-wide logging switches."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.KV
    console: bool = False


_config = LogConfig()


def _kv(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    text = str(value)
    if text == "" or "=" in text or any(ch.isspace() for ch in text):
        return json.dumps(text, ensure_ascii=False)
    return text


@dataclass
class LogTimer:
    """Logs ``message`` with the elapsed milliseconds when stopped."""

    logger: "Logger"
    message: str
    extra: Dict[str, Any]
    started: float = field(default_factory=time.monotonic)

    def stop(self, **extra: Any) -> None:
        duration = int((time.monotonic() - self.started) * 1000)
        self.logger.debug(self.message, {**self.extra, **extra, "duration": duration})


class Logger:
    """Logger carrying a fixed set of tags, usually ``service``."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = tags or {}

    def enabled(self, level: LogLevel) -> bool:
        return _config.console and level.priority >= _config.level.priority

    def _render(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> str:
        fields = {
            key: str(value) if isinstance(value, BaseException) else value
            for key, value in {**self.tags, **(extra or {})}.items()
            if value is not None
        }
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        if _config.format == LogFormat.JSON:
            record = {"time": stamp, "level": level.value.lower(), "msg": message, **fields}
            return json.dumps(record, ensure_ascii=False, separators=(",", ":"), default=str)
        pairs = [f"{key}={_kv(value)}" for key, value in fields.items()]
        return " ".join([stamp, f"level={level.value.lower()}", f"msg={_kv(message)}", *pairs])

    def log(self, level: LogLevel, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        if not self.enabled(level):
            return
        sys.stderr.write(self._render(level, message, extra) + "\n")
        sys.stderr.flush()

    def debug(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.DEBUG, message, extra)

    def info(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.INFO, message, extra)

    def warn(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.WARN, message, extra)

    def error(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self.log(LogLevel.ERROR, message, extra)

    def time(self, message: str, extra: Optional[Dict[str, Any]] = None) -> LogTimer:
        return LogTimer(logger=self, message=message, extra=dict(extra or {}))


class Log:
    """Logger factory and global switches."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Optional[Dict[str, Any]] = None) -> Logger:
        """Return a logger; loggers with a ``service`` tag are shared."""
        tags = tags or {}
        service = tags.get("service")
        if not isinstance(service, str) or not service:
            return Logger(tags=tags)
        if service not in cls._loggers:
            cls._loggers[service] = Logger(tags=tags)
        return cls._loggers[service]

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
    ) -> None:
        """Update the switches that are given, keep the rest."""
        if level is not None:
            _config.level = level
        if format is not None:
            _config.format = format
        if console is not None:
            _config.console = console

    @classmethod
    def reset(cls) -> None:
        """Restore the silent defaults."""
        _config.level = LogLevel.INFO
        _config.format = LogFormat.KV
        _config.console = False
