"""Structured logging with a replaceable process-wide logger."""

from __future__ import annotations

import json
import logging
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, TextIO

Fields = Optional[Mapping[str, Any]]

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "dpanic": 42,
    "panic": 45,
    "fatal": logging.CRITICAL,
}
_ALIASES = {"": "info", "warning": "warn"}
_COLORS = {
    "debug": "\x1b[35m",
    "info": "\x1b[34m",
    "warn": "\x1b[33m",
    "error": "\x1b[31m",
    "dpanic": "\x1b[31m",
    "panic": "\x1b[31m",
    "fatal": "\x1b[31m",
}
_RESET = "\x1b[0m"


class LogPanic(RuntimeError):
    """Raised after a message is logged at panic level."""


class Logger(ABC):
    """Interface every logger implements."""

    @abstractmethod
    def info(self, fields: Fields, msg: str) -> None: ...

    @abstractmethod
    def error(self, fields: Fields, msg: str) -> None: ...

    @abstractmethod
    def debug(self, fields: Fields, msg: str) -> None: ...

    @abstractmethod
    def warn(self, fields: Fields, msg: str) -> None: ...

    @abstractmethod
    def panic(self, fields: Fields, msg: str) -> None: ...

    @abstractmethod
    def fatal(self, fields: Fields, msg: str) -> None: ...


def _parse_level(level: str) -> str:
    name = _ALIASES.get(level, level)
    if name not in _LEVELS:
        raise ValueError(f"unrecognized level: {level!r}")
    return name


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.level_name,
            "time": record.created,
            "msg": record.getMessage(),
        }
        entry.update(record.fields)
        return json.dumps(entry, default=str)


class _ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        name = record.level_name
        line = f"{stamp}\t{_COLORS[name]}{name.upper()}{_RESET}\t{record.getMessage()}"
        if record.fields:
            line += "\t" + json.dumps(record.fields, default=str)
        return line


class StdLogger(Logger):
    """Logger writing JSON lines (production) or console lines (development)."""

    def __init__(self, dev: bool = False, level: str = "info", stream: TextIO | None = None):
        self.dev = dev
        self.level = _parse_level(level)
        self._logger = logging.Logger("rrdns", _LEVELS[self.level])
        self._logger.propagate = False
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(_ConsoleFormatter() if dev else _JsonFormatter())
        self._logger.addHandler(handler)

    def _log(self, name: str, fields: Fields, msg: str) -> None:
        self._logger.log(
            _LEVELS[name], msg, extra={"fields": dict(fields or {}), "level_name": name}
        )

    def info(self, fields: Fields, msg: str) -> None:
        self._log("info", fields, msg)

    def error(self, fields: Fields, msg: str) -> None:
        self._log("error", fields, msg)

    def debug(self, fields: Fields, msg: str) -> None:
        self._log("debug", fields, msg)

    def warn(self, fields: Fields, msg: str) -> None:
        self._log("warn", fields, msg)

    def panic(self, fields: Fields, msg: str) -> None:
        """Log the message, then raise LogPanic."""
        self._log("panic", fields, msg)
        raise LogPanic(msg)

    def fatal(self, fields: Fields, msg: str) -> None:
        """Log the message, then exit the process with status 1."""
        self._log("fatal", fields, msg)
        raise SystemExit(1)


class NoopLogger(Logger):
    """Logger that discards everything."""

    def info(self, fields: Fields, msg: str) -> None:
        pass

    def error(self, fields: Fields, msg: str) -> None:
        pass

    def debug(self, fields: Fields, msg: str) -> None:
        pass

    def warn(self, fields: Fields, msg: str) -> None:
        pass

    def panic(self, fields: Fields, msg: str) -> None:
        pass

    def fatal(self, fields: Fields, msg: str) -> None:
        pass


class _Registry:
    """Holds the process-wide logger."""

    def __init__(self, logger: Logger):
        self.current = logger


_registry = _Registry(StdLogger(dev=False, level="info"))


def set_logger(logger: Logger) -> None:
    """Replace the process-wide logger."""
    if not isinstance(logger, Logger):
        raise TypeError(f"expected a Logger, got {type(logger).__name__}")
    _registry.current = logger


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _registry.current


def configure(env: str, level: str) -> None:
    """Install a StdLogger for *env* ("prod" or anything else for development)."""
    try:
        name = _parse_level(level.lower())
    except ValueError as exc:
        raise ValueError(f"invalid log level: {exc}") from exc
    set_logger(StdLogger(dev=env != "prod", level=name))


def new_noop_logger() -> Logger:
    """Return a logger that discards all messages."""
    return NoopLogger()


def info(fields: Fields, msg: str) -> None:
    _registry.current.info(fields, msg)


def error(fields: Fields, msg: str) -> None:
    _registry.current.error(fields, msg)


def debug(fields: Fields, msg: str) -> None:
    _registry.current.debug(fields, msg)


def warn(fields: Fields, msg: str) -> None:
    _registry.current.warn(fields, msg)


def panic(fields: Fields, msg: str) -> None:
    _registry.current.panic(fields, msg)


def fatal(fields: Fields, msg: str) -> None:
    _registry.current.fatal(fields, msg)