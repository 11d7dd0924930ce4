"""Structured logging with bound context.

Human-readable console output for development, JSON Lines for machines.

Quick Start:
    >>> from adtkit.observability import get_logger, configure_logging
    >>>
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("adtkit.demo.forms")
    >>> log.debug("form validated", outcome="Invalid", errors=3)

    >>> # Scoped context
    >>> with log_context(form_id="signup"):
    ...     log.info("validating")  # includes form_id
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol, TextIO, Union, runtime_checkable

import orjson

if TYPE_CHECKING:
    from types import TracebackType

    from ..config import AdtkitSettings

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]

# Context var for scoped context (see log_context)
_log_context: ContextVar[JsonDict] = ContextVar("adtkit_log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. Immutable: bind() returns a new logger.

    Example:
        >>> log = BoundLogger(context={"module": "forms"})
        >>> log.info("validated", field="email")
        # => 10:30:45.120 [info] validated field=email module=forms
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int | None = None  # None = global level at call time

    def bind(self, **kw: JsonValue) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys},
                           _renderer=self._renderer, _level=self._level)

    def is_enabled_for(self, level: int) -> bool:
        return level >= (self._level if self._level is not None else _default_level.get())

    def _log(self, level: int, event: str, **kw: JsonValue) -> None:
        if not self.is_enabled_for(level):
            return
        merged = {**_log_context.get(), **self.context, **kw}
        (self._renderer or _get_renderer()).render(LogEntry(time.time(), _level_name(level), event, merged))

    def debug(self, event: str, **kw: JsonValue) -> None: self._log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: JsonValue) -> None: self._log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: JsonValue) -> None: self._log(logging.WARNING, event, **kw)
    def error(self, event: str, **kw: JsonValue) -> None: self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Log error with exception info."""
        import traceback
        self._log(logging.ERROR, event, exc_info=traceback.format_exc(), **kw)


@dataclass(slots=True)
class LogEntry:
    """Single log record with merged context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """HH:MM:SS.mmm"""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


_COLORS = {"reset": "\033[0m", "dim": "\033[2m", "bold": "\033[1m", "red": "\033[31m", "cyan": "\033[36m"}
_NO_COLORS = dict.fromkeys(_COLORS, "")
_LEVEL_COLORS = {"debug": "\033[34m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable console output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        c = _COLORS if self.colors else _NO_COLORS
        level_color = _LEVEL_COLORS.get(entry.level, c["dim"]) if self.colors else ""
        parts = [f"{c['dim']}{entry.ts_human}{c['reset']}"] if self.show_timestamp else []
        parts += [f"{level_color}[{entry.level}]{c['reset']}", f"{c['bold']}{entry.event}{c['reset']}"]
        parts += [f"{c['cyan']}{k}{c['reset']}={v!r}" if isinstance(v, str) and " " in v
                  else f"{c['cyan']}{k}{c['reset']}={v}"
                  for k, v in sorted(entry.context.items()) if k != "exc_info"]
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(f"{c['red']}{entry.context['exc_info']}{c['reset']}", file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        payload = {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(payload, default=repr, option=orjson.OPT_NON_STR_KEYS).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("adtkit_log_renderer", default=None)
_default_level: ContextVar[int] = ContextVar("adtkit_log_level", default=logging.INFO)


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Configure global structured logging. Format: "console" (human), "json" (machine), "none"."""
    _default_level.set(getattr(logging, level.upper(), logging.INFO))
    match format:
        case "console": renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _renderer.set(renderer)
    return renderer


def configure_from_settings(settings: AdtkitSettings | None = None, *, output: TextIO | None = None) -> LogRenderer:
    """Configure logging from ADTKIT_LOG_* settings."""
    from ..config import get_settings

    s = settings or get_settings()
    return configure_logging(s.logging.format, s.effective_log_level, output=output, colors=s.logging.colors)


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Get a structured logger. Name is added to context as 'logger'."""
    ctx = {**initial_context, **({"logger": name} if name else {})}
    return BoundLogger(context=ctx)


def _get_renderer() -> LogRenderer:
    if (renderer := _renderer.get()) is None:
        _renderer.set(renderer := ConsoleRenderer())
    return renderer


def _level_name(level: int) -> str:
    return logging.getLevelName(level).lower()


class log_context:
    """Context manager adding key-value pairs to every log entry within the scope."""

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: JsonValue) -> None:
        self._ctx: JsonDict = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        self._token = _log_context.set({**_log_context.get(), **self._ctx})
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _log_context.reset(self._token)  # type: ignore[arg-type]
