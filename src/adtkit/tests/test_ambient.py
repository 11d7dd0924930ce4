"""Tests for errors, settings and structured logging."""

from __future__ import annotations

import io

import orjson
import pytest

from adtkit.config import AdtkitSettings, clear_settings_cache, get_settings
from adtkit.errors import (
    AdtError,
    AdtException,
    EmptyFailureError,
    ErrorCode,
    InvalidPayloadError,
    MatchError,
    UnwrapError,
)
from adtkit.observability import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)


# ═════════════════════════════════════════════════════════════════════════════
# Errors
# ═════════════════════════════════════════════════════════════════════════════


def test_adt_error_render() -> None:
    error = AdtError.create("unwrap() on Absent", ErrorCode.UNWRAP_FAILED, variant="Absent")
    assert error.render() == "[UNWRAP_FAILED] unwrap() on Absent (variant: Absent)"
    assert str(AdtError.create("x", ErrorCode.EMPTY_FAILURE)) == "[EMPTY_FAILURE] x"


@pytest.mark.parametrize(
    ("exc_type", "code", "builtin"),
    [
        (UnwrapError, ErrorCode.UNWRAP_FAILED, RuntimeError),
        (MatchError, ErrorCode.NON_EXHAUSTIVE_MATCH, TypeError),
        (EmptyFailureError, ErrorCode.EMPTY_FAILURE, ValueError),
        (InvalidPayloadError, ErrorCode.INVALID_PAYLOAD, TypeError),
    ],
)
def test_exception_hierarchy(exc_type: type[AdtException], code: ErrorCode, builtin: type[Exception]) -> None:
    exc = exc_type.create("bad", variant="Invalid")
    assert isinstance(exc, AdtException)
    assert isinstance(exc, builtin)
    assert exc.error.code is code
    assert str(exc) == f"[{code.value}] bad (variant: Invalid)"


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.validation.missing_value_error == "Value is absent."
    assert settings.validation.password_min == 8
    assert settings.effective_log_level == "INFO"


def test_settings_cached() -> None:
    assert get_settings() is get_settings()


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADTKIT_DEBUG", "true")
    monkeypatch.setenv("ADTKIT_LOG_LEVEL", "warning")
    monkeypatch.setenv("ADTKIT_LOG_FORMAT", "JSON")
    clear_settings_cache()
    settings = get_settings()
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "json"
    assert settings.effective_log_level == "DEBUG"


def test_settings_reject_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    from pydantic import ValidationError

    monkeypatch.setenv("ADTKIT_VALIDATION_PASSWORD_MIN", "0")
    with pytest.raises(ValidationError):
        AdtkitSettings()


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_json_renderer_output() -> None:
    out = io.StringIO()
    configure_logging("json", "DEBUG", output=out)
    get_logger("adtkit.test", component="forms").debug("validated", errors=2)
    record = orjson.loads(out.getvalue().strip())
    assert record["event"] == "validated"
    assert record["level"] == "debug"
    assert record["logger"] == "adtkit.test"
    assert record["component"] == "forms"
    assert record["errors"] == 2
    assert "timestamp" in record


def test_console_renderer_output() -> None:
    out = io.StringIO()
    configure_logging("console", "INFO", output=out, colors=False)
    get_logger("adtkit.test").info("done", count=3)
    line = out.getvalue().strip()
    assert "[info] done" in line
    assert "count=3" in line
    assert "logger=adtkit.test" in line


def test_level_filtering_is_evaluated_at_call_time() -> None:
    out = io.StringIO()
    log = get_logger("adtkit.test")
    configure_logging("json", "WARNING", output=out)
    log.info("hidden")
    log.warning("shown")
    assert "hidden" not in out.getvalue()
    assert "shown" in out.getvalue()
    configure_logging("json", "DEBUG", output=out)
    log.debug("now visible")
    assert "now visible" in out.getvalue()


def test_bind_is_immutable() -> None:
    base = BoundLogger(context={"a": 1}, _renderer=NoOpRenderer())
    bound = base.bind(b=2)
    assert base.context == {"a": 1}
    assert bound.context == {"a": 1, "b": 2}
    assert bound.unbind("a").context == {"b": 2}


def test_log_context_scope() -> None:
    out = io.StringIO()
    log = BoundLogger(_renderer=JsonRenderer(output=out), _level=0)
    with log_context(form_id="signup"):
        log.info("inside")
    log.info("outside")
    inside, outside = (orjson.loads(line) for line in out.getvalue().splitlines())
    assert inside["form_id"] == "signup"
    assert "form_id" not in outside


def test_configure_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADTKIT_LOG_FORMAT", "json")
    clear_settings_cache()
    out = io.StringIO()
    renderer = configure_from_settings(output=out)
    assert isinstance(renderer, JsonRenderer)
    assert isinstance(configure_logging("console", output=io.StringIO()), ConsoleRenderer)


def test_configure_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging("xml")


def test_exception_appends_traceback() -> None:
    """exception() logs at error level even when INFO filters debug, then prints the traceback."""
    out = io.StringIO()
    configure_logging("console", "INFO", output=out, colors=False)
    try:
        int("four")
    except ValueError:
        get_logger("adtkit.test").exception("parse failed", text="four")
    event_line, *trace = out.getvalue().splitlines()
    assert "[error] parse failed" in event_line
    assert "text=four" in event_line
    assert "exc_info" not in event_line
    assert trace[0] == "Traceback (most recent call last):"
    assert "ValueError: invalid literal for int()" in "\n".join(trace)


def test_exception_in_json_carries_exc_info() -> None:
    out = io.StringIO()
    configure_logging("json", "INFO", output=out)
    try:
        raise KeyError("email")
    except KeyError:
        get_logger("adtkit.test").exception("lookup failed")
    record = orjson.loads(out.getvalue().strip())
    assert record["level"] == "error"
    assert "KeyError: 'email'" in record["exc_info"]
