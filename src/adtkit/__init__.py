"""adtkit - algebraic data types for error handling.

Three small, immutable, two-variant containers:

- Maybe       Present(value) | Absent()          absence without a diagnostic
- Result      Ok(value) | Err(error)             one diagnostic, short-circuits
- Validation  Valid(value) | Invalid([errors])   many diagnostics, accumulates

Quick Start:
    >>> from adtkit import Present, Absent, Ok, Err, Valid, Invalid, from_maybe
    >>>
    >>> Present(39).chain(lambda age: Present("benefits") if age > 30 else Absent())
    Present('benefits')
    >>>
    >>> Err("Division by zero.").or_else(lambda _: Ok(0)).merge()
    0
    >>>
    >>> (Invalid(["empty"]) + Valid("x") + Invalid(["bad pattern"])).errors
    ['empty', 'bad pattern']
    >>>
    >>> from_maybe(Absent()).map_failure(lambda _: [{"name": "name is required"}])
    Invalid([{'name': 'name is required'}])

Configuration is read from ADTKIT_* environment variables (see adtkit.config),
and structured logging lives in adtkit.observability. Runnable usage
scenarios live in adtkit.demo (``python -m adtkit.demo``).
"""

from .config import get_settings
from .errors import (
    AdtError,
    AdtException,
    EmptyFailureError,
    ErrorCode,
    InvalidPayloadError,
    MatchError,
    UnwrapError,
)
from .monads import (
    Absent,
    Err,
    Invalid,
    Maybe,
    Ok,
    Present,
    Result,
    Valid,
    Validation,
    collect,
    collect_results,
    from_maybe,
    from_result,
    sequence,
    traverse,
    try_fn,
)
from .observability import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Containers
    "Maybe", "Present", "Absent",
    "Result", "Ok", "Err",
    "Validation", "Valid", "Invalid",
    # Collection & conversion
    "sequence", "traverse", "collect_results", "try_fn",
    "collect", "from_maybe", "from_result",
    # Errors
    "ErrorCode", "AdtError", "AdtException",
    "UnwrapError", "MatchError", "EmptyFailureError", "InvalidPayloadError",
    # Ambient
    "get_settings", "configure_logging", "get_logger",
]
