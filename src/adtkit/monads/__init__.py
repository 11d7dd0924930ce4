"""Algebraic containers for error handling.

- Maybe: presence or absence of a value (Present / Absent)
- Result: success or a single diagnostic (Ok / Err), short-circuiting
- Validation: success or accumulated diagnostics (Valid / Invalid)

Example:
    >>> from adtkit.monads import Err, Invalid, Ok, Result, Valid, collect
    >>>
    >>> def divide(a: float, b: float) -> Result[float, str]:
    ...     return Err("Division by zero.") if b == 0 else Ok(a / b)
    >>>
    >>> divide(10, 0).get_or_else("Try again.")
    'Try again.'
    >>> collect([Valid(1), Invalid(["x"]), Invalid(["y"])])
    Invalid(['x', 'y'])
"""

from .maybe import Absent, Maybe, Present
from .result import Err, Ok, Result, collect_results, sequence, traverse, try_fn
from .validation import Invalid, Valid, Validation, collect, from_maybe, from_result

__all__ = [
    # Maybe
    "Maybe", "Present", "Absent",
    # Result
    "Result", "Ok", "Err",
    "sequence", "traverse", "collect_results", "try_fn",
    # Validation
    "Validation", "Valid", "Invalid",
    "collect", "from_maybe", "from_result",
]
