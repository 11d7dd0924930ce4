"""Divide-by-zero guards and cascading parsers with Result."""

from __future__ import annotations

from ..monads import Err, Ok, Result
from ..observability import get_logger

log = get_logger("adtkit.demo.arithmetic")

DIVISION_BY_ZERO = "Division by zero."


def safe_divide(dividend: float, divisor: float) -> Result[float, str]:
    """Ok(dividend / divisor), or Err("Division by zero.").

    >>> safe_divide(10, 5)
    Ok(2.0)
    >>> safe_divide(10, 0).get_or_else("Try again.")
    'Try again.'
    """
    if divisor == 0:
        log.debug("division rejected", dividend=dividend)
        return Err(DIVISION_BY_ZERO)
    return Ok(dividend / divisor)


def parse_int(text: str) -> Result[int, str]:
    try:
        return Ok(int(text))
    except ValueError:
        return Err(f"Could not parse {text!r} as an integer.")


def parse_float(text: str) -> Result[float, str]:
    try:
        return Ok(float(text))
    except ValueError:
        return Err(f"Could not parse {text!r} as a float.")


def parse_number(text: str) -> Result[int | float, str]:
    """Try int, then float; the first success wins.

    >>> parse_number("42")
    Ok(42)
    >>> parse_number("4.5")
    Ok(4.5)
    >>> parse_number("four")
    Err("Could not parse 'four' as a number.")
    """
    return (
        parse_int(text)
        .or_else(lambda _: parse_float(text))
        .or_else(lambda _: Err(f"Could not parse {text!r} as a number."))
    )


def divide_text(dividend: str, divisor: str) -> Result[float, str]:
    """Parse both operands then divide; the first failure is reported."""
    return parse_number(dividend).chain(
        lambda a: parse_number(divisor).chain(lambda b: safe_divide(a, b))
    )


def describe_division(dividend: float, divisor: float) -> str:
    """Both branches become display text, so merge() unwraps either one.

    >>> describe_division(10, 4)
    'Result: 2.5'
    >>> describe_division(1, 0)
    'Error: Division by zero.'
    """
    return safe_divide(dividend, divisor).bimap(lambda v: f"Result: {v}", lambda e: f"Error: {e}").merge()
