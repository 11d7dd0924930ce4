"""Presence checks chained with Maybe, converted to Validation for reporting.

Each check maps one kind of missing input to Absent(); chaining them stops at
the first miss. None, NaN, "" and whitespace-only strings count as missing.
Everything else is present, including 0, False and empty containers.

    >>> is_required_map("Steve", "name")
    Valid('Steve')
    >>> is_required_map("   ", "name")
    Invalid([{'name': 'name is required'}])
"""

from __future__ import annotations

from typing import Any, TypeVar

from ..monads import Absent, Invalid, Maybe, Present, Valid, Validation, from_maybe
from ..observability import get_logger

T = TypeVar("T")

log = get_logger("adtkit.demo.presence")


def null_check(value: T | None) -> Maybe[T]:
    return Absent() if value is None else Present(value)


def nan_check(value: T) -> Maybe[T]:
    """Absent for any NaN (float or Decimal); NaN is the only value unequal to itself."""
    return Absent() if value != value else Present(value)


def empty_string_check(value: T) -> Maybe[T]:
    return Absent() if value == "" else Present(value)


def blank_string_check(value: T) -> Maybe[T]:
    return Absent() if isinstance(value, str) and not value.strip() else Present(value)


def exception_check(value: Any) -> Maybe[Any]:
    """Run every presence check in order, short-circuiting on the first Absent."""
    return (
        null_check(value)
        .chain(nan_check)
        .chain(empty_string_check)
        .chain(blank_string_check)
    )


def required_error(field_name: str) -> list[dict[str, str]]:
    return [{field_name: f"{field_name} is required"}]


def is_required_match(value: Any, field_name: str) -> Validation[Any, dict[str, str]]:
    """Dispatch on both variants to rebuild the Validation with a field error."""
    return from_maybe(exception_check(value)).match_with({
        "Success": Valid,
        "Failure": lambda _: Invalid(required_error(field_name)),
    })


def is_required_map(value: Any, field_name: str) -> Validation[Any, dict[str, str]]:
    """Same outcome as is_required_match, replacing only the failure side."""
    result = from_maybe(exception_check(value)).map_failure(lambda _: required_error(field_name))
    if result.is_invalid():
        log.debug("required field missing", field=field_name)
    return result
