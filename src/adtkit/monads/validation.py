"""Validation applicative that accumulates failures instead of short-circuiting.

Valid(value) holds a successfully validated value. Invalid(errors) holds a
non-empty, ordered sequence of errors. Combining two Invalids with concat (or
``+``) concatenates their errors in call order, so independent checks can all
run and report together.

concat semantics:
    Valid(a)    + Valid(b)     -> Valid(b)          (rightmost value wins)
    Valid(a)    + Invalid(es)  -> Invalid(es)
    Invalid(es) + Valid(b)     -> Invalid(es)       (no recovery)
    Invalid(e1) + Invalid(e2)  -> Invalid(e1 + e2)

Example:
    >>> def not_empty(v: str) -> Validation[str, str]:
    ...     return Valid(v) if v.strip() else Invalid(["must not be empty"])
    >>> def has_at(v: str) -> Validation[str, str]:
    ...     return Valid(v) if "@" in v else Invalid(["must contain @"])
    >>> not_empty("").concat(has_at(""))
    Invalid(['must not be empty', 'must contain @'])
    >>> collect([not_empty("a@b"), has_at("a@b")])
    Valid('a@b')
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Mapping, TypeVar

from ..errors import EmptyFailureError, InvalidPayloadError, MatchError, UnwrapError
from .maybe import Absent, Maybe, Present
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_VALID = True
_INVALID = False


def _is_error_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _as_errors(value: Any, *, strict: bool) -> tuple[Any, ...]:
    """Normalize a failure payload to a non-empty tuple.

    strict: scalars are rejected rather than wrapped into a singleton.
    """
    if _is_error_sequence(value):
        errors = tuple(value)
    elif strict:
        raise InvalidPayloadError.create(
            f"Invalid() takes a sequence of errors, got {type(value).__name__}: {value!r}", variant="Invalid"
        )
    else:
        errors = (value,)
    if not errors:
        raise EmptyFailureError.create("Invalid() requires at least one error", variant="Invalid")
    return errors


class Validation(Generic[T, E]):
    """Discriminated union of Valid(value) and Invalid(errors).

    Unlike Result, composition with concat does not stop at the first
    failure: every Invalid's errors are kept, in order.
    """

    __slots__ = ("_value", "_is_valid")
    __match_args__ = ("_value",)

    def __init__(self, value: T | tuple[E, ...], is_valid: bool) -> None:
        """Private constructor. Use Valid() or Invalid() instead."""
        self._value = value
        self._is_valid = is_valid

    # ─── Type Checking ───────────────────────────────────────────────

    def is_valid(self) -> bool:
        return self._is_valid

    def is_invalid(self) -> bool:
        return not self._is_valid

    @property
    def variant(self) -> str:
        return "Valid" if self._is_valid else "Invalid"

    @property
    def errors(self) -> list[E]:
        """Accumulated errors (empty for Valid)."""
        return [] if self._is_valid else list(self._value)  # type: ignore[arg-type]

    # ─── Combination ─────────────────────────────────────────────────

    def concat(self, other: Validation[U, E]) -> Validation[U, E]:
        """Combine with another Validation, accumulating errors left to right."""
        if not isinstance(other, Validation):
            raise TypeError(f"concat() expects a Validation, got {type(other).__name__}")
        if self._is_valid:
            return other
        if other._is_valid:
            return self  # type: ignore[return-value]
        return Validation(self._value + other._value, _INVALID)  # type: ignore[operator]

    def __add__(self, other: object) -> Validation[Any, E]:
        return self.concat(other) if isinstance(other, Validation) else NotImplemented

    @classmethod
    def collect(cls, validations: Iterable[Validation[Any, E]]) -> Validation[Any, E]:
        """Fold concat across validations.

        Invalid with every error if any element is Invalid, else Valid with
        the last element's value. The fold starts from Valid(None), so an
        empty iterable gives Valid(None).
        """
        return reduce(lambda acc, v: acc.concat(v), validations, Valid(None))

    # ─── Functor / Bifunctor ─────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Validation[U, E]:
        """Apply f to a Valid value. Invalid passes through."""
        return Validation(f(self._value), _VALID) if self._is_valid else self  # type: ignore[arg-type,return-value]

    def map_failure(self, f: Callable[[list[E]], Any]) -> Validation[T, Any]:
        """Apply f to the whole error list of an Invalid. Valid passes through.

        A scalar return value is wrapped into a one-element error list.
        """
        if self._is_valid:
            return self
        return Validation(_as_errors(f(list(self._value)), strict=False), _INVALID)  # type: ignore[arg-type]

    def bimap(self, on_failure: Callable[[list[E]], Any], on_success: Callable[[T], U]) -> Validation[U, Any]:
        """Apply on_failure if Invalid, on_success if Valid."""
        return self.map(on_success) if self._is_valid else self.map_failure(on_failure)  # type: ignore[return-value]

    # ─── Extraction ──────────────────────────────────────────────────

    def fold(self, on_failure: Callable[[list[E]], U], on_success: Callable[[T], U]) -> U:
        """Reduce to a plain value. on_failure receives the error list."""
        return on_success(self._value) if self._is_valid else on_failure(list(self._value))  # type: ignore[arg-type]

    def match(self, *, success: Callable[[T], U], failure: Callable[[list[E]], U]) -> U:
        """Exhaustive pattern match. Both handlers are required."""
        return self.fold(failure, success)

    def match_with(self, cases: Mapping[str, Callable[..., U]]) -> U:
        """Dispatch on a {"Success": f, "Failure": g} table.

        Raises MatchError if either variant is missing from the table.
        """
        missing = [name for name in ("Success", "Failure") if name not in cases]
        if missing:
            raise MatchError.create(f"match_with() missing handler(s): {', '.join(missing)}", variant=self.variant)
        return self.fold(cases["Failure"], cases["Success"])

    def get_or_else(self, default: T) -> T:
        return self._value if self._is_valid else default  # type: ignore[return-value]

    def merge(self) -> T | list[E]:
        """Valid value, or the error list."""
        return self._value if self._is_valid else list(self._value)  # type: ignore[return-value,arg-type]

    def unwrap(self) -> T:
        """Extract the Valid value. Raises UnwrapError on Invalid."""
        if self._is_valid:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"unwrap() on Invalid: {list(self._value)!r}", variant="Invalid")  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────

    @classmethod
    def from_maybe(cls, maybe: Maybe[T], errors: Sequence[E] | None = None) -> Validation[T, Any]:
        """Present(v) -> Valid(v); Absent -> Invalid(errors).

        Without explicit errors the failure holds a placeholder from
        settings.validation.missing_value_error; replace it with map_failure.
        """
        if maybe.is_present():
            return Valid(maybe.unwrap())
        if errors is None:
            from ..config import get_settings

            errors = [get_settings().validation.missing_value_error]  # type: ignore[list-item]
        return Invalid(errors)

    @classmethod
    def from_result(cls, result: Result[T, E]) -> Validation[T, E]:
        """Ok(v) -> Valid(v); Err(e) -> Invalid([e])."""
        return result.to_validation()

    def to_result(self) -> Result[T, list[E]]:
        """Ok(value) if Valid, Err(error list) if Invalid."""
        return Ok(self._value) if self._is_valid else Err(list(self._value))  # type: ignore[arg-type]

    def to_maybe(self) -> Maybe[T]:
        return Present(self._value) if self._is_valid else Absent()  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_valid

    def __hash__(self) -> int:
        return hash((self._is_valid, self._value))

    def __repr__(self) -> str:
        return f"Valid({self._value!r})" if self._is_valid else f"Invalid({list(self._value)!r})"  # type: ignore[arg-type]

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validation):
            return NotImplemented
        return self._is_valid == other._is_valid and self._value == other._value

    def __iter__(self) -> Iterator[T]:
        """Yields the value if Valid, nothing if Invalid."""
        if self._is_valid:
            yield self._value  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Valid(value: T) -> Validation[T, Any]:  # noqa: N802
    """Construct the Valid variant."""
    return Validation(value, _VALID)


def Invalid(errors: Sequence[E]) -> Validation[Any, E]:  # noqa: N802
    """Construct the Invalid variant from a non-empty sequence of errors.

    Raises:
        InvalidPayloadError: errors is a scalar (a bare str counts as scalar)
        EmptyFailureError: errors is empty
    """
    return Validation(_as_errors(errors, strict=True), _INVALID)


collect = Validation.collect
from_maybe = Validation.from_maybe
from_result = Validation.from_result
