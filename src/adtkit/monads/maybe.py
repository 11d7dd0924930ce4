"""Maybe/Option monad modelling the presence or absence of a value.

Present(value) carries a payload, Absent() carries nothing. Absence has no
diagnostic; use Result when the failure needs an explanation.

Example:
    >>> ages = {"steve": 39, "laura": 38}
    >>> Maybe.of(ages.get("steve")).map(lambda a: a + 1)
    Present(40)
    >>> Maybe.of(ages.get("steven")).map(lambda a: a + 1)
    Absent()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Mapping, TypeVar

from ..errors import MatchError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result
    from .validation import Validation

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Maybe(Generic[T]):
    """Discriminated union of Present(value) and Absent().

    Implements Functor (map) and Monad (chain) so optional-producing checks
    can be sequenced, short-circuiting on the first Absent.

    Examples:
        >>> Present(2).chain(lambda x: Present(x * 10))
        Present(20)
        >>> Absent().chain(lambda x: Present(x * 10))
        Absent()
    """

    __slots__ = ("_value", "_is_present")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_present: bool) -> None:
        """Private constructor. Use Present() or Absent() instead."""
        self._value = value
        self._is_present = is_present

    @classmethod
    def of(cls, value: T | None) -> Maybe[T]:
        """Absent() for None, Present(value) for anything else."""
        return Absent() if value is None else Present(value)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_present(self) -> bool:
        return self._is_present

    def is_absent(self) -> bool:
        return not self._is_present

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the payload. Raises UnwrapError on Absent."""
        if self._is_present:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create("unwrap() on Absent", variant="Absent")

    def get_or_else(self, default: T) -> T:
        """Extract the payload or return default."""
        return self._value if self._is_present else default  # type: ignore[return-value]

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Apply f to a present payload. Absent passes through."""
        return Maybe(f(self._value), True) if self._is_present else Absent()  # type: ignore[arg-type]

    def chain(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Monadic bind. f is only invoked for Present and must return a Maybe."""
        return f(self._value) if self._is_present else Absent()  # type: ignore[arg-type]

    flat_map = chain
    and_then = chain

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep a present payload only when predicate holds."""
        return self if self._is_present and predicate(self._value) else Absent()  # type: ignore[arg-type]

    def or_else(self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        """On Absent, try the alternative produced by f. Present passes through."""
        return self if self._is_present else f()

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, present: Callable[[T], U], absent: Callable[[], U]) -> U:
        """Exhaustive pattern match. Both handlers are required."""
        return present(self._value) if self._is_present else absent()  # type: ignore[arg-type]

    def match_with(self, cases: Mapping[str, Callable[..., U]]) -> U:
        """Dispatch on a {"Present": f, "Absent": g} table.

        Raises MatchError if either variant is missing from the table.
        """
        missing = [name for name in ("Present", "Absent") if name not in cases]
        if missing:
            raise MatchError.create(f"match_with() missing handler(s): {', '.join(missing)}", variant=self.variant)
        return self.match(present=cases["Present"], absent=cases["Absent"])

    @property
    def variant(self) -> str:
        return "Present" if self._is_present else "Absent"

    # ─── Conversion ──────────────────────────────────────────────────

    def to_result(self, error: E) -> Result[T, E]:
        """Ok(value) if Present, Err(error) if Absent."""
        from .result import Err, Ok

        return Ok(self._value) if self._is_present else Err(error)  # type: ignore[arg-type]

    def to_validation(self, error: E) -> Validation[T, E]:
        """Valid(value) if Present, Invalid([error]) if Absent."""
        from .validation import Invalid, Valid

        return Valid(self._value) if self._is_present else Invalid([error])  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_present

    def __hash__(self) -> int:
        return hash((self._is_present, self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})" if self._is_present else "Absent()"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._is_present == other._is_present and self._value == other._value

    def __iter__(self) -> Iterator[T]:
        """Yields the payload if Present, nothing if Absent."""
        if self._is_present:
            yield self._value  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Present(value: T) -> Maybe[T]:  # noqa: N802
    """Construct the Present variant."""
    return Maybe(value, is_present=True)


def Absent() -> Maybe[T]:  # noqa: N802
    """Construct the Absent variant."""
    return Maybe(None, is_present=False)
