"""Result/Either monad for operations that may fail with a diagnostic.

Implements a discriminated union for success/failure:
- Functor: map, map_error
- Monad: chain (bind)
- Bifunctor: bimap
- Alternative: or_else for ordered fallback cascades
- Extraction: get_or_else, merge, match

No operation raises except the explicit unwrap family.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Iterable, Mapping, TypeVar

from ..errors import MatchError, UnwrapError
from .maybe import Absent, Maybe, Present

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .validation import Validation

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(84)
        >>> Err("fail").map(lambda x: x * 2)
        Err('fail')
        >>> Ok(5).chain(lambda x: Ok(x * 2) if x > 0 else Err("neg"))
        Ok(10)

        Fallback cascade, left to right:
        >>> Err("not an int").or_else(lambda _: Ok(4.5)).or_else(lambda _: Err("unreachable"))
        Ok(4.5)
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    @property
    def variant(self) -> str:
        return "Ok" if self._is_ok else "Err"

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises UnwrapError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"unwrap() on Err: {self._value!r}", variant="Err")

    def unwrap_err(self) -> E:
        """Extract Err value. Raises UnwrapError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"unwrap_err() on Ok: {self._value!r}", variant="Ok")

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom error message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError.create(f"{msg}: {self._value!r}", variant="Err")

    def get_or_else(self, default: T) -> T:
        """Extract Ok value or return default. Never fails."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    unwrap_or = get_or_else

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute one from the error."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def merge(self) -> T | E:
        """Return whichever payload is held, success or error."""
        return self._value

    # ─── Functor Operations ──────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    map_err = map_error

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Apply ok_fn if Ok, err_fn if Err."""
        return Result(ok_fn(self._value), _OK) if self._is_ok else Result(err_fn(self._value), _ERR)  # type: ignore[arg-type]

    # ─── Monad Operations ────────────────────────────────────────────

    def chain(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Err short-circuits and is passed through unchanged.

        Example:
            >>> Ok("42").chain(lambda s: Ok(int(s))).chain(lambda n: Ok(n * 2) if n > 0 else Err("neg"))
            Ok(84)
        """
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    flat_map = chain
    and_then = chain

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Err, apply f to recover or try an alternative. On Ok, pass through."""
        return f(self._value) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Inspection ──────────────────────────────────────────────────

    def ok(self) -> T | None:
        """Ok value or None."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Err value or None."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    def match_with(self, cases: Mapping[str, Callable[..., U]]) -> U:
        """Dispatch on an {"Ok": f, "Error": g} table ("Err" is accepted for "Error").

        Raises MatchError if either variant is missing from the table.
        """
        on_err = cases.get("Error", cases.get("Err"))
        missing = [name for name, h in (("Ok", cases.get("Ok")), ("Error", on_err)) if h is None]
        if missing:
            raise MatchError.create(f"match_with() missing handler(s): {', '.join(missing)}", variant=self.variant)
        return self.match(ok=cases["Ok"], err=on_err)  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────

    def to_maybe(self) -> Maybe[T]:
        """Present(value) if Ok, Absent() if Err. The diagnostic is dropped."""
        return Present(self._value) if self._is_ok else Absent()  # type: ignore[arg-type]

    def to_validation(self) -> Validation[T, E]:
        """Valid(value) if Ok, Invalid([error]) if Err."""
        from .validation import Invalid, Valid

        return Valid(self._value) if self._is_ok else Invalid([self._value])  # type: ignore[arg-type,list-item]

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (ok_value, err_value) tuple."""
        return (self._value, None) if self._is_ok else (None, self._value)  # type: ignore[return-value]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[List[T], E]. Fail-fast on first Err."""
    values: list[T] = []
    for r in results:
        if not r._is_ok:
            return Result(r._value, _ERR)  # type: ignore[arg-type]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, sequence results. Fail-fast: f is not called past the first Err."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if not r._is_ok:
            return Result(r._value, _ERR)  # type: ignore[arg-type]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast)."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if r._is_ok else errors).append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK) if not errors else Result(errors, _ERR)


def try_fn(f: Callable[[], T], *exc_types: type[Exception]) -> Result[T, Exception]:
    """Call f, capturing a raised exception as Err(exc).

    Only the given exception types are captured (all Exceptions by default);
    anything else propagates.

    Example:
        >>> try_fn(lambda: int("7"))
        Ok(7)
        >>> try_fn(lambda: int("x"), ValueError).is_err()
        True
    """
    catch = exc_types or (Exception,)
    try:
        return Ok(f())
    except catch as e:
        return Err(e)
