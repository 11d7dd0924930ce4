"""Tests for the Maybe monad.

Validates:
- Functor and monad laws
- Short-circuiting on Absent
- Exhaustive dispatch
- Conversions to Result and Validation
"""

from __future__ import annotations

from typing import Callable

import pytest

from adtkit import MatchError, UnwrapError
from adtkit.monads import Absent, Err, Invalid, Maybe, Ok, Present, Valid


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Present(a).chain(f) == f(a)"""
    f: Callable[[int], Maybe[int]] = lambda x: Present(x * 2)
    assert Present(21).chain(f) == f(21)


def test_monad_right_identity() -> None:
    """m.chain(Present) == m"""
    assert Present(42).chain(Present) == Present(42)
    assert Absent().chain(Present) == Absent()


def test_absent_chain_short_circuits() -> None:
    """Absent().chain(f) == Absent() and f is never called."""
    calls: list[object] = []

    def f(x: object) -> Maybe[object]:
        calls.append(x)
        return Present(x)

    assert Absent().chain(f) == Absent()
    assert calls == []


def test_functor_identity() -> None:
    assert Present(3).map(lambda x: x) == Present(3)
    assert Absent().map(lambda x: x) == Absent()


def test_functor_composition() -> None:
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    assert Present(5).map(lambda x: f(g(x))) == Present(5).map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_chain_stops_at_first_absent() -> None:
    result = (
        Present(10)
        .chain(lambda x: Present(x + 1))
        .chain(lambda _: Absent())
        .chain(lambda x: Present(x * 100))
    )
    assert result == Absent()


def test_aliases_match_chain() -> None:
    f: Callable[[int], Maybe[int]] = lambda x: Present(x - 1)
    assert Present(1).flat_map(f) == Present(1).and_then(f) == Present(0)


def test_of_wraps_none_as_absent() -> None:
    assert Maybe.of(None) == Absent()
    assert Maybe.of(0) == Present(0)
    assert Maybe.of(False) == Present(False)


def test_filter() -> None:
    assert Present(4).filter(lambda x: x % 2 == 0) == Present(4)
    assert Present(3).filter(lambda x: x % 2 == 0) == Absent()
    assert Absent().filter(lambda _: True) == Absent()


def test_or_else() -> None:
    assert Absent().or_else(lambda: Present("fallback")) == Present("fallback")
    assert Present("first").or_else(lambda: Present("fallback")) == Present("first")


def test_extraction() -> None:
    assert Present(1).unwrap() == 1
    assert Present(1).get_or_else(2) == 1
    assert Absent().get_or_else(2) == 2
    with pytest.raises(UnwrapError) as info:
        Absent().unwrap()
    assert info.value.error.variant == "Absent"
    assert isinstance(info.value, RuntimeError)


def test_match() -> None:
    handlers = {"present": lambda v: f"got {v}", "absent": lambda: "nothing"}
    assert Present(7).match(**handlers) == "got 7"
    assert Absent().match(**handlers) == "nothing"


def test_match_requires_both_handlers() -> None:
    with pytest.raises(TypeError):
        Present(7).match(present=lambda v: v)  # type: ignore[call-arg]


def test_match_with_table() -> None:
    cases = {"Present": lambda v: v + 1, "Absent": lambda: 0}
    assert Present(1).match_with(cases) == 2
    assert Absent().match_with(cases) == 0


def test_match_with_missing_variant() -> None:
    with pytest.raises(MatchError, match="Absent"):
        Present(1).match_with({"Present": lambda v: v})


def test_equality_and_hash() -> None:
    assert Present(1) == Present(1)
    assert Present(1) != Present(2)
    assert Present(None) != Absent()
    assert Absent() == Absent()
    assert len({Present(1), Present(1), Absent()}) == 2
    assert Present(1) != Ok(1)


def test_repr_bool_iter() -> None:
    assert repr(Present("a")) == "Present('a')"
    assert repr(Absent()) == "Absent()"
    assert Present(0)
    assert not Absent()
    assert list(Present(5)) == [5]
    assert list(Absent()) == []


def test_structural_pattern_matching() -> None:
    match Present(3):
        case Maybe(value) if value is not None:
            assert value == 3
        case _:
            pytest.fail("expected Present")


# ═════════════════════════════════════════════════════════════════════════════
# Conversions
# ═════════════════════════════════════════════════════════════════════════════


def test_to_result() -> None:
    assert Present(1).to_result("missing") == Ok(1)
    assert Absent().to_result("missing") == Err("missing")


def test_to_validation() -> None:
    assert Present(1).to_validation("missing") == Valid(1)
    assert Absent().to_validation("missing") == Invalid(["missing"])
