"""Safe map lookups with Maybe.

    >>> ages = {"steve": 39, "laura": 38}
    >>> benefits = {39: "benefits", 47: "benefits"}
    >>> safe_get(ages, "steve")
    Present(39)
    >>> safe_get(ages, "steven")
    Absent()
    >>> describe_age(safe_get(ages, "steve"))
    'The age is 39.'
    >>> lookup_benefit(ages, benefits, "laura")
    Absent()
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Hashable, TypeVar

from ..monads import Absent, Maybe, Present
from ..observability import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
U = TypeVar("U")

log = get_logger("adtkit.demo.lookup")


def safe_get(mapping: Mapping[K, V] | object, key: K) -> Maybe[V]:
    """Present(value) when mapping holds a truthy value for key, else Absent()."""
    if not isinstance(mapping, Mapping):
        log.debug("lookup on non-mapping", key=repr(key), type=type(mapping).__name__)
        return Absent()
    value = mapping.get(key)
    return Present(value) if value else Absent()


def handle_maybe(maybe: Maybe[V], on_present: Callable[[V], U], on_absent: Callable[[], U]) -> U:
    return maybe.match_with({"Present": on_present, "Absent": on_absent})


def handle_present(value: object) -> str:
    return f"The age is {value}."


def handle_absent() -> str:
    return "No age available for given key."


def describe_age(maybe: Maybe[int]) -> str:
    return handle_maybe(maybe, handle_present, handle_absent)


def get_benefit(benefits: Mapping[int, str]) -> Callable[[int], Maybe[str]]:
    """Second lookup step, suitable for Maybe.chain."""
    return lambda age: safe_get(benefits, age)


def lookup_benefit(ages: Mapping[str, int], benefits: Mapping[int, str], name: str) -> Maybe[str]:
    """name -> age -> benefit, Absent as soon as either lookup misses."""
    return safe_get(ages, name).chain(get_benefit(benefits))
