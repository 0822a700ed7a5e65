# monadkit/equality.py
# Structural equality shared by all containers.

from __future__ import annotations
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Equatable(Protocol):
    """Anything that can compare itself structurally with another value."""

    def equals(self, other: Any) -> bool: ...


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and value != value


def _is_equatable(value: Any) -> bool:
    # classes carry an unbound `equals`, only instances can compare themselves
    return not isinstance(value, type) and isinstance(value, Equatable)


def are_equal(a: Any, b: Any) -> bool:
    """
    a is b            -> True
    both NaN          -> True
    both Equatable    -> a.equals(b)   (instances only, never classes)
    otherwise         -> a == b
    """
    if a is b or (_is_nan(a) and _is_nan(b)):
        return True
    if _is_equatable(a) and _is_equatable(b):
        return a.equals(b)
    return a == b


def equals(a: Any) -> Callable[[Any], bool]:
    """equals(a)(b) == are_equal(a, b)"""
    return lambda b: are_equal(a, b)
