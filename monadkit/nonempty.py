# monadkit/nonempty.py
# A List that can never be Nil. Built only through the validated factories,
# which hand back a Maybe: Nothing for empty input.

from __future__ import annotations
from typing import Iterable, Optional, TypeVar

from .flist import List
from .ftypes import Maybe

T = TypeVar("T")


class NonEmptyList(List[T]):
    """Use NonEmptyList.from_list / from_array rather than the constructor."""

    def __init__(self, head: T, tail: Optional[List[T]] = None):
        super().__init__(head, tail)

    @staticmethod
    def from_list(values: List[T]) -> Maybe["NonEmptyList[T]"]:
        if values.size() == 0:
            return Maybe.nothing()
        if isinstance(values, NonEmptyList):
            return Maybe.of(values)
        # shares the tail, only the first node is rebuilt
        return Maybe.of(NonEmptyList(values.head(), values.tail()))

    @staticmethod
    def from_array(values: Iterable[T]) -> Maybe["NonEmptyList[T]"]:
        return NonEmptyList.from_list(List.from_array(values))

    def head(self) -> T:
        return self._head

    def cons(self, head: T) -> "NonEmptyList[T]":
        return NonEmptyList(head, self)
