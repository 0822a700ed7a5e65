# monadkit/flist.py
# Immutable singly-linked list: Nil() or cons(head, tail).
# Traversals are loops over the spine, so list length is not bounded by
# the interpreter's recursion limit.

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from .compose import flip, identity
from .equality import are_equal
from .ftypes import Maybe

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

_EMPTY = object()


@dataclass(frozen=True, eq=False, repr=False)
class List(Generic[T]):
    """
    List() is Nil, List(head) a single element, List(head, tail) a new node
    in front of `tail`. The size is stored on every node: 1 + size(tail).
    """

    is_nil: bool
    _head: Optional[T]
    _tail: Optional["List[T]"]
    _size: int

    def __init__(self, head: Any = _EMPTY, tail: Optional["List[T]"] = None):
        if head is _EMPTY:
            object.__setattr__(self, "is_nil", True)
            object.__setattr__(self, "_head", None)
            object.__setattr__(self, "_tail", None)
            object.__setattr__(self, "_size", 0)
            return
        if tail is None:
            tail = Nil()
        elif not isinstance(tail, List):
            raise TypeError(f"tail must be a List, got {type(tail).__name__}")
        object.__setattr__(self, "is_nil", False)
        object.__setattr__(self, "_head", head)
        object.__setattr__(self, "_tail", tail)
        object.__setattr__(self, "_size", tail._size + 1)

    # factories
    @staticmethod
    def of(value: T) -> "List[T]":
        return List(value)

    @staticmethod
    def from_array(values: Iterable[T]) -> "List[T]":
        """Right-to-left build, so the head is the first item of `values`."""
        return reduce(lambda acc, value: acc.cons(value), reversed(list(values)), Nil())

    # structural accessors
    def head(self) -> Optional[T]:
        return self._head

    def tail(self) -> "List[T]":
        return Nil() if self.is_nil else self._tail

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self
        while not node.is_nil:
            yield node._head
            node = node._tail

    # building
    def cons(self, head: T) -> "List[T]":
        return List(head, self)

    def append(self, other: "List[T]") -> "List[T]":
        if self.is_nil:
            return other
        return reduce(lambda acc, value: acc.cons(value), reversed(self.to_array()), other)

    # folds
    def fold_left(self, seed: A) -> Callable[[Callable[[A, T], A]], A]:
        """fold_left(seed)(fn): fn(acc, item), leftmost item first."""

        def run(fn: Callable[[A, T], A]) -> A:
            acc = seed
            for value in self:
                acc = fn(acc, value)
            return acc

        return run

    def fold_right(self, seed: A) -> Callable[[Callable[[T, A], A]], A]:
        """fold_right(seed)(fn): fn(item, acc), rightmost item first."""

        def run(fn: Callable[[T, A], A]) -> A:
            acc = seed
            for value in reversed(self.to_array()):
                acc = fn(value, acc)
            return acc

        return run

    # functor / monad operations
    def map(self, fn: Callable[[T], U]) -> "List[U]":
        acc = Nil()
        for value in self:
            acc = acc.cons(fn(value))
        return acc.reverse()

    def flatten(self) -> "List[Any]":
        """List of lists -> one list, inner order kept."""
        return self.fold_right(Nil())(lambda inner, acc: inner.append(acc))

    def flatten_maybe(self) -> "List[Any]":
        """List of Maybe -> list of the present values."""
        return self.flat_map(lambda maybe: maybe.to_list())

    def bind(self, fn: Callable[[T], "List[U]"]) -> "List[U]":
        return self.map(fn).flatten()

    def flat_map(self, fn: Callable[[T], "List[U]"]) -> "List[U]":
        return self.bind(fn)

    def chain(self, fn: Callable[[T], "List[U]"]) -> "List[U]":
        return self.bind(fn)

    def join(self) -> "List[Any]":
        return self.bind(identity)

    # queries
    def filter(self, predicate: Callable[[T], bool]) -> "List[T]":
        kept = self.fold_left(Nil())(
            lambda acc, value: acc.cons(value) if predicate(value) else acc
        )
        return kept.reverse()

    def find(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        for value in self:
            if predicate(value):
                return Maybe.from_null(value)
        return Maybe.nothing()

    def contains(self, value: Any) -> bool:
        return any(are_equal(item, value) for item in self)

    def for_each(self, fn: Callable[[T], Any]) -> None:
        for value in self:
            fn(value)

    def reverse(self) -> "List[T]":
        return self.fold_left(Nil())(flip(cons))

    # conversions
    def to_array(self) -> list:
        def push(acc: list, value: T) -> list:
            acc.append(value)
            return acc

        return self.fold_left([])(push)

    # equality
    def equals(self, other: Any) -> bool:
        if not isinstance(other, List) or self._size != other._size:
            return False
        left, right = self, other
        while not left.is_nil and not right.is_nil:
            if not are_equal(left._head, right._head):
                return False
            left, right = left._tail, right._tail
        return left.is_nil and right.is_nil

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # elements compare through are_equal, so only the size is hashed
        return hash((List, self._size))

    def __repr__(self) -> str:
        if self.is_nil:
            return "Nil"
        return f"{type(self).__name__}({', '.join(repr(v) for v in self)})"


_NIL: List[Any] = List()


def Nil() -> List[Any]:
    return _NIL


def cons(head: T, tail: List[T]) -> List[T]:
    return tail.cons(head)
