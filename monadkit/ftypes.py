# monadkit/ftypes.py
# Functional small types: Maybe and Either
# Immutable, compared structurally, convertible into each other and into List.

from __future__ import annotations
import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar, Union

from .compose import always_false, identity, noop
from .equality import are_equal, equals as equal_to
from .errors import (
    EmptyAccessError,
    IllegalValueError,
    InvalidSideAccessError,
    LeftRejection,
)
from .log import logger

if TYPE_CHECKING:
    from .flist import List

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
L = TypeVar("L")
R = TypeVar("R")

# Maybe (optional value)


@dataclass(frozen=True, eq=False)
class Maybe(Generic[T]):
    """
    Optional value: Some(value) or Nothing().

    None is the absent sentinel, so Some(None) is refused at construction.
    map() is "safe": a callback that raises or returns None gives Nothing.
    """

    has_value: bool
    value: Optional[T]

    def __init__(self, has_value: bool, value: Optional[T] = None):
        if has_value and value is None:
            raise IllegalValueError(value)
        object.__setattr__(self, "has_value", has_value)
        object.__setattr__(self, "value", value if has_value else None)

    # factories
    @staticmethod
    def of(value: T) -> "Maybe[T]":
        return Maybe(True, value)

    @staticmethod
    def nothing() -> "Maybe[Any]":
        return Maybe(False)

    @staticmethod
    def from_null(value: Optional[T]) -> "Maybe[T]":
        return Maybe(False) if value is None else Maybe(True, value)

    @staticmethod
    def from_undefined(value: Optional[T]) -> "Maybe[T]":
        # Python has a single absent sentinel
        return Maybe.from_null(value)

    # predicates
    def is_some(self) -> bool:
        return self.has_value

    def is_none(self) -> bool:
        return not self.is_some()

    # functor / monad operations
    def map(self, fn: Callable[[T], U]) -> "Maybe[U]":
        if not self.has_value:
            return Maybe(False)
        try:
            result = fn(self.value)
        except Exception as exc:
            logger.debug("map callback failed on %r, degrading to Nothing: %r", self, exc)
            return Maybe(False)
        return Maybe.from_null(result)

    def bind(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return fn(self.value) if self.has_value else Maybe(False)

    def flat_map(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return self.bind(fn)

    def chain(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return self.bind(fn)

    def join(self) -> "Maybe[Any]":
        """Some(Some(x)) -> Some(x)"""
        return self.bind(identity)

    def ap(self, maybe_fn: "Maybe[Callable[[T], U]]") -> "Maybe[U]":
        if not self.has_value:
            return Maybe(False)
        value = self.value
        return maybe_fn.map(lambda fn: fn(value))

    def take_left(self, other: "Maybe[Any]") -> "Maybe[T]":
        """Keep this value, provided both sides are present."""
        return self.bind(lambda a: other.bind(lambda _b: Maybe(True, a)))

    def take_right(self, other: "Maybe[U]") -> "Maybe[U]":
        """Keep the other value, provided both sides are present."""
        return self.bind(lambda _a: other.bind(lambda b: Maybe(True, b)))

    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        return self if self.has_value and predicate(self.value) else Maybe(False)

    # eliminators
    def fold(self, default: U) -> Callable[[Callable[[T], U]], U]:
        """fold(default)(fn): fn(value) when present, default otherwise."""
        return lambda fn: fn(self.value) if self.has_value else default

    def cata(self, none_fn: Callable[[], U], some_fn: Callable[[T], U]) -> U:
        return some_fn(self.value) if self.has_value else none_fn()

    def for_each(self, fn: Callable[[T], Any]) -> None:
        self.cata(noop, fn)

    # extractors
    def get_or_else(self, default: U) -> T | U:
        return self.value if self.has_value else default

    def or_some(self, default: U) -> T | U:
        return self.get_or_else(default)

    def or_else(self, other: "Maybe[T]") -> "Maybe[T]":
        return self if self.has_value else other

    def or_null(self) -> Optional[T]:
        return self.value

    def or_undefined(self) -> Optional[T]:
        return self.value

    def some(self) -> T:
        if not self.has_value:
            raise EmptyAccessError()
        return self.value

    # conversions
    def to_array(self) -> list:
        return [self.value] if self.has_value else []

    def to_either(self, left: Any = None) -> "Either[Any, T]":
        return Either(self.value, True) if self.has_value else Either(left, False)

    def to_list(self) -> "List[T]":
        from .flist import List, Nil

        return List.of(self.value) if self.has_value else Nil()

    # equality
    def equals(self, other: Any) -> bool:
        if not isinstance(other, Maybe) or self.has_value != other.has_value:
            return False
        return not self.has_value or are_equal(self.value, other.value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # payload equality goes through are_equal, which hash() cannot follow
        return hash((Maybe, self.has_value))

    def __repr__(self) -> str:
        return f"Some({self.value!r})" if self.has_value else "Nothing"


def Some(value: T) -> Maybe[T]:
    return Maybe(True, value)


def Nothing() -> Maybe[Any]:
    return Maybe(False)


# Either (Left / Right)


@dataclass(frozen=True, eq=False)
class Either(Generic[L, R]):
    """
    Either<L, R>: Left usually carries an error, Right a successful value.

    Factories: Left(val), Right(val), Either(val, is_right)
    bind/ap/join work on the Right side and pass a Left through untouched.
    map() calls the callback on whichever side is stored and keeps the tag,
    so Left("abcd").map(len) is Left(4).
    """

    value: Union[L, R]
    is_right_value: bool

    def __init__(self, value: Union[L, R], is_right: bool):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "is_right_value", bool(is_right))

    # predicates
    def is_right(self) -> bool:
        return self.is_right_value

    def is_left(self) -> bool:
        return not self.is_right()

    # functor / monad operations
    def map(self, fn: Callable[[Any], U]) -> "Either[L, U]":
        return Either(fn(self.value), self.is_right_value)

    def bind(self, fn: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return fn(self.value) if self.is_right_value else Either(self.value, False)

    def flat_map(self, fn: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return self.bind(fn)

    def chain(self, fn: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return self.bind(fn)

    def join(self) -> "Either[L, Any]":
        """Right(Right(x)) -> Right(x)"""
        return self.bind(identity)

    def ap(self, either_fn: "Either[L, Callable[[R], U]]") -> "Either[L, U]":
        if not self.is_right_value:
            return Either(self.value, False)
        if not either_fn.is_right():
            return Either(either_fn.value, False)
        return Either(either_fn.value(self.value), True)

    def take_left(self, other: "Either[L, Any]") -> "Either[L, R]":
        """Keep this Right value once both are Right; the first Left wins."""
        return self.bind(lambda a: other.bind(lambda _b: Either(a, True)))

    def take_right(self, other: "Either[L, U]") -> "Either[L, U]":
        """Keep the other Right value once both are Right; the first Left wins."""
        return self.bind(lambda _a: other.bind(lambda b: Either(b, True)))

    # Either-only operations
    def cata(self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        return right_fn(self.value) if self.is_right_value else left_fn(self.value)

    def fold(self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        return self.cata(left_fn, right_fn)

    def left_map(self, fn: Callable[[L], V]) -> "Either[V, R]":
        # a Right is returned unchanged
        return self if self.is_right_value else Either(fn(self.value), False)

    def swap(self) -> "Either[R, L]":
        return Either(self.value, not self.is_right_value)

    def for_each(self, fn: Callable[[R], Any]) -> None:
        self.cata(noop, fn)

    def for_each_left(self, fn: Callable[[L], Any]) -> None:
        self.cata(fn, noop)

    # extractors
    def left(self) -> L:
        if self.is_right_value:
            raise InvalidSideAccessError("left", "Right")
        return self.value

    def right(self) -> R:
        if not self.is_right_value:
            raise InvalidSideAccessError("right", "Left")
        return self.value

    def get_or_else(self, default: U) -> R | U:
        return self.value if self.is_right_value else default

    # conversions
    def to_maybe(self) -> Maybe[R]:
        return Maybe.from_null(self.value) if self.is_right_value else Maybe(False)

    def to_future(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> "asyncio.Future[R]":
        """
        Already-settled future: resolved with the Right value, or failed with
        the Left value. A Left that is not an exception is wrapped in
        LeftRejection. Must be called with a running loop unless one is given.

        A failed future that is dropped without being awaited makes asyncio
        log "Future exception was never retrieved" when it is collected.
        """
        loop = loop or asyncio.get_running_loop()
        future = loop.create_future()
        if self.is_right_value:
            future.set_result(self.value)
        else:
            error = (
                self.value
                if isinstance(self.value, BaseException)
                else LeftRejection(self.value)
            )
            logger.debug("rejecting future with %r", error)
            future.set_exception(error)
        return future

    # equality
    def equals(self, other: Any) -> bool:
        if not isinstance(other, Either):
            return False
        return self.cata(
            lambda left: other.cata(equal_to(left), always_false),
            lambda right: other.cata(always_false, equal_to(right)),
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((Either, self.is_right_value))

    def __repr__(self) -> str:
        return f"Right({self.value!r})" if self.is_right_value else f"Left({self.value!r})"


def Left(value: L) -> Either[L, Any]:
    return Either(value, False)


def Right(value: R) -> Either[Any, R]:
    return Either(value, True)
