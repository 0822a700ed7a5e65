import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import pytest
from monadkit import (
    Either,
    InvalidSideAccessError,
    Left,
    LeftRejection,
    Nothing,
    Right,
    Some,
)


@pytest.fixture
def left_string():
    return Left("abcd")


@pytest.fixture
def right_string():
    return Right("efgh")


# ============ Left ============


def test_left_value(left_string):
    assert left_string.is_left()
    assert not left_string.is_right()
    assert left_string.left() == "abcd"


def test_map_on_left_transforms_the_stored_value(left_string):
    """map also runs on a Left, but the tag stays Left."""
    left_length = left_string.map(len)
    assert left_length.is_left()
    assert left_length.left() == 4


def test_fold_runs_only_left_side(left_string):
    def boom(val):
        raise AssertionError(val)

    assert left_string.fold(lambda val: "left " + val, boom) == "left abcd"


def test_left_map(left_string):
    assert left_string.left_map(lambda val: "left: " + val).left() == "left: abcd"


def test_left_to_maybe_is_nothing(left_string):
    assert left_string.to_maybe().is_none()


def test_right_on_left_raises(left_string):
    with pytest.raises(InvalidSideAccessError, match=r"Cannot call right\(\) on a Left\."):
        left_string.right()


# ============ Right ============


def test_right_value(right_string):
    assert right_string.is_right()
    assert right_string.right() == "efgh"


def test_generic_constructor():
    assert Either("ijkl", True) == Right("ijkl")
    assert Either("ijkl", False) == Left("ijkl")


def test_take_right_and_take_left(right_string):
    other_right = Either("ijkl", True)
    assert right_string.take_right(other_right) == other_right
    assert right_string.take_right(other_right).equals(other_right)
    assert right_string.take_left(other_right) == right_string


def test_take_helpers_short_circuit_on_left(right_string):
    assert right_string.take_left(Left("e")) == Left("e")
    assert right_string.take_right(Left("e")) == Left("e")
    assert Left("first").take_right(right_string) == Left("first")
    assert Left("first").take_left(Left("second")) == Left("first")


def test_map_on_right(right_string):
    right_length = right_string.map(len)
    assert right_length.is_right()
    assert right_length.right() == 4


def test_fold_runs_only_right_side(right_string):
    def boom(val):
        raise AssertionError(val)

    assert right_string.fold(boom, lambda val: "right " + val) == "right efgh"
    assert right_string.cata(boom, lambda val: "right " + val) == "right efgh"


def test_right_to_maybe(right_string):
    maybe_right = right_string.to_maybe()
    assert maybe_right.is_some()
    assert maybe_right.some() == "efgh"


def test_right_holding_none_to_maybe_is_nothing():
    assert Right(None).to_maybe() == Nothing()


def test_left_on_right_raises(right_string):
    with pytest.raises(InvalidSideAccessError, match=r"Cannot call left\(\) on a Right\."):
        right_string.left()


def test_left_map_on_right_is_a_no_op(right_string):
    assert right_string.left_map(lambda val: "changed") is right_string


# ============ Monad operations ============


def test_bind_runs_only_on_right():
    assert Right(2).bind(lambda x: Right(x * 3)) == Right(6)
    assert Right(2).bind(lambda x: Left("too small")) == Left("too small")

    calls = []
    assert Left("e").bind(lambda x: calls.append(x) or Right(x)) == Left("e")
    assert calls == []


def test_bind_aliases_behave_the_same():
    fn = lambda x: Right(x + 1)
    for value in (Right(1), Left("e")):
        assert value.bind(fn) == value.flat_map(fn) == value.chain(fn)


def test_join():
    assert Right(Right(1)).join() == Right(1)
    assert Right(Left("e")).join() == Left("e")
    assert Left("e").join() == Left("e")


def test_ap():
    assert Right(3).ap(Right(lambda x: x + 1)) == Right(4)
    assert Right(3).ap(Left("no fn")) == Left("no fn")
    assert Left("e").ap(Right(lambda x: x + 1)) == Left("e")


def test_swap():
    assert Right(1).swap() == Left(1)
    assert Left("e").swap() == Right("e")


def test_for_each_sides():
    seen_right, seen_left = [], []
    Right(1).for_each(seen_right.append)
    Left("e").for_each(seen_right.append)
    Right(1).for_each_left(seen_left.append)
    Left("e").for_each_left(seen_left.append)
    assert seen_right == [1]
    assert seen_left == ["e"]


def test_get_or_else():
    assert Right(100).get_or_else(0) == 100
    assert Left("error").get_or_else(0) == 0


# ============ Equality ============


def test_equality_needs_same_side():
    assert Right(1) == Right(1)
    assert Left(1) == Left(1)
    assert Left(1) != Right(1)
    assert Right(Some(1)) == Right(Some(1))
    assert Right(1) != Some(1)


def test_equals_dispatches_on_both_tags():
    assert not Left("x").equals(Right("x"))
    assert not Right("x").equals(Left("x"))
    assert Left(Some(1)).equals(Left(Some(1)))
    assert not Right(1).equals("not an either")


def test_repr():
    assert repr(Right(1)) == "Right(1)"
    assert repr(Left("e")) == "Left('e')"


# ============ to_future ============


@pytest.mark.asyncio
async def test_to_future_resolves_right():
    future = Right(42).to_future()
    assert future.done()
    assert await future == 42


@pytest.mark.asyncio
async def test_to_future_rejects_left_with_wrapped_payload():
    future = Left("nope").to_future()
    assert future.done()
    with pytest.raises(LeftRejection) as info:
        await future
    assert info.value.value == "nope"


@pytest.mark.asyncio
async def test_to_future_rejects_left_exception_as_is():
    error = ValueError("bad input")
    with pytest.raises(ValueError, match="bad input"):
        await Left(error).to_future()


def test_to_future_with_explicit_loop():
    loop = asyncio.new_event_loop()
    try:
        future = Right("ok").to_future(loop)
        assert loop.run_until_complete(future) == "ok"
    finally:
        loop.close()


def test_to_future_left_exception_can_be_read_without_awaiting():
    """Reading exception() marks the failure as retrieved for asyncio."""
    loop = asyncio.new_event_loop()
    try:
        future = Left("nope").to_future(loop)
        assert isinstance(future.exception(), LeftRejection)
    finally:
        loop.close()
