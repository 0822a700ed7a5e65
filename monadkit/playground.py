# monadkit/playground.py
# Pure helpers behind the Streamlit demo page (app/main.py).

import re
from typing import Any

from .flist import List, Nil
from .ftypes import Either, Left, Maybe, Right, Some
from .nonempty import NonEmptyList

_SEPARATORS = re.compile(r"[,\s]+")


def parse_int(token: str) -> Either[str, int]:
    try:
        return Right(int(token))
    except ValueError:
        return Left(f"not a number: {token!r}")


def parse_numbers(text: str) -> Either[str, List[int]]:
    """
    "1, 2 3" -> Right(List(1, 2, 3))
    "1, x"   -> Left("not a number: 'x'")

    Stops at the first bad token.
    """
    tokens = List.from_array(t for t in _SEPARATORS.split(text) if t)
    parsed = tokens.fold_left(Right(Nil()))(
        lambda acc, token: acc.bind(
            lambda numbers: parse_int(token).bind(lambda n: Right(numbers.cons(n)))
        )
    )
    return parsed.bind(lambda numbers: Right(numbers.reverse()))


def safe_divide(numerator: float, denominator: float) -> Maybe[float]:
    """Nothing on division by zero (the error is absorbed by Maybe.map)."""
    return Some(numerator).map(lambda n: n / denominator)


def describe(container: Any) -> dict:
    """Tag and payload of a container, for display."""
    if isinstance(container, Maybe):
        return container.cata(
            lambda: {"type": "Maybe", "tag": "Nothing", "value": None},
            lambda v: {"type": "Maybe", "tag": "Some", "value": v},
        )
    if isinstance(container, Either):
        return container.cata(
            lambda v: {"type": "Either", "tag": "Left", "value": v},
            lambda v: {"type": "Either", "tag": "Right", "value": v},
        )
    if isinstance(container, List):
        return {
            "type": type(container).__name__,
            "tag": "Nil" if container.is_nil else "Cons",
            "value": container.to_array(),
            "size": container.size(),
        }
    raise TypeError(f"not a container: {type(container).__name__}")


def summarize(numbers: List[int], threshold: int = 10) -> dict:
    return {
        "size": numbers.size(),
        "evens": numbers.filter(lambda n: n % 2 == 0).to_array(),
        "doubled": numbers.map(lambda n: n * 2).to_array(),
        "first_above": numbers.find(lambda n: n > threshold).or_null(),
        "non_empty": NonEmptyList.from_list(numbers).is_some(),
        "total": numbers.fold_left(0)(lambda acc, n: acc + n),
    }
