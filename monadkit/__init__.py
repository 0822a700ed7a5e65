"""Immutable functional containers: Maybe, Either, List and NonEmptyList."""

from .compose import compose, flip, identity, pipe
from .equality import Equatable, are_equal, equals
from .errors import (
    EmptyAccessError,
    IllegalValueError,
    InvalidSideAccessError,
    LeftRejection,
    MonadError,
)
from .ftypes import Either, Left, Maybe, Nothing, Right, Some
from .flist import List, Nil, cons
from .nonempty import NonEmptyList

__all__ = [
    "compose",
    "pipe",
    "identity",
    "flip",
    "Equatable",
    "are_equal",
    "equals",
    "MonadError",
    "IllegalValueError",
    "EmptyAccessError",
    "InvalidSideAccessError",
    "LeftRejection",
    "Maybe",
    "Some",
    "Nothing",
    "Either",
    "Left",
    "Right",
    "List",
    "Nil",
    "cons",
    "NonEmptyList",
]

__version__ = "0.1.0"
