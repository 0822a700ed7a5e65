# monadkit/errors.py
# Exceptions raised by the containers. One class per failure condition,
# each carrying a fixed message.


class MonadError(Exception):
    """Base class for every container error."""


class IllegalValueError(MonadError, ValueError):
    """Some was built around the absent sentinel (None)."""

    def __init__(self, value=None):
        super().__init__(f"Can not create Some with illegal value: {value}.")


class EmptyAccessError(MonadError, LookupError):
    """some() was called on Nothing."""

    def __init__(self):
        super().__init__("Cannot call .some() on a None.")


class InvalidSideAccessError(MonadError, LookupError):
    """left() on a Right or right() on a Left."""

    def __init__(self, requested: str, actual: str):
        self.requested = requested
        self.actual = actual
        super().__init__(f"Cannot call {requested}() on a {actual}.")


class LeftRejection(MonadError):
    """
    Raised through a future produced by Either.to_future() when the Left
    payload is not itself an exception. The payload is kept on `.value`.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Either was a Left: {value!r}")
