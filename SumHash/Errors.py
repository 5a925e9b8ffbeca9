"""
Exceptions raised by the sumhash package.

Configuration errors are raised when a hash object or a parameter expansion
is built. Once a hash object exists, update/digest/reset do not raise;
InvalidBlockInput only signals a broken internal invariant.
"""


class SumHashError(Exception):
    """Base class for every sumhash error."""


class InvalidSaltLength(SumHashError, ValueError):
    """The salt is not exactly the required number of bytes."""

    def __init__(self, expected: int, got: int):
        super().__init__(f"bad salt size: want {expected}, got {got}")
        self.expected = expected
        self.got = got


class UnsupportedTruncationLength(SumHashError, ValueError):
    """The requested digest length is outside the chaining value width."""

    def __init__(self, maximum: int, got: int):
        super().__init__(
            f"unsupported output size: want 1..{maximum} bytes, got {got}"
        )
        self.maximum = maximum
        self.got = got


class InvalidBlockInput(SumHashError, RuntimeError):
    """A compression call received an input of the wrong width."""
