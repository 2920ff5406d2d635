"""Exception classes for varbase64.

This module defines the exception types raised by the codec.
"""


class Base64Error(Exception):
    """Base exception class for all varbase64 errors."""

    pass


class DecodeError(Base64Error, ValueError):
    """Exception raised when input is not valid Base64.

    The same exception is raised for every kind of malformed input (an unknown
    symbol, misplaced padding, a truncated tail, or non-zero trailing bits) so
    callers cannot tell the cases apart.
    """

    def __init__(self, message: str = "invalid base64 input") -> None:
        super().__init__(message)


class BufferSizeError(Base64Error, ValueError):
    """Exception raised when a destination buffer is too small."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"destination buffer too small: need {required} bytes, have {available}"
        )
        self.required = required
        self.available = available
