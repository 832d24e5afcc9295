"""Typed errors raised by linal."""

from __future__ import annotations


class LinalError(Exception):
    """Base class for domain failures raised by the library."""


class ZeroDivisorError(LinalError, ValueError, ZeroDivisionError):
    """A vector was divided by a scalar equal to zero."""


class DegenerateBasisError(ZeroDivisorError):
    """The basis vectors are linearly dependent, so no dual basis exists."""

    def __init__(self, volume: float) -> None:
        super().__init__(f"Cannot build a dual basis for a degenerate basis (volume={volume!r}).")
        self.volume = volume


class ParseError(LinalError, ValueError):
    """Text could not be parsed into a value type.

    ``token_index`` is the position of the offending token, or ``None`` when
    the number of tokens is wrong.
    """

    def __init__(self, text: str, expected: int, token_index: int | None = None) -> None:
        if token_index is None:
            message = f"Expected {expected} whitespace-separated numbers, got {text!r}."
        else:
            message = f"Token {token_index} of {text!r} is not a valid float."
        super().__init__(message)
        self.text = text
        self.expected = expected
        self.token_index = token_index
