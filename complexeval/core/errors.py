"""Errors raised while constructing, combining, or parsing complex numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from complexeval.core.render import to_exponential, to_string

if TYPE_CHECKING:
    from complexeval.core.number import Complex


class ComplexError(ValueError):
    """Base class for all complexeval errors."""


class InvalidNumber(ComplexError):
    """A value would have a NaN or infinite component."""


class DivisionError(ComplexError, ZeroDivisionError):
    """A division step produced a non-finite result."""

    def __init__(self, numerator: Complex, denominator: Complex):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"Cannot evaluate {to_exponential(numerator)} / {to_string(denominator)}"
        )


class ParseError(ComplexError):
    """Unbalanced brackets or tokens left over after a group."""


class InvalidExpression(ParseError):
    """A token the grammar has no rule for."""

    def __init__(self, token: str, remaining: Sequence[str]):
        self.token = token
        self.remaining = list(remaining)
        super().__init__(f"Invalid expression: {' '.join([token, *self.remaining])}")
