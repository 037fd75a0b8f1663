"""Recursive descent evaluation of complex-number expressions.

Grammar levels, outermost first:

    group           := [ '+' | ' ' ]* ( addition | <empty> ) [ ')' ]
    addition        := multiplication ( ( '+' | '-' ) multiplication )*
    multiplication  := exponentiation ( ( '*' | '/' | <juxtaposition> ) exponentiation )*
    exponentiation  := atom [ '^' exponentiation ]
    atom            := number [ 'e' sign digits ] | 'exp' atom | 'ln' atom
                     | 'e' | 'j' | '(' group | '-' atom

Each level takes the token list and a cursor and returns ``(value, next_pos)``.
Values are computed while parsing; no syntax tree is built. A level may be
handed a ``seed``: an already computed value that stands in for its first
term, which is how chains like ``a - b - c`` and ``a / b / c`` are evaluated
left to right.
"""

from __future__ import annotations

import logging
import re

from complexeval.core.errors import InvalidExpression, ParseError
from complexeval.core.number import E, I, ONE, ZERO, Complex, exp
from complexeval.core.number import log as ln
from complexeval.parser.tokenizer import tokenize

log = logging.getLogger(__name__)

END_OF_EXPRESSION = frozenset({"+", "-", "*", "/", "^", " ", ")"})

_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_DIGITS_RE = re.compile(r"[0-9]+")


def _peek(tokens: list[str], pos: int) -> str | None:
    return tokens[pos] if pos < len(tokens) else None


def _is_end_of_expression(token: str | None) -> bool:
    return token is None or token in END_OF_EXPRESSION


def _skip(tokens: list[str], pos: int, skippable: tuple[str, ...] = (" ",)) -> int:
    while pos < len(tokens) and tokens[pos] in skippable:
        pos += 1
    return pos


def evaluate(num: Complex | float | str) -> Complex:
    """Evaluate an expression string (or wrap a number) as a Complex.

    Raises ParseError / InvalidExpression for malformed input and
    InvalidNumber / DivisionError for arithmetic failures.
    """
    if isinstance(num, Complex):
        return Complex(num)
    if not isinstance(num, str):
        return Complex(num)

    tokens = tokenize(num)
    value, _ = _read_group(tokens, 0, nested=False)
    log.debug("Evaluated %r to %s", num, value)
    return value


def _read_group(tokens: list[str], pos: int, nested: bool) -> tuple[Complex, int]:
    """Contents of a bracket pair, or the whole input when not nested.

    Empty contents evaluate to 1. A nested group consumes its closing
    bracket; the top-level group must run to the end of the input.
    """
    pos = _skip(tokens, pos, (" ", "+"))
    tok = _peek(tokens, pos)

    if tok is None or tok == ")":
        value = ONE
    else:
        value, pos = _read_addition(tokens, pos)

    tok = _peek(tokens, pos)
    if nested and tok == ")":
        return value, pos + 1
    if nested and tok is None:
        raise ParseError(f"Unbalanced brackets: missing ')' after {value}")
    if not nested and tok is None:
        return value, pos
    raise ParseError(f"Invalid expression: {value} {' '.join(tokens[pos:])}")


def _read_addition(
    tokens: list[str], pos: int, seed: Complex | None = None
) -> tuple[Complex, int]:
    if seed is None:
        pos = _skip(tokens, pos)
        tok = _peek(tokens, pos)
        if tok == "+":
            return _read_addition(tokens, pos + 1)
        if tok == "-":
            # Leading minus: subtract the chain that follows from zero
            return _read_addition(tokens, pos, ZERO)
        left, pos = _read_multiplication(tokens, pos)
    else:
        left = seed

    pos = _skip(tokens, pos)
    tok = _peek(tokens, pos)

    if tok == "+":
        right, pos = _read_addition(tokens, pos + 1)
        return left.add(right), pos

    if tok == "-":
        right, pos = _read_multiplication(tokens, pos + 1)
        if _peek(tokens, pos) in ("+", "-"):
            return _read_addition(tokens, pos, left.sub(right))
        return left.sub(right), pos

    return left, pos


def _read_multiplication(
    tokens: list[str], pos: int, seed: Complex | None = None
) -> tuple[Complex, int]:
    left, pos = _read_exponentiation(tokens, pos, seed)
    pos = _skip(tokens, pos)
    tok = _peek(tokens, pos)

    if tok == "*":
        right, pos = _read_multiplication(tokens, pos + 1)
        return left.mul(right), pos

    if tok == "/":
        divisor, pos = _read_exponentiation(tokens, pos + 1)
        return _read_multiplication(tokens, pos, left.div(divisor))

    if not _is_end_of_expression(tok):
        # Implicit multiplication: "3(4)", "2 j"
        factor, pos = _read_expression(tokens, pos)
        return _read_multiplication(tokens, pos, left.mul(factor))

    return left, pos


def _read_exponentiation(
    tokens: list[str], pos: int, seed: Complex | None = None
) -> tuple[Complex, int]:
    if seed is None:
        left, pos = _read_expression(tokens, pos)
    else:
        left = seed

    pos = _skip(tokens, pos)
    if _peek(tokens, pos) == "^":
        # Right-associative: a^b^c == a^(b^c)
        exponent, pos = _read_exponentiation(tokens, pos + 1)
        return left.pow(exponent), pos

    return left, pos


def _read_number(literal: str, tokens: list[str], pos: int) -> tuple[Complex, int]:
    """A numeric literal, with an optional 'e' sign digits exponent suffix."""
    if (
        _peek(tokens, pos) == "e"
        and _peek(tokens, pos + 1) in ("+", "-")
        and _DIGITS_RE.fullmatch(_peek(tokens, pos + 2) or "")
    ):
        sign, digits = tokens[pos + 1], tokens[pos + 2]
        return Complex(float(f"{literal}e{sign}{digits}")), pos + 3
    return Complex(float(literal)), pos


def _read_expression(tokens: list[str], pos: int) -> tuple[Complex, int]:
    """A single atom, followed by anything juxtaposed with it."""
    pos = _skip(tokens, pos)
    if pos >= len(tokens):
        return ONE, pos

    first = tokens[pos]
    pos += 1

    if _NUMBER_RE.fullmatch(first):
        value, pos = _read_number(first, tokens, pos)
    elif first == "exp":
        arg, pos = _read_expression(tokens, pos)
        return exp(arg), pos
    elif first == "ln":
        arg, pos = _read_expression(tokens, pos)
        return ln(arg), pos
    elif first == "e":
        value = Complex(E)
    elif first == "j":
        value = I
    elif first == "(":
        value, pos = _read_group(tokens, pos, nested=True)
    elif first == "-":
        value, pos = _read_expression(tokens, pos)
        value = -value
    else:
        raise InvalidExpression(first, tokens[pos:])

    if _is_end_of_expression(_peek(tokens, pos)):
        return value, pos
    factor, pos = _read_expression(tokens, pos)
    return value.mul(factor), pos
