"""Complex numbers and an evaluator for human-written complex expressions."""

from complexeval.core import (
    Complex, ComplexError, DivisionError, InvalidExpression, InvalidNumber, ParseError,
    RenderConfig, RenderFormat, render,
)
from complexeval.parser import evaluate, tokenize

__all__ = [
    "Complex", "ComplexError", "DivisionError", "InvalidExpression", "InvalidNumber",
    "ParseError", "RenderConfig", "RenderFormat", "render", "evaluate", "tokenize",
]
