from complexeval.core.errors import (
    ComplexError, DivisionError, InvalidExpression, InvalidNumber, ParseError,
)
from complexeval.core.number import (
    Complex, E, I, ONE, PI, ZERO, add, angle, div, exp, log, mul, pow, sub,
)
from complexeval.core.render import (
    RenderConfig, RenderFormat, niceround, render,
    to_exponential, to_fixed, to_precision, to_string,
)

__all__ = [
    "ComplexError", "DivisionError", "InvalidExpression", "InvalidNumber", "ParseError",
    "Complex", "E", "I", "ONE", "PI", "ZERO",
    "add", "angle", "div", "exp", "log", "mul", "pow", "sub",
    "RenderConfig", "RenderFormat", "niceround", "render",
    "to_exponential", "to_fixed", "to_precision", "to_string",
]
