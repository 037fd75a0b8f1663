"""The Complex value type and the arithmetic defined on it.

Arithmetic lives in free functions (add, sub, mul, div, pow, exp, log, ...)
that accept any mix of Complex values, real numbers and expression strings.
Complex exposes thin forwarding methods and the Python numeric operators.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from complexeval.core.errors import DivisionError, InvalidNumber
from complexeval.core.render import to_string

E = math.e
PI = math.pi
LN2 = math.log(2)
LN10 = math.log(10)
LOG2E = math.log2(math.e)
LOG10E = math.log10(math.e)
SQRT1_2 = math.sqrt(0.5)
SQRT2 = math.sqrt(2)


def _components(value: object) -> tuple[float, float]:
    """Split a constructor argument into (real, imag) floats."""
    if value is None:
        return 0.0, 0.0
    if isinstance(value, Complex):
        return value.real, value.imag
    if isinstance(value, numbers.Real):
        try:
            return float(value), 0.0
        except OverflowError as err:
            raise InvalidNumber(f"Cannot construct complex number from {value}") from err
    if isinstance(value, complex):
        return value.real, value.imag

    from complexeval.parser.grammar import evaluate

    parsed = evaluate(value if isinstance(value, str) else str(value))
    return parsed.real, parsed.imag


@dataclass(frozen=True)
class Complex:
    """A complex number with double-precision real and imaginary parts.

    Complex(real, imag) accepts Complex values, real numbers or expression
    strings for either argument. The second argument is multiplied by j and
    added, except that a purely imaginary second argument is added as is, so
    Complex(1, 2), Complex(1, "2j") and Complex("1+2j") are equal.
    """

    real: float
    imag: float

    def __init__(
        self,
        real: Complex | float | str | None = None,
        imag: Complex | float | str | None = None,
    ):
        re_part, im_part = _components(real)

        # An absent or empty second argument adds nothing
        if imag is not None and imag != "":
            extra = _as_complex(imag)
            if extra.imag and not extra.real:
                im_part += extra.imag
            else:
                re_part -= extra.imag
                im_part += extra.real

        if not (math.isfinite(re_part) and math.isfinite(im_part)):
            raise InvalidNumber(f"Cannot construct complex number from [{real}, {imag}]")

        object.__setattr__(self, "real", re_part)
        object.__setattr__(self, "imag", im_part)

    @property
    def abs(self) -> float:
        return math.hypot(self.real, self.imag)

    @property
    def angle(self) -> float:
        """Argument in (-π, π]."""
        modulus = self.abs or 1.0
        return math.atan2(self.imag / modulus, self.real / modulus)

    def add(self, *operands: Complex | float | str) -> Complex:
        return add(self, *operands)

    def sub(self, *operands: Complex | float | str) -> Complex:
        return sub(self, *operands)

    def mul(self, *operands: Complex | float | str) -> Complex:
        return mul(self, *operands)

    def div(self, *operands: Complex | float | str) -> Complex:
        return div(self, *operands)

    def pow(self, exponent: Complex | float | str) -> Complex:
        return pow(self, exponent)

    # --- Python numeric protocol ---

    def __add__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return sub(self, other)

    def __rsub__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return sub(other, self)

    def __mul__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return mul(self, other)

    def __rmul__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return mul(other, self)

    def __truediv__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return div(self, other)

    def __rtruediv__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return div(other, self)

    def __pow__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return pow(self, other)

    def __rpow__(self, other: object) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return pow(other, self)

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def __pos__(self) -> Complex:
        return self

    def __abs__(self) -> float:
        return self.abs

    def __bool__(self) -> bool:
        return bool(self.real or self.imag)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imag!r})"


def _is_operand(value: object) -> bool:
    return isinstance(value, (Complex, numbers.Number))


def _as_complex(value: Complex | float | str) -> Complex:
    return value if isinstance(value, Complex) else Complex(value)


ZERO = Complex(0)
ONE = Complex(1)
I = Complex(0, 1)


def add(*operands: Complex | float | str) -> Complex:
    """Sum of all arguments."""
    real = imag = 0.0
    for n in operands:
        c = _as_complex(n)
        real += c.real
        imag += c.imag
    return Complex(real, imag)


def sub(lvalue: Complex | float | str, *rvalues: Complex | float | str) -> Complex:
    """Subtract every rvalue from lvalue, left to right."""
    start = _as_complex(lvalue)
    real, imag = start.real, start.imag
    for n in rvalues:
        c = _as_complex(n)
        real -= c.real
        imag -= c.imag
    return Complex(real, imag)


def mul(*operands: Complex | float | str) -> Complex:
    """Product of all arguments."""
    real, imag = 1.0, 0.0
    for n in operands:
        c = _as_complex(n)
        real, imag = real * c.real - imag * c.imag, real * c.imag + imag * c.real
    return Complex(real, imag)


def div(lvalue: Complex | float | str, *rvalues: Complex | float | str) -> Complex:
    """Divide lvalue by every rvalue, left to right.

    Raises DivisionError naming the numerator and denominator of the first
    step whose result is not finite (in particular, any division by zero).
    """
    start = _as_complex(lvalue)
    real, imag = start.real, start.imag

    for n in rvalues:
        d = _as_complex(n)
        den = d.real * d.real + d.imag * d.imag
        if den == 0:
            raise DivisionError(Complex(real, imag), d)

        a, b = real, imag
        real = (a * d.real + b * d.imag) / den
        imag = (b * d.real - a * d.imag) / den

        if not (math.isfinite(real) and math.isfinite(imag)):
            raise DivisionError(Complex(a, b), d)

    return Complex(real, imag)


def abs(n: Complex | float | str) -> float:
    """Modulus sqrt(real² + imag²)."""
    return _as_complex(n).abs


def angle(n: Complex | float | str) -> float:
    """Argument of n in the complex plane, in (-π, π]."""
    return _as_complex(n).angle


def exp(*terms: Complex | float | str) -> Complex:
    """e raised to the product of terms."""
    c = mul(*terms)
    try:
        scale = math.exp(c.real)
    except OverflowError as err:
        raise InvalidNumber(f"e^({c}) is too large") from err
    return mul(Complex(math.cos(c.imag), math.sin(c.imag)), scale)


def log(*terms: Complex | float | str) -> Complex:
    """Principal natural logarithm of the product of terms."""
    c = mul(*terms)
    modulus = c.abs
    if modulus == 0:
        raise InvalidNumber("Cannot take the logarithm of 0")
    return Complex(math.log(modulus), c.angle)


def pow(base: Complex | float | str, exponent: Complex | float | str) -> Complex:
    """base ** exponent, computed as exp(exponent * log(base))."""
    return exp(mul(exponent, log(base)))
