"""String rendering of complex values.

Four forms are supported, mirroring the ways a float can be printed:

- nice:        fixed notation trimmed of trailing zeros (the default, used by str())
- fixed:       a fixed number of fractional digits
- exponential: polar form ``r e^(θ/π)jπ`` for complex values, scientific
               notation for real ones
- precision:   a fixed number of significant digits

Every form omits a part that is exactly zero and writes the sign between the
parts from the imaginary part's sign.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from complexeval.core.number import Complex

NICE_DIGITS = 12

_TRAILING_ZEROS_RE = re.compile(r"\.?0+$")


class RenderFormat(str, Enum):
    """Rendering forms selectable from the command line."""

    NICE = "nice"
    FIXED = "fixed"
    EXPONENTIAL = "exponential"
    PRECISION = "precision"


@dataclass
class RenderConfig:
    """Configuration for turning results into text."""

    format: RenderFormat = RenderFormat.NICE
    digits: int | None = None


def niceround(real: float) -> str:
    """Render a float with 12 fractional digits, trailing zeros removed."""
    fixed = f"{real:.{NICE_DIGITS}f}"
    if "." in fixed:
        fixed = _TRAILING_ZEROS_RE.sub("", fixed)
    return "0" if fixed == "-0" else fixed


def _join(real: str, imag: str, imag_value: float) -> str:
    if imag_value >= 0:
        return f"{real}+{imag}"
    return f"{real}{imag}"


def _shortest(n: float) -> str:
    """Shortest round-tripping text for a float, without a bare '.0'."""
    text = repr(float(n))
    return text[:-2] if text.endswith(".0") else text


def to_string(value: Complex) -> str:
    real = niceround(value.real)
    imag = niceround(value.imag)

    if imag == "0":
        return real
    if real == "0":
        return f"{imag}j"
    return _join(real, f"{imag}j", value.imag)


def to_fixed(value: Complex, digits: int | None = None) -> str:
    digits = digits or 0
    real = f"{value.real:.{digits}f}"

    if not value.imag:
        return real
    imag = f"{value.imag:.{digits}f}j"
    if not value.real:
        return imag
    return _join(real, imag, value.imag)


def _scientific(x: float, digits: int | None) -> str:
    if digits is None:
        return np.format_float_scientific(x, trim="-", exp_digits=1)
    return np.format_float_scientific(
        x, precision=digits, unique=False, trim="k" if digits else "-", exp_digits=1,
    )


def to_exponential(value: Complex, digits: int | None = None) -> str:
    """Polar form for complex values, scientific notation for real ones.

    Factors equal to 1 are left out, so a unit-modulus value renders as
    ``e^0.5jπ`` and ``-2j`` as ``2e^-0.5jπ``.
    """
    if not value.imag:
        return _scientific(value.real, digits)

    def factor(n: float) -> str:
        if n == 1:
            return ""
        return _shortest(round(n, digits) if digits else n)

    return f"{factor(value.abs)}e^{factor(value.angle / math.pi)}jπ"


def _significant(x: float, precision: int | None) -> str:
    if precision is None:
        return _shortest(x)
    if not 1 <= precision <= 100:
        raise ValueError(f"precision must be between 1 and 100, got {precision}")

    mantissa, _, exponent = f"{x:.{precision - 1}e}".partition("e")
    power = int(exponent)
    if power < -6 or power >= precision:
        return f"{mantissa}e{power:+d}"
    return f"{x:.{max(precision - 1 - power, 0)}f}"


def to_precision(value: Complex, precision: int | None = None) -> str:
    real = _significant(value.real, precision)

    if not value.imag:
        return real
    imag = _significant(value.imag, precision) + "j"
    if not value.real:
        return imag
    return _join(real, imag, value.imag)


def render(value: Complex, config: RenderConfig | None = None) -> str:
    """Render a value in the form selected by ``config`` (nice by default)."""
    config = config or RenderConfig()

    if config.format == RenderFormat.FIXED:
        return to_fixed(value, config.digits)
    if config.format == RenderFormat.EXPONENTIAL:
        return to_exponential(value, config.digits)
    if config.format == RenderFormat.PRECISION:
        return to_precision(value, config.digits)
    return to_string(value)
