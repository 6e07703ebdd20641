"""Celsius, Fahrenheit and Kelvin temperatures and conversions."""

from __future__ import annotations

import math
from decimal import Decimal

__all__ = [
    "ABSOLUTE_ZERO_C",
    "BOILING_C",
    "FREEZING_C",
    "Celsius",
    "Fahrenheit",
    "Kelvin",
    "c_to_f",
    "c_to_k",
    "f_to_c",
]


def _format_g(value: float) -> str:
    """Format a float with the shortest digits, switching to exponent form
    when the decimal exponent is below -4 or at least 6."""
    x = float(value)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(x)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent
    exp10 = point - 1
    prefix = "-" if sign else ""

    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _parse_float(text: str) -> float:
    """Parse a decimal number strictly: no surrounding blanks or underscores."""
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid number {text!r}")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"invalid number {text!r}") from None


class Celsius(float):
    """A temperature in degrees Celsius."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{_format_g(self)}°C"

    def __repr__(self) -> str:
        return f"Celsius({float(self)!r})"


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{_format_g(self)}°F"

    def __repr__(self) -> str:
        return f"Fahrenheit({float(self)!r})"


class Kelvin(float):
    """A temperature in kelvins."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{_format_g(self)}°K"

    def __repr__(self) -> str:
        return f"Kelvin({float(self)!r})"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(float(c) * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((float(f) - 32) * 5 / 9)


def c_to_k(c: float) -> Kelvin:
    """Convert a Celsius temperature to Kelvin."""
    return Kelvin(float(c) - float(ABSOLUTE_ZERO_C))