"""Convert numbers between Celsius, Fahrenheit and Kelvin."""

from __future__ import annotations

import sys

from pocketkit.tempconv import (
    Celsius,
    Fahrenheit,
    _format_g,
    _parse_float,
    c_to_f,
    c_to_k,
    f_to_c,
)

_BOILING_F = 212.0
_FREEZING_F = 32.0


def describe(value: float) -> str:
    """Describe value read as Fahrenheit and as Celsius, on two lines."""
    f = Fahrenheit(value)
    c = Celsius(value)
    return f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}\n{c} = {c_to_k(c)}"


def boiling_point() -> str:
    """Return the boiling point of water in both scales."""
    f = _BOILING_F
    c = (f - 32) * 5 / 9
    return f"boiling point = {_format_g(f)}°F or {_format_g(c)}°C"


def ftoc_table() -> list[str]:
    """Return the freezing and boiling points converted to Celsius."""
    return [f"{Fahrenheit(f)} = {f_to_c(f)}" for f in (_FREEZING_F, _BOILING_F)]


def main(argv: list[str] | None = None) -> int:
    """Print the conversions of each numeric argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    for arg in args:
        try:
            value = _parse_float(arg)
        except ValueError as err:
            print(f"cf: {err}", file=sys.stderr)
            return 1
        print(describe(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())