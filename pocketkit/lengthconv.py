"""Feet and meters, and conversions between them."""

from __future__ import annotations

import sys

from pocketkit.tempconv import _format_g, _parse_float


class Feet(float):
    """A length in feet."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{_format_g(self)} feet"

    def __repr__(self) -> str:
        return f"Feet({float(self)!r})"


class Meters(float):
    """A length in meters."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{_format_g(self)} meters"

    def __repr__(self) -> str:
        return f"Meters({float(self)!r})"


FOOT_IN_METERS = Meters(0.3048)
METER_IN_FEET = Feet(3.28084)


def f_to_m(f: float) -> Meters:
    """Convert a length in feet to meters."""
    return Meters(float(f) * float(FOOT_IN_METERS))


def m_to_f(m: float) -> Feet:
    """Convert a length in meters to feet."""
    return Feet(float(m) * float(METER_IN_FEET))


def convert_length(text: str) -> str:
    """Read text as meters and as feet and describe both conversions."""
    n = _parse_float(text)
    mn, fn = Meters(n), Feet(n)
    return f"{mn} = {m_to_f(mn)}, {fn} = {f_to_m(fn)}"


def main(argv: list[str] | None = None) -> int:
    """Convert each argument, or each line of standard input if none."""
    args = sys.argv[1:] if argv is None else list(argv)
    source = args if args else (line.rstrip("\r\n") for line in sys.stdin)
    for text in source:
        try:
            print(convert_length(text))
        except ValueError as err:
            print(f"length: {err}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())