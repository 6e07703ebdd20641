"""Insert thousands separators into decimal number strings."""

from __future__ import annotations

import sys


def comma(s: str) -> str:
    """Insert commas in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def _group(s: str) -> str:
    lead = len(s) % 3
    out = []
    for i, ch in enumerate(s, start=1):
        out.append(ch)
        if (i - lead) % 3 == 0 and i < len(s):
            out.append(",")
    return "".join(out)


def comma1(s: str) -> str:
    """Insert commas in a non-negative decimal integer string, iteratively."""
    return _group(s)


def comma2(s: str) -> str:
    """Insert commas in a decimal string with optional sign and fraction."""
    sign = ""
    if s.startswith(("+", "-")):
        sign, s = s[0], s[1:]
    suffix = ""
    dot = s.rfind(".")
    if dot > 0:
        s, suffix = s[:dot], s[dot:]
    return sign + _group(s) + suffix


def anagrams(a: str, b: str) -> bool:
    """Report whether a and b have equal length and b holds every char of a."""
    if len(a.encode("utf-8")) != len(b.encode("utf-8")):
        return False
    return all(ch in b for ch in a)


def main(argv: list[str] | None = None) -> int:
    """Print each argument with commas inserted."""
    args = sys.argv[1:] if argv is None else list(argv)
    for arg in args:
        print(f"  {comma(arg)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())