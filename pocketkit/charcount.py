"""Count Unicode characters and UTF-8 encoding lengths."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass, field

UTF_MAX = 4

_RUNE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


@dataclass
class CharCounts:
    """Character counts, counts of encoding lengths, and invalid bytes."""

    counts: Counter = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


def _is_escaped_byte(ch: str) -> bool:
    return "\udc80" <= ch <= "\udcff"


def char_count(data: bytes) -> CharCounts:
    """Count the characters of UTF-8 data; each undecodable byte is invalid."""
    result = CharCounts()
    for ch in data.decode("utf-8", "surrogateescape"):
        if _is_escaped_byte(ch):
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[len(ch.encode("utf-8"))] += 1
    return result


def _quote_rune(ch: str) -> str:
    if ch in _RUNE_ESCAPES:
        body = _RUNE_ESCAPES[ch]
    elif ch.isprintable():
        body = ch
    else:
        cp = ord(ch)
        if cp < 0x80:
            body = f"\\x{cp:02x}"
        elif cp < 0x10000:
            body = f"\\u{cp:04x}"
        else:
            body = f"\\U{cp:08x}"
    return f"'{body}'"


def _report(result: CharCounts) -> str:
    lines = ["rune\tcount"]
    lines.extend(f"{_quote_rune(c)}\t{n}" for c, n in result.counts.items())
    lines.append("")
    lines.append("len\tcount")
    lines.extend(f"{i}\t{n}" for i, n in enumerate(result.utflen) if i > 0)
    if result.invalid > 0:
        lines.append("")
        lines.append(f"{result.invalid} invalid UTF-8 characters")
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Count the characters of standard input and print the tallies."""
    del argv
    try:
        data = sys.stdin.buffer.read()
    except OSError as err:
        print(f"charcount: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(_report(char_count(data)))
    return 0


if __name__ == "__main__":
    sys.exit(main())