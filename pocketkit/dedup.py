"""Print each distinct line once, in the order first seen."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from pocketkit.dup import _chomp


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line the first time it appears."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def main(argv: list[str] | None = None) -> int:
    """Print the distinct lines of standard input."""
    del argv
    try:
        for line in dedup(_chomp(raw) for raw in sys.stdin):
            print(line)
    except OSError as err:
        print(f"dedup: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())