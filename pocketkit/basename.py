"""Strip directory components and a trailing suffix from file names."""

from __future__ import annotations

import sys


def basename(s: str) -> str:
    """Remove everything up to the last '/' and from the last '.' on.

    e.g. a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def basename_scan(s: str) -> str:
    """Same result as basename, found by partitioning from the right."""
    _, _, s = s.rpartition("/")
    head, dot, _ = s.rpartition(".")
    return head if dot else s


def main(argv: list[str] | None = None) -> int:
    """Print the base name of each line of standard input."""
    del argv
    for line in sys.stdin:
        line = line.removesuffix("\n").removesuffix("\r")
        print(basename(line))
    return 0


if __name__ == "__main__":
    sys.exit(main())