"""Report lines that occur more than once in files or standard input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Iterator


def _chomp(line: str) -> str:
    """Drop one trailing line terminator, as a line scanner would."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _scan_lines(text: str) -> Iterator[str]:
    """Yield the lines of text; a final newline does not start an empty line."""
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield _chomp(piece)


def _read_text(path: str) -> str:
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")


def count_lines(lines: Iterable[str]) -> Counter[str]:
    """Count how often each line occurs; line terminators are ignored."""
    return Counter(_chomp(line) for line in lines)


def count_by_file(
    paths: Iterable[str],
) -> tuple[Counter[str], dict[str, list[str]], list[OSError]]:
    """Count lines across files and record which files each line appears in.

    Returns the counts, a mapping from line to the files holding it (in
    first-seen order), and the errors of files that could not be read.
    """
    counts: Counter[str] = Counter()
    files: dict[str, list[str]] = {}
    errors: list[OSError] = []
    for path in paths:
        try:
            text = _read_text(path)
        except OSError as err:
            errors.append(err)
            continue
        for line in _scan_lines(text):
            counts[line] += 1
            holders = files.setdefault(line, [])
            if path not in holders:
                holders.append(path)
    return counts, files, errors


def split_count(paths: Iterable[str]) -> tuple[Counter[str], list[OSError]]:
    """Count the pieces of each whole file split on newlines.

    Unlike line scanning, a trailing newline yields an empty final piece and
    carriage returns are kept.
    """
    counts: Counter[str] = Counter()
    errors: list[OSError] = []
    for path in paths:
        try:
            text = _read_text(path)
        except OSError as err:
            errors.append(err)
            continue
        counts.update(text.split("\n"))
    return counts, errors


def main(argv: list[str] | None = None) -> int:
    """Print duplicated lines of the named files, or of standard input."""
    paths = sys.argv[1:] if argv is None else list(argv)
    if not paths:
        for line, n in count_lines(sys.stdin).items():
            if n > 1:
                print(f"{n}\t{line}")
        return 0

    counts, files, errors = count_by_file(paths)
    for err in errors:
        print(f"dup: {err}", file=sys.stderr)
    for line, n in counts.items():
        if n > 1:
            print(f"{n}\t{line}\t\t{','.join(files[line])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())