"""Slice helpers: formatting, growth by doubling, filtering and reversal."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator

from pocketkit.servers import _quote, _quote_list

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1


class IntSlice:
    """A window of ints over a shared backing array, with a capacity.

    Re-slicing up to the capacity shares storage with the original, so
    writes through one view are seen through the other.
    """

    __slots__ = ("_array", "_offset", "_len", "_cap")

    def __init__(self, values: Iterable[int] = (), cap: int | None = None) -> None:
        data = [int(v) for v in values]
        n = len(data)
        capacity = n if cap is None else cap
        if capacity < n:
            raise ValueError(f"capacity {capacity} is less than length {n}")
        data.extend([0] * (capacity - n))
        self._array = data
        self._offset = 0
        self._len = n
        self._cap = capacity

    @classmethod
    def make(cls, length: int, cap: int | None = None) -> IntSlice:
        """Return a zeroed slice of the given length and capacity."""
        return cls([0] * length, cap)

    @classmethod
    def _view(cls, array: list[int], offset: int, length: int, cap: int) -> IntSlice:
        view = cls.__new__(cls)
        view._array, view._offset, view._len, view._cap = array, offset, length, cap
        return view

    @property
    def cap(self) -> int:
        """Number of elements available without reallocation."""
        return self._cap

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[int]:
        return iter(self._array[self._offset:self._offset + self._len])

    def _index(self, index: int) -> int:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError(f"index out of range [{index}] with length {self._len}")
        return self._offset + index

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step is not None:
                raise ValueError("slices do not take a step")
            start = 0 if index.start is None else index.start
            stop = self._len if index.stop is None else index.stop
            if not 0 <= start <= stop <= self._cap:
                raise IndexError(f"slice bounds out of range [{start}:{stop}]")
            return self._view(
                self._array, self._offset + start, stop - start, self._cap - start
            )
        return self._array[self._index(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._array[self._index(index)] = int(value)

    def _copy_from(self, src: Iterable[int]) -> int:
        """Copy as many elements of src as fit; return how many were copied."""
        items = list(src)[: self._len]
        self._array[self._offset:self._offset + len(items)] = items
        return len(items)

    def reverse(self) -> None:
        """Reverse the elements in place."""
        end = self._offset + self._len
        self._array[self._offset:end] = self._array[self._offset:end][::-1]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (IntSlice, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IntSlice({list(self)!r}, cap={self._cap})"

    def __str__(self) -> str:
        return "[" + " ".join(map(str, self)) + "]"


def _as_slice(x: IntSlice | Iterable[int]) -> IntSlice:
    return x if isinstance(x, IntSlice) else IntSlice(x)


def ints_to_string(values: Iterable[int]) -> str:
    """Format ints like a list literal: [1, 2, 3]."""
    return "[" + ", ".join(str(int(v)) for v in values) + "]"


def _grow(x: IntSlice, extra: int) -> IntSlice:
    """Return x extended by extra elements, reallocating by doubling if needed."""
    zlen = len(x) + extra
    if zlen <= x.cap:
        return x[:zlen]
    z = IntSlice.make(zlen, max(zlen, 2 * len(x)))
    z._copy_from(x)
    return z


def append_int(x: IntSlice | Iterable[int], y: int) -> IntSlice:
    """Append y to x, sharing x's storage when there is room."""
    x = _as_slice(x)
    n = len(x)
    z = _grow(x, 1)
    z[n] = y
    return z


def append_slice(x: IntSlice | Iterable[int], *args: int) -> IntSlice:
    """Append all args to x, sharing x's storage when there is room."""
    x = _as_slice(x)
    n = len(x)
    z = _grow(x, len(args))
    z[n:]._copy_from(args)
    return z


def nonempty(strings: list[str]) -> list[str]:
    """Return the non-empty strings, also moving them to the front of strings."""
    kept = [s for s in strings if s != ""]
    strings[: len(kept)] = kept
    return kept


def reverse(s: IntSlice | list[int]) -> None:
    """Reverse s in place."""
    s.reverse()


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"strconv.ParseInt: parsing {_quote(text)}: invalid syntax")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"strconv.ParseInt: parsing {_quote(text)}: value out of range")
    return value


def main(argv: list[str] | None = None) -> int:
    """Show the slice helpers, then reverse the integers on each input line."""
    del argv
    print(ints_to_string([1, 2, 3]))

    x = IntSlice()
    for i in range(10):
        y = append_int(x, i)
        print(f"{i}  cap={y.cap}\t{y}")
        x = y

    data = ["one", "", "three"]
    print(_quote_list(nonempty(data)))
    print(_quote_list(data))

    a = IntSlice(range(6))
    reverse(a)
    print(a)

    s = IntSlice(range(6))
    reverse(s[:2])
    reverse(s[2:])
    reverse(s)
    print(s)

    for line in sys.stdin:
        try:
            ints = [_parse_int(field) for field in line.split()]
        except ValueError as err:
            print(err, file=sys.stderr)
            continue
        ints.reverse()
        print("[" + " ".join(map(str, ints)) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())