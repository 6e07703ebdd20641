"""Population count (number of set bits) of 64-bit unsigned integers."""

from __future__ import annotations

_MAX_UINT64 = (1 << 64) - 1


def _build_table() -> tuple[int, ...]:
    table = [0] * 256
    for i in range(1, 256):
        table[i] = table[i // 2] + (i & 1)
    return tuple(table)


_PC = _build_table()


def _check(x: int) -> int:
    if not 0 <= x <= _MAX_UINT64:
        raise ValueError(f"{x} is not an unsigned 64-bit integer")
    return x


def pop_count(x: int) -> int:
    """Return the number of set bits in x using a byte lookup table."""
    return sum(_PC[b] for b in _check(x).to_bytes(8, "little"))


def pop_count_loop(x: int) -> int:
    """Return the number of set bits in x, shifting through its eight bytes."""
    _check(x)
    return sum(_PC[(x >> (i * 8)) & 0xFF] for i in range(8))


def pop_count_shift(x: int) -> int:
    """Return the number of set bits in x by testing each of 64 bits."""
    _check(x)
    return sum((x >> i) & 1 for i in range(64))


def pop_count_clear(x: int) -> int:
    """Return the number of set bits in x by clearing the lowest set bit."""
    _check(x)
    count = 0
    while x:
        x &= x - 1
        count += 1
    return count