"""Network interface flags used as a bit field."""

from __future__ import annotations

import enum


class Flags(enum.IntFlag):
    """Interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16


def is_up(v: int) -> bool:
    """Report whether the UP flag is set."""
    return int(v) & Flags.UP == Flags.UP


def turn_down(v: int) -> Flags:
    """Return v with the UP flag cleared."""
    return Flags(int(v) & ~int(Flags.UP))


def set_broadcast(v: int) -> Flags:
    """Return v with the BROADCAST flag set."""
    return Flags(int(v) | int(Flags.BROADCAST))


def is_cast(v: int) -> bool:
    """Report whether BROADCAST or MULTICAST is set."""
    return int(v) & int(Flags.BROADCAST | Flags.MULTICAST) != 0