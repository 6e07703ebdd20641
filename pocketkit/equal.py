"""Deep equality of arbitrary values, safe on cyclic structures."""

from __future__ import annotations

from typing import Any

_SCALARS = (bool, int, float, complex, str, bytes, bytearray, range, set, frozenset)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def _equal(x: Any, y: Any, seen: set[tuple[int, int, type]]) -> bool:
    if x is None or y is None:
        return x is None and y is None
    if type(x) is not type(y):
        return False
    if isinstance(x, _SCALARS):
        return x == y
    if callable(x):
        return x is y

    if x is y:
        return True
    key = (id(x), id(y), type(x))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        if len(x) != len(y):
            return False
        return all(k in y and _equal(v, y[k], seen) for k, v in x.items())
    attrs = getattr(x, "__dict__", None)
    slots = _slot_names(type(x))
    if isinstance(attrs, dict) or slots:
        if isinstance(attrs, dict) and not _equal(attrs, vars(y), seen):
            return False
        missing = object()
        return all(
            _equal(getattr(x, s, missing), getattr(y, s, missing), seen)
            if hasattr(x, s) and hasattr(y, s)
            else hasattr(x, s) == hasattr(y, s)
            for s in slots
        )
    return x == y


def equal(x: Any, y: Any) -> bool:
    """Report whether x and y are deeply equal.

    Values must have the same type. Dictionary keys are compared with ==,
    not deeply; functions are equal only to themselves.
    """
    return _equal(x, y, set())