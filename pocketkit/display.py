"""Print the structure of a value, one leaf per line."""

from __future__ import annotations

import dataclasses
import sys
import types
from collections.abc import Mapping
from typing import Any, TextIO

from pocketkit.format import _type_name, format_atom

_ATOMS = (bool, int, float, complex, str, bytes, bytearray)


def display(name: str, x: Any, out: TextIO | None = None) -> None:
    """Write every leaf of x, labelled by its path from name.

    Raises ValueError if x contains itself.
    """
    stream = sys.stdout if out is None else out
    stream.write(f"Display {name} ({_type_name(x)}):\n")
    if x is None:
        stream.write(f"{name} = invalid\n")
        return
    _walk(name, x, stream, set())


def _children(path: str, v: Any) -> list[tuple[str, Any]] | None:
    """The labelled parts of v, or None if v is a leaf."""
    if isinstance(v, Mapping):
        return [(f"{path}[{format_atom(k)}]", val) for k, val in v.items()]
    if isinstance(v, (list, tuple)):
        return [(f"{path}[{i}]", item) for i, item in enumerate(v)]
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        return [(f"{path}.{f.name}", getattr(v, f.name)) for f in dataclasses.fields(v)]
    if callable(v) or isinstance(v, types.ModuleType):
        return None
    attrs = getattr(v, "__dict__", None)
    if isinstance(attrs, dict):
        return [(f"{path}.{k}", val) for k, val in attrs.items()]
    return None


def _walk(path: str, v: Any, out: TextIO, active: set[int]) -> None:
    if v is None:
        out.write(f"{path} = nil\n")
        return
    children = None if isinstance(v, _ATOMS) else _children(path, v)
    if children is None:
        out.write(f"{path} = {format_atom(v)}\n")
        return
    if id(v) in active:
        raise ValueError(f"display: cycle at {path}")
    active.add(id(v))
    try:
        for child_path, child in children:
            _walk(child_path, child, out, active)
    finally:
        active.discard(id(v))