"""Sorting by insertion into an unbalanced binary tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Tree:
    value: int
    left: _Tree | None = None
    right: _Tree | None = None


def _add(root: _Tree | None, value: int) -> _Tree:
    node = _Tree(value)
    if root is None:
        return node
    t = root
    while True:
        if value < t.value:
            if t.left is None:
                t.left = node
                return root
            t = t.left
        else:
            if t.right is None:
                t.right = node
                return root
            t = t.right


def _in_order(t: _Tree | None) -> Iterator[int]:
    stack: list[_Tree] = []
    while stack or t is not None:
        while t is not None:
            stack.append(t)
            t = t.left
        t = stack.pop()
        yield t.value
        t = t.right


def sort(values: list[int]) -> None:
    """Sort values in place."""
    root: _Tree | None = None
    for v in values:
        root = _add(root, v)
    values[:] = list(_in_order(root))