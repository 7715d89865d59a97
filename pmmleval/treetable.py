"""Lookup table stored as a tree with one level per column."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_NO_KEY = object()


@dataclass
class TreeTableNode(Generic[K, V]):
    """One column level of a tree table."""

    value: V | None = None
    children: dict[K, TreeTableNode[K, V]] = field(default_factory=dict)

    def add(self, keys: Iterable[K], value: V) -> None:
        """Store ``value`` under the row described by ``keys``."""
        node = self
        for key in keys:
            node = node.children.setdefault(key, TreeTableNode())
        node.value = value

    def get(self, keys: Iterable[K]) -> V | None:
        """Return the value of the row described by ``keys``.

        Keys beyond a leaf are ignored; an unknown key, or too few keys,
        raises KeyError.
        """
        node = self
        remaining = iter(keys)
        while node.children:
            key = next(remaining, _NO_KEY)
            if key is _NO_KEY:
                raise KeyError("not enough keys for the table")
            node = node.children[key]
        return node.value


@dataclass
class TreeTable(Generic[K, V]):
    """Table whose lookup cost grows with the number of columns only."""

    root: TreeTableNode[K, V] = field(default_factory=TreeTableNode)

    def add(self, keys: Iterable[K], value: V) -> None:
        self.root.add(keys, value)

    def get(self, keys: Iterable[K]) -> V | None:
        return self.root.get(keys)