#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
persistent_set.py
-----------------

A persistent (fully versioned) ordered set backed by an unbalanced binary
search tree.

Every insertion copies only the nodes on the path from the root to the new
leaf; all other subtrees are shared with the previous version.  The root of
each version is kept in ``history``, so any earlier state can still be read
after later insertions.  Nodes are never modified once built.

Typical usage
~~~~~~~~~~~~~
>>> s = PersistentSet()
>>> s.insert(5, 2, 8)
PersistentSet([2, 5, 8])
>>> s.snapshot(0), s.snapshot(1)
([5], [2, 5])
>>> s.version_count
3
"""

from __future__ import annotations

import logging
from typing import Any, Generator, Generic, Iterable, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _SetNode(Generic[T]):
    """Immutable tree cell; ``None`` children mean "no child"."""

    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value: T,
        left: Optional["_SetNode[T]"] = None,
        right: Optional["_SetNode[T]"] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right


class PersistentSet(Generic[T]):
    """Ordered set whose every insertion produces a new, shared-structure version."""

    __slots__ = ("_root", "_history", "_sizes")

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[_SetNode[T]] = None
        self._history: List[Optional[_SetNode[T]]] = []
        self._sizes: List[int] = []
        if values is not None:
            self.insert(*values)

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def add(self, value: T) -> "PersistentSet[T]":
        """Record a new version containing *value* (a duplicate repeats the root)."""
        root, added = self._path_copy_insert(self._root, value)
        size = (self._sizes[-1] if self._sizes else 0) + (1 if added else 0)
        self._root = root
        self._history.append(root)
        self._sizes.append(size)
        logger.debug("PersistentSet version %d: %r (added=%s)", len(self._history) - 1, value, added)
        return self

    __lshift__ = add

    def insert(self, *values: T) -> "PersistentSet[T]":
        for value in values:
            self.add(value)
        return self

    @staticmethod
    def _path_copy_insert(
        root: Optional[_SetNode[T]], value: T
    ) -> Tuple[Optional[_SetNode[T]], bool]:
        path: List[Tuple[_SetNode[T], bool]] = []
        cur = root
        while cur is not None:
            if value < cur.value:  # type: ignore[operator]
                path.append((cur, True))
                cur = cur.left
            elif cur.value < value:  # type: ignore[operator]
                path.append((cur, False))
                cur = cur.right
            else:
                return root, False

        # Rebuild the path bottom-up; off-path subtrees are shared.
        new: _SetNode[T] = _SetNode(value)
        for node, went_left in reversed(path):
            if went_left:
                new = _SetNode(node.value, new, node.right)
            else:
                new = _SetNode(node.value, node.left, new)
        return new, True

    # ------------------------------------------------------------------
    #   Versions
    # ------------------------------------------------------------------
    @property
    def history(self) -> Tuple[Optional[_SetNode[T]], ...]:
        return tuple(self._history)

    @property
    def version_count(self) -> int:
        return len(self._history)

    def _version_root(self, version: Optional[int]) -> Optional[_SetNode[T]]:
        if version is None:
            return self._root
        # Raises IndexError for unknown versions, negative indices allowed.
        return self._history[version]

    def snapshot(self, version: int) -> List[T]:
        """Sorted values of *version* (0 is the state after the first insert)."""
        return list(self._iter_values(self._version_root(version)))

    # ------------------------------------------------------------------
    #   Set protocol (current version)
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._sizes[-1] if self._sizes else 0

    def __iter__(self) -> Generator[T, None, None]:
        return self._iter_values(self._root)

    def __contains__(self, value: Any) -> bool:
        cur = self._root
        while cur is not None:
            if value < cur.value:
                cur = cur.left
            elif cur.value < value:
                cur = cur.right
            else:
                return True
        return False

    @staticmethod
    def _iter_values(node: Optional[_SetNode[T]]) -> Generator[T, None, None]:
        stack: List[_SetNode[T]] = []
        cur = node
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.value
            cur = cur.right

    # ------------------------------------------------------------------
    #   Rendering
    # ------------------------------------------------------------------
    def render(self, version: Optional[int] = None) -> str:
        """Indented drawing of a version (default: the current one)."""
        root = self._version_root(version)
        if root is None:
            return ""
        lines: List[str] = []
        self._render_subtree(root, "", True, lines)
        return "\n".join(lines) + "\n"

    def _render_subtree(self, node: _SetNode[T], prefix: str, is_left: bool, lines: List[str]) -> None:
        if node.right is not None:
            self._render_subtree(node.right, prefix + ("│   " if is_left else "    "), False, lines)
        lines.append(prefix + ("└── " if is_left else "┌── ") + str(node.value))
        if node.left is not None:
            self._render_subtree(node.left, prefix + ("    " if is_left else "│   "), True, lines)

    def format_history(self) -> str:
        return "".join(
            f"state #{state:03d}:\n{self.render(state)}" for state in range(len(self._history))
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"PersistentSet({list(self)!r})"
