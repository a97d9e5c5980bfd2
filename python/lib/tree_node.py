#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
tree_node.py
------------

The node shared by every balanced tree in this package.

A single class covers both kinds of node: real (internal) nodes that hold a
key/value pair, and the per-tree *sentinel* that stands for "no child",
"no parent" and "empty tree".  The two differ only in which fields are
meaningful, so they are told apart by the ``is_sentinel`` flag rather than by
subclassing.

Both balancing strategies keep their metadata on the same node:

* ``color``  – ``RED`` / ``BLACK``, read by the red-black engine;
* ``height`` – longest downward path in edges, read by the AVL engine.
  The sentinel has height ``-1`` so that a leaf has height ``0``.

Typical usage
~~~~~~~~~~~~~
>>> nil = TreeNode.make_sentinel()
>>> node = TreeNode(5, "five", nil)
>>> node.left is nil and node.parent is nil
True
>>> node.is_red(), node.height
(True, 0)
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

# ----------------------------------------------------------------------
#  Node colour constants – using simple booleans is fastest
# ----------------------------------------------------------------------
RED = True
BLACK = False


class TreeNode(Generic[K, V]):
    """One stored key/value pair (or the sentinel of a tree)."""

    __slots__ = ("key", "value", "color", "height", "left", "right", "parent", "is_sentinel")

    def __init__(self, key: K, value: V, sentinel: Optional["TreeNode[K, V]"]) -> None:
        self.key = key
        self.value = value
        self.color = RED
        self.height = 0
        self.is_sentinel = False
        self.left: TreeNode[K, V] = sentinel  # type: ignore[assignment]
        self.right: TreeNode[K, V] = sentinel  # type: ignore[assignment]
        self.parent: TreeNode[K, V] = sentinel  # type: ignore[assignment]

    @classmethod
    def make_sentinel(cls) -> "TreeNode[Any, Any]":
        """Return a fresh sentinel: BLACK, height -1, linked to itself."""
        nil: TreeNode[Any, Any] = cls(None, None, None)
        nil.color = BLACK
        nil.height = -1
        nil.is_sentinel = True
        nil.left = nil.right = nil.parent = nil
        return nil

    # ------------------------------------------------------------------
    #   Structural predicates
    # ------------------------------------------------------------------
    @property
    def grandparent(self) -> "TreeNode[K, V]":
        # The sentinel's parent is itself, so this never falls off the tree.
        return self.parent.parent

    def is_left_child(self) -> bool:
        return not self.parent.is_sentinel and self.parent.left is self

    def is_right_child(self) -> bool:
        return not self.parent.is_sentinel and self.parent.right is self

    def is_root(self) -> bool:
        return not self.is_sentinel and self.parent.is_sentinel

    def has_no_left(self) -> bool:
        return self.left.is_sentinel

    def has_no_right(self) -> bool:
        return self.right.is_sentinel

    def is_leaf(self) -> bool:
        return self.has_no_left() and self.has_no_right()

    def is_detached(self) -> bool:
        """True once the node has been deleted from its tree."""
        return self.left is None

    # ------------------------------------------------------------------
    #   Balancing metadata
    # ------------------------------------------------------------------
    def is_red(self) -> bool:
        return self.color == RED

    def is_black(self) -> bool:
        return self.color == BLACK

    def balance_factor(self) -> int:
        return self.right.height - self.left.height

    def update_height(self) -> None:
        self.height = 1 + max(self.left.height, self.right.height)

    def __repr__(self) -> str:
        if self.is_sentinel:
            return "<NIL>"
        col = "R" if self.color == RED else "B"
        return f"<{col} {self.key!r}:{self.value!r} h={self.height}>"
