#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_tree.py
-----------------

A self-balancing binary search tree based on the **Red-Black** algorithm.
It behaves like an ordered mapping (key → value) while guaranteeing
O(log n) insert, delete and lookup.

Features
~~~~~~~~
* `tree.insert(key, value)` – add a new key (DuplicateKeyError if present)
* `tree[key] = value`   – insert / replace
* `value = tree[key]`    – lookup (KeyError if missing)
* `tree.delete(key)` / `del tree[key]` – delete (KeyNotFoundError if missing)
* `tree.search(key)`     – the node holding *key*, or None
* `tree.minimum()`, `tree.maximum()`, `tree.successor(node)`,
  `tree.predecessor(node)` – ordered navigation by node
* iteration (`for key in tree:`) – keys in ascending order
* `RedBlackTree.from_sequence(values)` – keys 0..n-1
* `tree.validate()` – sanity-check that the red-black invariants hold
* `print(tree)` – indented drawing, each node tagged [R] or [B]

Every tree owns a **private sentinel node** (`self._nil`) that represents
all leaves and the root's parent, which eliminates `None` checks everywhere.

Typical usage
~~~~~~~~~~~~~
>>> from red_black_tree import RedBlackTree
>>> rbt = RedBlackTree()
>>> for k in (10, 20, 30):
...     _ = rbt.insert(k, str(k))
>>> rbt.search(20) is rbt.minimum().parent
True
>>> rbt.min_key(), rbt.max_key()
(10, 30)
>>> rbt.delete(20)
'20'
>>> list(rbt)
[10, 30]
"""

from __future__ import annotations

import logging
from typing import Tuple, TypeVar

from balanced_tree import BalancedTree
from tree_errors import InvariantError
from tree_node import BLACK, RED, TreeNode

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_ANSI_BLACK = "\x1b[1m\x1b[30m"
_ANSI_RED = "\x1b[1m\x1b[31m"
_ANSI_RESET = "\x1b[0m"

__all__ = ["RedBlackTree", "RED", "BLACK"]


class RedBlackTree(BalancedTree[K, V]):
    """
    An ordered mapping implemented with a red-black binary search tree.

    Invariants kept after every public operation:

    1. the root and the sentinel are BLACK;
    2. a RED node never has a RED child;
    3. every path from a node down to the sentinel crosses the same number
       of BLACK nodes (its *black-height*).
    """

    __slots__ = ()

    # ------------------------------------------------------------------
    #   Insert fix-up (preserves red-black properties)
    # ------------------------------------------------------------------
    def _fix_insert(self, z: TreeNode[K, V]) -> None:
        """Restore red-black properties after inserting node `z` (which is RED)."""
        while z.parent.is_red():
            if z.parent.is_left_child():
                y = z.grandparent.right  # uncle
                if y.is_red():
                    # Case 1 – recolour
                    z.parent.color = BLACK
                    y.color = BLACK
                    z.grandparent.color = RED
                    z = z.grandparent
                else:
                    if z.is_right_child():
                        # Case 2 – left-rotate at parent
                        z = z.parent
                        self._rotate_left(z)
                    # Case 3 – right-rotate at grandparent
                    z.parent.color = BLACK
                    z.grandparent.color = RED
                    self._rotate_right(z.grandparent)
            else:  # Mirror of the above (parent is a right child)
                y = z.grandparent.left  # uncle
                if y.is_red():
                    # Case 1 (mirror)
                    z.parent.color = BLACK
                    y.color = BLACK
                    z.grandparent.color = RED
                    z = z.grandparent
                else:
                    if z.is_left_child():
                        # Case 2 (mirror)
                        z = z.parent
                        self._rotate_right(z)
                    # Case 3 (mirror)
                    z.parent.color = BLACK
                    z.grandparent.color = RED
                    self._rotate_left(z.grandparent)
        self._root.color = BLACK

    # ------------------------------------------------------------------
    #   Deletion – splice, then repair
    # ------------------------------------------------------------------
    def _delete_node(self, z: TreeNode[K, V]) -> None:
        """Splice node `z` out of the tree and fix up any colour violations."""
        y = z  # node physically removed from its position
        y_original_color = y.color
        if z.has_no_left():
            x = z.right
            self._transplant(z, z.right)
        elif z.has_no_right():
            x = z.left
            self._transplant(z, z.left)
        else:
            # z has two children: its in-order successor `y` takes its place
            y = self._subtree_minimum(z.right)
            y_original_color = y.color
            x = y.right
            if y.parent is z:
                # Successor is directly the right child of `z`
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        if y_original_color == BLACK:
            self._fix_delete(x)

    # ------------------------------------------------------------------
    #   Delete fix-up (preserves red-black properties)
    # ------------------------------------------------------------------
    def _fix_delete(self, x: TreeNode[K, V]) -> None:
        """
        Restore red-black properties after deleting a black node.
        `x` is the node that moved into the removed node's position (it may
        be the sentinel, whose parent was set by ``_transplant``).
        """
        logger.debug("double-black fixup below %r", x.parent.key)
        while x is not self._root and x.is_black():
            if x is x.parent.left:
                w = x.parent.right  # sibling
                if w.is_red():
                    # Case 1 – sibling is red
                    w.color = BLACK
                    x.parent.color = RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.is_black() and w.right.is_black():
                    # Case 2 – both of sibling's children are black
                    w.color = RED
                    x = x.parent
                else:
                    if w.right.is_black():
                        # Case 3 – sibling's right child is black, left child is red
                        w.left.color = BLACK
                        w.color = RED
                        self._rotate_right(w)
                        w = x.parent.right
                    # Case 4 – sibling's right child is red
                    w.color = x.parent.color
                    x.parent.color = BLACK
                    w.right.color = BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                # Mirror of the above, with "left" and "right" swapped
                w = x.parent.left
                if w.is_red():
                    w.color = BLACK
                    x.parent.color = RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.is_black() and w.left.is_black():
                    w.color = RED
                    x = x.parent
                else:
                    if w.left.is_black():
                        w.right.color = BLACK
                        w.color = RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = BLACK
                    w.left.color = BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = BLACK

    # ------------------------------------------------------------------
    #   Validation
    # ------------------------------------------------------------------
    def black_height(self) -> int:
        """Number of BLACK nodes below the root on any path to the sentinel."""
        height = 0
        node = self._root
        while node is not self._nil:
            node = node.left
            if node.is_black():
                height += 1
        return height

    def _validate_balance(self) -> None:
        if self._nil.color != BLACK:
            raise InvariantError("Sentinel is not black")
        if self._root.color != BLACK:
            raise InvariantError("Root is not black")

        def dfs(node: TreeNode[K, V]) -> int:
            """Return the black-height of *node*, counting the sentinel as 1."""
            if node is self._nil:
                return 1

            # Red nodes have black children
            if node.is_red() and (node.left.is_red() or node.right.is_red()):
                raise InvariantError(f"Red node {node.key!r} has a red child")

            left_black = dfs(node.left)
            right_black = dfs(node.right)

            # All paths have the same black height
            if left_black != right_black:
                raise InvariantError(f"Black-height mismatch below {node.key!r}")

            return left_black + (1 if node.is_black() else 0)

        dfs(self._root)

    # ------------------------------------------------------------------
    #   Rendering
    # ------------------------------------------------------------------
    def _format_entry(self, node: TreeNode[K, V], ansi: bool) -> str:
        if ansi:
            colour = _ANSI_RED if node.is_red() else _ANSI_BLACK
            return f"{colour}{node.key}{_ANSI_RESET}({node.value})"
        return f"{node.key}({node.value}) [{'R' if node.is_red() else 'B'}]"

    def colors(self) -> Tuple[Tuple[K, bool], ...]:
        """``(key, color)`` pairs in key order, mostly for tests and debugging."""
        return tuple((node.key, node.color) for node in self._inorder_nodes())
