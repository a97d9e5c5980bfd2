#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
avl_tree.py
-----------

A self-balancing binary search tree based on the **AVL** algorithm.

Each node stores its height (the sentinel's height is -1, a leaf's is 0).
After an insertion or a deletion the tree walks from the lowest changed node
up to the root, refreshing heights and rotating wherever the balance factor
``height(right) - height(left)`` leaves ``[-1, 1]``.

The public API is the same as ``RedBlackTree``'s (see ``balanced_tree.py``).

Typical usage
~~~~~~~~~~~~~
>>> from avl_tree import AVLTree
>>> tree = AVLTree.from_sequence(["a", "b", "c", "d", "e"])
>>> tree.height()
2
>>> tree[3]
'd'
"""

from __future__ import annotations

import logging
from typing import TypeVar

from balanced_tree import BalancedTree
from tree_errors import InvariantError
from tree_node import TreeNode

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class AVLTree(BalancedTree[K, V]):
    """An ordered mapping whose subtrees never differ in height by more than one."""

    __slots__ = ()

    def height(self) -> int:
        """Height of the root (kept up to date, so this is O(1))."""
        return self._root.height

    def _after_rotate(self, lowered: TreeNode[K, V], raised: TreeNode[K, V]) -> None:
        # `lowered` is now a child of `raised`: refresh bottom-up.
        lowered.update_height()
        raised.update_height()

    def _fix_insert(self, node: TreeNode[K, V]) -> None:
        # The new leaf already has height 0.
        self._rebalance_upward(node.parent)

    def _delete_node(self, z: TreeNode[K, V]) -> None:
        """Splice `z` out, then rebalance from the lowest node whose subtree changed."""
        if z.has_no_left():
            start = z.parent
            self._transplant(z, z.right)
        elif z.has_no_right():
            start = z.parent
            self._transplant(z, z.left)
        else:
            y = self._subtree_minimum(z.right)
            if y.parent is z:
                start = y
            else:
                start = y.parent
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
        self._rebalance_upward(start)

    def _rebalance_upward(self, node: TreeNode[K, V]) -> None:
        """Refresh heights from `node` to the root, rotating where unbalanced."""
        while node is not self._nil:
            node.update_height()
            balance = node.balance_factor()
            if balance < -1 or balance > 1:
                node = self._rebalance(node)
            node = node.parent

    def _rebalance(self, node: TreeNode[K, V]) -> TreeNode[K, V]:
        """Restore balance at `node` and return the new root of its subtree."""
        if node.balance_factor() < -1:
            left = node.left
            # Zig-zag: make the left child left-heavy first
            if left.right.height > left.left.height:
                logger.debug("AVL left-right case at %r", node.key)
                self._rotate_left(left)
            self._rotate_right(node)
        else:
            right = node.right
            if right.left.height > right.right.height:
                logger.debug("AVL right-left case at %r", node.key)
                self._rotate_right(right)
            self._rotate_left(node)
        return node.parent

    def _validate_balance(self) -> None:
        if self._nil.height != -1:
            raise InvariantError("Sentinel height is not -1")

        def dfs(node: TreeNode[K, V]) -> int:
            if node is self._nil:
                return -1
            left = dfs(node.left)
            right = dfs(node.right)
            expected = 1 + max(left, right)
            if node.height != expected:
                raise InvariantError(
                    f"Stored height {node.height} of {node.key!r} should be {expected}"
                )
            if abs(right - left) > 1:
                raise InvariantError(f"Node {node.key!r} is out of balance ({right - left})")
            return expected

        dfs(self._root)

    def _format_entry(self, node: TreeNode[K, V], ansi: bool) -> str:
        return f"{node.key}({node.value})|{node.height}|"
