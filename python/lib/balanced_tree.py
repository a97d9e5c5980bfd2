#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
balanced_tree.py
----------------

The part of a self-balancing binary search tree that does not depend on the
balancing strategy.  ``RedBlackTree`` and ``AVLTree`` derive from
``BalancedTree`` and only supply the fixup hooks.

What lives here
~~~~~~~~~~~~~~~
* ownership of the per-tree sentinel (``self._nil``) and the root reference
* plain BST insertion (duplicate keys are rejected before anything changes)
* the rotation primitives ``_rotate_left`` / ``_rotate_right``
* query operations: ``search``, ``minimum``, ``maximum``, ``successor``,
  ``predecessor``
* the ``dict``-like protocol (``tree[key]``, ``del tree[key]``, iteration …)
* bulk construction from a sequence (``from_sequence``)
* ``render()`` – an indented drawing of the tree, for debugging
* ``validate()`` – checks every invariant and raises ``InvariantError``

Hooks a balancing engine must implement
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
``_fix_insert(node)``        restore balance after ``node`` was linked in
``_delete_node(node)``       splice ``node`` out and restore balance
``_validate_balance()``      raise ``InvariantError`` if the engine's
                             invariant does not hold
``_format_entry(node, ansi)`` one line of ``render()``

Keys only need ``<``; two keys are considered equal when neither is smaller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import (
    Any,
    Generator,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from tree_errors import DuplicateKeyError, InvariantError, KeyNotFoundError
from tree_node import TreeNode

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T", bound="BalancedTree[Any, Any]")


class BalancedTree(Generic[K, V]):
    """
    Ordered mapping backed by a binary search tree with a private sentinel.

    Parameters
    ----------
    items : iterable of (key, value)   optional
        Pairs inserted one after another with ``tree[key] = value``
        (a repeated key replaces the earlier value).
    """

    __slots__ = ("_root", "_nil", "_size")

    def __init__(self, items: Optional[Iterable[Tuple[K, V]]] = None) -> None:
        # Owned by this instance only; never returned to callers.
        self._nil: TreeNode[K, V] = TreeNode.make_sentinel()
        self._root: TreeNode[K, V] = self._nil
        self._size: int = 0

        if items is not None:
            for key, value in items:
                self[key] = value

    @classmethod
    def from_sequence(cls: Type[T], values: Sequence[Any]) -> T:
        """
        Build a tree whose keys are the positions ``0..n-1`` of *values*.

        Raises ``TypeError`` when *values* is not a sequence (``str`` and
        ``bytes`` are refused as well: they are text, not a list of values).
        """
        if not isinstance(values, Sequence) or isinstance(values, (str, bytes, bytearray)):
            raise TypeError(
                f"no implicit conversion of {type(values).__name__} into a sequence"
            )
        tree = cls()
        for index, value in enumerate(values):
            tree.insert(index, value)
        return tree

    # ------------------------------------------------------------------
    #   Helper look-ups (internal)
    # ------------------------------------------------------------------
    def _search_node(self, key: K) -> TreeNode[K, V]:
        """Return the node that holds *key* or the sentinel if not found."""
        cur = self._root
        while cur is not self._nil:
            if key < cur.key:  # type: ignore[operator]
                cur = cur.left
            elif cur.key < key:  # type: ignore[operator]
                cur = cur.right
            else:
                return cur
        return self._nil

    def _subtree_minimum(self, node: TreeNode[K, V]) -> TreeNode[K, V]:
        while node.left is not self._nil:
            node = node.left
        return node

    def _subtree_maximum(self, node: TreeNode[K, V]) -> TreeNode[K, V]:
        while node.right is not self._nil:
            node = node.right
        return node

    def _check_handle(self, node: Optional[TreeNode[K, V]]) -> TreeNode[K, V]:
        """Make sure *node* is a live node of this very tree."""
        if not isinstance(node, TreeNode) or node.is_sentinel:
            raise ValueError(f"{node!r} is not a tree node")
        if node.is_detached():
            raise ValueError(f"{node!r} is no longer in the tree")
        top = node
        while not top.parent.is_sentinel:
            top = top.parent
        if top is not self._root:
            raise ValueError(f"{node!r} belongs to another tree")
        return node

    def _inorder_nodes(self) -> Generator[TreeNode[K, V], None, None]:
        stack: List[TreeNode[K, V]] = []
        cur = self._root
        while stack or cur is not self._nil:
            while cur is not self._nil:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur
            cur = cur.right

    # ------------------------------------------------------------------
    #   Public mapping methods
    # ------------------------------------------------------------------
    def __contains__(self, key: object) -> bool:
        return self._search_node(key) is not self._nil  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, key: K) -> V:
        node = self._search_node(key)
        if node is self._nil:
            raise KeyError(key)
        return node.value

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self._search_node(key)
        return default if node is self._nil else node.value

    def __setitem__(self, key: K, value: V) -> None:
        """Insert *key* with *value* or replace the value of an existing key."""
        node = self._search_node(key)
        if node is self._nil:
            self.insert(key, value)
        else:
            node.value = value

    def __delitem__(self, key: K) -> None:
        self.delete(key)

    def __iter__(self) -> Generator[K, None, None]:
        """Yield keys in ascending order (in-order traversal)."""
        for node in self._inorder_nodes():
            yield node.key

    def keys(self) -> List[K]:
        """Return a list of all keys in sorted order."""
        return list(self)

    def values(self) -> List[V]:
        """Return a list of all values in key order."""
        return [node.value for node in self._inorder_nodes()]

    def items(self) -> List[Tuple[K, V]]:
        """Return a list of ``(key, value)`` pairs in sorted order."""
        return [(node.key, node.value) for node in self._inorder_nodes()]

    # ------------------------------------------------------------------
    #   Insertion / deletion
    # ------------------------------------------------------------------
    def insert(self, key: K, value: Optional[V] = None) -> TreeNode[K, V]:
        """
        Link a new node for *key* and rebalance; return the new node.

        Raises ``DuplicateKeyError`` if *key* is already stored.  The check
        happens during the descent, before any link is written, so a failed
        insert leaves the tree exactly as it was.
        """
        parent = self._nil
        cur = self._root
        while cur is not self._nil:
            parent = cur
            if key < cur.key:  # type: ignore[operator]
                cur = cur.left
            elif cur.key < key:  # type: ignore[operator]
                cur = cur.right
            else:
                raise DuplicateKeyError(key)

        node: TreeNode[K, V] = TreeNode(key, value, self._nil)  # type: ignore[arg-type]
        node.parent = parent
        if parent is self._nil:
            self._root = node
        elif key < parent.key:  # type: ignore[operator]
            parent.left = node
        else:
            parent.right = node

        self._size += 1
        logger.debug("%s: inserted %r under %r", type(self).__name__, key, parent.key)
        self._fix_insert(node)
        return node

    def delete(self, key: K) -> V:
        """
        Remove *key* and return its value.

        Raises ``KeyNotFoundError`` (a ``KeyError``) if *key* is not stored.
        """
        node = self._search_node(key)
        if node is self._nil:
            raise KeyNotFoundError(key)
        return self.delete_node(node)

    def delete_node(self, node: TreeNode[K, V]) -> V:
        """Remove a node previously returned by ``search``/``insert``."""
        self._check_handle(node)
        value = node.value
        logger.debug("%s: deleting %r", type(self).__name__, node.key)
        self._delete_node(node)
        # A fixup may have borrowed the sentinel's parent link.
        self._nil.parent = self._nil
        self._size -= 1
        node.left = node.right = node.parent = None  # type: ignore[assignment]
        return value

    def _transplant(self, u: TreeNode[K, V], v: TreeNode[K, V]) -> None:
        """Replace subtree rooted at `u` with the subtree rooted at `v`."""
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        # Written even when `v` is the sentinel: deletion fixups read it.
        v.parent = u.parent

    # ------------------------------------------------------------------
    #   Left / right rotations – helper primitives
    # ------------------------------------------------------------------
    def _rotate_left(self, x: TreeNode[K, V]) -> None:
        """Left-rotate the subtree rooted at `x`."""
        y = x.right
        if y is self._nil:
            raise RuntimeError("rotate_left called on a node with nil right child")
        # Turn y's left subtree into x's right subtree
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        # Link x's parent to y
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        # Put x on y's left
        y.left = x
        x.parent = y
        logger.debug("rotate_left at %r", x.key)
        self._after_rotate(x, y)

    def _rotate_right(self, y: TreeNode[K, V]) -> None:
        """Right-rotate the subtree rooted at `y`."""
        x = y.left
        if x is self._nil:
            raise RuntimeError("rotate_right called on a node with nil left child")
        # Turn x's right subtree into y's left subtree
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        # Link y's parent to x
        x.parent = y.parent
        if y.parent is self._nil:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        # Put y on x's right
        x.right = y
        y.parent = x
        logger.debug("rotate_right at %r", y.key)
        self._after_rotate(y, x)

    def _after_rotate(self, lowered: TreeNode[K, V], raised: TreeNode[K, V]) -> None:
        """Called after every rotation; `lowered` is now a child of `raised`."""

    # ------------------------------------------------------------------
    #   Balancing hooks
    # ------------------------------------------------------------------
    def _fix_insert(self, node: TreeNode[K, V]) -> None:
        raise NotImplementedError

    def _delete_node(self, node: TreeNode[K, V]) -> None:
        raise NotImplementedError

    def _validate_balance(self) -> None:
        raise NotImplementedError

    def _format_entry(self, node: TreeNode[K, V], ansi: bool) -> str:
        return f"{node.key}({node.value})"

    # ------------------------------------------------------------------
    #   Queries
    # ------------------------------------------------------------------
    def search(self, key: K) -> Optional[TreeNode[K, V]]:
        """Return the node holding *key*, or ``None``."""
        node = self._search_node(key)
        return None if node is self._nil else node

    def minimum(self, node: Optional[TreeNode[K, V]] = None) -> Optional[TreeNode[K, V]]:
        """Smallest node of the subtree at *node* (default: whole tree)."""
        start = self._root if node is None else self._check_handle(node)
        if start is self._nil:
            return None
        return self._subtree_minimum(start)

    def maximum(self, node: Optional[TreeNode[K, V]] = None) -> Optional[TreeNode[K, V]]:
        """Largest node of the subtree at *node* (default: whole tree)."""
        start = self._root if node is None else self._check_handle(node)
        if start is self._nil:
            return None
        return self._subtree_maximum(start)

    def successor(self, node: TreeNode[K, V]) -> Optional[TreeNode[K, V]]:
        """Return the node with the next larger key, or ``None``."""
        self._check_handle(node)
        if node.right is not self._nil:
            return self._subtree_minimum(node.right)

        # Walk up until we arrive from a left child.
        y = node.parent
        while y is not self._nil and node is y.right:
            node = y
            y = y.parent
        return None if y is self._nil else y

    def predecessor(self, node: TreeNode[K, V]) -> Optional[TreeNode[K, V]]:
        """Return the node with the next smaller key, or ``None``."""
        self._check_handle(node)
        if node.left is not self._nil:
            return self._subtree_maximum(node.left)

        y = node.parent
        while y is not self._nil and node is y.left:
            node = y
            y = y.parent
        return None if y is self._nil else y

    def min_key(self) -> K:
        """Return the smallest key stored in the tree."""
        if self._root is self._nil:
            raise KeyError("min_key(): tree is empty")
        return self._subtree_minimum(self._root).key

    def max_key(self) -> K:
        """Return the largest key stored in the tree."""
        if self._root is self._nil:
            raise KeyError("max_key(): tree is empty")
        return self._subtree_maximum(self._root).key

    def height(self) -> int:
        """Edges on the longest root-to-node path; ``-1`` for an empty tree."""

        def walk(node: TreeNode[K, V]) -> int:
            if node is self._nil:
                return -1
            return 1 + max(walk(node.left), walk(node.right))

        return walk(self._root)

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify the structural invariants shared by every engine, then the
        engine's own balance invariant.

        Raises ``InvariantError`` (an ``AssertionError``) on the first
        violation found.
        """
        nil = self._nil
        if not (nil.left is nil and nil.right is nil and nil.parent is nil):
            raise InvariantError("Sentinel links were modified")
        if self._root is not nil and self._root.parent is not nil:
            raise InvariantError("Root has a parent")

        count = 0
        previous: Optional[TreeNode[K, V]] = None
        for node in self._inorder_nodes():
            count += 1
            if previous is not None and not previous.key < node.key:
                raise InvariantError(
                    f"BST property violated ({previous.key!r} before {node.key!r})"
                )
            for child in (node.left, node.right):
                if child is not nil and child.parent is not node:
                    raise InvariantError(f"Parent link of {child.key!r} is broken")
            previous = node

        if count != self._size:
            raise InvariantError(f"Size is {self._size} but tree holds {count} nodes")

        self._validate_balance()

    # ------------------------------------------------------------------
    #   Convenience string representations (for debugging)
    # ------------------------------------------------------------------
    def render(self, ansi: bool = False) -> str:
        """
        Draw the tree sideways, right subtree on top::

            │   ┌── 30(None) [R]
            └── 20(None) [B]
                └── 10(None) [R]
        """
        if self._root is self._nil:
            return ""
        lines: List[str] = []
        self._render_subtree(self._root, "", True, ansi, lines)
        return "\n".join(lines) + "\n"

    def _render_subtree(
        self,
        node: TreeNode[K, V],
        prefix: str,
        is_left: bool,
        ansi: bool,
        lines: List[str],
    ) -> None:
        if node.right is not self._nil:
            self._render_subtree(
                node.right, prefix + ("│   " if is_left else "    "), False, ansi, lines
            )
        lines.append(prefix + ("└── " if is_left else "┌── ") + self._format_entry(node, ansi))
        if node.left is not self._nil:
            self._render_subtree(
                node.left, prefix + ("    " if is_left else "│   "), True, ansi, lines
            )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{items}}})"
