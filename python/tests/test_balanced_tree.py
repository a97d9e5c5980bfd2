#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_balanced_tree.py
---------------------

Behaviour shared by every balancing engine, run once per engine:

* search / minimum / maximum / successor / predecessor
* node handles (stale and foreign handles are refused)
* sentinel ownership (one private sentinel per tree)
* rotation primitives and their fail-fast checks
* debug logging
"""

import random
import unittest

from avl_tree import AVLTree
from red_black_tree import RedBlackTree
from tree_node import BLACK


class _TreeQueryCases:
    """Mixed into one ``TestCase`` per engine; ``ENGINE`` is the tree class."""

    ENGINE = None

    def _tree(self, keys=()):
        tree = self.ENGINE()
        for k in keys:
            tree.insert(k, str(k))
        return tree

    # ------------------------------------------------------------------
    #  Queries
    # ------------------------------------------------------------------
    def test_search(self):
        tree = self._tree([10, 20, 30, 40, 50])
        node = tree.search(30)
        self.assertEqual((node.key, node.value), (30, "30"))
        self.assertIsNone(tree.search(35))
        self.assertIsNone(self._tree().search(1))

    def test_minimum_and_maximum(self):
        tree = self._tree([15, 2, 40, 7, 30])
        self.assertEqual(tree.minimum().key, 2)
        self.assertEqual(tree.maximum().key, 40)

        # Of a subtree
        root = tree._root
        self.assertEqual(tree.minimum(root.right).key, min(k for k in tree if k > root.key))

        empty = self._tree()
        self.assertIsNone(empty.minimum())
        self.assertIsNone(empty.maximum())
        with self.assertRaises(KeyError):
            empty.min_key()
        with self.assertRaises(KeyError):
            empty.max_key()

    def test_successor_predecessor(self):
        tree = self._tree([10, 20, 30, 40, 50])
        node = tree.search(20)
        self.assertEqual(tree.successor(node).key, 30)
        self.assertEqual(tree.predecessor(node).key, 10)

        # Edge cases – no successor / predecessor
        self.assertIsNone(tree.successor(tree.maximum()))
        self.assertIsNone(tree.predecessor(tree.minimum()))

    def test_walk_forward_and_backward(self):
        random.seed(3)
        keys = random.sample(range(1_000), 200)
        tree = self._tree(keys)

        forward = []
        node = tree.minimum()
        while node is not None:
            forward.append(node.key)
            node = tree.successor(node)
        self.assertEqual(forward, sorted(keys))

        backward = []
        node = tree.maximum()
        while node is not None:
            backward.append(node.key)
            node = tree.predecessor(node)
        self.assertEqual(backward, sorted(keys, reverse=True))

    def test_keys_only_need_less_than(self):
        tree = self._tree(["pear", "apple", "fig"])
        self.assertEqual(list(tree), ["apple", "fig", "pear"])
        self.assertIn("fig", tree)
        self.assertNotIn("kiwi", tree)

    # ------------------------------------------------------------------
    #  Node handles
    # ------------------------------------------------------------------
    def test_delete_node_by_handle(self):
        tree = self._tree([1, 2, 3, 4])
        node = tree.search(3)
        self.assertEqual(tree.delete_node(node), "3")
        self.assertEqual(list(tree), [1, 2, 4])
        tree.validate()

        # The handle is dead now
        self.assertTrue(node.is_detached())
        with self.assertRaises(ValueError):
            tree.successor(node)
        with self.assertRaises(ValueError):
            tree.delete_node(node)

    def test_foreign_and_bogus_handles_are_refused(self):
        first = self._tree([1, 2, 3])
        second = self._tree([1, 2, 3])
        with self.assertRaises(ValueError):
            first.successor(second.search(2))
        with self.assertRaises(ValueError):
            first.delete_node(second.search(1))
        with self.assertRaises(ValueError):
            first.predecessor(None)
        self.assertEqual(len(second), 3)

    # ------------------------------------------------------------------
    #  Sentinel ownership
    # ------------------------------------------------------------------
    def test_each_tree_owns_its_sentinel(self):
        first = self._tree([5, 3, 8])
        second = self._tree([5, 3, 8])
        self.assertIsNot(first._nil, second._nil)

        first.delete(3)
        second.delete(8)
        for tree in (first, second):
            self.assertIs(tree._nil.parent, tree._nil)
            self.assertIs(tree._nil.left, tree._nil)
            self.assertIs(tree._nil.right, tree._nil)
            self.assertEqual(tree._nil.color, BLACK)
            self.assertIsNone(tree._nil.key)
            tree.validate()

    def test_search_never_exposes_the_sentinel(self):
        tree = self._tree([1])
        for result in (tree.search(2), tree.successor(tree.search(1)), tree.predecessor(tree.search(1))):
            self.assertIsNone(result)

    # ------------------------------------------------------------------
    #  Rotation primitives
    # ------------------------------------------------------------------
    def test_rotation_requires_child(self):
        tree = self._tree([1])
        leaf = tree.search(1)
        with self.assertRaises(RuntimeError):
            tree._rotate_left(leaf)
        with self.assertRaises(RuntimeError):
            tree._rotate_right(leaf)

    def test_rotations_preserve_order_and_links(self):
        tree = self._tree([40, 20, 60, 10, 30, 50, 70])
        root = tree._root
        tree._rotate_left(root)
        self.assertIs(tree._root, root.parent)
        self.assertEqual(list(tree), [10, 20, 30, 40, 50, 60, 70])
        tree._rotate_right(tree._root)
        self.assertIs(tree._root, root)
        self.assertEqual(list(tree), [10, 20, 30, 40, 50, 60, 70])
        tree.validate()

    # ------------------------------------------------------------------
    #  Logging
    # ------------------------------------------------------------------
    def test_mutations_are_logged_at_debug_level(self):
        tree = self._tree()
        with self.assertLogs("balanced_tree", level="DEBUG") as logs:
            for k in (1, 2, 3):
                tree.insert(k)
            tree.delete(2)
        output = "\n".join(logs.output)
        self.assertIn("inserted 3", output)
        self.assertIn("rotate_left at 1", output)
        self.assertIn("deleting 2", output)


class TestRedBlackQueries(_TreeQueryCases, unittest.TestCase):
    ENGINE = RedBlackTree


class TestAVLQueries(_TreeQueryCases, unittest.TestCase):
    ENGINE = AVLTree


if __name__ == "__main__":
    unittest.main(verbosity=2)
