#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_persistent_set.py
----------------------

PersistentSet keeps every version readable and shares untouched subtrees
between versions.
"""

import random
import unittest

from persistent_set import PersistentSet


class TestPersistentSet(unittest.TestCase):
    def test_every_insert_creates_a_version(self):
        s = PersistentSet[int]()
        s.insert(5, 2, 8)
        self.assertEqual(s.version_count, 3)
        self.assertEqual(s.snapshot(0), [5])
        self.assertEqual(s.snapshot(1), [2, 5])
        self.assertEqual(s.snapshot(2), [2, 5, 8])
        self.assertEqual(s.snapshot(-1), list(s))
        with self.assertRaises(IndexError):
            s.snapshot(3)

    def test_old_versions_are_untouched(self):
        s = PersistentSet(range(0, 20, 2))
        old = s.history[4]
        before = list(PersistentSet._iter_values(old))
        s.insert(1, 3, 5, 7)
        self.assertEqual(list(PersistentSet._iter_values(old)), before)
        self.assertEqual(s.snapshot(4), [0, 2, 4, 6, 8])

    def test_untouched_subtrees_are_shared(self):
        s = PersistentSet[int]()
        s.insert(50, 25, 75)
        before, after = s.history[-1], s.add(10).history[-1]
        self.assertIsNot(before, after)
        # 10 went left, so the right subtree is reused as-is
        self.assertIs(before.right, after.right)
        self.assertIsNot(before.left, after.left)

    def test_duplicate_repeats_current_root(self):
        s = PersistentSet[int]()
        s << 3
        s << 3
        self.assertEqual(s.version_count, 2)
        self.assertIs(s.history[0], s.history[1])
        self.assertEqual(len(s), 1)

    def test_membership_and_len(self):
        s = PersistentSet("pear apple fig".split())
        self.assertIn("fig", s)
        self.assertNotIn("kiwi", s)
        self.assertEqual(len(s), 3)
        self.assertEqual(len(PersistentSet()), 0)

    def test_random_inserts_match_sorted_set(self):
        random.seed(11)
        values = [random.randrange(500) for _ in range(400)]
        s = PersistentSet(values)
        self.assertEqual(list(s), sorted(set(values)))
        self.assertEqual(s.snapshot(99), sorted(set(values[:100])))

    def test_render_and_history(self):
        s = PersistentSet([2, 1, 3])
        self.assertEqual(str(s), "│   ┌── 3\n└── 2\n    └── 1\n")
        self.assertEqual(s.render(0), "└── 2\n")
        self.assertEqual(PersistentSet().render(), "")
        self.assertTrue(s.format_history().startswith("state #000:\n└── 2\n"))
        self.assertIn("state #002:", s.format_history())


if __name__ == "__main__":
    unittest.main(verbosity=2)
