#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_hash_map.py
----------------

HashMap: set / get / remove semantics, growth on the load factor, the
mapping protocol and a randomised comparison against ``dict``.
"""

import random
import unittest

from hash_map import INITIAL_CAPACITY, HashMap


class _Collider:
    """Key whose instances all land in the same bucket."""

    def __init__(self, name):
        self.name = name

    def __hash__(self):
        return 7

    def __eq__(self, other):
        return isinstance(other, _Collider) and self.name == other.name

    def __repr__(self):
        return self.name


class TestHashMap(unittest.TestCase):
    # ------------------------------------------------------------------
    #  Basic functionality
    # ------------------------------------------------------------------
    def test_set_get_has(self):
        hm = HashMap[str, int]()
        self.assertIs(hm.set("dog", 4), hm)
        hm.set("bird", 2)
        self.assertEqual(hm.get("dog"), 4)
        self.assertIsNone(hm.get("trout"))
        self.assertEqual(hm.get("trout", 0), 0)
        self.assertTrue(hm.has("bird"))
        self.assertFalse(hm.has("trout"))
        self.assertEqual(hm.length, 2)

    def test_set_replaces_existing_value(self):
        hm = HashMap[str, int]()
        hm.set("dog", 4).set("dog", 3)
        self.assertEqual(hm.get("dog"), 3)
        self.assertEqual(len(hm), 1)

    def test_remove(self):
        hm = HashMap[str, int]()
        hm.set("dog", 4).set("cat", 4)
        self.assertEqual(hm.remove("dog"), 4)
        self.assertIsNone(hm.remove("dog"))
        self.assertIsNone(hm.remove("trout"))
        self.assertEqual(len(hm), 1)
        self.assertFalse(hm.has("dog"))

    def test_chained_collisions(self):
        hm = HashMap()
        a, b, c = _Collider("a"), _Collider("b"), _Collider("c")
        hm.set(a, 1).set(b, 2).set(c, 3)
        self.assertEqual([hm.get(k) for k in (a, b, c)], [1, 2, 3])
        hm.remove(b)
        self.assertEqual(hm.entries(), [(a, 1), (c, 3)])

    # ------------------------------------------------------------------
    #  Growth
    # ------------------------------------------------------------------
    def test_rehash_doubles_capacity(self):
        hm = HashMap[int, int]()
        self.assertEqual(hm.capacity, INITIAL_CAPACITY)
        for i in range(12):  # 12 == 0.75 * 16, not over the limit yet
            hm.set(i, i)
        self.assertEqual(hm.capacity, 16)
        hm.set(12, 12)
        self.assertEqual(hm.capacity, 32)
        self.assertEqual(sorted(hm.keys()), list(range(13)))
        self.assertTrue(all(hm.get(i) == i for i in range(13)))

    def test_constructor_options(self):
        hm = HashMap(initial_capacity=2, load_factor=0.5)
        hm.set("a", 1)
        self.assertEqual(hm.capacity, 2)
        hm.set("b", 2)
        self.assertEqual(hm.capacity, 4)
        hm.clear()
        self.assertEqual((hm.capacity, len(hm)), (2, 0))

        for bad in ({"initial_capacity": 0}, {"load_factor": 0}, {"load_factor": 1.5}):
            with self.assertRaises(ValueError):
                HashMap(**bad)

    # ------------------------------------------------------------------
    #  Mapping protocol and views
    # ------------------------------------------------------------------
    def test_mapping_protocol(self):
        hm = HashMap[str, int]()
        hm["x"] = 1
        self.assertEqual(hm["x"], 1)
        self.assertIn("x", hm)
        self.assertEqual(list(hm), ["x"])
        del hm["x"]
        self.assertNotIn("x", hm)
        with self.assertRaises(KeyError):
            hm["x"]
        with self.assertRaises(KeyError):
            del hm["x"]

    def test_views_and_string(self):
        hm = HashMap[str, int]()
        self.assertEqual(str(hm), "{}")
        self.assertTrue(hm.is_empty())
        hm.set("dog", 4)
        self.assertEqual(str(hm), '{ "dog": 4 }')
        hm.set("cat", 5)
        self.assertEqual(sorted(hm.values()), [4, 5])
        self.assertEqual(sorted(hm.entries()), [("cat", 5), ("dog", 4)])
        self.assertEqual(repr(hm).startswith("HashMap({"), True)

    # ------------------------------------------------------------------
    #  Randomised comparison against dict
    # ------------------------------------------------------------------
    def test_random_operations_against_dict(self):
        random.seed(5)
        hm = HashMap[int, int]()
        reference = {}
        for _ in range(3_000):
            k = random.randrange(300)
            if random.random() < 0.6:
                v = random.randint(0, 99)
                hm.set(k, v)
                reference[k] = v
            else:
                self.assertEqual(hm.remove(k), reference.pop(k, None))
            self.assertEqual(len(hm), len(reference))
        self.assertEqual(dict(hm.entries()), reference)


if __name__ == "__main__":
    unittest.main(verbosity=2)
