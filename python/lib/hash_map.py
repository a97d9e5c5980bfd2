#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
hash_map.py
-----------

A hash map with separate chaining: an array of buckets, each bucket a
``LinkedList`` of entries.  The bucket array doubles whenever the number of
entries exceeds ``load_factor * capacity``.

Features
~~~~~~~~
* `set(key, value)`, `get(key, default=None)`, `has(key)`, `remove(key)`
* `keys()`, `values()`, `entries()`, `clear()`
* `m[key] = value`, `m[key]` (KeyError if missing), `del m[key]`, `key in m`
* `len(m)`, iteration over keys, `str(m)` → ``{ "k": v, ... }``

Typical usage
~~~~~~~~~~~~~
>>> animals = HashMap()
>>> animals.set("dog", 4).set("bird", 2).get("dog")
4
>>> animals.remove("bird")
2
>>> animals.has("bird")
False
"""

from __future__ import annotations

import logging
from typing import Generator, Generic, List, Optional, Tuple, TypeVar

from linked_list import LinkedList

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

INITIAL_CAPACITY = 16
LOAD_FACTOR = 0.75


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.value!r})"


class HashMap(Generic[K, V]):
    """
    Mapping built on chained buckets.

    Parameters
    ----------
    initial_capacity : int, default ``INITIAL_CAPACITY``
        Number of buckets to start with (and to go back to on ``clear``).
    load_factor : float, default ``LOAD_FACTOR``
        Grow once ``len(self) > load_factor * capacity``.
    """

    __slots__ = ("_buckets", "_capacity", "_length", "_initial_capacity", "_load_factor")

    def __init__(
        self,
        *,
        initial_capacity: int = INITIAL_CAPACITY,
        load_factor: float = LOAD_FACTOR,
    ) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        if not 0 < load_factor <= 1:
            raise ValueError(f"load_factor must be in (0, 1], got {load_factor}")
        self._initial_capacity = initial_capacity
        self._load_factor = load_factor
        self._buckets: List[Optional[LinkedList[_Entry[K, V]]]] = [None] * initial_capacity
        self._capacity = initial_capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    # ------------------------------------------------------------------
    #   Bucket helpers
    # ------------------------------------------------------------------
    def _bucket_index(self, key: K) -> int:
        return hash(key) % self._capacity

    def _find_entry(self, key: K) -> Optional[_Entry[K, V]]:
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is None:
            return None
        for entry in bucket:
            if entry.key == key:
                return entry
        return None

    def _rehash(self) -> None:
        old_buckets = self._buckets
        self._capacity *= 2
        self._buckets = [None] * self._capacity
        logger.debug("HashMap grown to %d buckets (%d entries)", self._capacity, self._length)
        for bucket in old_buckets:
            if bucket is None:
                continue
            for entry in bucket:
                index = self._bucket_index(entry.key)
                if self._buckets[index] is None:
                    self._buckets[index] = LinkedList()
                self._buckets[index].append(entry)  # type: ignore[union-attr]

    # ------------------------------------------------------------------
    #   Core API
    # ------------------------------------------------------------------
    def set(self, key: K, value: V) -> "HashMap[K, V]":
        """Insert *key* or replace its value; returns ``self`` for chaining."""
        entry = self._find_entry(key)
        if entry is not None:
            entry.value = value
            return self

        index = self._bucket_index(key)
        if self._buckets[index] is None:
            self._buckets[index] = LinkedList()
        self._buckets[index].append(_Entry(key, value))  # type: ignore[union-attr]
        self._length += 1

        if self._length > self._load_factor * self._capacity:
            self._rehash()
        return self

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        entry = self._find_entry(key)
        return default if entry is None else entry.value

    def has(self, key: K) -> bool:
        return self._find_entry(key) is not None

    def remove(self, key: K) -> Optional[V]:
        """Delete *key* and return its value, or ``None`` if it was absent."""
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is None:
            return None
        for position, entry in enumerate(bucket):
            if entry.key == key:
                bucket.delete_at(position)
                self._length -= 1
                return entry.value
        return None

    def clear(self) -> None:
        self._buckets = [None] * self._initial_capacity
        self._capacity = self._initial_capacity
        self._length = 0

    def entries(self) -> List[Tuple[K, V]]:
        """All ``(key, value)`` pairs, in bucket order."""
        return [(entry.key, entry.value) for entry in self._iter_entries()]

    def keys(self) -> List[K]:
        return [entry.key for entry in self._iter_entries()]

    def values(self) -> List[V]:
        return [entry.value for entry in self._iter_entries()]

    def _iter_entries(self) -> Generator[_Entry[K, V], None, None]:
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __getitem__(self, key: K) -> V:
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __delitem__(self, key: K) -> None:
        if self._find_entry(key) is None:
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return self._find_entry(key) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Generator[K, None, None]:
        for entry in self._iter_entries():
            yield entry.key

    def __str__(self) -> str:
        if self.is_empty():
            return "{}"
        body = ", ".join(f'"{entry.key}": {entry.value}' for entry in self._iter_entries())
        return "{ " + body + " }"

    def __repr__(self) -> str:
        return f"HashMap({dict(self.entries())!r})"
