#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
linked_list.py
--------------

A singly linked list with a ``list``-like, index based interface.

Features
~~~~~~~~
* O(1) `append`, `prepend`, `shift` (remove head)
* `insert(index, value)` – negative indices count from the end; an index past
  the end pads the list with ``None`` first
* `pop()` (remove tail), `delete_at(index)`, `clear()`
* `lst[index]` / `lst.at(index)`, `head`, `tail`
* `find_index(value)` / `index(value)`, `value in lst`
* `len(lst)`, iteration, `to_list()`, `str(lst)` → ``( a ) -> ( b ) -> nil``

Typical usage
~~~~~~~~~~~~~
>>> lst = LinkedList()
>>> lst.append("dog").append("cat").prepend("fish")
LinkedList(['fish', 'dog', 'cat'])
>>> lst[-1]
'cat'
>>> str(lst)
'( fish ) -> ( dog ) -> ( cat ) -> nil'
"""

from __future__ import annotations

from typing import Any, Generator, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    """Internal list cell – not meant to be used directly by callers."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: Optional["_Node[T]"] = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList(Generic[T]):
    """Singly linked list keeping references to both ends."""

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    # ------------------------------------------------------------------
    #   Access
    # ------------------------------------------------------------------
    @property
    def head(self) -> Optional[T]:
        return None if self._head is None else self._head.value

    @property
    def tail(self) -> Optional[T]:
        return None if self._tail is None else self._tail.value

    def _node_at(self, index: int) -> Optional[_Node[T]]:
        """Node at *index* (negative allowed) or ``None`` when out of range."""
        if index >= self._size or index < -self._size:
            return None
        index %= self._size
        node = self._head
        while index:
            index -= 1
            node = node.next  # type: ignore[union-attr]
        return node

    def at(self, index: int) -> Optional[T]:
        """Value at *index*, or ``None`` when out of range."""
        node = self._node_at(int(index))
        return None if node is None else node.value

    def __getitem__(self, index: int) -> T:
        node = self._node_at(index)
        if node is None:
            raise IndexError("linked list index out of range")
        return node.value

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __iter__(self) -> Generator[T, None, None]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def to_list(self) -> List[T]:
        return list(self)

    # ------------------------------------------------------------------
    #   Modification
    # ------------------------------------------------------------------
    def append(self, value: T) -> "LinkedList[T]":
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1
        return self

    def prepend(self, value: T) -> "LinkedList[T]":
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return self

    def insert(self, index: int, value: T) -> "LinkedList[T]":
        """
        Insert *value* so that it ends up at position *index*.

        ``0`` and ``-(len + 1)`` prepend; anything smaller raises
        ``IndexError``.  A positive index past the end pads with ``None``.
        A negative index ``-k`` places the value right after the element
        currently at ``-k`` (so ``-1`` appends, like Ruby's ``Array#insert``).
        """
        min_index = -self._size
        if index < min_index - 1:
            raise IndexError(
                f"index {index} too small for linked list; minimum: {min_index - 1}"
            )
        if index == min_index - 1 or index == 0:
            return self.prepend(value)
        if index >= self._size:
            while self._size < index:
                self.append(None)  # type: ignore[arg-type]
            return self.append(value)
        if index < 0:
            index = index % self._size + 1
            if index == self._size:
                return self.append(value)
        previous = self._node_at(index - 1)
        previous.next = _Node(value, previous.next)  # type: ignore[union-attr]
        self._size += 1
        return self

    def pop(self) -> Optional[T]:
        """Remove and return the last value, ``None`` if the list is empty."""
        if self._tail is None:
            return None
        value = self._tail.value
        if self._size == 1:
            self.clear()
            return value
        previous = self._node_at(self._size - 2)
        previous.next = None  # type: ignore[union-attr]
        self._tail = previous
        self._size -= 1
        return value

    def shift(self) -> Optional[T]:
        """Remove and return the first value, ``None`` if the list is empty."""
        if self._head is None:
            return None
        value = self._head.value
        if self._size == 1:
            self.clear()
            return value
        self._head = self._head.next
        self._size -= 1
        return value

    def delete_at(self, index: int) -> Optional[T]:
        """Remove the value at *index*; ``None`` when out of range."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"no implicit conversion from {type(index).__name__} to integer")
        if index < -self._size or index >= self._size:
            return None
        index %= self._size
        if index == 0:
            return self.shift()
        if index == self._size - 1:
            return self.pop()
        previous = self._node_at(index - 1)
        removed = previous.next  # type: ignore[union-attr]
        previous.next = removed.next  # type: ignore[union-attr]
        self._size -= 1
        return removed.value  # type: ignore[union-attr]

    def clear(self) -> "LinkedList[T]":
        self._head = self._tail = None
        self._size = 0
        return self

    # ------------------------------------------------------------------
    #   Searching
    # ------------------------------------------------------------------
    def find_index(self, value: Any) -> Optional[int]:
        """Position of the first element equal to *value*, or ``None``."""
        for position, current in enumerate(self):
            if current == value:
                return position
        return None

    index = find_index

    def __contains__(self, value: object) -> bool:
        return self.find_index(value) is not None

    # ------------------------------------------------------------------
    #   Conversion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        if self._head is None:
            return ""
        return "".join(f"( {value} ) -> " for value in self) + "nil"

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"
