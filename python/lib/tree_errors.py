#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
tree_errors.py
--------------

Exceptions raised by the containers in this package.

Each error also derives from the builtin a caller would naturally expect, so
``except KeyError`` keeps working for code that treats a tree like a ``dict``.
"""


class TreeError(Exception):
    """Base class for every container error."""


class DuplicateKeyError(TreeError, KeyError):
    """Raised by ``insert`` when the key is already stored."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key {self.key!r} duplicated in tree"


class KeyNotFoundError(TreeError, KeyError):
    """Raised when deleting (or looking up) a key that is not stored."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key {self.key!r} not found in tree"


class InvariantError(TreeError, AssertionError):
    """Raised by ``validate()`` when a structural invariant is broken."""
