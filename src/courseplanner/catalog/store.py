"""Ordered course store: an unbalanced binary search tree keyed by course number.

The tree shape depends only on insertion order, so sorted input degrades
insert and search toward linear time. Insert, search and traversal are all
iterative, so a degenerate tree never hits the recursion limit.
"""

from __future__ import annotations

from typing import Iterator, Optional

from courseplanner.catalog.record import CourseRecord


class _Node:
    __slots__ = ("record", "left", "right")

    def __init__(self, record: CourseRecord):
        self.record = record
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class CourseStore:
    """Course records ordered by key, with exact lookup and in-order listing."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._len = 0

    def insert(self, record: CourseRecord) -> bool:
        """Insert ``record``. Returns True when it replaced a record with the same key."""
        if self._root is None:
            self._root = _Node(record)
            self._len = 1
            return False

        node = self._root
        while True:
            if record.key == node.record.key:
                node.record = record
                return True
            if record.key < node.record.key:
                if node.left is None:
                    node.left = _Node(record)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(record)
                    break
                node = node.right
        self._len += 1
        return False

    def search(self, key: str) -> Optional[CourseRecord]:
        node = self._root
        while node is not None:
            if key == node.record.key:
                return node.record
            node = node.left if key < node.record.key else node.right
        return None

    def exists(self, key: str) -> bool:
        return self.search(key) is not None

    def enumerate(self) -> Iterator[CourseRecord]:
        """Yield every record in ascending key order. Each call starts over."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.record
            node = node.right

    def clear(self) -> None:
        self._root = None
        self._len = 0

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        deepest = 0
        pending = [(self._root, 1)]
        while pending:
            node, depth = pending.pop()
            deepest = max(deepest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    pending.append((child, depth + 1))
        return deepest

    def __len__(self) -> int:
        return self._len

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __iter__(self) -> Iterator[CourseRecord]:
        return self.enumerate()
