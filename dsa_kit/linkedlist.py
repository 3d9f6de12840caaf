"""Singly and doubly linked lists of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _SNode:
    value: int
    next: _SNode | None = None


@dataclass(slots=True, eq=False)
class _DNode:
    value: int
    prev: _DNode | None = None
    next: _DNode | None = None


class SinglyLinkedList:
    """A forward-linked list supporting append, sum and in-place reversal."""

    def __init__(self) -> None:
        self._head: _SNode | None = None
        self._tail: _SNode | None = None
        self._size = 0

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = _SNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def sum(self) -> int:
        """Return the sum of all values."""
        return sum(self)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: _SNode | None = None
        curr = self._head
        self._tail = curr
        while curr is not None:
            nxt = curr.next
            curr.next = prev
            prev = curr
            curr = nxt
        self._head = prev

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A list linked in both directions with positional insert and removal."""

    def __init__(self) -> None:
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        self._size = 0

    def prepend(self, value: int) -> None:
        """Add ``value`` at the front."""
        node = _DNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = _DNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: int, index: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Raises IndexError if ``index`` is negative or greater than the length.
        """
        if index < 0 or index > self._size:
            raise IndexError("index can't be greater than size")
        if index == 0:
            self.prepend(value)
            return
        if index == self._size:
            self.append(value)
            return
        after = self._node_at(index)
        before = after.prev
        node = _DNode(value, prev=before, next=after)
        before.next = node
        after.prev = node
        self._size += 1

    def remove_at(self, index: int) -> int:
        """Remove the element at ``index`` and return its value."""
        node = self._node_at(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def get(self, index: int) -> int:
        """Return the value at ``index``."""
        return self._node_at(index).value

    def _node_at(self, index: int) -> _DNode:
        if index < 0 or index >= self._size:
            raise IndexError("index out of bounds")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"