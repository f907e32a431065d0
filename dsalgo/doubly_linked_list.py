"""A doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """A node holding a value and links to its neighbours."""

    data: Any
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list; built from ``values`` in the order given."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self._tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self._append(value)

    def _append(self, value: Any) -> None:
        node = DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self.head is None

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` at the front of the list."""
        node = DoublyNode(value, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def delete_at_head(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self.head
        self._unlink(node)
        return node.data

    def _unlink(self, node: DoublyNode) -> None:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def delete(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        node = self.head
        while node is not None:
            if node.data == value:
                self._unlink(node)
                return True
            node = node.next
        return False

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self.is_empty():
            return "List is Empty!"
        return "List : " + "".join(f"{value}->" for value in self) + "null"