"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A node holding a value and a link to the next node."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list; built from ``values`` in the order given."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> Node | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self.head is None

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` at the front of the list."""
        self.head = Node(value, self.head)

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` at the end of the list."""
        node = Node(value)
        last = self._last_node()
        if last is None:
            self.head = node
        else:
            last.next = node

    def search(self, value: Any) -> bool:
        """Return whether some node holds ``value``."""
        return any(node.data == value for node in self._nodes())

    def delete_head(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        return node.data

    def delete(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        if self.head is None:
            return False
        if self.head.data == value:
            self.delete_head()
            return True
        previous = self.head
        while previous.next is not None:
            current = previous.next
            if current.data == value:
                previous.next = current.next
                current.next = None
                return True
            previous = current
        return False

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def insert_loop(self) -> None:
        """Link the last node back to the head, making the list circular."""
        last = self._last_node()
        if last is None:
            raise ValueError("cannot make a loop in an empty list")
        last.next = self.head

    def detect_loop(self) -> bool:
        """Return whether following the links ever comes back to a node."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def find_mid(self) -> Any:
        """Return the middle value; the first of the two middles for an even length."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        middle = (len(self) - 1) // 2
        for index, value in enumerate(self):
            if index == middle:
                return value
        raise AssertionError("unreachable")

    def remove_duplicates(self) -> None:
        """Drop every node whose value already appeared earlier in the list."""
        seen: set[Any] = set()
        previous: Node | None = None
        node = self.head
        while node is not None:
            if node.data in seen:
                assert previous is not None
                previous.next = node.next
            else:
                seen.add(node.data)
                previous = node
            node = node.next

    def find_nth(self, n: int) -> Any:
        """Return the ``n``-th value counted from the end, starting at 1."""
        if not 1 <= n <= len(self):
            raise IndexError(f"no element {n} from the end")
        lead = self.head
        for _ in range(n):
            assert lead is not None
            lead = lead.next
        trail = self.head
        while lead is not None:
            assert trail is not None
            lead = lead.next
            trail = trail.next
        assert trail is not None
        return trail.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def __str__(self) -> str:
        if self.is_empty():
            return "List is Empty!"
        return "List : " + "".join(f"{value}->" for value in self) + "null"