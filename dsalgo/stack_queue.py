"""Fixed-capacity stacks and queues, and stacks and queues built from one another."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class BoundedStack:
    """A last-in, first-out stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._items

    def top(self) -> Any:
        """Return the value on top without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the top down."""
        return reversed(self._items)


class CircularQueue:
    """A first-in, first-out queue in a ring buffer of ``capacity`` slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return self._size == 0

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self._size == 0:
            raise IndexError("front of an empty queue")
        return self._slots[self._front]

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back; raise OverflowError when the queue is full."""
        if self._size == self.capacity:
            raise OverflowError("queue is full")
        back = (self._front + self._size) % self.capacity
        self._slots[back] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._size == 0:
            raise IndexError("dequeue from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to back."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]


class TwoStacks:
    """Two stacks sharing one array of ``size`` slots, growing towards each other."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _full(self) -> bool:
        return self._top1 >= self._top2 - 1

    def push1(self, value: Any) -> None:
        """Push onto the first stack, which grows from the start of the array."""
        if self._full():
            raise OverflowError("stack is full")
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: Any) -> None:
        """Push onto the second stack, which grows from the end of the array."""
        if self._full():
            raise OverflowError("stack is full")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> Any:
        """Remove and return the top of the first stack."""
        if self._top1 == -1:
            raise IndexError("pop from an empty stack")
        value = self._slots[self._top1]
        self._slots[self._top1] = None
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Remove and return the top of the second stack."""
        if self._top2 == self.size:
            raise IndexError("pop from an empty stack")
        value = self._slots[self._top2]
        self._slots[self._top2] = None
        self._top2 += 1
        return value


class QueueFromStacks:
    """A queue kept in one stack, reordered through a second stack on each enqueue."""

    def __init__(self) -> None:
        self._main: list[Any] = []
        self._spare: list[Any] = []

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._main:
            raise IndexError("dequeue from an empty queue")
        return self._main.pop()

    def __len__(self) -> int:
        return len(self._main)


class StackFromQueue:
    """A stack kept in a single queue, rotated on each push so the top comes first."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._queue.append(value)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> Any:
        """Remove and return the value on top."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> Any:
        """Return the value on top without removing it."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._queue


class MinStack:
    """A stack that also reports its smallest value in constant time."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._minima: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)
        if not self._minima or value <= self._minima[-1]:
            self._minima.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        value = self._items.pop()
        if value == self._minima[-1]:
            self._minima.pop()
        return value

    def top(self) -> Any:
        """Return the value on top without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def get_min(self) -> Any:
        """Return the smallest value in the stack."""
        if not self._minima:
            raise IndexError("minimum of an empty stack")
        return self._minima[-1]