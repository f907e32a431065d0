"""Problems solved with stacks and queues, including monotonic-stack scans."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence

from dsalgo.stack_queue import BoundedStack, CircularQueue

_OPENERS = "([{"
_CLOSERS = {")": "(", "]": "[", "}": "{"}
_DIGITS = "0123456789"


def find_bin(n: int) -> list[str]:
    """Return the binary forms of 1 to ``n``, produced breadth-first from a queue."""
    if n < 0:
        raise ValueError("n must not be negative")
    pending: deque[str] = deque(["1"])
    result: list[str] = []
    while len(result) < n:
        current = pending.popleft()
        result.append(current)
        pending.append(current + "0")
        pending.append(current + "1")
    return result


def reverse_k(queue: CircularQueue, k: int) -> CircularQueue:
    """Return a new queue whose first ``k`` values are reversed; the rest keep order.

    The given queue is left unchanged and the new one has the same capacity.
    """
    items = list(queue)
    if not 0 <= k <= len(items):
        raise ValueError(f"k must be between 0 and {len(items)}")
    stack = BoundedStack(k)
    for value in items[:k]:
        stack.push(value)
    result = CircularQueue(queue.capacity)
    for value in stack:
        result.enqueue(value)
    for value in items[k:]:
        result.enqueue(value)
    return result


def sort_stack(values: Iterable[int]) -> list[int]:
    """Sort a stack given bottom to top, using one extra stack.

    The returned list is also bottom to top, with the smallest value on top.
    """
    source = list(values)
    ordered: list[int] = []
    while source:
        value = source.pop()
        while ordered and ordered[-1] > value:
            source.append(ordered.pop())
        ordered.append(value)
    while ordered:
        source.append(ordered.pop())
    return source


def _insert_sorted(stack: list[int], value: int) -> None:
    if not stack or value < stack[-1]:
        stack.append(value)
        return
    held = stack.pop()
    _insert_sorted(stack, value)
    stack.append(held)


def sort_stack_recursive(stack: list[int]) -> None:
    """Sort a list used as a stack in place, recursively; the smallest ends on top."""
    if not stack:
        return
    value = stack.pop()
    sort_stack_recursive(stack)
    _insert_sorted(stack, value)


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_divide,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and ``+ - * /``.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for char in expression:
        if char in _DIGITS:
            stack.append(int(char))
            continue
        operation = _OPERATIONS.get(char)
        if operation is None:
            raise ValueError(f"unexpected character {char!r} in expression")
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks an operand")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def is_balanced(expression: str) -> bool:
    """Return False when a closing bracket does not match the last open one.

    Characters other than brackets are ignored. Brackets still open at the end
    of the expression do not make it unbalanced.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[char]:
                return False
            stack.pop()
    return True


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one, or 0."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for index in reversed(range(len(temperatures))):
        current = temperatures[index]
        while stack and temperatures[stack[-1]] <= current:
            stack.pop()
        if stack:
            result[index] = stack[-1] - index
        stack.append(index)
    return result


def next_greater_element(values: Sequence[int]) -> list[int]:
    """For each value, return the first greater value to its right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for index in reversed(range(len(values))):
        current = values[index]
        while stack and stack[-1] <= current:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(current)
    return result


def next_greater_element_subset(queries: Iterable[int], values: Sequence[int]) -> list[int]:
    """For each query, return the first value greater than it to its right in ``values``."""
    greater = dict(zip(values, next_greater_element(values)))
    result: list[int] = []
    for query in queries:
        if query not in greater:
            raise ValueError(f"{query!r} does not occur in values")
        result.append(greater[query])
    return result


def next_greater_elements_circular(values: Sequence[int]) -> list[int]:
    """Like next_greater_element, but the search wraps around to the start."""
    size = len(values)
    result = [-1] * size
    stack = list(reversed(range(size)))
    for index in reversed(range(size)):
        current = values[index]
        while stack and values[stack[-1]] <= current:
            stack.pop()
        if stack:
            result[index] = values[stack[-1]]
        stack.append(index)
    return result


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, count the run of consecutive days up to it with no higher price."""
    spans = [1] * len(prices)
    stack: list[int] = []
    for index, price in enumerate(prices):
        while stack and prices[stack[-1]] < price:
            spans[index] += spans[stack.pop()]
        stack.append(index)
    return spans


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under a histogram."""
    bars = [*heights, 0]
    best = 0
    stack: list[int] = []
    for index, height in enumerate(bars):
        while stack and bars[stack[-1]] >= height:
            bar_height = bars[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, bar_height * (index - left - 1))
        stack.append(index)
    return best