# dsalgo

A small library of classic data structures and algorithms in plain Python,
with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsalgo.arrays`: `quick_sort`, `merge_sort`, `max_min_form` (largest,
  smallest, second largest, ... from a sorted sequence), `max_subarray_sum`,
  `remove_even`, `merge_sorted`, `find_pair_with_sum` (two values adding up
  to a target, or `None`), `find_product` (product of all other values),
  `first_unique`, `second_maximum`, `right_rotate` and `rearrange_negatives`.
  These return new lists and leave their input alone.
- `dsalgo.linked_list`: `Node` and a singly linked `LinkedList` with
  `insert_at_head`, `insert_at_tail`, `search` (also `in`), `delete_head`,
  `delete`, `reverse`, `insert_loop`, `detect_loop`, `find_mid`,
  `remove_duplicates` and `find_nth` (n-th value from the end, counting
  from 1). It supports `len()`, iteration and `str()`.
- `dsalgo.list_algorithms`: `union` and `intersection` of two linked lists,
  returning new lists, and `delete_node`, which removes a node without
  access to the head (not possible for the last node).
- `dsalgo.doubly_linked_list`: `DoublyNode` and a `DoublyLinkedList` with
  `insert_at_head`, `delete_at_head` and `delete`, iterable in both
  directions via `iter()` and `reversed()`.
- `dsalgo.stack_queue`: `BoundedStack` and `CircularQueue` of fixed
  capacity, `TwoStacks` sharing one array, `QueueFromStacks`,
  `StackFromQueue` and `MinStack` with a constant-time `get_min`.
- `dsalgo.stack_algorithms`: `find_bin`, `reverse_k`, `sort_stack`,
  `sort_stack_recursive`, `evaluate_postfix` (single digits and `+ - * /`,
  division truncating towards zero), `is_balanced`, `daily_temperatures`,
  `next_greater_element`, `next_greater_element_subset`,
  `next_greater_elements_circular`, `stock_span` and
  `largest_rectangle_area`.

## Errors

Operations on an empty structure raise `IndexError` (popping an empty stack,
deleting from an empty list, `find_nth` out of range). Pushing onto a full
`BoundedStack`, `CircularQueue` or `TwoStacks` raises `OverflowError`.
Invalid arguments, such as a malformed postfix expression or `max_subarray_sum`
of an empty sequence, raise `ValueError`.

## Examples

```python
from dsalgo.arrays import quick_sort, max_subarray_sum
from dsalgo.linked_list import LinkedList
from dsalgo.stack_algorithms import evaluate_postfix, largest_rectangle_area

quick_sort([9, 312, 32, 78, 5])              # [5, 9, 32, 78, 312]
max_subarray_sum([-1, -7, -2, -5, -10, -1])  # -1

numbers = LinkedList([57, 36, 89, 44])
numbers.reverse()
list(numbers)                                # [44, 89, 36, 57]

evaluate_postfix("921*-8-4+")                # 3
largest_rectangle_area([2, 1, 5, 6, 2, 3])   # 10
```

## What it does not do

The package is a library only: it has no command-line program, and its
structures live in memory with no storage or serialisation.