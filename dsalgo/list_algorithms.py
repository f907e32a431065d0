"""Algorithms that combine or edit singly linked lists."""

from __future__ import annotations

from dsalgo.linked_list import LinkedList, Node


def union(first: LinkedList, second: LinkedList) -> LinkedList:
    """Return a new list of the values of both lists, each value kept once.

    Values appear in the order they are first met: ``first`` and then ``second``.
    The input lists are left unchanged.
    """
    combined = LinkedList([*first, *second])
    combined.remove_duplicates()
    return combined


def intersection(first: LinkedList, second: LinkedList) -> LinkedList:
    """Return a new list of the values of ``first`` that also occur in ``second``.

    Every value of ``first`` is paired with every equal value of ``second``, so a
    value repeated in either list is repeated in the result as often as such
    pairs occur. The order follows ``first``.
    """
    return LinkedList(
        left for left in first for right in second if left == right
    )


def delete_node(node: Node) -> None:
    """Remove ``node`` from its list without access to the head.

    The value and link of the following node are copied into ``node``, so the
    following node drops out of the list. The last node of a list cannot be
    removed this way.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node of a list in place")
    node.data = following.data
    node.next = following.next
    following.next = None