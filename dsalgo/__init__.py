"""Classic data structures and algorithms: arrays, linked lists, stacks and queues."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "doubly_linked_list",
    "linked_list",
    "list_algorithms",
    "stack_queue",
    "stack_algorithms",
]