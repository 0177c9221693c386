"""Classic data structures and a simulated first-fit memory pool."""

__version__ = "0.1.0"
__all__ = ["bst", "hashmap", "linked_list", "memory", "queues", "stack"]