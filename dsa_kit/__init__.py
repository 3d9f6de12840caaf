"""Classic data structures and algorithms: search, heap, linked lists, stacks, trees and array problems."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "hashing",
    "heap",
    "linkedlist",
    "recursion",
    "stacks",
    "trees",
    "twopointers",
]