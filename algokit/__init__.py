"""Solutions to classic algorithm problems on linked lists, arrays, matrices, numbers and strings."""

__version__ = "0.1.0"
__all__ = [
    "linked_list",
    "arrays",
    "matrix",
    "array_ops",
    "numbers",
    "strings",
]