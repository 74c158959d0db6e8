"""Classic algorithms and data structures: sorting, searching, numbers, trees, linked lists, graphs, matrices and text patterns."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "binary_tree",
    "graphs",
    "linked_list",
    "matrix",
    "numbers",
    "patterns",
    "redblack",
    "searching",
    "sorting",
]