"""Classic algorithms: sorting, searching, matrix multiplication, backtracking,
graph traversal, shortest paths and minimum spanning trees."""

__version__ = "0.1.0"
__all__ = [
    "backtracking",
    "matrix",
    "searching",
    "shortest_paths",
    "sorting",
    "spanning",
    "traversal",
]