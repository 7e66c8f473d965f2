"""Classic algorithm solutions: tree traversal, grid search, a segment tree, counting and array problems."""

__version__ = "0.1.0"
__all__ = ["tree", "grid", "segment_tree", "counting", "arrays"]