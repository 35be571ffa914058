"""Classic algorithms and data structures: segment trees, digit DP, graphs, trees, lists and stacks."""

__version__ = "0.1.0"

__all__ = [
    "binary_tree",
    "digit_dp",
    "dynamic",
    "graphs",
    "linked_list",
    "range_trees",
    "stacks",
]