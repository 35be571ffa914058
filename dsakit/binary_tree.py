"""Binary trees: construction, traversals and structural queries.

Trees are built from :class:`TreeNode` objects; an empty tree is ``None``.
Nodes are compared by identity, so two equal-looking subtrees are distinct
nodes unless they are the same object.
"""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


Tree = Optional[TreeNode]


def build_tree(values: Iterable[Optional[int]]) -> Tree:
    """Build a tree from level-order values, with ``None`` marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    rest = [v for v in items if v is not None]
    if rest:
        raise ValueError("values continue below missing nodes")
    return root


def is_same_tree(p: Tree, q: Tree) -> bool:
    """Return whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrored(p: Tree, q: Tree) -> bool:
    if p is None or q is None:
        return p is q
    return p.val == q.val and _mirrored(p.left, q.right) and _mirrored(p.right, q.left)


def is_symmetric(root: Tree) -> bool:
    """Return whether a tree is a mirror image of itself."""
    return _mirrored(root, root)


def _levels(root: Tree) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Tree) -> list[list[int]]:
    """Return node values level by level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def vertical_traversal(root: Tree) -> list[list[int]]:
    """Return values column by column from left to right.

    Within a column, values are ordered by row, and by value within a row.
    """
    cells: dict[tuple[int, int], list[int]] = defaultdict(list)
    stack: list[tuple[Tree, int, int]] = [(root, 0, 0)]
    while stack:
        node, row, col = stack.pop()
        if node is None:
            continue
        cells[(row, col)].append(node.val)
        stack.append((node.left, row + 1, col - 1))
        stack.append((node.right, row + 1, col + 1))
    if not cells:
        return []
    columns: dict[int, list[int]] = defaultdict(list)
    for (_, col), values in sorted(cells.items()):
        columns[col].extend(sorted(values))
    return [columns[col] for col in sorted(columns)]


def max_depth(root: Tree) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _check_traversals(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError("traversals differ in length")
    if sorted(first) != sorted(second):
        raise ValueError("traversals hold different values")


def build_from_preorder_inorder(preorder: Sequence[int], inorder: Sequence[int]) -> Tree:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    _check_traversals(preorder, inorder)
    where = {value: index for index, value in enumerate(inorder)}

    def build(lo: int, hi: int, start: int) -> Tree:
        if lo > hi:
            return None
        node = TreeNode(preorder[start])
        split = where[node.val]
        node.left = build(lo, split - 1, start + 1)
        node.right = build(split + 1, hi, start + split - lo + 1)
        return node

    return build(0, len(inorder) - 1, 0)


def build_from_inorder_postorder(inorder: Sequence[int], postorder: Sequence[int]) -> Tree:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    _check_traversals(inorder, postorder)
    where = {value: index for index, value in enumerate(inorder)}

    def build(lo: int, hi: int, end: int) -> Tree:
        if lo > hi:
            return None
        node = TreeNode(postorder[end])
        split = where[node.val]
        right_size = hi - split
        node.right = build(split + 1, hi, end - 1)
        node.left = build(lo, split - 1, end - right_size - 1)
        return node

    return build(0, len(inorder) - 1, len(postorder) - 1)


def is_balanced(root: Tree) -> bool:
    """Return whether every node's subtree heights differ by at most one."""

    def height(node: Tree) -> int:
        # -1 marks an unbalanced subtree
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if left < 0 or right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return height(root) >= 0


def max_path_sum(root: Tree) -> int:
    """Return the largest sum of values along any non-empty path."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.val

    def gain(node: Tree) -> int:
        nonlocal best
        if node is None:
            return 0
        left = gain(node.left)
        right = gain(node.right)
        best = max(best, node.val + left + right)
        return max(node.val + left, node.val + right, 0)

    gain(root)
    return best


def preorder(root: Tree) -> list[int]:
    """Return values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: Tree) -> list[int]:
    """Return values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.val)
        current = current.right
    return result


def right_side_view(root: Tree) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def _spine(node: Tree, side: str) -> int:
    length = 0
    while node is not None:
        length += 1
        node = getattr(node, side)
    return length


def count_complete_nodes(root: Tree) -> int:
    """Count the nodes of a complete binary tree in less than linear time."""
    if root is None:
        return 0
    left = _spine(root, "left")
    right = _spine(root, "right")
    if left == right:
        return (1 << left) - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def lowest_common_ancestor(root: Tree, p: TreeNode, q: TreeNode) -> Tree:
    """Return the deepest node having both ``p`` and ``q`` as descendants (or itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def diameter(root: Tree) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    longest = 0

    def height(node: Tree) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        longest = max(longest, left + right)
        return 1 + max(left, right)

    height(root)
    return longest