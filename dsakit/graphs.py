"""Dynamic programming on directed acyclic graphs and on trees.

Nodes are numbered from 1 to ``node_count``; edges are pairs of node numbers.
Trees are rooted at node 1.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

MOD = 10**9 + 7

Edge = tuple[int, int]


def _adjacency(node_count: int, edges: Iterable[Edge], directed: bool) -> list[list[int]]:
    if node_count < 1:
        raise ValueError("a graph needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(node_count + 1)]
    for a, b in edges:
        if not (1 <= a <= node_count and 1 <= b <= node_count):
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{node_count}")
        adjacency[a].append(b)
        if not directed:
            adjacency[b].append(a)
    return adjacency


def _tree_preorder(node_count: int, edges: Iterable[Edge]) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Return ``(node, parent)`` pairs in preorder from node 1, and the adjacency."""
    edge_list = list(edges)
    adjacency = _adjacency(node_count, edge_list, directed=False)
    if len(edge_list) != node_count - 1:
        raise ValueError("edges do not form a tree")
    order: list[tuple[int, int]] = []
    seen = [False] * (node_count + 1)
    stack = [(1, 0)]
    seen[1] = True
    while stack:
        node, parent = stack.pop()
        order.append((node, parent))
        for child in adjacency[node]:
            if child != parent and not seen[child]:
                seen[child] = True
                stack.append((child, node))
    if len(order) != node_count:
        raise ValueError("edges do not form a tree")
    return order, adjacency


def longest_path_dag(node_count: int, edges: Iterable[Edge]) -> int:
    """Return the number of edges on the longest path of a directed acyclic graph."""
    edge_list = list(edges)
    adjacency = _adjacency(node_count, edge_list, directed=True)
    indegree = [0] * (node_count + 1)
    for _, b in edge_list:
        indegree[b] += 1
    longest = [0] * (node_count + 1)
    ready = deque(node for node in range(1, node_count + 1) if indegree[node] == 0)
    visited = 0
    while ready:
        node = ready.popleft()
        visited += 1
        for nxt in adjacency[node]:
            longest[nxt] = max(longest[nxt], longest[node] + 1)
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                ready.append(nxt)
    if visited != node_count:
        raise ValueError("graph contains a cycle")
    return max(longest[1:])


def count_tree_colourings(node_count: int, edges: Iterable[Edge]) -> int:
    """Count black/white colourings with no two adjacent black nodes, modulo 1e9+7."""
    order, _ = _tree_preorder(node_count, edges)
    white = [1] * (node_count + 1)
    black = [1] * (node_count + 1)
    for node, parent in reversed(order):
        if parent:
            white[parent] = white[parent] * (white[node] + black[node]) % MOD
            black[parent] = black[parent] * white[node] % MOD
    return (white[1] + black[1]) % MOD


def count_pairs_at_distance(node_count: int, k: int, edges: Iterable[Edge]) -> int:
    """Count unordered pairs of tree nodes exactly ``k`` edges apart."""
    if k < 0:
        raise ValueError("distance must not be negative")
    order, _ = _tree_preorder(node_count, edges)
    below = [[1] + [0] * k for _ in range(node_count + 1)]
    pairs = 0
    for node, parent in reversed(order):
        if not parent:
            continue
        upper, lower = below[parent], below[node]
        pairs += sum(upper[k - i - 1] * lower[i] for i in range(k))
        for i in range(k):
            upper[i + 1] += lower[i]
    return pairs


def tree_diameter(node_count: int, edges: Iterable[Edge]) -> int:
    """Return the number of edges on the longest path of a tree."""
    order, _ = _tree_preorder(node_count, edges)
    first = [0] * (node_count + 1)
    second = [0] * (node_count + 1)
    diameter = 0
    for node, parent in reversed(order):
        diameter = max(diameter, first[node] + second[node])
        if parent:
            height = first[node] + 1
            if height > first[parent]:
                first[parent], second[parent] = height, first[parent]
            elif height > second[parent]:
                second[parent] = height
    return diameter


def tree_distance_sums(node_count: int, edges: Iterable[Edge]) -> list[int]:
    """For each node 1..n, return the sum of its distances to all other nodes."""
    order, _ = _tree_preorder(node_count, edges)
    size = [1] * (node_count + 1)
    depth = [0] * (node_count + 1)
    for node, parent in order:
        if parent:
            depth[node] = depth[parent] + 1
    for node, parent in reversed(order):
        if parent:
            size[parent] += size[node]
    sums = [0] * (node_count + 1)
    sums[1] = sum(depth[1:])
    for node, parent in order:
        if parent:
            sums[node] = sums[parent] + node_count - 2 * size[node]
    return sums[1:]