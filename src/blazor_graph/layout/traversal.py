"""Breadth-first visitation order over a component graph.

All roots seed a single queue, so the order interleaves the trees of
different roots level by level rather than finishing one root first.
"""

from __future__ import annotations

__all__ = ["bfs_order", "find_roots", "unreachable"]

import logging
from collections import deque

from blazor_graph.parser.model import ComponentGraph

logger = logging.getLogger(__name__)


def find_roots(graph: ComponentGraph) -> list[str]:
    """Return relation keys with no incoming edges, in relation order."""
    return [name for name in graph.declared if graph.in_degree(name) == 0]


def bfs_order(graph: ComponentGraph) -> list[str]:
    """Return the deterministic visitation order of all reachable nodes.

    Each node is enqueued at most once. Nodes that can only be reached
    through a cycle with no root feeding it are not visited.
    """
    roots = find_roots(graph)
    logger.debug("Roots: %s", roots)

    visited = set(roots)
    queue = deque(roots)
    order: list[str] = []

    while queue:
        name = queue.popleft()
        order.append(name)
        for child in graph.children(name):
            if child not in visited:
                visited.add(child)
                queue.append(child)

    return order


def unreachable(graph: ComponentGraph, order: list[str]) -> list[str]:
    """Return graph nodes missing from *order*, in creation order."""
    seen = set(order)
    return [name for name in graph.names if name not in seen]
