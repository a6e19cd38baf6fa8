"""Shortest alternating-color paths from node 0."""
import logging
from collections import deque
from typing import Any, Dict, List, Optional

from .graph import build_adjacency
from .types import Adjacency, Color, EdgeList, State

logger = logging.getLogger(__name__)

SOURCE = 0
UNREACHABLE = -1


class _SearchResult:
    """Raw output of one alternating BFS."""

    def __init__(self, n: int):
        self.dist: List[Optional[int]] = [None] * n
        # first state that reached each node; its parent chain is a shortest walk
        self.arrival: List[Optional[State]] = [None] * n
        self.parent: Dict[State, Optional[State]] = {}


def _search(n: int, adj: Adjacency) -> _SearchResult:
    """Level-order BFS over (node, color of last edge) states."""
    result = _SearchResult(n)
    visited = [[False, False] for _ in range(n)]

    result.dist[SOURCE] = 0
    queue = deque()
    for color in Color:
        # a seed's color is the edge it "arrived" on, so it forbids that color next
        queue.append((SOURCE, 0, color))
        visited[SOURCE][color] = True
        result.parent[(SOURCE, color)] = None

    expanded = 0
    while queue:
        node, distance, prev_color = queue.popleft()
        expanded += 1
        allowed = prev_color.other

        for neighbor, color in adj[node]:
            if color != allowed or visited[neighbor][color]:
                continue
            visited[neighbor][color] = True
            result.parent[(neighbor, color)] = (node, prev_color)

            # BFS order: the first discovery is already minimal
            if result.dist[neighbor] is None:
                result.dist[neighbor] = distance + 1
                result.arrival[neighbor] = (neighbor, color)

            queue.append((neighbor, distance + 1, color))

    logger.debug("Alternating BFS finished: n=%d states_expanded=%d", n, expanded)
    return result


def _finalize(dist: List[Optional[int]]) -> List[int]:
    return [UNREACHABLE if d is None else d for d in dist]


def shortest_alternating_paths(n: int, red_edges: EdgeList, blue_edges: EdgeList) -> List[int]:
    """Minimum alternating-walk length from node 0 to every node.

    Args:
        n: Node count, nodes are numbered 0..n-1
        red_edges: Directed red edges as (source, destination) pairs
        blue_edges: Directed blue edges as (source, destination) pairs

    Returns:
        List of n ints; -1 where no alternating walk exists

    Raises:
        InvalidGraphError: If n or any edge is outside the accepted domain
    """
    adj = build_adjacency(n, red_edges, blue_edges)
    return _finalize(_search(n, adj).dist)


def _walk_back(result: _SearchResult, node: int):
    """Rebuild the node and color sequence leading to node's first arrival."""
    nodes = []
    colors = []
    state = result.arrival[node]
    while state is not None:
        current, color = state
        nodes.append(current)
        prev = result.parent[state]
        if prev is not None:
            colors.append(color.label)
        state = prev
    nodes.reverse()
    colors.reverse()
    return nodes, colors


def alternating_paths(n: int, red_edges: EdgeList, blue_edges: EdgeList) -> Dict[str, Any]:
    """Shortest alternating walks from node 0, with the walks themselves."""
    adj = build_adjacency(n, red_edges, blue_edges)
    result = _search(n, adj)
    distances = _finalize(result.dist)

    paths: List[List[int]] = []
    colors: List[List[str]] = []
    for node in range(n):
        if node == SOURCE:
            paths.append([SOURCE])
            colors.append([])
        elif result.arrival[node] is None:
            paths.append([])
            colors.append([])
        else:
            walk, walk_colors = _walk_back(result, node)
            paths.append(walk)
            colors.append(walk_colors)

    unreachable = [node for node, d in enumerate(distances) if d == UNREACHABLE]

    return {
        "distances": distances,
        "paths": paths,
        "colors": colors,
        "unreachable": unreachable
    }
