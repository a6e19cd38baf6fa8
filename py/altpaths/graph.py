"""Input validation and adjacency construction."""
import logging
from typing import Any

from .types import Adjacency, Color, EdgeList, InvalidGraphError

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a node id
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_edges(n: int, edges: EdgeList, color: Color) -> None:
    """Check every edge of one color is an in-range (source, destination) pair."""
    # generators would be used up here and leave nothing to build from
    if not isinstance(edges, (list, tuple)):
        raise InvalidGraphError(f"{color} edges must be a list of pairs, got {edges!r}")

    for index, edge in enumerate(edges):
        if isinstance(edge, (str, bytes)) or not hasattr(edge, "__len__") or len(edge) != 2:
            raise InvalidGraphError(
                f"{color} edge {index} must be a (source, destination) pair, got {edge!r}"
            )
        for endpoint in edge:
            if not _is_int(endpoint):
                raise InvalidGraphError(
                    f"{color} edge {index} has non-integer endpoint {endpoint!r}"
                )
            if endpoint < 0 or endpoint >= n:
                raise InvalidGraphError(
                    f"{color} edge {index} endpoint {endpoint} out of range [0, {n - 1}]"
                )


def validate_graph(n: int, red_edges: EdgeList, blue_edges: EdgeList) -> None:
    """Raise InvalidGraphError unless the graph description is well formed.

    Args:
        n: Node count, nodes are numbered 0..n-1
        red_edges: Directed red edges as (source, destination) pairs
        blue_edges: Directed blue edges as (source, destination) pairs
    """
    if not _is_int(n):
        raise InvalidGraphError(f"node count must be an integer, got {n!r}")
    if n < 1:
        raise InvalidGraphError(f"node count must be at least 1, got {n}")

    _validate_edges(n, red_edges, Color.RED)
    _validate_edges(n, blue_edges, Color.BLUE)


def build_adjacency(n: int, red_edges: EdgeList, blue_edges: EdgeList) -> Adjacency:
    """Build the color-tagged adjacency list.

    Red edges are listed before blue edges for each source node, each group in
    input order. Duplicate edges and self-loops are kept as given.
    """
    validate_graph(n, red_edges, blue_edges)

    adj: Adjacency = [[] for _ in range(n)]
    for src, dst in red_edges:
        adj[src].append((dst, Color.RED))
    for src, dst in blue_edges:
        adj[src].append((dst, Color.BLUE))

    logger.debug("Built adjacency: n=%d red=%d blue=%d", n, len(red_edges), len(blue_edges))
    return adj
