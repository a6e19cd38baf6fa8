"""Shortest alternating-color paths in red/blue directed graphs - public API."""
from .types import Color, InvalidGraphError
from .graph import build_adjacency, validate_graph
from .paths import shortest_alternating_paths, alternating_paths

__all__ = [
    'Color', 'InvalidGraphError',
    'build_adjacency', 'validate_graph',
    'shortest_alternating_paths', 'alternating_paths'
]
