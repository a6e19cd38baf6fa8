"""Type definitions for the alternating-path library."""
from enum import IntEnum
from typing import List, Sequence, Tuple


class Color(IntEnum):
    """Edge color. Values double as the slot in a visited row."""
    RED = 0
    BLUE = 1

    @property
    def other(self) -> "Color":
        """The opposite color."""
        return Color.BLUE if self is Color.RED else Color.RED

    @property
    def label(self) -> str:
        """Lowercase name used in JSON output."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.label


class InvalidGraphError(ValueError):
    """Raised when a node count or edge list is outside the accepted domain."""


# (source, destination) as supplied by the caller, list or tuple
EdgeList = Sequence[Sequence[int]]

# adjacency[u] -> [(destination, color), ...] in insertion order
Adjacency = List[List[Tuple[int, Color]]]

# (node, color of the edge used to arrive there)
State = Tuple[int, Color]
