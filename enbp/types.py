"""Shared type aliases and enums."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Node identifier: position of the node in the weight matrix.
NodeID = int

#: Edge weight (likelihood that two nodes denote the same entity).
Weight = Union[int, float]


class NodeOrder(IntEnum):
    """How node indices relate to the edge direction of the input graph."""

    #: Node indices already follow a topological order (edges go low -> high).
    INDEX = 1
    #: Relabel nodes into a topological order before solving.
    TOPOLOGICAL = 2

    @classmethod
    def from_string(cls, value: str) -> "NodeOrder":
        """Parse a string into a NodeOrder enum value.

        Args:
            value: Case-insensitive member name (e.g., "index", "TOPOLOGICAL").

        Returns:
            The corresponding NodeOrder member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid node_order '{value}'. Valid values are: {valid}"
            ) from None
