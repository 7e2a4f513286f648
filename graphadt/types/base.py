"""Base enums shared across graphadt."""

from __future__ import annotations

from enum import IntEnum


class SearchStrategy(IntEnum):
    """Order in which pending paths are taken from the frontier."""

    #: Breadth-first: shorter paths are fully explored before longer ones.
    BFS = 1
    #: Depth-first: the first-listed outgoing edge is followed first.
    DFS = 2

    @classmethod
    def from_string(cls, value: str) -> "SearchStrategy":
        """Parse a string into a SearchStrategy enum value.

        Args:
            value: Case-insensitive string name (e.g., "bfs", "DFS").

        Returns:
            The corresponding SearchStrategy enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid search strategy '{value}'. Valid values are: {valid}"
            ) from None

    @classmethod
    def coerce(cls, value: "SearchStrategy | str") -> "SearchStrategy":
        """Return ``value`` as a SearchStrategy, parsing strings by name."""
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)
