"""Configuration defaults for graphadt searches."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Defaults applied when a caller leaves search settings unspecified."""

    # Times a single edge may appear in one path when no bound is given
    default_max_retraversals: int = 1

    # Traversal order used by path finding when no strategy is given
    default_strategy: str = "BFS"

    # Frontier size past which the engine logs a warning (never enforced)
    frontier_warning_threshold: int = 1_000_000

    def should_warn(self, frontier_size: int) -> bool:
        """Return True if a frontier of this size deserves a warning."""
        return (
            self.frontier_warning_threshold > 0
            and frontier_size > self.frontier_warning_threshold
        )


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
