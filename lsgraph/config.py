"""Configuration classes for lsgraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Configuration for topology loading and query execution."""

    # Loader installs both src->dst and dst->src for every file triple
    symmetric_load: bool = True

    # Link-file lines starting with this prefix are ignored
    comment_prefix: str = "#"

    # Upper bound on reachability scans that change an ancestor set; None
    # derives it from the router count
    max_reachability_passes: Optional[int] = None

    # Prompt shown by the interactive shell
    prompt: str = "lsgraph> "

    # Level name and record format for the "lsgraph" logger
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def reachability_pass_limit(self, router_count: int) -> int:
        """Return the maximum number of propagation scans for a network.

        Each changing scan extends every ancestor set by at least one more hop,
        so at most ``router_count - 1`` of them precede the fixed point. The
        final scan that confirms nothing changed is not counted.
        """
        if self.max_reachability_passes is not None:
            return max(1, self.max_reachability_passes)
        return max(1, router_count)


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
