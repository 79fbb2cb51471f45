"""Lightweight representation of a single shortest path.

``Path`` stores the ordered router names from source to destination and the
total transmission time along them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple


@dataclass(frozen=True)
class Path:
    """A routed path through the network.

    Attributes:
        routers: Router names from source to destination, inclusive.
        cost: Total transmission time of the path.
    """

    routers: Tuple[str, ...]
    cost: float

    def __iter__(self) -> Iterator[str]:
        return iter(self.routers)

    def __len__(self) -> int:
        return len(self.routers)

    def __getitem__(self, idx: int) -> str:
        return self.routers[idx]

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def src(self) -> str:
        """Return the first router in the path."""
        return self.routers[0]

    @property
    def dst(self) -> str:
        """Return the last router in the path."""
        return self.routers[-1]

    @property
    def hops(self) -> int:
        """Number of links traversed."""
        return len(self.routers) - 1

    def links(self) -> Tuple[Tuple[str, str], ...]:
        """Return the ``(source, target)`` pairs traversed, in order."""
        return tuple(zip(self.routers, self.routers[1:]))
