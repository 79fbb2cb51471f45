"""Link-state topology model with Router, Link, and Network classes.

Routers are stored in an arena (a list) owned by the ``Network`` and are
addressed by their stable integer index. Adjacency lists, predecessors,
ancestor sets, and link endpoints all hold indices rather than object
references. Routers are never removed from the arena, so indices stay valid
for the lifetime of the network.
"""

from __future__ import annotations

import math
from bisect import insort
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from lsgraph.exceptions import InvalidWeightError, SelfLoopError
from lsgraph.logging import get_logger

LOGGER = get_logger(__name__)

INF = float("inf")

LinkKey = Tuple[str, str]
NeighborView = Tuple[str, float, bool]
RouterView = Tuple[str, bool, List[NeighborView]]


@dataclass
class Router:
    """A named vertex of the network.

    Attributes:
        name (str): Unique router name.
        index (int): Position of the router in the owning network's arena.
        active (bool): False when the router is down.
        distance (float): Tentative time-to-reach from the last query source.
        predecessor (Optional[int]): Arena index of the previous hop on the
            shortest path, or None.
        adjacent (List[int]): Outgoing neighbour indices, sorted by neighbour name.
        ancestors (Set[int]): Indices of routers that can reach this one. Only
            meaningful right after a reachability query.
    """

    name: str
    index: int
    active: bool = True
    distance: float = INF
    predecessor: Optional[int] = None
    adjacent: List[int] = field(default_factory=list)
    ancestors: Set[int] = field(default_factory=set)

    def reset(self) -> None:
        """Clear the per-query state."""
        self.distance = INF
        self.predecessor = None
        self.ancestors.clear()


@dataclass
class Link:
    """One directed link between two routers.

    Attributes:
        source (int): Arena index of the source router.
        target (int): Arena index of the target router.
        weight (float): Transmission time, non-negative.
        active (bool): False when the link is down.
    """

    source: int
    target: int
    weight: float
    active: bool = True

    def reverse(self) -> None:
        """Swap source and target in place."""
        self.source, self.target = self.target, self.source


def _check_weight(weight: float) -> float:
    try:
        value = float(weight)
    except (TypeError, ValueError) as exc:
        raise InvalidWeightError(weight) from exc
    if math.isnan(value) or value < 0:
        raise InvalidWeightError(weight)
    return value


class Network:
    """A container for routers and the directed links between them.

    The network exclusively owns every ``Router`` and ``Link``. Links are keyed
    by the ordered ``(source name, target name)`` pair, so there is at most one
    link per direction between two routers.

    Example:
        >>> net = Network()
        >>> net.load_links([("A", "B", 2), ("B", "C", 3), ("A", "C", 10)])
        >>> net.shortest_path("A", "C").routers
        ('A', 'B', 'C')
    """

    def __init__(self) -> None:
        self._routers: List[Router] = []
        self._index: Dict[str, int] = {}
        self._links: Dict[LinkKey, Link] = {}

    def __len__(self) -> int:
        return len(self._routers)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Network(routers={len(self._routers)}, links={len(self._links)})"

    #
    # Lookups
    #
    @property
    def routers(self) -> Dict[str, Router]:
        """Mapping of router name -> Router, ordered by name."""
        return {r.name: r for r in sorted(self._routers, key=lambda r: r.name)}

    @property
    def links(self) -> Dict[LinkKey, Link]:
        """Mapping of ``(source name, target name)`` -> Link (a shallow copy)."""
        return dict(self._links)

    def router_names(self) -> List[str]:
        """Return router names in sorted order."""
        return sorted(self._index)

    def router_at(self, index: int) -> Router:
        """Return the router stored at an arena index."""
        return self._routers[index]

    def iter_routers(self) -> Iterator[Router]:
        """Iterate routers in sorted name order."""
        for name in sorted(self._index):
            yield self._routers[self._index[name]]

    def has_router(self, name: str) -> bool:
        return name in self._index

    def has_link(self, src: str, dst: str) -> bool:
        return (src, dst) in self._links

    def get_router(self, name: str) -> Optional[Router]:
        """Return the router with this name, or None."""
        index = self._index.get(name)
        return None if index is None else self._routers[index]

    def get_link(self, src: str, dst: str) -> Optional[Link]:
        """Return the link ``src -> dst``, or None."""
        return self._links.get((src, dst))

    def link_between(self, source: Router, target: Router) -> Link:
        """Return the link joining two routers that are adjacent."""
        return self._links[(source.name, target.name)]

    def link_key(self, link: Link) -> LinkKey:
        """Return the ``(source name, target name)`` key for a link."""
        return (self._routers[link.source].name, self._routers[link.target].name)

    #
    # Mutations
    #
    def add_router(self, name: str) -> Router:
        """Return the router named ``name``, creating it when missing."""
        index = self._index.get(name)
        if index is not None:
            return self._routers[index]

        router = Router(name=name, index=len(self._routers))
        self._routers.append(router)
        self._index[name] = router.index
        LOGGER.debug("Added router '%s'", name)
        return router

    def add_link(self, src: str, dst: str, weight: float) -> Link:
        """Add the link ``src -> dst`` or update the weight of an existing one.

        Missing endpoints are created. Updating an existing link leaves its
        active flag and the adjacency lists untouched.

        Raises:
            InvalidWeightError: If ``weight`` is negative or not a number.
            SelfLoopError: If ``src == dst``.
        """
        value = _check_weight(weight)
        if src == dst:
            raise SelfLoopError(src)

        link = self._links.get((src, dst))
        if link is not None:
            link.weight = value
            return link

        source = self.add_router(src)
        target = self.add_router(dst)
        link = Link(source=source.index, target=target.index, weight=value)
        self._links[(src, dst)] = link
        self._add_adjacent(source, target)
        return link

    def delete_link(self, src: str, dst: str) -> bool:
        """Remove the link ``src -> dst``. Returns False when it did not exist."""
        link = self._links.pop((src, dst), None)
        if link is None:
            return False

        self._routers[link.source].adjacent.remove(link.target)
        return True

    def set_router_active(self, name: str, active: bool) -> bool:
        """Bring a router up or down. Returns False when it does not exist."""
        router = self.get_router(name)
        if router is None:
            return False
        router.active = active
        return True

    def set_link_active(self, src: str, dst: str, active: bool) -> bool:
        """Bring a link up or down. Returns False when it does not exist."""
        link = self._links.get((src, dst))
        if link is None:
            return False
        link.active = active
        return True

    def load_links(self, triples: Iterable[Tuple[str, str, float]]) -> None:
        """Install ``src -> dst`` and ``dst -> src`` for each triple."""
        for src, dst, weight in triples:
            self.add_link(src, dst, weight)
            self.add_link(dst, src, weight)

    def clear(self) -> None:
        """Drop every router and link."""
        self._routers.clear()
        self._index.clear()
        self._links.clear()

    def reset_all(self) -> None:
        """Clear distance, predecessor, and ancestors on every router."""
        for router in self._routers:
            router.reset()

    def transpose(self) -> None:
        """Reverse every link and rebuild adjacency lists and the link mapping.

        Applying it twice restores the original topology.
        """
        for router in self._routers:
            router.adjacent.clear()

        transposed: Dict[LinkKey, Link] = {}
        for link in self._links.values():
            link.reverse()
            self._add_adjacent(self._routers[link.source], self._routers[link.target])
            transposed[self.link_key(link)] = link
        self._links = transposed

    #
    # Queries
    #
    def shortest_path(self, src: str, dst: str):
        """Shortest path from ``src`` to ``dst``. See ``lsgraph.algorithms.spf``."""
        from lsgraph.algorithms.spf import shortest_path

        return shortest_path(self, src, dst)

    def reachability(self) -> Dict[str, Set[str]]:
        """Routers able to reach each router. See ``lsgraph.algorithms.reachability``."""
        from lsgraph.algorithms.reachability import reachability

        return reachability(self)

    def topology(self) -> List[RouterView]:
        """Return an ordered dump of routers and their outgoing links.

        Returns:
            One ``(name, active, neighbors)`` tuple per router, sorted by name,
            where ``neighbors`` lists ``(neighbor name, weight, link active)``
            in adjacency order.
        """
        dump: List[RouterView] = []
        for router in self.iter_routers():
            neighbors: List[NeighborView] = []
            for index in router.adjacent:
                neighbor = self._routers[index]
                link = self.link_between(router, neighbor)
                neighbors.append((neighbor.name, link.weight, link.active))
            dump.append((router.name, router.active, neighbors))
        return dump

    def _add_adjacent(self, source: Router, target: Router) -> None:
        if target.index in source.adjacent:
            return
        insort(source.adjacent, target.index, key=lambda i: self._routers[i].name)
