"""Shortest-path-first (SPF) over a link-state ``Network``.

Dijkstra's algorithm with a binary min-heap holding every router. Every
successful relaxation lowers the neighbour's key through ``decrease_key`` so
that extraction order always follows the relaxed distances.

Down routers are removed from the queue without being expanded, and they are
never relaxed into, so they cannot appear on a path unless they are the
source itself. Down links are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

from lsgraph.algorithms.heap import MinHeap
from lsgraph.exceptions import UnknownRouterError, UnreachableError
from lsgraph.logging import get_logger
from lsgraph.model.path import Path

if TYPE_CHECKING:
    from lsgraph.model.network import Network, Router

LOGGER = get_logger(__name__)

INF = float("inf")


def _require(network: Network, name: str, role: str) -> Router:
    router = network.get_router(name)
    if router is None:
        raise UnknownRouterError(name, role=role)
    return router


def _dijkstra(network: Network, source: Router) -> None:
    """Fill ``distance`` and ``predecessor`` on every router reachable from source."""
    network.reset_all()
    source.distance = 0.0

    min_pq: MinHeap[int] = MinHeap(
        (router.index, router.distance) for router in network.iter_routers()
    )

    settled = 0
    while min_pq:
        u = network.router_at(min_pq.extract_min())
        if u.distance == INF:
            # Every router still queued is unreachable
            break
        settled += 1
        if not u.active:
            continue

        for v_index in u.adjacent:
            v = network.router_at(v_index)
            if not v.active or v_index not in min_pq:
                continue
            uv = network.link_between(u, v)
            if not uv.active:
                continue

            new_distance = u.distance + uv.weight
            if new_distance < v.distance:
                v.distance = new_distance
                v.predecessor = u.index
                min_pq.decrease_key(v_index, new_distance)

    LOGGER.debug(
        "SPF from '%s' settled %d of %d routers", source.name, settled, len(network)
    )


def shortest_path(network: Network, src: str, dst: str) -> Path:
    """Return the minimum transmission-time path from ``src`` to ``dst``.

    Args:
        network: Topology to route over. Its per-router query state is reset
            and left holding this query's distances and predecessors.
        src: Source router name.
        dst: Destination router name.

    Returns:
        Path with router names from ``src`` to ``dst`` and the total cost.

    Raises:
        UnknownRouterError: If either router does not exist (source first).
        UnreachableError: If no path exists over active routers and links.
    """
    source = _require(network, src, "Source router")
    destination = _require(network, dst, "Destination router")

    LOGGER.debug("Shortest path query %s -> %s", src, dst)
    _dijkstra(network, source)

    if destination.distance == INF:
        raise UnreachableError(src, dst)

    # Walk predecessors back to the source
    hops: List[str] = []
    router = destination
    while True:
        hops.append(router.name)
        if router.predecessor is None:
            break
        router = network.router_at(router.predecessor)
    hops.reverse()

    return Path(routers=tuple(hops), cost=destination.distance)


def shortest_path_tree(network: Network, src: str) -> Dict[str, float]:
    """Return the shortest transmission time from ``src`` to every reachable router.

    Raises:
        UnknownRouterError: If ``src`` does not exist.
    """
    source = _require(network, src, "Source router")
    _dijkstra(network, source)
    return {
        router.name: router.distance
        for router in network.iter_routers()
        if router.distance != INF
    }
