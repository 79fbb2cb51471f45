"""All-pairs reachability by transposition and ancestor propagation.

The network is transposed so that each router's adjacency list names the
routers that link *into* it in the original orientation. Scanning that
adjacency, every router ``v`` merges ``(u.ancestors - {v}) | {u}`` for each
original incoming neighbour ``u``. Scans repeat until no ancestor set changes,
which makes the result independent of iteration order and correct on cyclic
topologies. The network is transposed back before returning.

Only active routers and active links take part: a down router neither gains
ancestors nor passes its own on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Set

from lsgraph.config import ENGINE_CONFIG, EngineConfig
from lsgraph.logging import get_logger

if TYPE_CHECKING:
    from lsgraph.model.network import Network

LOGGER = get_logger(__name__)


def _propagate(network: Network) -> bool:
    """Run one scan over the transposed adjacency. Returns True if anything changed."""
    changed = False
    for v in network.iter_routers():
        if not v.active:
            continue
        for u_index in v.adjacent:
            u = network.router_at(u_index)
            if not u.active or not network.link_between(v, u).active:
                continue
            # In the original orientation the link runs u -> v
            incoming = (u.ancestors - {v.index}) | {u.index}
            if not incoming <= v.ancestors:
                v.ancestors |= incoming
                changed = True
    return changed


def compute_ancestors(
    network: Network, config: Optional[EngineConfig] = None
) -> None:
    """Fill ``Router.ancestors`` for every router in the network.

    The topology is transposed for the computation and restored afterwards,
    including when the computation raises.

    Raises:
        RuntimeError: If more scans change an ancestor set than the limit from
            ``config`` allows. The final scan that changes nothing is not
            counted.
    """
    config = config or ENGINE_CONFIG
    limit = config.reachability_pass_limit(len(network))

    network.reset_all()
    network.transpose()
    try:
        changing = 0
        while _propagate(network):
            changing += 1
            if changing > limit:
                raise RuntimeError(
                    f"Reachability did not converge within {limit} passes."
                )
    finally:
        network.transpose()

    # The final scan only confirms that nothing changed
    LOGGER.debug("Reachability converged after %d pass(es)", changing + 1)


def reachability(
    network: Network, config: Optional[EngineConfig] = None
) -> Dict[str, Set[str]]:
    """Return, for every active router, the routers that can reach it.

    ``u`` is in ``result[v]`` iff there is a directed path ``u -> ... -> v``
    made only of active links and active routers, with ``u != v``.

    Args:
        network: Topology to analyse. Router ancestor sets are left populated.
        config: Optional engine configuration (defaults to ``ENGINE_CONFIG``).

    Returns:
        Mapping of router name -> set of ancestor router names, ordered by name.
    """
    compute_ancestors(network, config)
    return {
        router.name: {network.router_at(i).name for i in router.ancestors}
        for router in network.iter_routers()
        if router.active
    }


def reachable_from(
    network: Network, config: Optional[EngineConfig] = None
) -> Dict[str, Set[str]]:
    """Return, for every active router, the routers it can reach."""
    ancestors = reachability(network, config)
    result: Dict[str, Set[str]] = {name: set() for name in ancestors}
    for target, sources in ancestors.items():
        for source in sources:
            result[source].add(target)
    return result
