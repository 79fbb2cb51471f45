"""Graph conversion utilities between ``Network`` and NetworkX graphs.

``to_digraph`` exports the topology as a ``networkx.DiGraph`` whose nodes and
edges carry the ``active`` flag and edges carry ``weight``. With
``active_only=True`` down routers and down links are left out, which yields
the graph the query engines actually traverse.

Example:
    >>> import networkx as nx
    >>> from lsgraph.graph.convert import from_digraph, to_digraph
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2.0)
    >>> net = from_digraph(G)
    >>> to_digraph(net).edges["A", "B"]["weight"]
    2.0
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from lsgraph.model.network import Network


def to_digraph(network: Network, active_only: bool = False) -> nx.DiGraph:
    """Convert a Network to a NetworkX DiGraph.

    Args:
        network: Source topology.
        active_only: If True, drop down routers, down links, and links that
            touch a down router.

    Returns:
        A DiGraph with an ``active`` attribute on nodes and ``weight`` and
        ``active`` attributes on edges.
    """
    nx_graph = nx.DiGraph()
    for router in network.iter_routers():
        if active_only and not router.active:
            continue
        nx_graph.add_node(router.name, active=router.active)

    for (src, dst), link in network.links.items():
        if active_only and (
            not link.active or src not in nx_graph or dst not in nx_graph
        ):
            continue
        nx_graph.add_edge(src, dst, weight=link.weight, active=link.active)
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph,
    weight: str = "weight",
    default_weight: float = 1.0,
    network: Optional[Network] = None,
) -> Network:
    """Build a Network from a NetworkX directed graph.

    Node and edge ``active`` attributes are honoured when present. The graph
    is converted into a fresh network first, so when an edge is rejected the
    ``network`` passed in is left untouched.

    Args:
        nx_graph: A directed NetworkX graph.
        weight: Edge attribute holding the transmission time.
        default_weight: Weight for edges without the attribute.
        network: Optional network to add into; a new one is created otherwise.

    Raises:
        ValueError: If ``nx_graph`` is undirected.
        SelfLoopError: If an edge joins a node to itself.
        InvalidWeightError: If an edge weight is negative, NaN or not a number.
    """
    if not nx_graph.is_directed():
        raise ValueError("from_digraph() requires a directed graph.")

    staged = Network()
    for node, data in nx_graph.nodes(data=True):
        router = staged.add_router(str(node))
        router.active = bool(data.get("active", True))

    for u, v, data in nx_graph.edges(data=True):
        link = staged.add_link(str(u), str(v), data.get(weight, default_weight))
        link.active = bool(data.get("active", True))

    if network is None:
        return staged
    _merge(staged, network)
    return network


def _merge(source: Network, target: Network) -> None:
    """Copy routers, links and their up/down flags from ``source`` into ``target``."""
    for router in source.iter_routers():
        target.add_router(router.name).active = router.active
    for (src, dst), link in source.links.items():
        target.add_link(src, dst, link.weight).active = link.active
