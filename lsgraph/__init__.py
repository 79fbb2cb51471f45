"""lsgraph: link-state network modeling and route queries.

lsgraph keeps a mutable directed graph of routers and links and answers
shortest-path (Dijkstra) and reachability queries over the active topology.

Primary API:
    Network, Router, Link - Topology model
    shortest_path() - Minimum transmission-time path between two routers
    reachability() - Routers able to reach each router
    load_network() - Build a Network from a link file

Example:
    from lsgraph import Network

    net = Network()
    net.load_links([("A", "B", 2.0), ("B", "C", 3.0), ("A", "C", 10.0)])
    path = net.shortest_path("A", "C")      # Path(('A', 'B', 'C'), 5.0)

    net.set_link_active("B", "C", False)
    net.shortest_path("A", "C").cost        # 10.0
"""

from __future__ import annotations

from lsgraph import cli, logging
from lsgraph._version import __version__
from lsgraph.algorithms.heap import MinHeap
from lsgraph.algorithms.reachability import reachability, reachable_from
from lsgraph.algorithms.spf import shortest_path, shortest_path_tree
from lsgraph.config import ENGINE_CONFIG, EngineConfig
from lsgraph.exceptions import (
    EmptyHeapError,
    InvalidKeyUpdateError,
    InvalidWeightError,
    LsGraphError,
    SelfLoopError,
    UnknownRouterError,
    UnreachableError,
)
from lsgraph.graph.convert import from_digraph, to_digraph
from lsgraph.io import load_network, parse_links, read_links
from lsgraph.model.network import Link, Network, Router
from lsgraph.model.path import Path

__all__ = [
    # Version
    "__version__",
    # Model
    "Network",
    "Router",
    "Link",
    "Path",
    # Queries
    "shortest_path",
    "shortest_path_tree",
    "reachability",
    "reachable_from",
    "MinHeap",
    # Loading
    "load_network",
    "parse_links",
    "read_links",
    # NetworkX interop
    "from_digraph",
    "to_digraph",
    # Configuration
    "EngineConfig",
    "ENGINE_CONFIG",
    # Errors
    "LsGraphError",
    "UnknownRouterError",
    "UnreachableError",
    "EmptyHeapError",
    "InvalidKeyUpdateError",
    "InvalidWeightError",
    "SelfLoopError",
    # Utilities
    "cli",
    "logging",
]
