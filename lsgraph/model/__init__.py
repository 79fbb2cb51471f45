"""Topology model: routers, links, the owning network, and paths."""

from lsgraph.model.network import Link, Network, Router
from lsgraph.model.path import Path

__all__ = ["Link", "Network", "Path", "Router"]
