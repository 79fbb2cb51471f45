"""Query engines over a `Network`: priority queue, SPF, and reachability."""

from lsgraph.algorithms.heap import MinHeap
from lsgraph.algorithms.reachability import reachability, reachable_from
from lsgraph.algorithms.spf import shortest_path, shortest_path_tree

__all__ = [
    "MinHeap",
    "reachability",
    "reachable_from",
    "shortest_path",
    "shortest_path_tree",
]
