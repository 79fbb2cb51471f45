"""
Tests for basic network construction and mutation.

This module covers:
- Router and Link defaults
- Router creation on first reference
- Link add/update/delete and adjacency consistency
- Up/down flags on routers and links
- Transposition and per-query reset
"""

import math
import random

import pytest

from lsgraph.exceptions import InvalidWeightError, SelfLoopError
from lsgraph.model.network import Link, Network, Router


def _assert_consistent(net: Network) -> None:
    """Link mapping and adjacency lists describe the same edge set."""
    from_links = set(net.links)
    from_adjacency = set()
    for router in net.routers.values():
        names = [net.router_at(i).name for i in router.adjacent]
        assert names == sorted(names)
        assert len(names) == len(set(names))
        from_adjacency.update((router.name, name) for name in names)
    assert from_links == from_adjacency
    for (src, dst), link in net.links.items():
        assert net.link_key(link) == (src, dst)


class TestRouterAndLink:
    def test_router_defaults(self):
        router = Router("A", index=0)
        assert router.active is True
        assert math.isinf(router.distance)
        assert router.predecessor is None
        assert router.adjacent == []
        assert router.ancestors == set()

    def test_router_reset(self):
        router = Router("A", index=0, distance=3.0, predecessor=2, ancestors={1, 2})
        router.reset()
        assert math.isinf(router.distance)
        assert router.predecessor is None
        assert router.ancestors == set()

    def test_link_defaults_and_reverse(self):
        link = Link(source=0, target=1, weight=2.5)
        assert link.active is True
        link.reverse()
        assert (link.source, link.target) == (1, 0)


class TestRouters:
    def test_add_router_idempotent(self):
        net = Network()
        first = net.add_router("A")
        second = net.add_router("A")
        assert first is second
        assert len(net) == 1

    def test_indices_are_stable(self):
        net = Network()
        a = net.add_router("A")
        b = net.add_router("B")
        assert (a.index, b.index) == (0, 1)
        assert net.router_at(1) is b

    def test_lookup_missing_router(self):
        net = Network()
        assert net.get_router("nope") is None
        assert "nope" not in net
        assert not net.has_router("nope")

    def test_router_names_sorted(self):
        net = Network()
        for name in ("C", "A", "B"):
            net.add_router(name)
        assert net.router_names() == ["A", "B", "C"]
        assert list(net.routers) == ["A", "B", "C"]


class TestLinks:
    def test_add_link_creates_endpoints(self):
        net = Network()
        net.add_link("X", "Y", 1)
        assert "X" in net and "Y" in net
        assert net.has_link("X", "Y")
        assert not net.has_link("Y", "X")
        _assert_consistent(net)

    def test_re_adding_pair_updates_weight(self):
        net = Network()
        net.add_link("X", "Y", 1)
        net.add_link("X", "Y", 5)
        assert list(net.links) == [("X", "Y")]
        assert net.get_link("X", "Y").weight == 5
        assert net.get_router("X").adjacent == [net.get_router("Y").index]

    def test_re_adding_pair_keeps_active_flag(self):
        net = Network()
        net.add_link("X", "Y", 1)
        net.set_link_active("X", "Y", False)
        net.add_link("X", "Y", 2)
        assert net.get_link("X", "Y").active is False

    def test_adjacency_sorted_by_name(self):
        net = Network()
        for dst in ("D", "B", "C"):
            net.add_link("A", dst, 1)
        adjacent = [net.router_at(i).name for i in net.get_router("A").adjacent]
        assert adjacent == ["B", "C", "D"]

    def test_delete_link(self):
        net = Network()
        net.add_link("A", "B", 1)
        net.add_link("A", "C", 1)
        assert net.delete_link("A", "B") is True
        assert not net.has_link("A", "B")
        assert "B" in net
        _assert_consistent(net)

    def test_delete_missing_link_is_noop(self):
        net = Network()
        net.add_link("A", "B", 1)
        assert net.delete_link("B", "A") is False
        assert net.delete_link("Q", "R") is False
        assert len(net.links) == 1
        assert len(net) == 2

    @pytest.mark.parametrize("weight", [-1, float("nan"), "abc", None])
    def test_invalid_weight_rejected(self, weight):
        net = Network()
        with pytest.raises(InvalidWeightError):
            net.add_link("A", "B", weight)
        assert len(net) == 0

    def test_invalid_weight_is_value_error(self):
        with pytest.raises(ValueError):
            Network().add_link("A", "B", -0.5)

    def test_self_loop_rejected(self):
        net = Network()
        with pytest.raises(SelfLoopError):
            net.add_link("A", "A", 1)
        assert len(net) == 0

    def test_load_links_bidirectional(self):
        net = Network()
        net.load_links([("A", "B", 2), ("B", "C", 3)])
        assert set(net.links) == {("A", "B"), ("B", "A"), ("B", "C"), ("C", "B")}
        assert net.get_link("C", "B").weight == 3
        _assert_consistent(net)


class TestUpDown:
    def test_router_down_and_up(self):
        net = Network()
        net.add_router("A")
        assert net.set_router_active("A", False) is True
        assert net.get_router("A").active is False
        net.set_router_active("A", True)
        assert net.get_router("A").active is True

    def test_link_down_and_up(self):
        net = Network()
        net.add_link("A", "B", 1)
        assert net.set_link_active("A", "B", False) is True
        assert net.get_link("A", "B").active is False
        net.set_link_active("A", "B", True)
        assert net.get_link("A", "B").active is True

    def test_missing_entities_are_noop(self):
        net = Network()
        net.add_link("A", "B", 1)
        assert net.set_router_active("Z", False) is False
        assert net.set_link_active("B", "A", False) is False
        assert "Z" not in net
        assert not net.has_link("B", "A")


class TestTransposeAndReset:
    def test_transpose_reverses_links(self):
        net = Network()
        net.add_link("A", "B", 2)
        net.set_link_active("A", "B", False)
        net.transpose()
        assert list(net.links) == [("B", "A")]
        link = net.get_link("B", "A")
        assert link.weight == 2
        assert link.active is False
        assert net.get_router("A").adjacent == []
        _assert_consistent(net)

    @pytest.mark.parametrize("seed", range(5))
    def test_transpose_is_involution(self, seed):
        rng = random.Random(seed)
        names = [f"R{i}" for i in range(8)]
        net = Network()
        for _ in range(20):
            src, dst = rng.sample(names, 2)
            net.add_link(src, dst, rng.randint(0, 9))
        for src, dst in rng.sample(sorted(net.links), 3):
            net.set_link_active(src, dst, False)

        before_links = {k: (l.weight, l.active) for k, l in net.links.items()}
        before_adj = {n: list(r.adjacent) for n, r in net.routers.items()}

        net.transpose()
        _assert_consistent(net)
        net.transpose()

        assert {k: (l.weight, l.active) for k, l in net.links.items()} == before_links
        assert {n: list(r.adjacent) for n, r in net.routers.items()} == before_adj
        _assert_consistent(net)

    def test_reset_all(self, triangle1):
        triangle1.shortest_path("A", "C")
        triangle1.reachability()
        triangle1.reset_all()
        for router in triangle1.routers.values():
            assert math.isinf(router.distance)
            assert router.predecessor is None
            assert router.ancestors == set()

    def test_clear(self, triangle1):
        triangle1.clear()
        assert len(triangle1) == 0
        assert triangle1.links == {}


class TestTopology:
    def test_topology_dump(self, triangle1):
        triangle1.set_router_active("B", False)
        triangle1.set_link_active("A", "C", False)
        assert triangle1.topology() == [
            ("A", True, [("B", 2.0, True), ("C", 10.0, False)]),
            ("B", False, [("A", 2.0, True), ("C", 3.0, True)]),
            ("C", True, [("A", 10.0, True), ("B", 3.0, True)]),
        ]

    def test_topology_empty(self):
        assert Network().topology() == []
