"""Global pytest configuration and shared sample networks."""

import pytest

from lsgraph.model.network import Network


@pytest.fixture
def triangle1():
    # Every line is loaded in both directions.
    #
    #      [2]       [3]
    #  A◄──────►B◄──────►C
    #  ▲                 ▲
    #  └───────[10]──────┘

    net = Network()
    net.load_links([("A", "B", 2), ("B", "C", 3), ("A", "C", 10)])
    return net


@pytest.fixture
def square1():
    # Directed only.
    #
    #      [1]      [1]
    #  A──────►B──────►C
    #  │               ▲
    #  │ [2]       [2] │
    #  └──────►D───────┘

    net = Network()
    net.add_link("A", "B", 1)
    net.add_link("B", "C", 1)
    net.add_link("A", "D", 2)
    net.add_link("D", "C", 2)
    return net


@pytest.fixture
def late_relaxation1():
    # Directed only. The cheap route to E runs through the high-numbered hops,
    # which are only relaxed after E already holds a finite distance.
    #
    #  S──[1]──►A──[1]──►B──[1]──►C──[1]──►E
    #  │                                   ▲
    #  └─────────────────[10]──────────────┘

    net = Network()
    net.add_link("S", "E", 10)
    net.add_link("S", "A", 1)
    net.add_link("A", "B", 1)
    net.add_link("B", "C", 1)
    net.add_link("C", "E", 1)
    return net


@pytest.fixture
def cycle1():
    # Directed ring with a tail; names chosen so sorted iteration order is
    # not a topological order.
    #
    #  D──►C──►B──►A──►D      A──►Z

    net = Network()
    net.add_link("D", "C", 1)
    net.add_link("C", "B", 1)
    net.add_link("B", "A", 1)
    net.add_link("A", "D", 1)
    net.add_link("A", "Z", 1)
    return net


@pytest.fixture
def chain_reverse1():
    # Directed chain whose names sort against the direction of travel.
    #
    #  E──►D──►C──►B──►A

    net = Network()
    for src, dst in [("E", "D"), ("D", "C"), ("C", "B"), ("B", "A")]:
        net.add_link(src, dst, 1)
    return net
