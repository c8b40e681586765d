from hypothesis import given

from algraph import (
    get_instance_for,
    eq_strict,
    AlgraphConfig,
    SimplifyConfig,
    Vertex,
    Overlay,
    Empty,
    empty,
    vertex,
    overlay,
    connect,
    edge,
)
from algraph.transform import simplify

from strategies import graphs

G = get_instance_for(eq_strict)


def test_idempotent_overlay_collapses():
    assert G.simplify(overlay(vertex(1), vertex(1))) == Vertex(1)


def test_overlay_with_own_subgraph_collapses():
    assert G.simplify(overlay(edge(1, 2), vertex(1))) == edge(1, 2)
    assert G.simplify(overlay(vertex(2), edge(1, 2))) == edge(1, 2)


def test_empty_operands_collapse():
    assert G.simplify(connect(empty(), vertex(3))) == Vertex(3)
    assert G.simplify(overlay(vertex(3), empty())) == Vertex(3)
    assert G.simplify(overlay(empty(), empty())) == Empty()


def test_distinct_operands_are_kept():
    g = overlay(vertex(1), vertex(2))
    assert G.simplify(g) == g


@given(graphs)
def test_simplify_preserves_the_graph(g):
    assert G.equals(G.simplify(g), g)


@given(graphs)
def test_simplify_never_grows(g):
    assert G.size(G.simplify(g)) <= G.size(g)


def test_max_size_skips_large_candidates():
    g = overlay(vertex(1), vertex(1))
    assert simplify(g, eq_strict, max_size=1) == Overlay(Vertex(1), Vertex(1))
    assert simplify(g, eq_strict, max_size=2) == Vertex(1)


def test_instance_applies_configured_cap():
    capped = get_instance_for(
        eq_strict,
        config=AlgraphConfig(simplify=SimplifyConfig(max_size=1)),
    )
    g = overlay(vertex(1), vertex(1))
    assert capped.simplify(g) == g


def test_cap_counts_leaves_of_simplified_operands():
    g = overlay(overlay(vertex(1), vertex(1)), vertex(2))
    assert simplify(g, eq_strict, max_size=2) == Overlay(Vertex(1), Vertex(2))


def test_capped_simplify_on_deep_tree():
    g = Empty()
    for i in range(20_000):
        g = Overlay(g, Vertex(i))

    simplified = simplify(g, eq_strict, max_size=4)

    assert G.size(simplified) == 20_000
    assert G.equals(simplified, g)
