from hypothesis import given

from algraph import (
    get_instance_for,
    eq_strict,
    Vertex,
    Connect,
    empty,
    vertex,
    overlay,
    connect,
    edge,
    clique,
)

from strategies import graphs

G = get_instance_for(eq_strict)


def test_map_keeps_shape():
    g = overlay(edge(1, 2), vertex(3))
    assert G.map(str, g) == overlay(edge("1", "2"), vertex("3"))


def test_map_can_merge_vertices():
    g = G.map(lambda n: n % 2, clique([1, 2, 3]))
    assert set(G.vertex_set(g)) == {0, 1}
    assert set(G.edge_set(g)) == {(1, 0), (0, 1), (1, 1)}


def test_chain_substitutes_subgraphs():
    g = G.chain(edge(1, 2), lambda n: edge(n, n * 10))
    assert set(G.vertex_set(g)) == {1, 10, 2, 20}
    assert set(G.edge_set(g)) == {
        (1, 10),
        (2, 20),
        (1, 2),
        (1, 20),
        (10, 2),
        (10, 20),
    }


def test_chain_to_empty_erases_everything():
    assert G.is_empty(G.chain(clique([1, 2, 3]), lambda _: empty()))


def test_ap_applies_each_function_vertex():
    gf = overlay(vertex(lambda x: x + 1), vertex(lambda x: x * 10))
    g = G.ap(gf, edge(1, 2))

    assert set(G.vertex_set(g)) == {2, 3, 10, 20}
    assert set(G.edge_set(g)) == {(2, 3), (10, 20)}


def test_induce_drops_vertices_and_their_edges():
    g = G.induce(lambda n: n % 2 == 0, clique(range(5)))
    assert set(G.vertex_set(g)) == {0, 2, 4}
    assert set(G.edge_set(g)) == {(0, 2), (0, 4), (2, 4)}


def test_remove_vertex():
    g = G.remove_vertex(2, clique([1, 2, 3]))
    assert set(G.vertex_set(g)) == {1, 3}
    assert set(G.edge_set(g)) == {(1, 3)}


def test_remove_missing_vertex_keeps_graph():
    g = overlay(edge(1, 2), vertex(3))
    assert G.equals(G.remove_vertex(9, g), g)


def test_split_vertex_copies_incident_edges():
    g = G.split_vertex(1, [5, 6], overlay(edge(0, 1), edge(1, 2)))
    assert set(G.vertex_set(g)) == {0, 2, 5, 6}
    assert set(G.edge_set(g)) == {(0, 5), (0, 6), (5, 2), (6, 2)}


def test_split_into_nothing_removes_vertex():
    g = clique([1, 2, 3])
    assert G.equals(G.split_vertex(2, [], g), G.remove_vertex(2, g))


def test_transpose_reverses_edges():
    assert G.transpose(edge(1, 2)) == Connect(Vertex(2), Vertex(1))
    g = G.transpose(clique([1, 2, 3]))
    assert set(G.edge_set(g)) == {(2, 1), (3, 1), (3, 2)}


@given(graphs)
def test_transpose_is_an_involution(g):
    assert G.transpose(G.transpose(g)) == g


@given(graphs)
def test_transpose_flips_edge_set(g):
    flipped = {(b, a) for a, b in G.edge_set(g)}
    assert set(G.edge_set(G.transpose(g))) == flipped
    assert G.vertex_set(G.transpose(g)).same_as(G.vertex_set(g))


@given(graphs)
def test_transforms_do_not_modify_input(g):
    before = repr(g)
    G.map(lambda n: n + 1, g)
    G.transpose(g)
    G.simplify(g)
    G.induce(lambda n: n > 2, g)
    assert repr(g) == before


def test_connect_with_removed_side_keeps_other_side():
    g = G.remove_vertex(1, connect(vertex(1), vertex(2)))
    assert set(G.vertex_set(g)) == {2}
    assert G.edge_count(g) == 0
