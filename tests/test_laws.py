from hypothesis import given

from algraph import get_instance_for, eq_strict, empty, overlay, connect

from strategies import graphs

G = get_instance_for(eq_strict)


@given(graphs, graphs)
def test_overlay_is_commutative(x, y):
    assert G.equals(overlay(x, y), overlay(y, x))


@given(graphs, graphs, graphs)
def test_overlay_is_associative(x, y, z):
    assert G.equals(overlay(x, overlay(y, z)), overlay(overlay(x, y), z))


@given(graphs)
def test_overlay_is_idempotent(x):
    assert G.equals(overlay(x, x), x)


@given(graphs)
def test_empty_is_connect_identity(x):
    assert G.equals(connect(empty(), x), x)
    assert G.equals(connect(x, empty()), x)


@given(graphs, graphs, graphs)
def test_connect_is_associative(x, y, z):
    assert G.equals(connect(x, connect(y, z)), connect(connect(x, y), z))


@given(graphs, graphs, graphs)
def test_connect_distributes_over_overlay(x, y, z):
    assert G.equals(
        connect(x, overlay(y, z)),
        overlay(connect(x, y), connect(x, z)),
    )
    assert G.equals(
        connect(overlay(x, y), z),
        overlay(connect(x, z), connect(y, z)),
    )


@given(graphs, graphs, graphs)
def test_decomposition(x, y, z):
    assert G.equals(
        connect(x, connect(y, z)),
        overlay(overlay(connect(x, y), connect(x, z)), connect(y, z)),
    )


@given(graphs, graphs)
def test_overlay_absorbed_by_connect(x, y):
    assert G.equals(overlay(connect(x, y), overlay(x, y)), connect(x, y))
