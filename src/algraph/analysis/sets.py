from __future__ import annotations

from typing import List, Tuple, TypeVar

from algraph.graph.expression import Graph
from algraph.graph.fold import foldg, ITERATIVE
from algraph.labels.capabilities import Eq, Ord
from algraph.labels.collections import LabelSet
from algraph.analysis.membership import is_empty

T = TypeVar("T")

Edge = Tuple[T, T]


def vertex_set(g: Graph[T], eq: Eq[T], *, strategy: str = ITERATIVE) -> LabelSet[T]:
    result = foldg(
        g,
        LabelSet(eq),
        lambda v: LabelSet.singleton(eq, v),
        LabelSet._absorb,
        LabelSet._absorb,
        strategy=strategy,
    )
    return result.freeze()


def _sets(
    g: Graph[T],
    eq: Eq[T],
    strategy: str,
) -> Tuple[LabelSet[T], LabelSet[Edge]]:
    """
    Fold to (vertex set, edge set) in one pass.

    Connect adds the cross product of its operands' vertex sets
    to the union of their edge sets. Intermediate sets are merged in
    place; callers freeze what they hand out.
    """

    pair_eq = eq.pair()
    none = (LabelSet(eq), LabelSet(pair_eq))

    def on_vertex(v):
        return LabelSet.singleton(eq, v), none[1]

    def on_overlay(x, y):
        return x[0]._absorb(y[0]), x[1]._absorb(y[1])

    def on_connect(x, y):
        cross = LabelSet(pair_eq, ((a, b) for a in x[0] for b in y[0]))
        return x[0]._absorb(y[0]), x[1]._absorb(y[1])._absorb(cross)

    return foldg(g, none, on_vertex, on_overlay, on_connect, strategy=strategy)


def edge_set(g: Graph[T], eq: Eq[T], *, strategy: str = ITERATIVE) -> LabelSet[Edge]:
    return _sets(g, eq, strategy)[1].freeze()


def graph_equals(
    x: Graph[T],
    y: Graph[T],
    eq: Eq[T],
    *,
    strategy: str = ITERATIVE,
) -> bool:
    """
    Semantic equality: same vertex set and same edge set.

    Tree shape is irrelevant, so overlay(a, b) equals overlay(b, a).
    Costs O(V + E) set comparisons per call.
    """

    x_empty = is_empty(x, strategy=strategy)
    y_empty = is_empty(y, strategy=strategy)
    if x_empty or y_empty:
        return x_empty and y_empty

    x_vertices, x_edges = _sets(x, eq, strategy)
    y_vertices, y_edges = _sets(y, eq, strategy)
    return x_vertices.same_as(y_vertices) and x_edges.same_as(y_edges)


# ---------------------------------------------------------------------
# Counts and ordered listings
# ---------------------------------------------------------------------


def vertex_count(g: Graph[T], eq: Eq[T], *, strategy: str = ITERATIVE) -> int:
    return len(vertex_set(g, eq, strategy=strategy))


def edge_count(g: Graph[T], eq: Eq[T], *, strategy: str = ITERATIVE) -> int:
    return len(edge_set(g, eq, strategy=strategy))


def vertex_list(g: Graph[T], order: Ord[T], *, strategy: str = ITERATIVE) -> List[T]:
    return order.sorted(vertex_set(g, order.eq, strategy=strategy))


def edge_list(g: Graph[T], order: Ord[T], *, strategy: str = ITERATIVE) -> List[Edge]:
    """
    Edges sorted by source, then target.
    """

    def compare(x: Edge, y: Edge) -> int:
        return order.compare(x[0], y[0]) or order.compare(x[1], y[1])

    pairs = edge_set(g, order.eq, strategy=strategy)
    return Ord(compare, order.eq.pair()).sorted(pairs)
