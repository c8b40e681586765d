from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from algraph.graph.expression import (
    Graph,
    Vertex,
    empty,
    overlay,
    connect,
    vertices,
)
from algraph.graph.fold import foldg, ITERATIVE
from algraph.labels.capabilities import Eq

A = TypeVar("A")
B = TypeVar("B")


def gmap(f: Callable[[A], B], g: Graph[A], *, strategy: str = ITERATIVE) -> Graph[B]:
    """
    Relabel every vertex with `f`, keeping the expression's shape.
    """
    return foldg(
        g,
        empty(),
        lambda v: Vertex(f(v)),
        overlay,
        connect,
        strategy=strategy,
    )


def chain(
    g: Graph[A],
    f: Callable[[A], Graph[B]],
    *,
    strategy: str = ITERATIVE,
) -> Graph[B]:
    """
    Substitute every vertex `v` with the expression `f(v)`.

    The Overlay/Connect structure around each vertex is kept, so every
    edge into or out of `v` now reaches every vertex of `f(v)`.
    Substituting Empty deletes the vertex together with its edges.
    """
    return foldg(g, empty(), f, overlay, connect, strategy=strategy)


def ap(
    gf: Graph[Callable[[A], B]],
    g: Graph[A],
    *,
    strategy: str = ITERATIVE,
) -> Graph[B]:
    """
    Replace every function vertex `fn` of `gf` with `gmap(fn, g)`.
    """
    return chain(gf, lambda fn: gmap(fn, g, strategy=strategy), strategy=strategy)


def induce(
    predicate: Callable[[A], bool],
    g: Graph[A],
    *,
    strategy: str = ITERATIVE,
) -> Graph[A]:
    """
    Subgraph induced by the vertices satisfying `predicate`.
    """
    return chain(
        g,
        lambda a: Vertex(a) if predicate(a) else empty(),
        strategy=strategy,
    )


def remove_vertex(v: A, g: Graph[A], eq: Eq[A], *, strategy: str = ITERATIVE) -> Graph[A]:
    equals = eq.equals
    return induce(lambda a: not equals(v, a), g, strategy=strategy)


def split_vertex(
    v: A,
    replacements: Iterable[A],
    g: Graph[A],
    eq: Eq[A],
    *,
    strategy: str = ITERATIVE,
) -> Graph[A]:
    """
    Replace `v` with the overlay of `replacements`; each replacement
    inherits all of `v`'s incoming and outgoing edges.
    """
    equals = eq.equals
    split = vertices(list(replacements))
    return chain(
        g,
        lambda a: split if equals(v, a) else Vertex(a),
        strategy=strategy,
    )
