from __future__ import annotations

from typing import List, Tuple, TypeVar

from algraph.graph.expression import Graph
from algraph.graph.fold import foldg, ITERATIVE
from algraph.labels.capabilities import Eq, Ord
from algraph.labels.collections import AdjacencyMap

T = TypeVar("T")

AdjacencyList = List[Tuple[T, List[T]]]


def to_adjacency_map(g: Graph[T], eq: Eq[T], *, strategy: str = ITERATIVE) -> AdjacencyMap[T]:
    """
    Flatten an expression into vertex -> successor set form.

    Connect merges both operands' maps with a cross map in which every
    source-side vertex gets every target-side vertex as successor.
    Target-side vertices stay keys even when they have no successors.
    Intermediate maps are merged in place and the result is frozen.
    """

    def on_connect(source: AdjacencyMap[T], target: AdjacencyMap[T]) -> AdjacencyMap[T]:
        cross = source._cross(target)
        return source._absorb(target)._absorb(cross)

    result = foldg(
        g,
        AdjacencyMap(eq),
        lambda v: AdjacencyMap.singleton(eq, v),
        AdjacencyMap._absorb,
        on_connect,
        strategy=strategy,
    )
    return result.freeze()


def to_adjacency_list(g: Graph[T], order: Ord[T], *, strategy: str = ITERATIVE) -> AdjacencyList:
    """
    Adjacency map as (vertex, successors) pairs, both levels sorted.
    """
    am = to_adjacency_map(g, order.eq, strategy=strategy)
    return [(v, order.sorted(am[v])) for v in order.sorted(am)]


def is_subgraph(
    parent: Graph[T],
    candidate: Graph[T],
    eq: Eq[T],
    *,
    strategy: str = ITERATIVE,
) -> bool:
    """
    True when every vertex and every edge of `candidate` is in `parent`.
    """

    parent_map = to_adjacency_map(parent, eq, strategy=strategy)
    candidate_map = to_adjacency_map(candidate, eq, strategy=strategy)

    if len(candidate_map) > len(parent_map):
        return False

    for v, successors in candidate_map.items():
        parent_successors = parent_map.get(v)
        if parent_successors is None:
            return False
        if not successors.issubset(parent_successors):
            return False

    return True
