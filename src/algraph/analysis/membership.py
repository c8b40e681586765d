from __future__ import annotations

import operator
from typing import Tuple, TypeVar

from algraph.graph.expression import Graph
from algraph.graph.fold import foldg, ITERATIVE
from algraph.labels.capabilities import Eq

T = TypeVar("T")

# A state transformer over {0, 1, 2}, stored as its lookup table
# (image of 0, image of 1, image of 2).
Transition = Tuple[int, int, int]

NOTHING_SEEN = 0
SOURCE_SEEN = 1
EDGE_FOUND = 2

_IDENTITY: Transition = (NOTHING_SEEN, SOURCE_SEEN, EDGE_FOUND)


def is_empty(g: Graph[T], *, strategy: str = ITERATIVE) -> bool:
    return foldg(
        g,
        True,
        lambda _: False,
        operator.and_,
        operator.and_,
        strategy=strategy,
    )


def size(g: Graph[T], *, strategy: str = ITERATIVE) -> int:
    """
    Number of leaves (Empty and Vertex nodes) in the expression.
    """
    return foldg(
        g,
        1,
        lambda _: 1,
        operator.add,
        operator.add,
        strategy=strategy,
    )


def has_vertex(v: T, g: Graph[T], eq: Eq[T], *, strategy: str = ITERATIVE) -> bool:
    equals = eq.equals
    return foldg(
        g,
        False,
        lambda a: equals(v, a),
        operator.or_,
        operator.or_,
        strategy=strategy,
    )


def has_edge(
    source: T,
    target: T,
    g: Graph[T],
    eq: Eq[T],
    *,
    strategy: str = ITERATIVE,
) -> bool:
    """
    Edge membership without materialising the edge set.

    Runs a three-state automaton through the fold: 0 nothing seen,
    1 source seen, 2 edge confirmed (absorbing). Connect feeds the
    state reached on its source side into its target side, so a target
    match only counts after the source matched on an earlier operand.
    """

    equals = eq.equals

    def on_vertex(x) -> Transition:
        hit = EDGE_FOUND if equals(target, x) else SOURCE_SEEN
        start = SOURCE_SEEN if equals(source, x) else NOTHING_SEEN
        return (start, hit, EDGE_FOUND)

    def on_overlay(left: Transition, right: Transition) -> Transition:
        return (
            max(left[0], right[0]),
            max(left[1], right[1]),
            max(left[2], right[2]),
        )

    def on_connect(first: Transition, then: Transition) -> Transition:
        return tuple(
            EDGE_FOUND if state == EDGE_FOUND else then[state]
            for state in first
        )

    table = foldg(g, _IDENTITY, on_vertex, on_overlay, on_connect, strategy=strategy)
    return table[NOTHING_SEEN] == EDGE_FOUND
