"""
Absorption-based simplification of graph expressions.

`simplify` is a heuristic, not a canonicaliser: it only collapses a
binary node into one of its operands when the node denotes the same
graph as that operand. Two expressions for the same graph may still
simplify to different trees, and the result is not guaranteed minimal.

Every binary node costs a semantic equality check (O(V + E)), so the
whole pass is superlinear. `max_size` bounds the nodes that get checked.
"""

from __future__ import annotations

import logging
from typing import Callable, Tuple, TypeVar

from algraph.graph.expression import Graph, empty, vertex, overlay, connect
from algraph.graph.fold import foldg, ITERATIVE
from algraph.labels.capabilities import Eq
from algraph.analysis.sets import graph_equals

T = TypeVar("T")

Combine = Callable[[Graph[T], Graph[T]], Graph[T]]
Sized = Tuple[Graph[T], int]


def simplify(
    g: Graph[T],
    eq: Eq[T],
    *,
    max_size: int = 0,
    strategy: str = ITERATIVE,
) -> Graph[T]:
    """
    Collapse redundant Overlay/Connect nodes bottom-up.

    At each binary node with simplified operands x and y, build
    z = op(x, y); return x if z denotes the same graph as x, else y
    if it denotes the same graph as y, else z.

    With `max_size > 0`, candidates with more than `max_size` leaves
    are kept as built without comparison. 0 means uncapped.
    """

    stats = {"collapsed": 0, "skipped": 0}

    # fold over (expression, leaf count) so the cap needs no extra pass
    def simple(op: Combine):
        def combine(x: Sized, y: Sized) -> Sized:
            (left, left_leaves), (right, right_leaves) = x, y
            z = op(left, right)
            leaves = left_leaves + right_leaves
            if max_size > 0 and leaves > max_size:
                stats["skipped"] += 1
                return z, leaves
            if graph_equals(left, z, eq, strategy=strategy):
                stats["collapsed"] += 1
                return x
            if graph_equals(right, z, eq, strategy=strategy):
                stats["collapsed"] += 1
                return y
            return z, leaves

        return combine

    result, _ = foldg(
        g,
        (empty(), 1),
        lambda v: (vertex(v), 1),
        simple(overlay),
        simple(connect),
        strategy=strategy,
    )

    logging.getLogger("algraph.simplify").debug(
        "simplify: collapsed=%s skipped=%s max_size=%s",
        stats["collapsed"],
        stats["skipped"],
        max_size,
    )
    return result
