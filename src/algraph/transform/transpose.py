from __future__ import annotations

from typing import TypeVar

from algraph.graph.expression import Graph, Connect, empty, vertex, overlay
from algraph.graph.fold import foldg, ITERATIVE

T = TypeVar("T")


def _flipped_connect(source: Graph[T], target: Graph[T]) -> Graph[T]:
    return Connect(target, source)


def transpose(g: Graph[T], *, strategy: str = ITERATIVE) -> Graph[T]:
    """
    Reverse the direction of every edge by swapping Connect operands.

    Transposing twice gives back a tree identical to `g`.
    """
    return foldg(g, empty(), vertex, overlay, _flipped_connect, strategy=strategy)
