from __future__ import annotations

from typing import Callable, List, Tuple, TypeVar

from algraph.errors import TraversalError
from algraph.graph.expression import Graph, Empty, Vertex, Overlay, Connect

T = TypeVar("T")
B = TypeVar("B")

RECURSIVE = "recursive"
ITERATIVE = "iterative"
STRATEGIES = (RECURSIVE, ITERATIVE)


def foldg(
    g: Graph[T],
    on_empty: B,
    on_vertex: Callable[[T], B],
    on_overlay: Callable[[B, B], B],
    on_connect: Callable[[B, B], B],
    *,
    strategy: str = ITERATIVE,
) -> B:
    """
    Collapse an expression bottom-up.

    Empty becomes `on_empty`, Vertex(v) becomes `on_vertex(v)` and
    each binary node combines the folded results of its operands
    (left before right, source before target).

    Both strategies return the same result. The iterative one keeps an
    explicit work list and is not bounded by the interpreter's
    recursion limit.
    """

    if strategy == ITERATIVE:
        return _fold_iterative(g, on_empty, on_vertex, on_overlay, on_connect)
    if strategy == RECURSIVE:
        return _fold_recursive(g, on_empty, on_vertex, on_overlay, on_connect)

    raise TraversalError(
        f"unknown traversal strategy {strategy!r}; expected one of {STRATEGIES}"
    )


def _fold_recursive(g, on_empty, on_vertex, on_overlay, on_connect):
    def go(node):
        if isinstance(node, Empty):
            return on_empty
        if isinstance(node, Vertex):
            return on_vertex(node.value)
        if isinstance(node, Overlay):
            return on_overlay(go(node.left), go(node.right))
        if isinstance(node, Connect):
            return on_connect(go(node.source), go(node.target))
        raise TypeError(f"not a graph expression: {node!r}")

    return go(g)


def _fold_iterative(g, on_empty, on_vertex, on_overlay, on_connect):
    # (node, children_done) pairs; results hold folded operands in order
    stack: List[Tuple[object, bool]] = [(g, False)]
    results: list = []

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Empty):
            results.append(on_empty)
        elif isinstance(node, Vertex):
            results.append(on_vertex(node.value))
        elif isinstance(node, Overlay):
            if children_done:
                right = results.pop()
                left = results.pop()
                results.append(on_overlay(left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        elif isinstance(node, Connect):
            if children_done:
                target = results.pop()
                source = results.pop()
                results.append(on_connect(source, target))
            else:
                stack.append((node, True))
                stack.append((node.target, False))
                stack.append((node.source, False))
        else:
            raise TypeError(f"not a graph expression: {node!r}")

    return results.pop()
