from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, Iterable, List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")


class _Node:
    """
    Tree equality, hashing and repr for expression nodes.

    All three walk the tree with an explicit work list, so they work on
    trees deeper than the interpreter's recursion limit.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Node):
            return NotImplemented
        return same_tree(self, other)

    def __hash__(self) -> int:
        from algraph.graph.fold import foldg

        return foldg(
            self,
            hash(("Empty",)),
            lambda v: hash(("Vertex", v)),
            lambda l, r: hash(("Overlay", l, r)),
            lambda s, t: hash(("Connect", s, t)),
        )

    def __repr__(self) -> str:
        from algraph.graph.fold import foldg

        return "".join(
            _fragments(
                foldg(
                    self,
                    "Empty()",
                    lambda v: f"Vertex(value={v!r})",
                    _wrap("Overlay(left=", ", right="),
                    _wrap("Connect(source=", ", target="),
                )
            )
        )


def _fragments(rendered) -> Deque[str]:
    # leaves render to a plain str; binary nodes to a deque of pieces
    if isinstance(rendered, str):
        return deque([rendered])
    return rendered


def _wrap(opening: str, separator: str):
    def combine(first, second) -> Deque[str]:
        first = _fragments(first)
        second = _fragments(second)
        # grow the longer operand so skewed trees render in linear time
        if len(first) >= len(second):
            first.appendleft(opening)
            first.append(separator)
            first.extend(second)
            first.append(")")
            return first
        second.appendleft(separator)
        second.extendleft(reversed(first))
        second.appendleft(opening)
        second.append(")")
        return second

    return combine


@dataclass(frozen=True, eq=False, repr=False)
class Empty(_Node):
    """
    The empty graph. Identity of both Overlay and Connect.
    """


@dataclass(frozen=True, eq=False, repr=False)
class Vertex(_Node, Generic[T]):
    """
    A single isolated vertex.
    """

    value: T


@dataclass(frozen=True, eq=False, repr=False)
class Overlay(_Node, Generic[T]):
    """
    Union of the vertices and edges of both operands.
    """

    left: "Graph[T]"
    right: "Graph[T]"


@dataclass(frozen=True, eq=False, repr=False)
class Connect(_Node, Generic[T]):
    """
    Union of both operands plus an edge from every vertex of
    `source` to every vertex of `target`. Operand order matters.
    """

    source: "Graph[T]"
    target: "Graph[T]"


Graph = Union[Empty, Vertex[T], Overlay[T], Connect[T]]

_EMPTY = Empty()


def same_tree(x: Graph[T], y: Graph[T]) -> bool:
    """
    True when both expressions have the same shape and equal labels.

    This is what `==` on expressions means. For "denotes the same
    graph" use semantic equality (analysis.graph_equals).
    """

    pending: List[Tuple[object, object]] = [(x, y)]
    while pending:
        a, b = pending.pop()
        if a is b:
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, Vertex):
            if not a.value == b.value:
                return False
        elif isinstance(a, Overlay):
            pending.append((a.right, b.right))
            pending.append((a.left, b.left))
        elif isinstance(a, Connect):
            pending.append((a.target, b.target))
            pending.append((a.source, b.source))

    return True


# ---------------------------------------------------------------------
# Primitive constructors
# ---------------------------------------------------------------------


def empty() -> Graph:
    return _EMPTY


def vertex(value: T) -> Graph[T]:
    return Vertex(value)


def overlay(left: Graph[T], right: Graph[T]) -> Graph[T]:
    return Overlay(left, right)


def connect(source: Graph[T], target: Graph[T]) -> Graph[T]:
    return Connect(source, target)


def edge(source: T, target: T) -> Graph[T]:
    return Connect(Vertex(source), Vertex(target))


# ---------------------------------------------------------------------
# Combinators over sequences
# ---------------------------------------------------------------------


def _balanced(graphs: Sequence[Graph[T]], op) -> Graph[T]:
    # op is associative, so any bracketing denotes the same graph
    if not graphs:
        return _EMPTY

    level: List[Graph[T]] = list(graphs)
    while len(level) > 1:
        paired = [op(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
        if len(level) % 2:
            paired.append(level[-1])
        level = paired

    return level[0]


def overlays(graphs: Iterable[Graph[T]]) -> Graph[T]:
    return _balanced(list(graphs), overlay)


def connects(graphs: Iterable[Graph[T]]) -> Graph[T]:
    return _balanced(list(graphs), connect)


def vertices(values: Iterable[T]) -> Graph[T]:
    """
    Overlay of isolated vertices.
    """
    return overlays(Vertex(v) for v in values)


def edges(pairs: Iterable[Tuple[T, T]]) -> Graph[T]:
    return overlays(edge(a, b) for a, b in pairs)


def clique(values: Iterable[T]) -> Graph[T]:
    """
    Connect of all given vertices: an edge from every vertex
    to every later vertex in the sequence.
    """
    return connects(Vertex(v) for v in values)
