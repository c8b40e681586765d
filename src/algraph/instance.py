from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

import networkx as nx
import numpy as np

from algraph.errors import MissingOrderError
from algraph.config.settings import AlgraphConfig
from algraph.labels.capabilities import Eq, Ord
from algraph.labels.collections import AdjacencyMap, LabelSet
from algraph.graph import expression
from algraph.graph.expression import Graph
from algraph.graph.fold import foldg
from algraph import analysis, transform, adjacency

T = TypeVar("T")
B = TypeVar("B")


class GraphInstance(Generic[T]):
    """
    The graph algebra bound to one vertex label type.

    Closes over the label equality (and optionally order) capability
    and the configuration, so callers never pass them per operation.
    Constructors are shared by every instance; only derived operations
    depend on the capabilities.
    """

    empty = staticmethod(expression.empty)
    vertex = staticmethod(expression.vertex)
    vertices = staticmethod(expression.vertices)
    overlay = staticmethod(expression.overlay)
    overlays = staticmethod(expression.overlays)
    connect = staticmethod(expression.connect)
    connects = staticmethod(expression.connects)
    edge = staticmethod(expression.edge)
    edges = staticmethod(expression.edges)
    clique = staticmethod(expression.clique)

    def __init__(
        self,
        *,
        eq: Eq[T],
        order: Optional[Ord[T]] = None,
        config: Optional[AlgraphConfig] = None,
    ) -> None:
        self.eq = eq
        self.order = order
        self.config = config or AlgraphConfig()
        self._strategy = self.config.traversal.strategy

    def __repr__(self) -> str:
        return (
            f"GraphInstance(strategy={self._strategy!r}, "
            f"ordered={self.order is not None})"
        )

    # ------------------------------------------------------------------
    # Fold
    # ------------------------------------------------------------------

    def fold(
        self,
        g: Graph[T],
        on_empty: B,
        on_vertex: Callable[[T], B],
        on_overlay: Callable[[B, B], B],
        on_connect: Callable[[B, B], B],
    ) -> B:
        return foldg(
            g,
            on_empty,
            on_vertex,
            on_overlay,
            on_connect,
            strategy=self._strategy,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_empty(self, g: Graph[T]) -> bool:
        return analysis.is_empty(g, strategy=self._strategy)

    def size(self, g: Graph[T]) -> int:
        return analysis.size(g, strategy=self._strategy)

    def has_vertex(self, v: T, g: Graph[T]) -> bool:
        return analysis.has_vertex(v, g, self.eq, strategy=self._strategy)

    def has_edge(self, source: T, target: T, g: Graph[T]) -> bool:
        return analysis.has_edge(source, target, g, self.eq, strategy=self._strategy)

    def vertex_set(self, g: Graph[T]) -> LabelSet[T]:
        return analysis.vertex_set(g, self.eq, strategy=self._strategy)

    def edge_set(self, g: Graph[T]) -> LabelSet[Tuple[T, T]]:
        return analysis.edge_set(g, self.eq, strategy=self._strategy)

    def vertex_count(self, g: Graph[T]) -> int:
        return analysis.vertex_count(g, self.eq, strategy=self._strategy)

    def edge_count(self, g: Graph[T]) -> int:
        return analysis.edge_count(g, self.eq, strategy=self._strategy)

    def vertex_list(self, g: Graph[T]) -> List[T]:
        return analysis.vertex_list(g, self._require_order(), strategy=self._strategy)

    def edge_list(self, g: Graph[T]) -> List[Tuple[T, T]]:
        return analysis.edge_list(g, self._require_order(), strategy=self._strategy)

    def equals(self, x: Graph[T], y: Graph[T]) -> bool:
        return analysis.graph_equals(x, y, self.eq, strategy=self._strategy)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def map(self, f: Callable[[T], B], g: Graph[T]) -> Graph[B]:
        return transform.gmap(f, g, strategy=self._strategy)

    def chain(self, g: Graph[T], f: Callable[[T], Graph[B]]) -> Graph[B]:
        return transform.chain(g, f, strategy=self._strategy)

    def ap(self, gf: Graph[Callable[[T], B]], g: Graph[T]) -> Graph[B]:
        return transform.ap(gf, g, strategy=self._strategy)

    def induce(self, predicate: Callable[[T], bool], g: Graph[T]) -> Graph[T]:
        return transform.induce(predicate, g, strategy=self._strategy)

    def remove_vertex(self, v: T, g: Graph[T]) -> Graph[T]:
        return transform.remove_vertex(v, g, self.eq, strategy=self._strategy)

    def split_vertex(self, v: T, replacements: Iterable[T], g: Graph[T]) -> Graph[T]:
        return transform.split_vertex(v, replacements, g, self.eq, strategy=self._strategy)

    def transpose(self, g: Graph[T]) -> Graph[T]:
        return transform.transpose(g, strategy=self._strategy)

    def simplify(self, g: Graph[T]) -> Graph[T]:
        return transform.simplify(
            g,
            self.eq,
            max_size=self.config.simplify.max_size,
            strategy=self._strategy,
        )

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def to_adjacency_map(self, g: Graph[T]) -> AdjacencyMap[T]:
        return adjacency.to_adjacency_map(g, self.eq, strategy=self._strategy)

    def to_adjacency_list(self, g: Graph[T]) -> List[Tuple[T, List[T]]]:
        return adjacency.to_adjacency_list(g, self._require_order(), strategy=self._strategy)

    def is_subgraph(self, parent: Graph[T], candidate: Graph[T]) -> bool:
        return adjacency.is_subgraph(parent, candidate, self.eq, strategy=self._strategy)

    def to_networkx(self, g: Graph[T]) -> nx.DiGraph:
        return adjacency.to_networkx(g, self.eq, strategy=self._strategy)

    def from_networkx(self, digraph: nx.DiGraph) -> Graph[T]:
        return adjacency.from_networkx(digraph)

    def to_adjacency_matrix(self, g: Graph[T]) -> Tuple[List[T], np.ndarray]:
        return adjacency.to_adjacency_matrix(g, self._require_order(), strategy=self._strategy)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_order(self) -> Ord[T]:
        if self.order is None:
            raise MissingOrderError(
                "ordered output needs an Ord; pass order= to get_instance_for"
            )
        return self.order


def get_instance_for(
    eq: Eq[T],
    order: Optional[Ord[T]] = None,
    config: Optional[AlgraphConfig] = None,
) -> GraphInstance[T]:
    """
    Bind the graph algebra to a label equality (and optional order).

    The order, when given, must agree with `eq`.
    """

    instance = GraphInstance(eq=eq, order=order, config=config)
    logging.getLogger("algraph.instance").debug("created %r", instance)
    return instance
