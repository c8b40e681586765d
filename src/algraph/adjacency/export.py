"""
Hand-off to conventional graph tooling.

Expressions are flattened through the adjacency map, so the exported
structures hold exactly the vertex set and edge set of the expression.
networkx needs hashable labels and identifies nodes by Python `==`
and `hash`; the numpy matrix does not.
"""

from __future__ import annotations

import logging
from typing import Hashable, List, Tuple, TypeVar

import networkx as nx
import numpy as np

from algraph.graph.expression import Graph, overlay, vertices, edges
from algraph.graph.fold import ITERATIVE
from algraph.labels.capabilities import Eq, Ord
from algraph.adjacency.conversion import to_adjacency_map

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def to_networkx(g: Graph[T], eq: Eq[T], *, strategy: str = ITERATIVE) -> nx.DiGraph:
    """
    networkx DiGraph with the vertex set and edge set of `g`.

    Vertices are deduplicated under `eq`, but networkx then keys its
    nodes by Python `==` and `hash`. The export is only faithful when
    `eq` agrees with `==` (eq_strict does). With a coarser `eq` the
    surviving representative of a class is arbitrary and edges may
    attach to a label networkx treats as a different node.
    """
    am = to_adjacency_map(g, eq, strategy=strategy)

    digraph = nx.DiGraph()
    for v, successors in am.items():
        digraph.add_node(v)
        for w in successors:
            digraph.add_edge(v, w)

    logging.getLogger("algraph.export").debug(
        "to_networkx: nodes=%s edges=%s",
        digraph.number_of_nodes(),
        digraph.number_of_edges(),
    )
    return digraph


def from_networkx(digraph: nx.DiGraph) -> Graph[H]:
    """
    Expression with the same nodes and edges as `digraph`.

    Node and edge attributes are dropped.
    """
    return overlay(
        vertices(digraph.nodes()),
        edges(digraph.edges()),
    )


def to_adjacency_matrix(
    g: Graph[T],
    order: Ord[T],
    *,
    strategy: str = ITERATIVE,
) -> Tuple[List[T], np.ndarray]:
    """
    0/1 adjacency matrix with rows and columns in `order`.

    Entry [i, j] is 1 when there is an edge labels[i] -> labels[j].
    """

    am = to_adjacency_map(g, order.eq, strategy=strategy)
    labels = order.sorted(am)

    matrix = np.zeros((len(labels), len(labels)), dtype=np.int8)
    for i, v in enumerate(labels):
        successors = am[v]
        for j, w in enumerate(labels):
            if w in successors:
                matrix[i, j] = 1

    return labels, matrix
