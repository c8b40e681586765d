"""
Analysis subsystem for algraph.

Read-only queries computed by folding an expression:
- vertex and edge sets, semantic equality
- emptiness, size, vertex membership
- edge membership via a three-state automaton
"""

from algraph.analysis.membership import is_empty, size, has_vertex, has_edge
from algraph.analysis.sets import (
    vertex_set,
    edge_set,
    graph_equals,
    vertex_count,
    edge_count,
    vertex_list,
    edge_list,
)

__all__ = [
    "is_empty",
    "size",
    "has_vertex",
    "has_edge",
    "vertex_set",
    "edge_set",
    "graph_equals",
    "vertex_count",
    "edge_count",
    "vertex_list",
    "edge_list",
]
