"""
Graph expression subsystem for algraph.

Defines the four-constructor expression type and the single fold
every derived operation is built from:
- Empty, Vertex, Overlay, Connect
- constructors and sequence combinators
- foldg (recursive or work-list traversal)
"""

from algraph.graph.expression import (
    Graph,
    Empty,
    Vertex,
    Overlay,
    Connect,
    empty,
    vertex,
    vertices,
    overlay,
    overlays,
    connect,
    connects,
    edge,
    edges,
    clique,
    same_tree,
)
from algraph.graph.fold import foldg, RECURSIVE, ITERATIVE, STRATEGIES

__all__ = [
    "Graph",
    "Empty",
    "Vertex",
    "Overlay",
    "Connect",
    "empty",
    "vertex",
    "vertices",
    "overlay",
    "overlays",
    "connect",
    "connects",
    "edge",
    "edges",
    "clique",
    "same_tree",
    "foldg",
    "RECURSIVE",
    "ITERATIVE",
    "STRATEGIES",
]
