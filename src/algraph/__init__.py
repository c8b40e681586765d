"""
algraph
=======

Directed graphs as algebraic expressions.

A graph is built from four constructors (Empty, Vertex, Overlay,
Connect) and every property is computed by folding the expression,
never by storing vertex and edge collections.

Core idea:
- Build graphs with algebra, analyse them with one fold.

Public API:
- get_instance_for / GraphInstance
- Eq / Ord capabilities
- constructors and foldg
- load_config
"""

from algraph.errors import AlgraphError, ConfigError, TraversalError, MissingOrderError
from algraph.labels import (
    Eq,
    Ord,
    eq_strict,
    eq_by,
    from_equals,
    ord_natural,
    ord_by,
    LabelSet,
    AdjacencyMap,
)
from algraph.graph import (
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
    foldg,
)
from algraph.config import AlgraphConfig, TraversalConfig, SimplifyConfig, load_config
from algraph.instance import GraphInstance, get_instance_for

__all__ = [
    "AlgraphError",
    "ConfigError",
    "TraversalError",
    "MissingOrderError",
    "Eq",
    "Ord",
    "eq_strict",
    "eq_by",
    "from_equals",
    "ord_natural",
    "ord_by",
    "LabelSet",
    "AdjacencyMap",
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
    "foldg",
    "AlgraphConfig",
    "TraversalConfig",
    "SimplifyConfig",
    "load_config",
    "GraphInstance",
    "get_instance_for",
]

__version__ = "0.1.0"
