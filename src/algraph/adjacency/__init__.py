"""
Adjacency subsystem for algraph.

Flattened representations of an expression for downstream consumers:
- adjacency map and ordered adjacency list
- subgraph containment test
- networkx DiGraph and numpy adjacency matrix hand-off
"""

from algraph.adjacency.conversion import (
    to_adjacency_map,
    to_adjacency_list,
    is_subgraph,
)
from algraph.adjacency.export import (
    to_networkx,
    from_networkx,
    to_adjacency_matrix,
)

__all__ = [
    "to_adjacency_map",
    "to_adjacency_list",
    "is_subgraph",
    "to_networkx",
    "from_networkx",
    "to_adjacency_matrix",
]
