"""
Label capabilities and collections for algraph.

Vertex labels are compared only through a caller-supplied capability:
- Eq: equality (plus an optional hash key)
- Ord: total order, for deterministic output
"""

from algraph.labels.capabilities import (
    Eq,
    Ord,
    eq_strict,
    eq_by,
    from_equals,
    ord_natural,
    ord_by,
)
from algraph.labels.collections import LabelSet, AdjacencyMap

__all__ = [
    "Eq",
    "Ord",
    "eq_strict",
    "eq_by",
    "from_equals",
    "ord_natural",
    "ord_by",
    "LabelSet",
    "AdjacencyMap",
]
