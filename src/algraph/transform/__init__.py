"""
Transform subsystem for algraph.

Every transform builds a new expression; inputs are never modified.
- gmap / chain / ap: relabelling and vertex substitution
- induce / remove_vertex / split_vertex: substitution-based editing
- transpose: edge reversal
- simplify: heuristic absorption pass
"""

from algraph.transform.substitution import (
    gmap,
    chain,
    ap,
    induce,
    remove_vertex,
    split_vertex,
)
from algraph.transform.transpose import transpose
from algraph.transform.simplify import simplify

__all__ = [
    "gmap",
    "chain",
    "ap",
    "induce",
    "remove_vertex",
    "split_vertex",
    "transpose",
    "simplify",
]
