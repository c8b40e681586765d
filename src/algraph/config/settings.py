from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from algraph.errors import ConfigError
from algraph.graph.fold import STRATEGIES, ITERATIVE

# ---------------------------------------------------------------------
# Fold traversal
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class TraversalConfig:
    """
    Controls how folds walk an expression tree.

    "iterative" uses an explicit work list and handles arbitrarily
    deep trees; "recursive" uses the call stack.
    """

    strategy: Literal["recursive", "iterative"] = ITERATIVE

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ConfigError(
                f"traversal strategy must be one of {STRATEGIES}, got {self.strategy!r}"
            )


# ---------------------------------------------------------------------
# Simplification
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class SimplifyConfig:
    """
    Bounds the cost of the absorption pass.

    max_size = 0 leaves simplify uncapped.
    """

    max_size: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.max_size, bool) or not isinstance(self.max_size, int):
            raise ConfigError(
                f"simplify max_size must be an integer, got {self.max_size!r}"
            )
        if self.max_size < 0:
            raise ConfigError(f"simplify max_size must be >= 0, got {self.max_size}")


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class AlgraphConfig:
    """
    Root configuration object for algraph.

    Passed once to an instance and treated as immutable policy.
    """

    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    simplify: SimplifyConfig = field(default_factory=SimplifyConfig)
