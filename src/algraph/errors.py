from __future__ import annotations


class AlgraphError(Exception):
    """
    Base class for errors raised by algraph.
    """


class ConfigError(AlgraphError, ValueError):
    """
    Raised when a configuration value is outside its allowed range.
    """


class TraversalError(AlgraphError, ValueError):
    """
    Raised when a fold is asked to use an unknown traversal strategy.
    """


class MissingOrderError(AlgraphError, ValueError):
    """
    Raised when ordered output is requested from an instance
    that was built without an order capability.
    """
