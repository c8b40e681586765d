"""
Configuration for algraph.

Policy lives in frozen dataclasses; load_config() fills them from
Dynaconf (defaults, optional settings files, ALGRAPH_* env vars).
"""

from algraph.config.settings import AlgraphConfig, TraversalConfig, SimplifyConfig
from algraph.config.loader import load_config, load_settings

__all__ = [
    "AlgraphConfig",
    "TraversalConfig",
    "SimplifyConfig",
    "load_config",
    "load_settings",
]
