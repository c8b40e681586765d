from __future__ import annotations

import logging
from typing import Iterable, Optional

from dynaconf import Dynaconf

from algraph.config.defaults import DEFAULTS
from algraph.config.settings import AlgraphConfig, SimplifyConfig, TraversalConfig


def load_settings(settings_files: Optional[Iterable[str]] = None) -> Dynaconf:
    """
    Dynaconf settings from optional settings files and
    ALGRAPH_* environment variables (env wins).
    """

    return Dynaconf(
        envvar_prefix="ALGRAPH",
        load_dotenv=True,
        settings_files=list(settings_files or []),
    )


def load_config(settings_files: Optional[Iterable[str]] = None) -> AlgraphConfig:
    settings = load_settings(settings_files)

    config = AlgraphConfig(
        traversal=TraversalConfig(
            strategy=str(settings.get("TRAVERSAL_STRATEGY", DEFAULTS["TRAVERSAL_STRATEGY"])),
        ),
        simplify=SimplifyConfig(
            max_size=settings.get("SIMPLIFY_MAX_SIZE", DEFAULTS["SIMPLIFY_MAX_SIZE"]),
        ),
    )

    logging.getLogger("algraph.config").info(
        "config loaded: strategy=%s simplify_max_size=%s",
        config.traversal.strategy,
        config.simplify.max_size,
    )
    return config
