from __future__ import annotations

import logging
from typing import Any

from dynaconf import Dynaconf

from strictgraph.config.constants import DEFAULTS
from strictgraph.config.settings import GraphConfig


def _settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="STRICTGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def _flag(settings: Dynaconf, overrides: dict, name: str) -> bool:
    if name in overrides:
        return bool(overrides[name])
    key = name.upper()
    # @bool understands on/off, yes/no and true/false spellings
    return settings.get(key, DEFAULTS[key], cast="@bool")


def load_graph_config(**overrides: Any) -> GraphConfig:
    """
    Build a GraphConfig from ``STRICTGRAPH_*`` environment variables.

    Keyword overrides win over the environment, which wins over DEFAULTS.
    """
    settings = _settings()

    config = GraphConfig(
        allow_self_loops=_flag(settings, overrides, "allow_self_loops"),
        strict_attribute_keys=_flag(settings, overrides, "strict_attribute_keys"),
    )

    logging.getLogger("strictgraph.config").info(
        "graph config loaded: allow_self_loops=%s strict_attribute_keys=%s",
        config.allow_self_loops,
        config.strict_attribute_keys,
    )
    return config
