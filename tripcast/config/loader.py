"""YAML config loader and dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from tripcast.config.schema import TripcastConfig


def load_config(path: str | Path | None = None) -> TripcastConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults.
    """
    if path is None:
        return TripcastConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return TripcastConfig(**raw)


def get_config_value(config: TripcastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'search.min_query_length'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, dict):
            obj = obj[part]
        elif isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
