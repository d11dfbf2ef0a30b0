"""Run configuration system with frozen, serializable dataclasses."""

from src.config.influence import InfluenceConfig, LoaderConfig, ReportConfig
from src.config.defaults import DEFAULT_CONFIG
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "InfluenceConfig",
    "LoaderConfig",
    "ReportConfig",
    "DEFAULT_CONFIG",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
