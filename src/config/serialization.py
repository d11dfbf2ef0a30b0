"""JSON serialization and deserialization for run configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from src.config.influence import InfluenceConfig

_DACITE_CONFIG = DaciteConfig(check_types=True, strict=True)


def config_to_json(config: InfluenceConfig) -> str:
    """Serialize an InfluenceConfig to a JSON string (sorted keys, 2-space indent)."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> InfluenceConfig:
    """Deserialize a JSON string to an InfluenceConfig.

    Uses dacite with strict=True so unknown keys are rejected rather than
    silently ignored. Missing keys fall back to the dataclass defaults.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: InfluenceConfig) -> dict[str, Any]:
    """Convert an InfluenceConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> InfluenceConfig:
    """Reconstruct an InfluenceConfig from a plain dictionary."""
    return from_dict(data_class=InfluenceConfig, data=d, config=_DACITE_CONFIG)
