"""Default run configuration."""

from src.config.influence import InfluenceConfig

# Edge list at data/network.edges, interactive source, network printed,
# score shown with two decimals.
DEFAULT_CONFIG = InfluenceConfig()
