"""Console reporting and step timing for influence runs."""

from src.reporting.console import format_distances, format_network, format_score
from src.reporting.timing import Timing, timed

__all__ = [
    "format_network",
    "format_distances",
    "format_score",
    "Timing",
    "timed",
]
