"""Run configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Edge-list input parameters."""

    edges_path: str = "data/network.edges"
    weighted_keyword: str = "weighted"  # third header token marking a weighted graph


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Console output parameters."""

    print_network: bool = True
    score_decimals: int = 2
    unreachable_label: str = "Unreachable"


@dataclass(frozen=True, slots=True)
class InfluenceConfig:
    """Top-level configuration for an influence run.

    source=None means the start user is read interactively. Validation runs
    in __post_init__ to reject invalid configurations early.
    """

    loader: LoaderConfig = field(default_factory=LoaderConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    source: int | None = None

    def __post_init__(self) -> None:
        if self.source is not None and self.source < 0:
            raise ValueError(f"source must be >= 0, got {self.source}")
        if self.report.score_decimals < 0:
            raise ValueError(
                f"score_decimals must be >= 0, got {self.report.score_decimals}"
            )
        if not self.loader.weighted_keyword.strip():
            raise ValueError("weighted_keyword must be a non-empty string")
