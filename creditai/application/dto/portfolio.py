"""Data transfer objects for the portfolio views."""

from dataclasses import dataclass
from typing import Dict, List

from creditai.domain.entities import (
    ConfusionMatrix,
    CostSimulation,
    FairnessSubgroup,
    FeatureImportance,
    KpiSummary,
    ModelMetrics,
    PredictionBin,
    RiskBucket,
    RocPoint,
    ThresholdPoint,
)


@dataclass(frozen=True)
class DashboardResponse:
    """Headline KPIs and distributions of the dashboard page."""

    kpis: KpiSummary
    risk_distribution: List[RiskBucket]
    prediction_distribution: List[PredictionBin]
    global_importance: List[FeatureImportance]


@dataclass(frozen=True)
class ModelPerformanceResponse:
    """Candidate model comparison."""

    selected_model: str
    metrics: List[ModelMetrics]
    roc_curves: Dict[str, List[RocPoint]]
    confusion_matrices: Dict[str, ConfusionMatrix]
    threshold_sweep: List[ThresholdPoint]
    cost_simulation: CostSimulation


@dataclass(frozen=True)
class FairnessSubgroupDTO:
    """Subgroup metrics with its deviation from the reference subgroup."""

    subgroup: str
    accuracy: float
    approval_rate: float
    count: int
    approval_gap: float
    flagged: bool

    @classmethod
    def from_entity(
        cls,
        subgroup: FairnessSubgroup,
        reference: FairnessSubgroup,
        threshold: float,
    ) -> "FairnessSubgroupDTO":
        gap = round(abs(subgroup.approval_rate - reference.approval_rate), 4)
        return cls(
            subgroup=subgroup.subgroup,
            accuracy=subgroup.accuracy,
            approval_rate=subgroup.approval_rate,
            count=subgroup.count,
            approval_gap=gap,
            flagged=gap > threshold,
        )


@dataclass(frozen=True)
class FairnessResponse:
    """Fairness audit across demographic subgroups."""

    reference_subgroup: str
    subgroups: List[FairnessSubgroupDTO]
    disparate_impact_ratio: float
    disparate_impact_threshold: float
    disparate_impact_passed: bool
