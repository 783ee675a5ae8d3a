"""Portfolio entities backing the dashboard, model-performance and fairness views."""

from dataclasses import dataclass, field
from typing import Dict, List

from .borrower import Borrower


@dataclass(frozen=True)
class KpiSummary:
    """Headline numbers of the dashboard."""

    total_borrowers: int
    avg_credit_score: int
    approval_rate: float
    auc_score: float
    selected_model: str
    financial_inclusion_rate: float
    new_borrowers_scored: int


@dataclass(frozen=True)
class RiskBucket:
    """Share of the portfolio in one risk band."""

    band: str
    count: int
    percentage: float


@dataclass(frozen=True)
class PredictionBin:
    """Histogram bin of predicted default probabilities."""

    bin: str
    count: int


@dataclass(frozen=True)
class FeatureImportance:
    """Global mean |attribution| of a feature."""

    feature: str
    importance: float


@dataclass(frozen=True)
class ModelMetrics:
    """Hold-out and cross-validation metrics of one candidate model."""

    model: str
    accuracy: float
    precision: float
    recall: float
    f1: float
    auc: float
    cross_val_mean: float
    cross_val_std: float


@dataclass(frozen=True)
class ConfusionMatrix:
    """Confusion matrix counts of one model."""

    true_positive: int
    false_positive: int
    true_negative: int
    false_negative: int

    @property
    def total(self) -> int:
        return (
            self.true_positive
            + self.false_positive
            + self.true_negative
            + self.false_negative
        )


@dataclass(frozen=True)
class RocPoint:
    """One point of a ROC curve."""

    fpr: float
    tpr: float


@dataclass(frozen=True)
class ThresholdPoint:
    """Precision/recall/F1 at one decision threshold."""

    threshold: float
    precision: float
    recall: float
    f1: float


@dataclass(frozen=True)
class FairnessSubgroup:
    """Model behaviour on one demographic subgroup."""

    subgroup: str
    accuracy: float
    approval_rate: float
    count: int


@dataclass(frozen=True)
class CostSimulation:
    """
    Cost-sensitive view of the selected model's errors.

    All amounts are in rupees.
    """

    avg_loan_amount: int
    false_negative_cost: int
    false_positive_cost: int
    true_positive_gain: int
    total_false_negatives: int
    total_false_positives: int
    total_true_positives: int

    @property
    def expected_loss_from_fn(self) -> int:
        return self.total_false_negatives * self.false_negative_cost

    @property
    def expected_loss_from_fp(self) -> int:
        return self.total_false_positives * self.false_positive_cost

    @property
    def total_projected_gain(self) -> int:
        return self.total_true_positives * self.true_positive_gain

    @property
    def net_impact(self) -> int:
        return (
            self.total_projected_gain
            - self.expected_loss_from_fp
            - self.expected_loss_from_fn
        )


@dataclass(frozen=True)
class Portfolio:
    """Every dataset behind the dashboard pages, built once per process."""

    kpis: KpiSummary
    risk_distribution: List[RiskBucket]
    prediction_distribution: List[PredictionBin]
    borrowers: List[Borrower]
    model_metrics: List[ModelMetrics]
    roc_curves: Dict[str, List[RocPoint]]
    confusion_matrices: Dict[str, ConfusionMatrix]
    threshold_sweep: List[ThresholdPoint]
    fairness: List[FairnessSubgroup]
    disparate_impact_ratio: float
    cost_simulation: CostSimulation
    global_importance: List[FeatureImportance] = field(default_factory=list)
