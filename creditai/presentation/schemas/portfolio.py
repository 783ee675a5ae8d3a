"""Dashboard, model performance and fairness Pydantic schemas."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class KpiSummarySchema(_FromAttributes):
    total_borrowers: int
    avg_credit_score: int
    approval_rate: float
    auc_score: float
    selected_model: str
    financial_inclusion_rate: float
    new_borrowers_scored: int


class RiskBucketSchema(_FromAttributes):
    band: str
    count: int
    percentage: float


class PredictionBinSchema(_FromAttributes):
    bin: str = Field(..., examples=["20-25%"])
    count: int


class FeatureImportanceSchema(_FromAttributes):
    feature: str
    importance: float


class DashboardResponseSchema(_FromAttributes):
    """Schema for GET /v1/dashboard response body."""

    kpis: KpiSummarySchema
    risk_distribution: List[RiskBucketSchema]
    prediction_distribution: List[PredictionBinSchema]
    global_importance: List[FeatureImportanceSchema]


class ModelMetricsSchema(_FromAttributes):
    model: str
    accuracy: float
    precision: float
    recall: float
    f1: float
    auc: float
    cross_val_mean: float
    cross_val_std: float


class ConfusionMatrixSchema(_FromAttributes):
    true_positive: int
    false_positive: int
    true_negative: int
    false_negative: int
    total: int


class RocPointSchema(_FromAttributes):
    fpr: float
    tpr: float


class ThresholdPointSchema(_FromAttributes):
    threshold: float
    precision: float
    recall: float
    f1: float


class CostSimulationSchema(_FromAttributes):
    """Amounts in rupees."""

    avg_loan_amount: int
    false_negative_cost: int
    false_positive_cost: int
    true_positive_gain: int
    total_false_negatives: int
    total_false_positives: int
    total_true_positives: int
    expected_loss_from_fn: int
    expected_loss_from_fp: int
    total_projected_gain: int
    net_impact: int


class ModelPerformanceResponseSchema(_FromAttributes):
    """Schema for GET /v1/models response body."""

    selected_model: str = Field(..., examples=["XGBoost"])
    metrics: List[ModelMetricsSchema]
    roc_curves: Dict[str, List[RocPointSchema]]
    confusion_matrices: Dict[str, ConfusionMatrixSchema]
    threshold_sweep: List[ThresholdPointSchema]
    cost_simulation: CostSimulationSchema


class FairnessSubgroupSchema(_FromAttributes):
    subgroup: str = Field(..., examples=["Rural"])
    accuracy: float
    approval_rate: float
    count: int
    approval_gap: float = Field(
        ...,
        description="Absolute approval-rate difference to the reference subgroup",
    )
    flagged: bool


class FairnessResponseSchema(_FromAttributes):
    """Schema for GET /v1/fairness response body."""

    reference_subgroup: str = Field(..., examples=["Urban"])
    subgroups: List[FairnessSubgroupSchema]
    disparate_impact_ratio: float = Field(..., examples=[0.833])
    disparate_impact_threshold: float = Field(..., examples=[0.8])
    disparate_impact_passed: bool
