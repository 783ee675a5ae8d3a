"""Domain Entities - Core business objects."""

from .borrower import (
    Borrower,
    BorrowerRecommendation,
    BorrowerRiskBand,
    FeatureAttribution,
)
from .chat import ChatMessage, ChatRole
from .portfolio import (
    ConfusionMatrix,
    CostSimulation,
    FairnessSubgroup,
    FeatureImportance,
    KpiSummary,
    ModelMetrics,
    Portfolio,
    PredictionBin,
    RiskBucket,
    RocPoint,
    ThresholdPoint,
)

__all__ = [
    "Borrower",
    "BorrowerRecommendation",
    "BorrowerRiskBand",
    "FeatureAttribution",
    "ChatMessage",
    "ChatRole",
    "ConfusionMatrix",
    "CostSimulation",
    "FairnessSubgroup",
    "FeatureImportance",
    "KpiSummary",
    "ModelMetrics",
    "Portfolio",
    "PredictionBin",
    "RiskBucket",
    "RocPoint",
    "ThresholdPoint",
]
