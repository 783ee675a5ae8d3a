"""Borrower entity representing one record of the scored portfolio."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class BorrowerRiskBand(str, Enum):
    """Coarse risk bands used by the portfolio views."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class BorrowerRecommendation(str, Enum):
    """Binary portfolio recommendation."""

    APPROVE = "Approve"
    DECLINE = "Decline"


@dataclass(frozen=True)
class FeatureAttribution:
    """Signed contribution of one feature to a borrower's predicted risk."""

    feature: str
    value: float

    def to_dict(self) -> dict:
        return {"feature": self.feature, "value": self.value}


@dataclass(frozen=True)
class Borrower:
    """
    A scored borrower in the portfolio.

    Monetary values are in rupees, credit_age in years.
    """

    id: str
    name: str
    credit_score: int
    risk_band: BorrowerRiskBand
    prediction_probability: float
    debt_to_income_ratio: float
    payment_utilization_ratio: float
    monthly_income: int
    number_of_open_accounts: int
    number_of_late_payments: int
    total_debt: int
    credit_age: float
    recommendation: BorrowerRecommendation
    confidence: float
    attributions: List[FeatureAttribution] = field(default_factory=list)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or id."""
        needle = query.lower()
        return needle in self.name.lower() or needle in self.id.lower()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "credit_score": self.credit_score,
            "risk_band": self.risk_band.value,
            "prediction_probability": self.prediction_probability,
            "debt_to_income_ratio": self.debt_to_income_ratio,
            "payment_utilization_ratio": self.payment_utilization_ratio,
            "monthly_income": self.monthly_income,
            "number_of_open_accounts": self.number_of_open_accounts,
            "number_of_late_payments": self.number_of_late_payments,
            "total_debt": self.total_debt,
            "credit_age": self.credit_age,
            "recommendation": self.recommendation.value,
            "confidence": self.confidence,
            "attributions": [a.to_dict() for a in self.attributions],
        }
