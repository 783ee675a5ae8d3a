"""
Data models for questionnaire scoring.

These models represent the data structures used throughout the scoring pipeline,
from the raw questionnaire answers to the final result and improvement advice.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class Feature(str, Enum):
    """The eleven scored features, in aggregation order."""
    MONTHLY_INCOME = "Monthly Income"
    EMPLOYMENT_TYPE = "Employment Type"
    INCOME_DURATION = "Income Duration"
    MONTHLY_EMI = "Monthly EMI"
    MISSED_PAYMENTS = "Missed Payments"
    BILL_PAYMENT_BEHAVIOR = "Bill Payment Behavior"
    AVG_BANK_BALANCE = "Avg Bank Balance"
    SAVINGS_HABIT = "Savings Habit"
    INCOME_SOURCES = "Income Sources"
    LOAN_REJECTION_HISTORY = "Loan Rejection History"
    AGE = "Age"


class RiskBand(str, Enum):
    """Risk tiers, best first."""
    PRIME = "Prime"
    NEAR_PRIME = "Near Prime"
    SUBPRIME = "Subprime"
    HIGH_RISK = "High Risk"


class Recommendation(str, Enum):
    """Underwriting recommendations, aligned tier-for-tier with RiskBand."""
    STRONG_APPROVE = "Strong Approve"
    APPROVE = "Approve"
    REVIEW = "Review"
    REJECT = "Reject"


class Impact(str, Enum):
    """Suggestion impact levels."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return _IMPACT_RANK[self]


_IMPACT_RANK = {Impact.HIGH: 0, Impact.MEDIUM: 1, Impact.LOW: 2}


@dataclass(frozen=True)
class AnswerSet:
    """
    A borrower's questionnaire answers.

    Every categorical field holds one of the question's option strings.
    Empty or unrecognized strings are allowed: the scorer treats them as
    unknown and assigns the neutral sub-score, so a half-finished
    questionnaire still produces a result.

    Attributes:
        monthly_income_range: e.g. "₹30,000–60,000"
        employment_type: e.g. "Salaried"
        income_duration: e.g. "1–3 years"
        total_monthly_emi: e.g. "None"
        missed_payments: e.g. "Never"
        bill_payment_behavior: e.g. "Before due date"
        avg_bank_balance: e.g. "₹20,000–50,000"
        savings_habit: e.g. "Yes (20%+)"
        income_sources: "1", "2" or "3+"
        loan_rejection_history: e.g. "No"
        age: Age in years (None when not provided)
    """
    monthly_income_range: str = ""
    employment_type: str = ""
    income_duration: str = ""
    total_monthly_emi: str = ""
    missed_payments: str = ""
    bill_payment_behavior: str = ""
    avg_bank_balance: str = ""
    savings_habit: str = ""
    income_sources: str = ""
    loan_rejection_history: str = ""
    age: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AnswerSet":
        """Build from a mapping, ignoring unknown keys and treating None as unanswered."""
        values: Dict[str, Any] = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            values[f.name] = value if f.name == "age" else str(value)
        return cls(**values)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class FeatureScore:
    """
    Normalized standing on one feature.

    Attributes:
        feature: Which feature was scored
        score: Sub-score from 0-100 (higher = lower risk)
        attribution: Signed contribution to predicted risk.
            Negative values reduce risk, positive values increase it.
    """
    feature: Feature
    score: int
    attribution: float


@dataclass(frozen=True)
class Attribution:
    """A single entry of the ranked explanation list."""
    feature: Feature
    value: float


@dataclass(frozen=True)
class ScoringResult:
    """
    The outcome of scoring one AnswerSet.

    Built fresh on every call and never mutated afterwards.

    Attributes:
        credit_score: Score in the 300-850 range
        risk_band: Risk tier derived from credit_score
        recommendation: Underwriting recommendation on the same thresholds
        confidence: Display confidence between 0.65 and 0.95
        prediction_probability: Estimated default probability (1 - weighted/100)
        debt_to_income_ratio: DTI proxy looked up from the EMI answer alone
        expected_value: credit_score * confidence * (1 - prediction_probability)
        weighted_sum: The 0-100 weighted aggregate of all sub-scores
        feature_scores: All eleven sub-scores in aggregation order
        attributions: All eleven attributions, largest magnitude first
    """
    credit_score: int
    risk_band: RiskBand
    recommendation: Recommendation
    confidence: float
    prediction_probability: float
    debt_to_income_ratio: float
    expected_value: int
    weighted_sum: float
    feature_scores: Tuple[FeatureScore, ...]
    attributions: Tuple[Attribution, ...]

    def sub_score(self, feature: Feature) -> int:
        """Sub-score recorded for a feature."""
        for fs in self.feature_scores:
            if fs.feature == feature:
                return fs.score
        raise KeyError(feature)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "credit_score": self.credit_score,
            "risk_band": self.risk_band.value,
            "recommendation": self.recommendation.value,
            "confidence": self.confidence,
            "prediction_probability": self.prediction_probability,
            "debt_to_income_ratio": self.debt_to_income_ratio,
            "expected_value": self.expected_value,
            "weighted_sum": self.weighted_sum,
            "feature_scores": [
                {"feature": fs.feature.value, "score": fs.score}
                for fs in self.feature_scores
            ],
            "attributions": [
                {"feature": a.feature.value, "value": a.value}
                for a in self.attributions
            ],
        }


@dataclass(frozen=True)
class Suggestion:
    """One piece of improvement advice."""
    title: str
    description: str
    impact: Impact

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "impact": self.impact.value,
        }
