"""
Feature Scoring for the CreditAI scoring engine.

Each questionnaire answer is mapped to a 0-100 sub-score and a signed
attribution. Categorical questions use explicit lookup tables, age is
scored piecewise by range.

Fail-open policy:
    A value that is not in the feature's table (empty, missing, a typo,
    or an option added to the UI later) scores the neutral sub-score and
    a zero attribution. Nothing in this module raises on bad input.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional, Tuple

from .models import AnswerSet, Feature, FeatureScore
from .settings import ScoringSettings, scoring_settings


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a dashboard would display it (0.5 always rounds away from zero)."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    # normalize -0.0
    return float(rounded) + 0.0


@dataclass(frozen=True)
class FeatureSpec:
    """
    Static definition of one scored feature.

    Attributes:
        feature: Feature identifier
        answer_key: AnswerSet field the raw value is read from
        weight: Share of the weighted aggregate (all weights sum to 1.0)
        ceiling: Maximum attribution magnitude for a sub-score of 0 or 100
        table: Option string -> sub-score (None for range-scored features)
    """
    feature: Feature
    answer_key: str
    weight: float
    ceiling: float
    table: Optional[Dict[str, int]] = None

    @property
    def options(self) -> Tuple[str, ...]:
        return tuple(self.table) if self.table else ()


# =============================================================================
# Lookup Tables (option order = questionnaire order)
# =============================================================================

MONTHLY_INCOME_TABLE = {
    "< ₹15,000": 20,
    "₹15,000–30,000": 40,
    "₹30,000–60,000": 65,
    "₹60,000–1L": 80,
    "₹1L+": 95,
}

EMPLOYMENT_TYPE_TABLE = {
    "Salaried": 90,
    "Self-employed": 55,
    "Freelancer": 40,
    "Business owner": 70,
}

INCOME_DURATION_TABLE = {
    "< 6 months": 25,
    "6–12 months": 45,
    "1–3 years": 70,
    "3+ years": 95,
}

MONTHLY_EMI_TABLE = {
    "None": 95,
    "< ₹5,000": 75,
    "₹5,000–15,000": 45,
    "₹15,000+": 20,
}

MISSED_PAYMENTS_TABLE = {
    "Never": 95,
    "1–2 times": 40,
    "3+ times": 10,
}

BILL_PAYMENT_BEHAVIOR_TABLE = {
    "Before due date": 90,
    "On due date": 65,
    "After due date": 25,
}

AVG_BANK_BALANCE_TABLE = {
    "< ₹5,000": 15,
    "₹5,000–20,000": 40,
    "₹20,000–50,000": 70,
    "₹50,000+": 92,
}

SAVINGS_HABIT_TABLE = {
    "No": 15,
    "Occasionally": 40,
    "Yes (less than 20%)": 65,
    "Yes (20%+)": 90,
}

INCOME_SOURCES_TABLE = {
    "1": 50,
    "2": 75,
    "3+": 92,
}

LOAN_REJECTION_HISTORY_TABLE = {
    "No": 90,
    "Yes (once)": 50,
    "Yes (multiple times)": 15,
}

# Upper age bound (exclusive) -> sub-score. Young and elderly borrowers
# score below prime working age.
AGE_BRACKETS: Tuple[Tuple[int, int], ...] = (
    (21, 30),
    (25, 50),
    (35, 80),
    (50, 85),
    (60, 70),
)
AGE_SENIOR_SCORE = 55


FEATURE_SPECS: Tuple[FeatureSpec, ...] = (
    FeatureSpec(Feature.MONTHLY_INCOME, "monthly_income_range", 0.15, 0.18, MONTHLY_INCOME_TABLE),
    FeatureSpec(Feature.EMPLOYMENT_TYPE, "employment_type", 0.08, 0.12, EMPLOYMENT_TYPE_TABLE),
    FeatureSpec(Feature.INCOME_DURATION, "income_duration", 0.12, 0.15, INCOME_DURATION_TABLE),
    FeatureSpec(Feature.MONTHLY_EMI, "total_monthly_emi", 0.18, 0.20, MONTHLY_EMI_TABLE),
    FeatureSpec(Feature.MISSED_PAYMENTS, "missed_payments", 0.20, 0.25, MISSED_PAYMENTS_TABLE),
    FeatureSpec(Feature.BILL_PAYMENT_BEHAVIOR, "bill_payment_behavior", 0.07, 0.10, BILL_PAYMENT_BEHAVIOR_TABLE),
    FeatureSpec(Feature.AVG_BANK_BALANCE, "avg_bank_balance", 0.08, 0.12, AVG_BANK_BALANCE_TABLE),
    FeatureSpec(Feature.SAVINGS_HABIT, "savings_habit", 0.04, 0.08, SAVINGS_HABIT_TABLE),
    FeatureSpec(Feature.INCOME_SOURCES, "income_sources", 0.03, 0.06, INCOME_SOURCES_TABLE),
    FeatureSpec(Feature.LOAN_REJECTION_HISTORY, "loan_rejection_history", 0.03, 0.14, LOAN_REJECTION_HISTORY_TABLE),
    FeatureSpec(Feature.AGE, "age", 0.02, 0.05),
)

_SPECS_BY_FEATURE = {spec.feature: spec for spec in FEATURE_SPECS}


def get_feature_spec(feature: Feature) -> FeatureSpec:
    """Look up the static definition of a feature."""
    return _SPECS_BY_FEATURE[Feature(feature)]


# =============================================================================
# Scoring
# =============================================================================

def score_age(age: Any, settings: ScoringSettings = scoring_settings) -> int:
    """
    Convert an age in years to a 0-100 sub-score.

    Brackets:
        < 21: 30, 21-24: 50, 25-34: 80, 35-49: 85, 50-59: 70, 60+: 55

    Args:
        age: Age in years; anything that is not a number scores neutral
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        Sub-score from 0-100
    """
    if isinstance(age, bool) or not isinstance(age, (int, float)) or math.isnan(age):
        return settings.neutral_sub_score

    for upper_bound, sub_score in AGE_BRACKETS:
        if age < upper_bound:
            return sub_score
    return AGE_SENIOR_SCORE


def calculate_attribution(
    sub_score: int,
    ceiling: float,
    settings: ScoringSettings = scoring_settings,
) -> float:
    """
    Signed risk attribution for a sub-score.

    attribution = -((sub_score - neutral) / 100) * ceiling

    A sub-score above neutral gives a negative (risk-reducing) value.
    """
    return -((sub_score - settings.neutral_sub_score) / 100) * ceiling + 0.0


def score_feature(
    feature: Feature,
    raw_value: Any,
    settings: ScoringSettings = scoring_settings,
) -> FeatureScore:
    """
    Score a single raw answer.

    Args:
        feature: Which feature the value belongs to
        raw_value: Option string for categorical features, age in years for Age
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        FeatureScore with the sub-score and its attribution
    """
    spec = get_feature_spec(feature)

    if spec.table is None:
        sub_score = score_age(raw_value, settings)
    elif isinstance(raw_value, str):
        sub_score = spec.table.get(raw_value, settings.neutral_sub_score)
    else:
        sub_score = settings.neutral_sub_score

    return FeatureScore(
        feature=spec.feature,
        score=sub_score,
        attribution=calculate_attribution(sub_score, spec.ceiling, settings),
    )


def score_answers(
    answers: AnswerSet,
    settings: ScoringSettings = scoring_settings,
) -> Tuple[FeatureScore, ...]:
    """Score every feature of an AnswerSet in aggregation order."""
    return tuple(
        score_feature(spec.feature, getattr(answers, spec.answer_key), settings)
        for spec in FEATURE_SPECS
    )
