"""
Score Computation for the CreditAI scoring engine.

This module orchestrates the complete scoring process:
1. Score every feature of the AnswerSet
2. Combine the sub-scores into a weighted 0-100 aggregate
3. Map the aggregate to the 300-850 credit score range
4. Derive risk band and recommendation from one shared threshold table
5. Derive confidence, default probability and expected value
6. Look up the debt-to-income proxy from the EMI answer
7. Rank the attributions for explanation display

This is the main entry point for the scoring module. It never raises:
unknown answers are already neutralized by the feature scorer.
"""

from typing import Iterable, List, Tuple

from .features import FEATURE_SPECS, round_half_up, score_answers
from .models import (
    AnswerSet,
    Attribution,
    FeatureScore,
    Recommendation,
    RiskBand,
    ScoringResult,
)
from .settings import ScoringSettings, scoring_settings


# Tier index -> (band, recommendation). Both are derived from the same index
# so they can never disagree about a threshold.
TIERS: Tuple[Tuple[RiskBand, Recommendation], ...] = (
    (RiskBand.PRIME, Recommendation.STRONG_APPROVE),
    (RiskBand.NEAR_PRIME, Recommendation.APPROVE),
    (RiskBand.SUBPRIME, Recommendation.REVIEW),
    (RiskBand.HIGH_RISK, Recommendation.REJECT),
)

# EMI answer -> debt-to-income proxy
DEBT_TO_INCOME_TABLE = {
    "None": 0.05,
    "< ₹5,000": 0.20,
    "₹5,000–15,000": 0.45,
    "₹15,000+": 0.70,
}
DEFAULT_DEBT_TO_INCOME = 0.30


def calculate_weighted_sum(feature_scores: Iterable[FeatureScore]) -> float:
    """
    Weighted average of the sub-scores (0-100).

    Weights are aligned positionally with FEATURE_SPECS.
    """
    return sum(
        fs.score * spec.weight
        for fs, spec in zip(feature_scores, FEATURE_SPECS)
    )


def weighted_sum_to_credit_score(
    weighted_sum: float,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """
    Map a 0-100 weighted sub-score to the credit score range.

    Args:
        weighted_sum: Weighted aggregate of the sub-scores
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        Credit score (300-850 with default settings)
    """
    if weighted_sum < 0:
        weighted_sum = 0
    elif weighted_sum > 100:
        weighted_sum = 100

    raw = settings.min_credit_score + (weighted_sum / 100) * settings.score_span
    return int(round_half_up(raw))


def get_tier(
    credit_score: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """Index into TIERS for a credit score (0 = best)."""
    for threshold, tier in settings.tier_thresholds:
        if credit_score >= threshold:
            return tier
    return len(TIERS) - 1


def score_to_risk_band(
    credit_score: int,
    settings: ScoringSettings = scoring_settings,
) -> RiskBand:
    """Risk band for a credit score: >=750 Prime, >=650 Near Prime, >=550 Subprime."""
    return TIERS[get_tier(credit_score, settings)][0]


def score_to_recommendation(
    credit_score: int,
    settings: ScoringSettings = scoring_settings,
) -> Recommendation:
    """Recommendation for a credit score, on the same thresholds as the band."""
    return TIERS[get_tier(credit_score, settings)][1]


def calculate_confidence(
    weighted_sum: float,
    settings: ScoringSettings = scoring_settings,
) -> float:
    """Confidence between 0.65 and 0.95, linear in the weighted sub-score."""
    return round_half_up(
        settings.confidence_floor + (weighted_sum / 100) * settings.confidence_span,
        2,
    )


def calculate_prediction_probability(weighted_sum: float) -> float:
    """Default probability proxy: the complement of the weighted sub-score."""
    return round_half_up(1 - weighted_sum / 100, 3)


def calculate_expected_value(
    credit_score: int,
    confidence: float,
    prediction_probability: float,
) -> int:
    """Composite display metric: score x confidence x (1 - default probability)."""
    return int(round_half_up(credit_score * confidence * (1 - prediction_probability)))


def lookup_debt_to_income_ratio(total_monthly_emi: str) -> float:
    """
    Debt-to-income proxy for an EMI answer.

    Deliberately independent of every other answer and of the weighted score.
    """
    return DEBT_TO_INCOME_TABLE.get(total_monthly_emi, DEFAULT_DEBT_TO_INCOME)


def rank_attributions(feature_scores: Iterable[FeatureScore]) -> List[Attribution]:
    """
    Order attributions by descending magnitude.

    Values are rounded to 3 decimals before ranking. sorted() is stable, so
    equal magnitudes keep their aggregation order.
    """
    attributions = [
        Attribution(feature=fs.feature, value=round_half_up(fs.attribution, 3))
        for fs in feature_scores
    ]
    return sorted(attributions, key=lambda a: abs(a.value), reverse=True)


def compute_score(
    answers: AnswerSet,
    settings: ScoringSettings = scoring_settings,
) -> ScoringResult:
    """
    Score a questionnaire.

    Args:
        answers: The borrower's answers (missing answers score neutral)
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        A new, immutable ScoringResult
    """
    feature_scores = score_answers(answers, settings)
    weighted_sum = calculate_weighted_sum(feature_scores)

    credit_score = weighted_sum_to_credit_score(weighted_sum, settings)
    confidence = calculate_confidence(weighted_sum, settings)
    prediction_probability = calculate_prediction_probability(weighted_sum)
    tier = get_tier(credit_score, settings)
    risk_band, recommendation = TIERS[tier]

    return ScoringResult(
        credit_score=credit_score,
        risk_band=risk_band,
        recommendation=recommendation,
        confidence=confidence,
        prediction_probability=prediction_probability,
        debt_to_income_ratio=lookup_debt_to_income_ratio(answers.total_monthly_emi),
        expected_value=calculate_expected_value(
            credit_score, confidence, prediction_probability
        ),
        weighted_sum=round_half_up(weighted_sum, 2),
        feature_scores=feature_scores,
        attributions=tuple(rank_attributions(feature_scores)),
    )
