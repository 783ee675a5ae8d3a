"""
Questionnaire Scoring Module for the CreditAI Gateway
"""

from .models import (
    AnswerSet,
    Attribution,
    Feature,
    FeatureScore,
    Impact,
    Recommendation,
    RiskBand,
    ScoringResult,
    Suggestion,
)
from .settings import ScoringSettings, scoring_settings
from .features import FEATURE_SPECS, get_feature_spec, score_age, score_feature
from .credit_score import (
    compute_score,
    lookup_debt_to_income_ratio,
    rank_attributions,
    score_to_recommendation,
    score_to_risk_band,
)
from .suggestions import generate_suggestions
from .questions import MAX_AGE, MIN_AGE, Question, is_valid_age, list_questions

__all__ = [
    # Settings
    "ScoringSettings",
    "scoring_settings",
    # Models
    "AnswerSet",
    "Attribution",
    "Feature",
    "FeatureScore",
    "Impact",
    "Recommendation",
    "RiskBand",
    "ScoringResult",
    "Suggestion",
    # Feature Scoring
    "FEATURE_SPECS",
    "get_feature_spec",
    "score_age",
    "score_feature",
    # Aggregation
    "compute_score",
    "lookup_debt_to_income_ratio",
    "rank_attributions",
    "score_to_recommendation",
    "score_to_risk_band",
    # Suggestions
    "generate_suggestions",
    # Questionnaire
    "MAX_AGE",
    "MIN_AGE",
    "Question",
    "is_valid_age",
    "list_questions",
]
