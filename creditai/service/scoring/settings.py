"""
Scoring Settings for the CreditAI scoring engine.

This module contains the tunable constants of the score mapping: the
credit score range, the band/recommendation thresholds and the confidence
curve. Per-feature lookup tables and weights live in ``features.py`` and
are not configurable, so the weight vector always sums to 1.0.

Environment variables use the SCORING_ prefix:
    SCORING_PRIME_THRESHOLD=750
    SCORING_CONFIDENCE_FLOOR=0.65
    SCORING_MAX_SUGGESTIONS=6

Usage:
    from creditai.service.scoring.settings import scoring_settings

    # Use default settings (loaded from env)
    floor = scoring_settings.min_credit_score

    # Or create custom settings for testing
    custom = ScoringSettings(prime_threshold=760)
"""

from functools import lru_cache
from typing import List, Tuple

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringSettings(BaseSettings):
    """
    Configurable parameters for the score mapping.

    All settings can be overridden via environment variables with SCORING_ prefix.
    Sub-scores are 0-100, credit scores use the 300-850 bureau range.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Credit Score Range ===
    min_credit_score: int = Field(
        default=300,
        ge=0,
        description="Credit score for a weighted sub-score of 0",
    )
    max_credit_score: int = Field(
        default=850,
        gt=0,
        description="Credit score for a weighted sub-score of 100",
    )

    # === Band / Recommendation Thresholds ===
    prime_threshold: int = Field(
        default=750,
        description="Scores at or above this are Prime / Strong Approve",
    )
    near_prime_threshold: int = Field(
        default=650,
        description="Scores at or above this are Near Prime / Approve",
    )
    subprime_threshold: int = Field(
        default=550,
        description="Scores at or above this are Subprime / Review (below = High Risk / Reject)",
    )

    # === Feature Scoring ===
    neutral_sub_score: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Sub-score used for unknown or missing answers",
    )

    # === Confidence Curve ===
    confidence_floor: float = Field(
        default=0.65,
        ge=0.0,
        le=1.0,
        description="Confidence at a weighted sub-score of 0",
    )
    confidence_span: float = Field(
        default=0.30,
        ge=0.0,
        le=1.0,
        description="Confidence added between weighted sub-score 0 and 100",
    )

    # === Suggestions ===
    max_suggestions: int = Field(
        default=6,
        ge=0,
        description="Maximum number of improvement suggestions returned",
    )

    @model_validator(mode="after")
    def validate_thresholds(self) -> "ScoringSettings":
        """Thresholds must be strictly descending and inside the score range."""
        if self.min_credit_score >= self.max_credit_score:
            raise ValueError(
                f"min_credit_score ({self.min_credit_score}) must be below "
                f"max_credit_score ({self.max_credit_score})"
            )
        if not (
            self.max_credit_score
            >= self.prime_threshold
            > self.near_prime_threshold
            > self.subprime_threshold
            >= self.min_credit_score
        ):
            raise ValueError(
                "Thresholds must satisfy max >= prime > near_prime > subprime >= min"
            )
        if self.confidence_floor + self.confidence_span > 1.0:
            raise ValueError("confidence_floor + confidence_span cannot exceed 1.0")
        return self

    @property
    def score_span(self) -> int:
        """Width of the credit score range."""
        return self.max_credit_score - self.min_credit_score

    @property
    def tier_thresholds(self) -> List[Tuple[int, int]]:
        """Lower bounds of the tiers, best first, paired with the tier index."""
        return [
            (self.prime_threshold, 0),
            (self.near_prime_threshold, 1),
            (self.subprime_threshold, 2),
        ]


@lru_cache
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings instance."""
    return ScoringSettings()


scoring_settings = get_scoring_settings()
