"""
Unit Tests for scoring settings and the questionnaire catalogue.
"""

import pytest
from pydantic import ValidationError

from creditai.service.scoring import (
    FEATURE_SPECS,
    MAX_AGE,
    MIN_AGE,
    Recommendation,
    RiskBand,
    ScoringSettings,
    is_valid_age,
    list_questions,
    score_to_recommendation,
    score_to_risk_band,
)
from creditai.service.scoring.credit_score import weighted_sum_to_credit_score


# =============================================================================
# Settings Tests
# =============================================================================

class TestScoringSettings:
    """Tests for ScoringSettings validation and derived values."""

    def test_defaults(self):
        settings = ScoringSettings()

        assert settings.min_credit_score == 300
        assert settings.max_credit_score == 850
        assert settings.score_span == 550
        assert settings.tier_thresholds == [(750, 0), (650, 1), (550, 2)]

    def test_custom_threshold_moves_band(self):
        settings = ScoringSettings(prime_threshold=760)

        assert score_to_risk_band(755, settings) == RiskBand.NEAR_PRIME
        assert score_to_recommendation(755, settings) == Recommendation.APPROVE

    def test_custom_range(self):
        settings = ScoringSettings(
            min_credit_score=0,
            max_credit_score=1000,
            prime_threshold=900,
            near_prime_threshold=700,
            subprime_threshold=500,
        )

        assert weighted_sum_to_credit_score(50, settings) == 500

    def test_thresholds_must_descend(self):
        with pytest.raises(ValidationError):
            ScoringSettings(prime_threshold=600, near_prime_threshold=650)

    def test_thresholds_inside_range(self):
        with pytest.raises(ValidationError):
            ScoringSettings(prime_threshold=900)

    def test_range_must_be_ordered(self):
        with pytest.raises(ValidationError):
            ScoringSettings(min_credit_score=850, max_credit_score=300)

    def test_confidence_cannot_exceed_one(self):
        with pytest.raises(ValidationError):
            ScoringSettings(confidence_floor=0.8, confidence_span=0.3)

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SCORING_MAX_SUGGESTIONS", "3")

        assert ScoringSettings().max_suggestions == 3


# =============================================================================
# Questionnaire Tests
# =============================================================================

class TestQuestionnaire:
    """Tests for the questionnaire catalogue."""

    def test_ten_questions_in_stepper_order(self):
        questions = list_questions()

        assert len(questions) == 10
        assert [q.key for q in questions] == [
            spec.answer_key for spec in FEATURE_SPECS if spec.table is not None
        ]

    def test_options_match_scorer_tables(self):
        tables = {spec.answer_key: spec.table for spec in FEATURE_SPECS if spec.table}

        for question in list_questions():
            assert list(question.options) == list(tables[question.key])

    def test_questions_have_text(self):
        for question in list_questions():
            assert question.label
            assert question.description

    @pytest.mark.parametrize("age", [MIN_AGE, 30, MAX_AGE])
    def test_valid_ages(self, age):
        assert is_valid_age(age)

    @pytest.mark.parametrize("age", [MIN_AGE - 1, MAX_AGE + 1, None, "30", 30.5, True])
    def test_invalid_ages(self, age):
        assert not is_valid_age(age)
