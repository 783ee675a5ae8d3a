"""
Unit Tests for the improvement suggestion rules.

These tests verify:
1. Each rule triggers on its answers only
2. Impact ordering (High, Medium, Low) with rule order kept inside a level
3. The cap on the number of suggestions
"""

import pytest

from creditai.service.scoring import (
    AnswerSet,
    Impact,
    ScoringSettings,
    compute_score,
    generate_suggestions,
)
from creditai.service.scoring.suggestions import SUGGESTION_RULES


BEST = dict(
    monthly_income_range="₹1L+",
    employment_type="Salaried",
    income_duration="3+ years",
    total_monthly_emi="None",
    missed_payments="Never",
    bill_payment_behavior="Before due date",
    avg_bank_balance="₹50,000+",
    savings_habit="Yes (20%+)",
    income_sources="3+",
    loan_rejection_history="No",
    age=30,
)

WORST = dict(
    monthly_income_range="< ₹15,000",
    employment_type="Freelancer",
    income_duration="< 6 months",
    total_monthly_emi="₹15,000+",
    missed_payments="3+ times",
    bill_payment_behavior="After due date",
    avg_bank_balance="< ₹5,000",
    savings_habit="No",
    income_sources="1",
    loan_rejection_history="Yes (multiple times)",
    age=19,
)


def titles(answers: AnswerSet, **kwargs) -> list:
    return [s.title for s in generate_suggestions(answers, **kwargs)]


# =============================================================================
# Rule Tests
# =============================================================================

class TestSuggestionRules:
    """Tests for the individual rules."""

    def test_best_answers_get_no_suggestions(self):
        assert generate_suggestions(AnswerSet(**BEST)) == []

    def test_nine_rules(self):
        assert len(SUGGESTION_RULES) == 9

    @pytest.mark.parametrize(
        "field,value,title",
        [
            ("missed_payments", "1–2 times", "Eliminate Missed Payments"),
            ("total_monthly_emi", "₹5,000–15,000", "Reduce Your Debt-to-Income Ratio"),
            ("bill_payment_behavior", "On due date", "Pay Bills Before Due Date"),
            ("avg_bank_balance", "₹5,000–20,000", "Build a Liquidity Buffer"),
            ("savings_habit", "Occasionally", "Develop Consistent Savings Habit"),
            ("income_sources", "1", "Diversify Income Sources"),
            ("income_duration", "6–12 months", "Build Income Stability"),
            ("monthly_income_range", "₹15,000–30,000", "Increase Earning Capacity"),
            ("loan_rejection_history", "Yes (once)", "Address Past Loan Rejections"),
        ],
    )
    def test_single_rule_triggers(self, field, value, title):
        answers = AnswerSet(**{**BEST, field: value})

        assert titles(answers) == [title]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("total_monthly_emi", "< ₹5,000"),
            ("avg_bank_balance", "₹20,000–50,000"),
            ("savings_habit", "Yes (less than 20%)"),
            ("income_sources", "2"),
            ("income_duration", "1–3 years"),
            ("monthly_income_range", "₹30,000–60,000"),
        ],
    )
    def test_moderate_answers_do_not_trigger(self, field, value):
        assert titles(AnswerSet(**{**BEST, field: value})) == []

    def test_negated_rules_trigger_on_blank_answers(self):
        """Rules written as "not the best option" fire on unanswered questions."""
        assert titles(AnswerSet()) == [
            "Eliminate Missed Payments",
            "Pay Bills Before Due Date",
            "Address Past Loan Rejections",
        ]

    def test_suggestions_ignore_the_score(self):
        answers = AnswerSet(**WORST)
        result = compute_score(AnswerSet(**BEST))

        assert titles(answers, result=result) == titles(answers)


# =============================================================================
# Ordering and Cap Tests
# =============================================================================

class TestSuggestionOrdering:
    """Tests for impact ordering and the cap."""

    def test_worst_answers_capped_at_six(self):
        suggestions = generate_suggestions(AnswerSet(**WORST))

        assert [s.title for s in suggestions] == [
            "Eliminate Missed Payments",
            "Reduce Your Debt-to-Income Ratio",
            "Build a Liquidity Buffer",
            "Pay Bills Before Due Date",
            "Develop Consistent Savings Habit",
            "Diversify Income Sources",
        ]
        assert [s.impact for s in suggestions[:3]] == [Impact.HIGH] * 3

    def test_high_impact_before_rule_order(self):
        """Liquidity (High) outranks bill payment (Medium) despite rule order."""
        answers = AnswerSet(
            **{**BEST, "bill_payment_behavior": "On due date", "avg_bank_balance": "< ₹5,000"}
        )

        assert titles(answers) == ["Build a Liquidity Buffer", "Pay Bills Before Due Date"]

    def test_impact_ranks_are_monotonic(self):
        ranks = [s.impact.rank for s in generate_suggestions(AnswerSet(**WORST))]

        assert ranks == sorted(ranks)

    def test_low_impact_dropped_by_cap(self):
        assert "Increase Earning Capacity" not in titles(AnswerSet(**WORST))

    def test_cap_from_settings(self):
        settings = ScoringSettings(max_suggestions=9)
        suggestions = generate_suggestions(AnswerSet(**WORST), settings=settings)

        assert len(suggestions) == 9
        assert suggestions[-1].title == "Increase Earning Capacity"
        assert suggestions[-1].impact == Impact.LOW

    def test_to_dict(self):
        suggestion = generate_suggestions(AnswerSet(**WORST))[0]

        assert suggestion.to_dict() == {
            "title": "Eliminate Missed Payments",
            "description": (
                "Set up auto-pay or payment reminders for all bills and EMIs. "
                "Even 1-2 missed payments significantly hurt your score."
            ),
            "impact": "High",
        }
