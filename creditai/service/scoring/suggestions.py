"""
Improvement Suggestions for the CreditAI scoring engine.

Suggestions are driven by the raw answers, not by the computed score:
each rule inspects one questionnaire field and, when it triggers,
contributes one fixed piece of advice. The result is ordered by impact
(High, Medium, Low), keeping rule order within an impact level, and capped.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .models import AnswerSet, Impact, ScoringResult, Suggestion
from .settings import ScoringSettings, scoring_settings


@dataclass(frozen=True)
class SuggestionRule:
    """A trigger on the answers paired with the advice it produces."""
    name: str
    applies: Callable[[AnswerSet], bool]
    suggestion: Suggestion


SUGGESTION_RULES: Tuple[SuggestionRule, ...] = (
    SuggestionRule(
        name="missed_payments",
        applies=lambda a: a.missed_payments != "Never",
        suggestion=Suggestion(
            title="Eliminate Missed Payments",
            description=(
                "Set up auto-pay or payment reminders for all bills and EMIs. "
                "Even 1-2 missed payments significantly hurt your score."
            ),
            impact=Impact.HIGH,
        ),
    ),
    SuggestionRule(
        name="monthly_emi",
        applies=lambda a: a.total_monthly_emi in ("₹15,000+", "₹5,000–15,000"),
        suggestion=Suggestion(
            title="Reduce Your Debt-to-Income Ratio",
            description=(
                "Focus on paying down existing EMIs before taking new loans. "
                "Consider debt consolidation to lower monthly obligations."
            ),
            impact=Impact.HIGH,
        ),
    ),
    SuggestionRule(
        name="bill_payment_behavior",
        applies=lambda a: a.bill_payment_behavior != "Before due date",
        suggestion=Suggestion(
            title="Pay Bills Before Due Date",
            description=(
                "Paying bills early demonstrates financial discipline. "
                "Set up auto-debit 3-5 days before due dates."
            ),
            impact=Impact.MEDIUM,
        ),
    ),
    SuggestionRule(
        name="avg_bank_balance",
        applies=lambda a: a.avg_bank_balance in ("< ₹5,000", "₹5,000–20,000"),
        suggestion=Suggestion(
            title="Build a Liquidity Buffer",
            description=(
                "Maintain at least 3 months of expenses as bank balance. "
                "Start with ₹1,000/month auto-transfer to savings."
            ),
            impact=Impact.HIGH,
        ),
    ),
    SuggestionRule(
        name="savings_habit",
        applies=lambda a: a.savings_habit in ("No", "Occasionally"),
        suggestion=Suggestion(
            title="Develop Consistent Savings Habit",
            description=(
                "Save at least 10-20% of monthly income. "
                "Use recurring deposits or SIPs for automated savings."
            ),
            impact=Impact.MEDIUM,
        ),
    ),
    SuggestionRule(
        name="income_sources",
        applies=lambda a: a.income_sources == "1",
        suggestion=Suggestion(
            title="Diversify Income Sources",
            description=(
                "Explore freelancing, part-time work, or passive income streams. "
                "Multiple income sources reduce default risk significantly."
            ),
            impact=Impact.MEDIUM,
        ),
    ),
    SuggestionRule(
        name="income_duration",
        applies=lambda a: a.income_duration in ("< 6 months", "6–12 months"),
        suggestion=Suggestion(
            title="Build Income Stability",
            description=(
                "Stay in your current role longer to demonstrate income consistency. "
                "Avoid frequent job changes."
            ),
            impact=Impact.MEDIUM,
        ),
    ),
    SuggestionRule(
        name="monthly_income",
        applies=lambda a: a.monthly_income_range in ("< ₹15,000", "₹15,000–30,000"),
        suggestion=Suggestion(
            title="Increase Earning Capacity",
            description=(
                "Invest in skill development or certifications to boost income. "
                "Consider upskilling in high-demand areas."
            ),
            impact=Impact.LOW,
        ),
    ),
    SuggestionRule(
        name="loan_rejection_history",
        applies=lambda a: a.loan_rejection_history != "No",
        suggestion=Suggestion(
            title="Address Past Loan Rejections",
            description=(
                "Understand why past applications were rejected. "
                "Fix those specific issues before reapplying."
            ),
            impact=Impact.MEDIUM,
        ),
    ),
)


def generate_suggestions(
    answers: AnswerSet,
    result: Optional[ScoringResult] = None,
    settings: ScoringSettings = scoring_settings,
) -> List[Suggestion]:
    """
    Build the ranked list of improvement suggestions.

    Args:
        answers: The borrower's raw answers
        result: The scoring result. Accepted for symmetry with the report
            and chat callers; the current rules only read the answers.
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        At most settings.max_suggestions suggestions, High impact first
    """
    triggered = [rule.suggestion for rule in SUGGESTION_RULES if rule.applies(answers)]
    ranked = sorted(triggered, key=lambda s: s.impact.rank)
    return ranked[: settings.max_suggestions]
