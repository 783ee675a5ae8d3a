"""
Questionnaire catalogue.

The options of every question are read from the feature lookup tables,
so a UI rendering this catalogue can only offer values the scorer knows.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .features import FEATURE_SPECS
from .models import Feature


MIN_AGE = 18
MAX_AGE = 100


@dataclass(frozen=True)
class Question:
    """A single questionnaire step."""
    key: str
    label: str
    description: str
    options: Tuple[str, ...]


_QUESTION_TEXT = {
    Feature.MONTHLY_INCOME: (
        "What is your monthly income?",
        "Your total take-home income per month from all sources.",
    ),
    Feature.EMPLOYMENT_TYPE: (
        "What is your employment type?",
        "How you currently earn your primary income.",
    ),
    Feature.INCOME_DURATION: (
        "How long have you had this income?",
        "Time you have been receiving your current primary income.",
    ),
    Feature.MONTHLY_EMI: (
        "What is your total monthly EMI?",
        "Sum of all loan and credit card instalments you pay each month.",
    ),
    Feature.MISSED_PAYMENTS: (
        "Have you missed any payments in the last 12 months?",
        "Any EMI, credit card or bill payment made after its due date.",
    ),
    Feature.BILL_PAYMENT_BEHAVIOR: (
        "When do you usually pay your bills?",
        "Utility, phone and rent payments.",
    ),
    Feature.AVG_BANK_BALANCE: (
        "What is your average bank balance?",
        "Typical balance across your savings and current accounts.",
    ),
    Feature.SAVINGS_HABIT: (
        "Do you save a portion of your income?",
        "Regular savings, recurring deposits or SIPs.",
    ),
    Feature.INCOME_SOURCES: (
        "How many income sources do you have?",
        "Salary, business, rent, freelance work and similar.",
    ),
    Feature.LOAN_REJECTION_HISTORY: (
        "Has a loan application of yours ever been rejected?",
        "Any personal, vehicle, home or credit card application.",
    ),
}

AGE_QUESTION_LABEL = "What is your age?"
AGE_QUESTION_DESCRIPTION = f"Enter your age in years ({MIN_AGE}-{MAX_AGE})."


def list_questions() -> List[Question]:
    """The ten categorical questions in stepper order."""
    questions = []
    for spec in FEATURE_SPECS:
        if spec.table is None:
            continue
        label, description = _QUESTION_TEXT[spec.feature]
        questions.append(
            Question(
                key=spec.answer_key,
                label=label,
                description=description,
                options=spec.options,
            )
        )
    return questions


def is_valid_age(age: object) -> bool:
    """Form-boundary check: a whole number of years between MIN_AGE and MAX_AGE."""
    if isinstance(age, bool) or not isinstance(age, int):
        return False
    return MIN_AGE <= age <= MAX_AGE
