"""Data transfer objects for questionnaire scoring."""

from dataclasses import dataclass, replace
from typing import Any, List, Optional

from creditai.service.scoring import (
    MAX_AGE,
    MIN_AGE,
    AnswerSet,
    ScoringResult,
    Suggestion,
    is_valid_age,
)


@dataclass(frozen=True)
class ScoreRequest:
    """Input data for scoring a questionnaire."""
    answers: AnswerSet
    age: Any = None

    def validate(self) -> List[str]:
        errors = []

        if self.age is None:
            errors.append("age is required")
        elif not is_valid_age(self.age):
            errors.append(f"age must be a whole number between {MIN_AGE} and {MAX_AGE}")

        return errors

    def to_answer_set(self) -> AnswerSet:
        """The answers with the validated age attached."""
        return replace(self.answers, age=self.age)


@dataclass(frozen=True)
class ScoreResponse:
    """Result of a scoring run with its improvement suggestions."""

    answers: AnswerSet
    result: ScoringResult
    suggestions: List[Suggestion]

    @property
    def age(self) -> Optional[int]:
        return self.answers.age

    def to_dict(self) -> dict:
        return {
            **self.result.to_dict(),
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


@dataclass(frozen=True)
class ScoreReport:
    """A rendered PDF report."""

    filename: str
    content: bytes
    credit_score: int
