"""Scoring-related domain exceptions."""

from .base import DomainException


class InvalidScoreRequestException(DomainException):
    """Raised when a scoring request fails form-boundary validation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_SCORE_REQUEST",
        )
