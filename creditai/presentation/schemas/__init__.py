"""Pydantic schemas for API request/response validation."""

from .error import ErrorResponseSchema
from .score import (
    AgeQuestionSchema,
    QuestionSchema,
    QuestionnaireSchema,
    ScoreRequestSchema,
    ScoreResponseSchema,
)
from .borrower import BorrowerSchema, BorrowerSearchResponseSchema
from .portfolio import (
    DashboardResponseSchema,
    FairnessResponseSchema,
    ModelPerformanceResponseSchema,
)
from .chat import ChatMessageSchema, ChatRequestSchema, ChatResponseSchema

__all__ = [
    "ErrorResponseSchema",
    "ScoreRequestSchema",
    "ScoreResponseSchema",
    "QuestionSchema",
    "AgeQuestionSchema",
    "QuestionnaireSchema",
    "BorrowerSchema",
    "BorrowerSearchResponseSchema",
    "DashboardResponseSchema",
    "ModelPerformanceResponseSchema",
    "FairnessResponseSchema",
    "ChatMessageSchema",
    "ChatRequestSchema",
    "ChatResponseSchema",
]
