"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .score import InvalidScoreRequestException
from .borrower import BorrowerNotFoundException
from .chat import (
    ChatAPIException,
    ChatConnectionException,
    ChatQuotaExceededException,
    ChatRateLimitedException,
)

__all__ = [
    "DomainException",
    "InvalidScoreRequestException",
    "BorrowerNotFoundException",
    "ChatAPIException",
    "ChatConnectionException",
    "ChatQuotaExceededException",
    "ChatRateLimitedException",
]
