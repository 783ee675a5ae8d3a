"""Application services."""

from .scoring_service import ScoringService
from .portfolio_service import PortfolioService
from .chat_service import ChatService

__all__ = [
    "ScoringService",
    "PortfolioService",
    "ChatService",
]
