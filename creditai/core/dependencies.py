"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from creditai.domain.entities import Portfolio
from creditai.domain.interfaces import BorrowerRepository, ChatCompletionClient
from creditai.infrastructure.portfolio import get_portfolio
from creditai.infrastructure.repositories import InMemoryBorrowerRepository
from creditai.infrastructure.clients import HttpChatCompletionClient
from creditai.application.services import ChatService, PortfolioService, ScoringService


# Data dependencies
def get_portfolio_data() -> Portfolio:
    """Get the process-wide portfolio."""
    return get_portfolio()


@lru_cache
def _borrower_repository() -> InMemoryBorrowerRepository:
    return InMemoryBorrowerRepository(get_portfolio().borrowers)


def get_borrower_repository() -> BorrowerRepository:
    """Get a BorrowerRepository instance."""
    return _borrower_repository()


# External client dependencies
def get_chat_client() -> ChatCompletionClient:
    """Get a ChatCompletionClient instance."""
    return HttpChatCompletionClient()


# Service dependencies
def get_scoring_service() -> ScoringService:
    """Get a ScoringService instance."""
    return ScoringService()


def get_portfolio_service(
    portfolio: Annotated[Portfolio, Depends(get_portfolio_data)],
    borrower_repo: Annotated[BorrowerRepository, Depends(get_borrower_repository)],
) -> PortfolioService:
    """Get a PortfolioService instance with all dependencies."""
    return PortfolioService(
        portfolio=portfolio,
        borrower_repository=borrower_repo,
    )


def get_chat_service(
    chat_client: Annotated[ChatCompletionClient, Depends(get_chat_client)],
) -> ChatService:
    """Get a ChatService instance."""
    return ChatService(chat_client=chat_client)
