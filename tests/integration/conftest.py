"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Mock chat completion clients (success and each failure mode)
- Reference questionnaire bodies
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Sequence

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from creditai.main import app
from creditai.core.dependencies import get_chat_client
from creditai.domain.entities import ChatMessage
from creditai.domain.exceptions import (
    ChatAPIException,
    ChatConnectionException,
    ChatQuotaExceededException,
    ChatRateLimitedException,
)
from creditai.domain.interfaces import ChatCompletionClient


# =============================================================================
# Mock Clients
# =============================================================================

class MockChatCompletionClient(ChatCompletionClient):
    """Mock chat client that streams canned deltas or fails in a given mode."""

    FAILURES = {
        "rate_limited": ChatRateLimitedException,
        "quota_exceeded": ChatQuotaExceededException,
        "error": lambda: ChatAPIException("Chat API error: upstream", status_code=500),
        "connection_error": ChatConnectionException,
    }

    def __init__(self, mode: str = "success", deltas: Sequence[str] = ()):
        self.mode = mode
        self.deltas = list(deltas) or ["Paying ", "every EMI ", "on time helps most."]
        self.calls: List[List[ChatMessage]] = []

    async def stream(self, messages):
        self.calls.append(list(messages))

        if self.mode != "success":
            raise self.FAILURES[self.mode]()

        for delta in self.deltas:
            yield delta


# =============================================================================
# Mock Client Fixtures
# =============================================================================

@pytest.fixture
def mock_chat_client() -> MockChatCompletionClient:
    """Create a chat client that answers successfully."""
    return MockChatCompletionClient()


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    mock_chat_client: MockChatCompletionClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Uses the seeded in-memory portfolio
    - Mocks the chat completion client
    """
    def override_get_chat_client():
        return mock_chat_client

    app.dependency_overrides[get_chat_client] = override_get_chat_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_chat_client():
    """
    Factory for test clients whose chat client fails in a given mode.

    Usage: ``async with make_chat_client("rate_limited") as ac: ...``
    """
    @asynccontextmanager
    async def factory(mode: str):
        chat_client = MockChatCompletionClient(mode=mode)
        app.dependency_overrides[get_chat_client] = lambda: chat_client

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()

    return factory


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def typical_request() -> dict:
    """Request body for a typical salaried borrower."""
    return {
        "monthly_income_range": "₹30,000–60,000",
        "employment_type": "Salaried",
        "income_duration": "1–3 years",
        "total_monthly_emi": "< ₹5,000",
        "missed_payments": "Never",
        "bill_payment_behavior": "On due date",
        "avg_bank_balance": "₹20,000–50,000",
        "savings_habit": "Yes (less than 20%)",
        "income_sources": "2",
        "loan_rejection_history": "No",
        "age": 32,
    }


@pytest.fixture
def best_request() -> dict:
    """Request body with the best option on every question."""
    return {
        "monthly_income_range": "₹1L+",
        "employment_type": "Salaried",
        "income_duration": "3+ years",
        "total_monthly_emi": "None",
        "missed_payments": "Never",
        "bill_payment_behavior": "Before due date",
        "avg_bank_balance": "₹50,000+",
        "savings_habit": "Yes (20%+)",
        "income_sources": "3+",
        "loan_rejection_history": "No",
        "age": 30,
    }


@pytest.fixture
def worst_request() -> dict:
    """Request body with the worst option on every question."""
    return {
        "monthly_income_range": "< ₹15,000",
        "employment_type": "Freelancer",
        "income_duration": "< 6 months",
        "total_monthly_emi": "₹15,000+",
        "missed_payments": "3+ times",
        "bill_payment_behavior": "After due date",
        "avg_bank_balance": "< ₹5,000",
        "savings_habit": "No",
        "income_sources": "1",
        "loan_rejection_history": "Yes (multiple times)",
        "age": 19,
    }
