"""Liveness check with the scoring and portfolio configuration in effect."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from creditai import __version__
from creditai.core.config import settings
from creditai.core.dependencies import get_portfolio_data
from creditai.domain.entities import Portfolio
from creditai.service.scoring import scoring_settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    portfolio_seed: int = Field(..., description="Seed the mock portfolio was built from")
    borrowers: int = Field(..., description="Borrowers in the mock portfolio")
    score_range: tuple[int, int] = Field(..., examples=[(300, 850)])


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the service status, the portfolio seed and the credit score range.",
)
async def health_check(
    portfolio: Annotated[Portfolio, Depends(get_portfolio_data)],
) -> HealthResponse:
    return HealthResponse(
        version=__version__,
        portfolio_seed=settings.portfolio_seed,
        borrowers=len(portfolio.borrowers),
        score_range=(scoring_settings.min_credit_score, scoring_settings.max_credit_score),
    )
