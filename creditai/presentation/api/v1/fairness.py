"""Fairness audit API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from creditai.application.services import PortfolioService
from creditai.core.dependencies import get_portfolio_service
from creditai.presentation.schemas import FairnessResponseSchema

fairness_router = APIRouter(prefix="/fairness")


@fairness_router.get(
    "",
    response_model=FairnessResponseSchema,
    summary="Fairness Audit",
    description="Subgroup approval rates with flags, and the disparate impact check.",
)
async def get_fairness(
    portfolio_service: Annotated[PortfolioService, Depends(get_portfolio_service)],
) -> FairnessResponseSchema:
    return FairnessResponseSchema.model_validate(portfolio_service.get_fairness())
