"""Model performance API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from creditai.application.services import PortfolioService
from creditai.core.dependencies import get_portfolio_service
from creditai.presentation.schemas import ModelPerformanceResponseSchema

models_router = APIRouter(prefix="/models")


@models_router.get(
    "",
    response_model=ModelPerformanceResponseSchema,
    summary="Compare Models",
    description="""
    Metrics, ROC curves, confusion matrices and threshold sweep of the
    candidate models, with the cost simulation of the selected model.
    """,
)
async def get_models(
    portfolio_service: Annotated[PortfolioService, Depends(get_portfolio_service)],
) -> ModelPerformanceResponseSchema:
    return ModelPerformanceResponseSchema.model_validate(
        portfolio_service.get_model_performance()
    )
