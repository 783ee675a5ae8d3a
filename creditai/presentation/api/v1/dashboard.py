"""Dashboard API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from creditai.application.services import PortfolioService
from creditai.core.dependencies import get_portfolio_service
from creditai.presentation.schemas import DashboardResponseSchema

dashboard_router = APIRouter(prefix="/dashboard")


@dashboard_router.get(
    "",
    response_model=DashboardResponseSchema,
    summary="Get Dashboard",
    description="Portfolio KPIs, risk and prediction distributions, and global feature importance.",
)
async def get_dashboard(
    portfolio_service: Annotated[PortfolioService, Depends(get_portfolio_service)],
) -> DashboardResponseSchema:
    return DashboardResponseSchema.model_validate(portfolio_service.get_dashboard())
