"""Borrower lookup API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from creditai.application.services import PortfolioService
from creditai.core.dependencies import get_portfolio_service
from creditai.presentation.schemas import (
    BorrowerSchema,
    BorrowerSearchResponseSchema,
    ErrorResponseSchema,
)

borrowers_router = APIRouter(
    prefix="/borrowers",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Borrower not found"},
    },
)


@borrowers_router.get(
    "",
    response_model=BorrowerSearchResponseSchema,
    summary="Search Borrowers",
    description="""
    Search the portfolio by borrower name or ID (case-insensitive).

    An empty query returns the first borrowers of the portfolio.
    """,
)
async def search_borrowers(
    portfolio_service: Annotated[PortfolioService, Depends(get_portfolio_service)],
    q: Annotated[
        str,
        Query(max_length=100, description="Name or ID fragment"),
    ] = "",
    limit: Annotated[
        int,
        Query(ge=1, le=50, description="Maximum number of borrowers to return"),
    ] = PortfolioService.DEFAULT_SEARCH_LIMIT,
) -> BorrowerSearchResponseSchema:
    borrowers = await portfolio_service.search_borrowers(q, limit=limit)
    total = await portfolio_service.count_borrowers()

    return BorrowerSearchResponseSchema(
        query=q,
        total=total,
        borrowers=[BorrowerSchema.model_validate(b.to_dict()) for b in borrowers],
    )


@borrowers_router.get(
    "/{borrower_id}",
    response_model=BorrowerSchema,
    summary="Get Borrower",
    description="Retrieve a borrower's profile and feature attributions.",
    responses={
        200: {"description": "Borrower found"},
    },
)
async def get_borrower(
    borrower_id: Annotated[str, Path(description="Borrower ID, e.g. BRW-1001")],
    portfolio_service: Annotated[PortfolioService, Depends(get_portfolio_service)],
) -> BorrowerSchema:
    borrower = await portfolio_service.get_borrower(borrower_id)
    return BorrowerSchema.model_validate(borrower.to_dict())
