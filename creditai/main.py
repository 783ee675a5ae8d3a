"""
CreditAI Gateway - Main Application Entry Point

An alternative credit scoring service: scores a ten-question financial
behaviour questionnaire, explains the score, suggests improvements and
serves the portfolio, model and fairness views of the CreditAI dashboard.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from creditai import __version__
from creditai.core.config import settings
from creditai.core.logging import setup_logging
from creditai.core.metrics import get_metrics, get_metrics_content_type
from creditai.infrastructure.portfolio import get_portfolio
from creditai.presentation.api import api_router
from creditai.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Build the mock portfolio once
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    portfolio = get_portfolio()
    logger.info(
        "application_started",
        version=__version__,
        portfolio_seed=settings.portfolio_seed,
        borrowers=len(portfolio.borrowers),
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="CreditAI Gateway",
    description="AI-Powered Alternative Credit Scoring Service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "creditai.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
