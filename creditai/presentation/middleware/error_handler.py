"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from creditai.domain.exceptions import (
    BorrowerNotFoundException,
    ChatAPIException,
    DomainException,
    InvalidScoreRequestException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_body(code: str, message: str) -> dict:
    return {
        "error": code,
        "message": message,
        "request_id": get_request_id(),
    }


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(BorrowerNotFoundException)
    async def borrower_not_found_handler(
        request: Request,
        exc: BorrowerNotFoundException,
    ) -> JSONResponse:
        """Handle borrower not found errors."""
        return JSONResponse(
            status_code=404,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(InvalidScoreRequestException)
    async def invalid_score_request_handler(
        request: Request,
        exc: InvalidScoreRequestException,
    ) -> JSONResponse:
        """Handle invalid scoring requests."""
        return JSONResponse(
            status_code=400,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(ChatAPIException)
    async def chat_error_handler(
        request: Request,
        exc: ChatAPIException,
    ) -> JSONResponse:
        """Handle chat endpoint errors that escaped the chat service."""
        logger.error(
            "chat_api_error",
            code=exc.code,
            message=exc.message,
            status_code=exc.status_code,
        )
        return JSONResponse(
            status_code=503,
            content=_error_body(
                exc.code,
                "Assistant temporarily unavailable. Please try again later.",
            ),
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=400,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred."),
        )
