"""Error body shared by every non-2xx response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """
    Error body.

    ``error`` is a domain exception code or INTERNAL_ERROR; ``request_id``
    matches the X-Request-ID response header when the request got that far.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "INVALID_SCORE_REQUEST",
                    "message": "age must be a whole number between 18 and 100",
                    "request_id": "4f1c2b7e-9d3a-4c55-8e21-0b6f3a9d7c10",
                },
                {
                    "error": "BORROWER_NOT_FOUND",
                    "message": "Borrower not found: BRW-9999",
                    "request_id": "4f1c2b7e-9d3a-4c55-8e21-0b6f3a9d7c10",
                },
            ]
        }
    )

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="What went wrong, for people")
    request_id: Optional[str] = Field(None, description="Request ID for tracing")
