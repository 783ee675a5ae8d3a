"""Borrower-related Pydantic schemas."""

from typing import List

from pydantic import BaseModel, Field


class BorrowerAttributionSchema(BaseModel):
    feature: str
    value: float


class BorrowerSchema(BaseModel):
    """A scored borrower of the portfolio."""

    id: str = Field(..., examples=["BRW-1001"])
    name: str = Field(..., examples=["Aarav Sharma"])
    credit_score: int = Field(..., ge=300, le=850)
    risk_band: str = Field(..., examples=["Low"])
    prediction_probability: float
    debt_to_income_ratio: float
    payment_utilization_ratio: float
    monthly_income: int = Field(..., description="Monthly income in rupees")
    number_of_open_accounts: int
    number_of_late_payments: int
    total_debt: int = Field(..., description="Total debt in rupees")
    credit_age: float = Field(..., description="Credit history length in years")
    recommendation: str = Field(..., examples=["Approve"])
    confidence: float
    attributions: List[BorrowerAttributionSchema] = Field(
        default_factory=list,
        description="Feature attributions, largest magnitude first",
    )


class BorrowerSearchResponseSchema(BaseModel):
    """Schema for GET /v1/borrowers response body."""

    query: str
    total: int = Field(..., description="Number of borrowers in the portfolio")
    borrowers: List[BorrowerSchema]
