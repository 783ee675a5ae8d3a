"""Scoring-related Pydantic schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScoreRequestSchema(BaseModel):
    """
    Schema for POST /v1/score and /v1/score/report request bodies.

    Answers are free strings: an option the scorer does not know is scored
    as neutral rather than rejected. Age is range-checked by the service.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
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
            ]
        }
    )

    monthly_income_range: str = Field("", description="Monthly take-home income range")
    employment_type: str = Field("", description="Primary employment type")
    income_duration: str = Field("", description="Time with the current primary income")
    total_monthly_emi: str = Field("", description="Total monthly EMI range")
    missed_payments: str = Field("", description="Missed payments in the last 12 months")
    bill_payment_behavior: str = Field("", description="When bills are usually paid")
    avg_bank_balance: str = Field("", description="Average bank balance range")
    savings_habit: str = Field("", description="Savings habit")
    income_sources: str = Field("", description="Number of income sources")
    loan_rejection_history: str = Field("", description="Past loan rejections")
    age: Optional[int] = Field(
        None,
        description="Age in years (18-100)",
        examples=[32],
    )


class FeatureScoreSchema(BaseModel):
    """Sub-score of one feature."""

    feature: str = Field(..., examples=["Missed Payments"])
    score: int = Field(
        ...,
        ge=0,
        le=100,
        description="Sub-score (0-100, higher is lower risk)",
        examples=[95],
    )


class AttributionSchema(BaseModel):
    """Signed contribution of one feature to predicted risk."""

    feature: str = Field(..., examples=["Missed Payments"])
    value: float = Field(
        ...,
        description="Positive increases risk, negative reduces it",
        examples=[-0.113],
    )


class SuggestionSchema(BaseModel):
    """One improvement suggestion."""

    title: str = Field(..., examples=["Pay Bills Before Due Date"])
    description: str
    impact: str = Field(..., examples=["Medium"])


class ScoreResponseSchema(BaseModel):
    """Schema for POST /v1/score response body."""

    credit_score: int = Field(
        ...,
        ge=300,
        le=850,
        description="Credit score (300-850)",
        examples=[724],
    )
    risk_band: str = Field(..., examples=["Near Prime"])
    recommendation: str = Field(..., examples=["Approve"])
    confidence: float = Field(..., description="Display confidence (0.65-0.95)", examples=[0.88])
    prediction_probability: float = Field(
        ...,
        description="Estimated default probability",
        examples=[0.229],
    )
    debt_to_income_ratio: float = Field(
        ...,
        description="DTI proxy from the EMI answer",
        examples=[0.2],
    )
    expected_value: int = Field(..., examples=[491])
    weighted_sum: float = Field(
        ...,
        description="Weighted aggregate of all sub-scores (0-100)",
        examples=[77.15],
    )
    feature_scores: List[FeatureScoreSchema]
    attributions: List[AttributionSchema] = Field(
        ...,
        description="Feature attributions, largest magnitude first",
    )
    suggestions: List[SuggestionSchema] = Field(
        ...,
        description="Improvement suggestions, High impact first",
    )


class QuestionSchema(BaseModel):
    """One questionnaire step."""

    key: str = Field(..., examples=["missed_payments"])
    label: str
    description: str
    options: List[str]


class AgeQuestionSchema(BaseModel):
    """The numeric age step."""

    key: str = "age"
    label: str
    description: str
    min_age: int
    max_age: int


class QuestionnaireSchema(BaseModel):
    """Schema for GET /v1/score/questions response body."""

    questions: List[QuestionSchema]
    age: AgeQuestionSchema
