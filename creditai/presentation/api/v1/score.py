"""Questionnaire scoring API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from creditai.application.dto import ScoreRequest
from creditai.application.services import ScoringService
from creditai.core.dependencies import get_scoring_service
from creditai.presentation.schemas import (
    AgeQuestionSchema,
    ErrorResponseSchema,
    QuestionSchema,
    QuestionnaireSchema,
    ScoreRequestSchema,
    ScoreResponseSchema,
)
from creditai.service.scoring import MAX_AGE, MIN_AGE, AnswerSet, list_questions
from creditai.service.scoring.questions import (
    AGE_QUESTION_DESCRIPTION,
    AGE_QUESTION_LABEL,
)

score_router = APIRouter(
    prefix="/score",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


def _to_dto(request: ScoreRequestSchema) -> ScoreRequest:
    answers = AnswerSet.from_mapping(request.model_dump(exclude={"age"}))
    return ScoreRequest(answers=answers, age=request.age)


@score_router.get(
    "/questions",
    response_model=QuestionnaireSchema,
    summary="Get Questionnaire",
    description="The ten questionnaire steps with their options, plus the age step.",
)
async def get_questions() -> QuestionnaireSchema:
    return QuestionnaireSchema(
        questions=[
            QuestionSchema(
                key=q.key,
                label=q.label,
                description=q.description,
                options=list(q.options),
            )
            for q in list_questions()
        ],
        age=AgeQuestionSchema(
            label=AGE_QUESTION_LABEL,
            description=AGE_QUESTION_DESCRIPTION,
            min_age=MIN_AGE,
            max_age=MAX_AGE,
        ),
    )


@score_router.post(
    "",
    response_model=ScoreResponseSchema,
    status_code=200,
    summary="Score Questionnaire",
    description="""Score a borrower's questionnaire answers and suggest improvements""",
    responses={
        200: {"description": "Questionnaire scored successfully"},
    },
)
async def score_questionnaire(
    request: ScoreRequestSchema,
    scoring_service: Annotated[ScoringService, Depends(get_scoring_service)],
) -> ScoreResponseSchema:
    """
    Score a questionnaire.

    Returns the credit score, band, recommendation, feature attributions
    and ranked improvement suggestions.
    """
    response = scoring_service.score(_to_dto(request))
    return ScoreResponseSchema.model_validate(response.to_dict())


@score_router.post(
    "/report",
    status_code=200,
    summary="Download Score Report",
    description="""Score a questionnaire and download the result as a PDF report""",
    response_class=Response,
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF report",
        },
    },
)
async def download_report(
    request: ScoreRequestSchema,
    scoring_service: Annotated[ScoringService, Depends(get_scoring_service)],
) -> Response:
    report = scoring_service.report(_to_dto(request))
    return Response(
        content=report.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{report.filename}"',
        },
    )
