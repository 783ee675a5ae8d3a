"""Scoring service - orchestrates the questionnaire scoring use case."""

from datetime import date
from typing import Optional

import structlog

from creditai.core.metrics import record_report, record_score, track_scoring_latency
from creditai.domain.exceptions import InvalidScoreRequestException
from creditai.application.dto import ScoreReport, ScoreRequest, ScoreResponse
from creditai.infrastructure.reports import render_score_report, report_filename
from creditai.service.scoring import (
    ScoringSettings,
    compute_score,
    generate_suggestions,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class ScoringService:
    """
    Application service for questionnaire scoring.

    The scoring engine is pure; this service adds boundary validation,
    logging, metrics and report rendering around it.
    """

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self._settings = settings or scoring_settings

    def score(self, request: ScoreRequest) -> ScoreResponse:
        """
        Score a questionnaire.

        Args:
            request: The answers and age

        Returns:
            ScoreResponse with the result and ranked suggestions

        Raises:
            InvalidScoreRequestException: If the age fails validation
        """
        errors = request.validate()
        if errors:
            raise InvalidScoreRequestException("; ".join(errors))

        answers = request.to_answer_set()

        with track_scoring_latency():
            result = compute_score(answers, self._settings)
            suggestions = generate_suggestions(answers, result, self._settings)

        record_score(
            risk_band=result.risk_band.value,
            recommendation=result.recommendation.value,
            credit_score=result.credit_score,
        )
        logger.info(
            "borrower_scored",
            credit_score=result.credit_score,
            risk_band=result.risk_band.value,
            recommendation=result.recommendation.value,
            weighted_sum=result.weighted_sum,
            suggestions=len(suggestions),
        )

        return ScoreResponse(answers=answers, result=result, suggestions=suggestions)

    def report(self, request: ScoreRequest, today: Optional[date] = None) -> ScoreReport:
        """
        Score a questionnaire and render the PDF report.

        Raises:
            InvalidScoreRequestException: If the age fails validation
        """
        response = self.score(request)
        content = render_score_report(
            response.result,
            response.answers,
            response.age,
            response.suggestions,
        )
        record_report()

        return ScoreReport(
            filename=report_filename(response.result, today),
            content=content,
            credit_score=response.result.credit_score,
        )
