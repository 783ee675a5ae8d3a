"""Portfolio service - dashboard, borrower lookup, model and fairness views."""

from typing import List

import structlog

from creditai.domain.entities import Borrower, Portfolio
from creditai.domain.exceptions import BorrowerNotFoundException
from creditai.domain.interfaces import BorrowerRepository
from creditai.application.dto import (
    DashboardResponse,
    FairnessResponse,
    FairnessSubgroupDTO,
    ModelPerformanceResponse,
)

logger = structlog.get_logger(__name__)


class PortfolioService:
    """
    Application service for the read-only portfolio views.
    """

    DEFAULT_SEARCH_LIMIT = 6
    # Approval-rate gap to the reference subgroup that flags a subgroup
    FAIRNESS_GAP_THRESHOLD = 0.10
    # Four-fifths rule
    DISPARATE_IMPACT_THRESHOLD = 0.80

    def __init__(
        self,
        portfolio: Portfolio,
        borrower_repository: BorrowerRepository,
    ):
        self._portfolio = portfolio
        self._borrower_repo = borrower_repository

    def get_dashboard(self) -> DashboardResponse:
        """Headline KPIs and distributions."""
        return DashboardResponse(
            kpis=self._portfolio.kpis,
            risk_distribution=self._portfolio.risk_distribution,
            prediction_distribution=self._portfolio.prediction_distribution,
            global_importance=self._portfolio.global_importance,
        )

    async def get_borrower(self, borrower_id: str) -> Borrower:
        """
        Get a borrower by ID.

        Raises:
            BorrowerNotFoundException: If no borrower has this ID
        """
        borrower = await self._borrower_repo.get_by_id(borrower_id)
        if borrower is None:
            logger.info("borrower_not_found", borrower_id=borrower_id)
            raise BorrowerNotFoundException(borrower_id)
        return borrower

    async def search_borrowers(
        self,
        query: str = "",
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> List[Borrower]:
        """Case-insensitive search on borrower name or ID."""
        return await self._borrower_repo.search(query, limit=limit)

    async def count_borrowers(self) -> int:
        """Number of borrowers in the portfolio."""
        return await self._borrower_repo.count()

    def get_model_performance(self) -> ModelPerformanceResponse:
        """Metrics, curves and costs of the candidate models."""
        return ModelPerformanceResponse(
            selected_model=self._portfolio.kpis.selected_model,
            metrics=self._portfolio.model_metrics,
            roc_curves=self._portfolio.roc_curves,
            confusion_matrices=self._portfolio.confusion_matrices,
            threshold_sweep=self._portfolio.threshold_sweep,
            cost_simulation=self._portfolio.cost_simulation,
        )

    def get_fairness(self) -> FairnessResponse:
        """
        Fairness audit.

        The first subgroup is the reference; any subgroup whose approval
        rate differs from it by more than FAIRNESS_GAP_THRESHOLD is flagged.
        """
        subgroups = self._portfolio.fairness
        reference = subgroups[0]
        ratio = self._portfolio.disparate_impact_ratio

        return FairnessResponse(
            reference_subgroup=reference.subgroup,
            subgroups=[
                FairnessSubgroupDTO.from_entity(
                    s, reference, self.FAIRNESS_GAP_THRESHOLD
                )
                for s in subgroups
            ],
            disparate_impact_ratio=ratio,
            disparate_impact_threshold=self.DISPARATE_IMPACT_THRESHOLD,
            disparate_impact_passed=ratio >= self.DISPARATE_IMPACT_THRESHOLD,
        )
