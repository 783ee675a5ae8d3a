"""
Integration tests for the Scoring API endpoints.

These tests verify:
1. GET /v1/score/questions - Questionnaire catalogue
2. POST /v1/score - Score a questionnaire
3. POST /v1/score/report - Download the PDF report
4. Form-boundary validation and error bodies
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# GET /v1/score/questions Tests
# =============================================================================

class TestQuestionnaire:
    """Tests for GET /v1/score/questions endpoint."""

    @pytest.mark.asyncio
    async def test_questions(self, client: AsyncClient):
        response = await client.get("/v1/score/questions")

        assert response.status_code == 200

        data = response.json()
        assert len(data["questions"]) == 10
        assert data["questions"][0]["key"] == "monthly_income_range"
        assert "Never" in data["questions"][4]["options"]
        assert data["age"]["min_age"] == 18
        assert data["age"]["max_age"] == 100


# =============================================================================
# POST /v1/score Tests
# =============================================================================

class TestScoreQuestionnaire:
    """Tests for POST /v1/score endpoint."""

    @pytest.mark.asyncio
    async def test_typical_borrower(self, client: AsyncClient, typical_request: dict):
        response = await client.post("/v1/score", json=typical_request)

        assert response.status_code == 200

        data = response.json()
        assert data["credit_score"] == 724
        assert data["weighted_sum"] == 77.15
        assert data["risk_band"] == "Near Prime"
        assert data["recommendation"] == "Approve"
        assert data["debt_to_income_ratio"] == 0.2
        assert [s["title"] for s in data["suggestions"]] == ["Pay Bills Before Due Date"]

    @pytest.mark.asyncio
    async def test_best_answers(self, client: AsyncClient, best_request: dict):
        """
        Best option everywhere.

        Every question scores 90+, age 30 scores 80: weighted sum 93.27.
        """
        response = await client.post("/v1/score", json=best_request)

        assert response.status_code == 200

        data = response.json()
        assert data["credit_score"] == 813
        assert data["risk_band"] == "Prime"
        assert data["recommendation"] == "Strong Approve"
        assert data["confidence"] == 0.93
        assert data["suggestions"] == []
        assert all(a["value"] < 0 for a in data["attributions"])

    @pytest.mark.asyncio
    async def test_worst_answers(self, client: AsyncClient, worst_request: dict):
        response = await client.post("/v1/score", json=worst_request)

        assert response.status_code == 200

        data = response.json()
        assert data["credit_score"] == 415
        assert data["risk_band"] == "High Risk"
        assert data["recommendation"] == "Reject"
        assert len(data["suggestions"]) == 6
        assert [s["impact"] for s in data["suggestions"][:3]] == ["High", "High", "High"]

    @pytest.mark.asyncio
    async def test_response_shape(self, client: AsyncClient, typical_request: dict):
        response = await client.post("/v1/score", json=typical_request)
        data = response.json()

        assert len(data["feature_scores"]) == 11
        assert len(data["attributions"]) == 11
        magnitudes = [abs(a["value"]) for a in data["attributions"]]
        assert magnitudes == sorted(magnitudes, reverse=True)

    @pytest.mark.asyncio
    async def test_unknown_option_scores_neutral(self, client: AsyncClient, typical_request: dict):
        """Unknown options are not rejected."""
        body = {**typical_request, "employment_type": "Astronaut"}

        response = await client.post("/v1/score", json=body)

        assert response.status_code == 200
        scores = {fs["feature"]: fs["score"] for fs in response.json()["feature_scores"]}
        assert scores["Employment Type"] == 50

    @pytest.mark.asyncio
    async def test_partial_questionnaire(self, client: AsyncClient):
        response = await client.post("/v1/score", json={"age": 40})

        assert response.status_code == 200
        assert response.json()["risk_band"] == "Subprime"


# =============================================================================
# Validation Tests
# =============================================================================

class TestScoreValidation:
    """Tests for form-boundary validation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("age", [17, 101, 0, -5])
    async def test_age_out_of_range(self, client: AsyncClient, typical_request: dict, age: int):
        response = await client.post("/v1/score", json={**typical_request, "age": age})

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "INVALID_SCORE_REQUEST"
        assert "age" in data["message"]
        assert data["request_id"] == response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_age_missing(self, client: AsyncClient, typical_request: dict):
        body = {k: v for k, v in typical_request.items() if k != "age"}

        response = await client.post("/v1/score", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "age is required"

    @pytest.mark.asyncio
    async def test_age_not_a_number(self, client: AsyncClient, typical_request: dict):
        response = await client.post("/v1/score", json={**typical_request, "age": "thirty"})

        assert response.status_code == 422


# =============================================================================
# POST /v1/score/report Tests
# =============================================================================

class TestScoreReport:
    """Tests for POST /v1/score/report endpoint."""

    @pytest.mark.asyncio
    async def test_report_is_pdf_attachment(self, client: AsyncClient, worst_request: dict):
        response = await client.post("/v1/score/report", json=worst_request)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF-")

        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="CreditAI_Report_415_')
        assert disposition.endswith('.pdf"')

    @pytest.mark.asyncio
    async def test_report_validates_age(self, client: AsyncClient, worst_request: dict):
        response = await client.post("/v1/score/report", json={**worst_request, "age": 12})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_SCORE_REQUEST"
