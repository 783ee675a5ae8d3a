"""
Unit Tests for the PDF score report.
"""

from datetime import date, datetime

import pytest

from creditai.infrastructure.reports import (
    ScoreReportGenerator,
    render_score_report,
    report_filename,
)
from creditai.infrastructure.reports.pdf_report import (
    format_percent,
    format_signed,
    to_latin1,
)
from creditai.service.scoring import AnswerSet, compute_score, generate_suggestions


@pytest.fixture
def worst_answers() -> AnswerSet:
    return AnswerSet(
        monthly_income_range="< ₹15,000",
        employment_type="Freelancer",
        income_duration="< 6 months",
        total_monthly_emi="₹15,000+",
        missed_payments="3+ times",
        bill_payment_behavior="After due date",
        avg_bank_balance="< ₹5,000",
        savings_habit="No",
        income_sources="1",
        loan_rejection_history="Yes (multiple times)",
        age=19,
    )


class TestFormatting:
    """Tests for text helpers."""

    def test_to_latin1_transliterates_rupee_and_dashes(self):
        assert to_latin1("₹30,000–60,000") == "Rs. 30,000-60,000"
        assert to_latin1("CreditAI — Report") == "CreditAI - Report"

    def test_to_latin1_replaces_other_glyphs(self):
        assert to_latin1("ok ✓") == "ok ?"

    def test_format_percent(self):
        assert format_percent(0.585, 1) == "58.5%"
        assert format_percent(0.05) == "5%"
        assert format_percent(0.93) == "93%"

    def test_format_signed(self):
        assert format_signed(0.1) == "+0.100"
        assert format_signed(-0.068) == "-0.068"
        assert format_signed(0.0) == "0.000"

    def test_report_filename(self, worst_answers: AnswerSet):
        result = compute_score(worst_answers)

        assert report_filename(result, date(2024, 3, 9)) == "CreditAI_Report_415_2024-03-09.pdf"


class TestRenderReport:
    """Tests for PDF rendering."""

    def test_render_returns_pdf_bytes(self, worst_answers: AnswerSet):
        result = compute_score(worst_answers)
        suggestions = generate_suggestions(worst_answers, result)

        pdf = render_score_report(result, worst_answers, worst_answers.age, suggestions)

        assert isinstance(pdf, bytes)
        assert pdf.startswith(b"%PDF-")
        assert pdf.rstrip().endswith(b"%%EOF")

    def test_render_without_suggestions_or_answers(self):
        result = compute_score(AnswerSet())

        pdf = render_score_report(result, AnswerSet(), None, [])

        assert pdf.startswith(b"%PDF-")

    def test_render_with_fixed_timestamp_is_stable(self, worst_answers: AnswerSet):
        result = compute_score(worst_answers)
        suggestions = generate_suggestions(worst_answers, result)
        generated_at = datetime(2024, 3, 9, 12, 0, 0)

        first = ScoreReportGenerator().generate(
            result, worst_answers, 19, suggestions, generated_at=generated_at
        )
        second = ScoreReportGenerator().generate(
            result, worst_answers, 19, suggestions, generated_at=generated_at
        )

        assert len(first) == len(second)
