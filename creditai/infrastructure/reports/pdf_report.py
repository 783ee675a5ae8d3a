"""
Credit Score Report PDF Generator

Renders a scoring result as a one or two page PDF using fpdf2.
"""

from datetime import date, datetime
from typing import Optional, Sequence

import structlog
from fpdf import FPDF

from creditai.service.scoring import (
    AnswerSet,
    Impact,
    RiskBand,
    ScoringResult,
    Suggestion,
)
from creditai.service.scoring.features import round_half_up

logger = structlog.get_logger(__name__)


PRODUCT_NAME = "CreditAI"
REPORT_TITLE = "Credit Score Report"
TAG_LINE = "CreditAI - AI-Powered Alternative Credit Scoring"

# Core PDF fonts only cover Latin-1
_TRANSLITERATIONS = {
    "₹": "Rs. ",
    "–": "-",
    "—": "-",
    "’": "'",
    "‘": "'",
    "“": '"',
    "”": '"',
}


def to_latin1(text: str) -> str:
    """Transliterate glyphs the core fonts cannot draw."""
    for glyph, replacement in _TRANSLITERATIONS.items():
        text = text.replace(glyph, replacement)
    return text.encode("latin-1", "replace").decode("latin-1")


def format_percent(value: float, digits: int = 0) -> str:
    """Format a 0-1 ratio as a percentage string."""
    return f"{round_half_up(value * 100, digits):.{digits}f}%"


def format_signed(value: float) -> str:
    """Attribution value with an explicit sign for increases in risk."""
    return f"{'+' if value > 0 else ''}{value:.3f}"


def report_filename(result: ScoringResult, today: Optional[date] = None) -> str:
    """Download file name: CreditAI_Report_<score>_<YYYY-MM-DD>.pdf"""
    today = today or date.today()
    return f"CreditAI_Report_{result.credit_score}_{today.isoformat()}.pdf"


class _ReportPDF(FPDF):
    """FPDF with the report footer on every page."""

    FOOTER_COLOR = (150, 150, 150)

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", size=8)
        self.set_text_color(*self.FOOTER_COLOR)
        self.cell(0, 5, TAG_LINE, align="C")
        self.set_x(self.l_margin)
        self.cell(0, 5, f"Page {self.page_no()} of {{nb}}", align="R")


class ScoreReportGenerator:
    """
    Generates PDF credit score reports.

    Layout:
    - Dark header band with product name, title and date
    - Score banner coloured by risk band
    - Key financial metrics
    - Feature impact analysis with signed bars
    - Improvement recommendations (when any)
    - Footer with tag line and page numbering
    """

    # Page dimensions and margins (A4)
    PAGE_WIDTH = 210
    PAGE_HEIGHT = 297
    MARGIN = 20

    # Colors (RGB)
    HEADER_COLOR = (30, 41, 59)
    TEXT_COLOR = (30, 41, 59)
    MUTED_COLOR = (100, 116, 139)
    WHITE = (255, 255, 255)
    RISK_UP_COLOR = (239, 68, 68)
    RISK_DOWN_COLOR = (34, 197, 94)

    BAND_COLORS = {
        RiskBand.PRIME: (34, 197, 94),
        RiskBand.NEAR_PRIME: (59, 130, 246),
        RiskBand.SUBPRIME: (245, 158, 11),
        RiskBand.HIGH_RISK: (239, 68, 68),
    }

    IMPACT_COLORS = {
        Impact.HIGH: (239, 68, 68),
        Impact.MEDIUM: (245, 158, 11),
        Impact.LOW: (34, 197, 94),
    }

    # Attribution bars: mm per unit of attribution, zero axis x position
    BAR_SCALE = 300
    BAR_AXIS_X = 120
    VALUE_X = 170

    # Start a new page before a block that begins below these y positions
    SECTION_BREAK_Y = 240
    ITEM_BREAK_Y = 270

    def generate(
        self,
        result: ScoringResult,
        answers: AnswerSet,
        age: Optional[int],
        suggestions: Sequence[Suggestion],
        generated_at: Optional[datetime] = None,
    ) -> bytes:
        """
        Generate the PDF report for a scoring result.

        Args:
            result: The scoring result to render
            answers: The raw answers (income and employment are shown)
            age: The borrower's age as entered
            suggestions: Ranked improvement suggestions
            generated_at: Generation timestamp (defaults to now)

        Returns:
            PDF content as bytes
        """
        generated_at = generated_at or datetime.now()

        pdf = _ReportPDF()
        pdf.set_auto_page_break(auto=True, margin=self.MARGIN)
        pdf.add_page()
        pdf.set_font("Helvetica", size=10)

        self._add_header(pdf, generated_at)
        self._add_score_banner(pdf, result)
        self._add_key_metrics(pdf, result, answers, age)
        self._add_feature_analysis(pdf, result)
        if suggestions:
            self._add_suggestions(pdf, suggestions)

        # fpdf2's output() returns bytearray
        pdf_bytes = bytes(pdf.output())

        logger.info(
            "score_report_rendered",
            credit_score=result.credit_score,
            pages=pdf.page_no(),
            size_bytes=len(pdf_bytes),
        )
        return pdf_bytes

    def _add_header(self, pdf: FPDF, generated_at: datetime) -> None:
        """Dark header band."""
        pdf.set_fill_color(*self.HEADER_COLOR)
        pdf.rect(0, 0, self.PAGE_WIDTH, 45, style="F")

        pdf.set_text_color(*self.WHITE)
        pdf.set_xy(self.MARGIN, 14)
        pdf.set_font("Helvetica", "B", 22)
        pdf.cell(0, 10, PRODUCT_NAME, new_x="LMARGIN", new_y="NEXT")

        pdf.set_x(self.MARGIN)
        pdf.set_font("Helvetica", size=12)
        pdf.cell(0, 8, REPORT_TITLE, new_x="LMARGIN", new_y="NEXT")

        pdf.set_x(self.MARGIN)
        pdf.set_font("Helvetica", size=9)
        generated = f"{generated_at.day} {generated_at.strftime('%B %Y')}"
        pdf.cell(0, 6, f"Generated: {generated}", new_x="LMARGIN", new_y="NEXT")

        pdf.set_y(55)

    def _add_score_banner(self, pdf: FPDF, result: ScoringResult) -> None:
        """Score and band on a band-coloured block."""
        y = pdf.get_y()
        width = self.PAGE_WIDTH - 2 * self.MARGIN

        pdf.set_fill_color(*self.BAND_COLORS[result.risk_band])
        pdf.rect(self.MARGIN, y, width, 35, style="F")

        pdf.set_text_color(*self.WHITE)
        pdf.set_xy(self.MARGIN, y + 6)
        pdf.set_font("Helvetica", "B", 28)
        pdf.cell(width, 14, str(result.credit_score), align="C")

        pdf.set_xy(self.MARGIN, y + 22)
        pdf.set_font("Helvetica", "B", 11)
        banner = f"{result.risk_band.value} Risk - {result.recommendation.value}"
        pdf.cell(width, 8, banner, align="C")

        pdf.set_y(y + 45)

    def _add_section_title(self, pdf: FPDF, title: str) -> None:
        pdf.set_x(self.MARGIN)
        pdf.set_text_color(*self.TEXT_COLOR)
        pdf.set_font("Helvetica", "B", 14)
        pdf.cell(0, 8, title, new_x="LMARGIN", new_y="NEXT")

    def _add_key_metrics(
        self,
        pdf: FPDF,
        result: ScoringResult,
        answers: AnswerSet,
        age: Optional[int],
    ) -> None:
        """Label/value table of the headline numbers."""
        self._add_section_title(pdf, "Key Financial Metrics")

        metrics = [
            ("Credit Score", f"{result.credit_score} / 850"),
            ("Risk Band", result.risk_band.value),
            ("Recommendation", result.recommendation.value),
            ("Default Probability", format_percent(result.prediction_probability, 1)),
            ("Debt-to-Income Ratio", format_percent(result.debt_to_income_ratio)),
            ("Confidence", format_percent(result.confidence)),
            ("Monthly Income", answers.monthly_income_range or "N/A"),
            ("Employment", answers.employment_type or "N/A"),
            ("Age", "N/A" if age is None else str(age)),
        ]

        width = self.PAGE_WIDTH - 2 * self.MARGIN - 10
        for label, value in metrics:
            y = pdf.get_y()
            pdf.set_xy(self.MARGIN + 5, y)
            pdf.set_font("Helvetica", size=10)
            pdf.set_text_color(*self.MUTED_COLOR)
            pdf.cell(width / 2, 7, label)
            pdf.set_font("Helvetica", "B", 10)
            pdf.set_text_color(*self.TEXT_COLOR)
            pdf.cell(width / 2, 7, to_latin1(value), align="R")
            pdf.set_y(y + 7)

        pdf.ln(5)

    def _add_feature_analysis(self, pdf: FPDF, result: ScoringResult) -> None:
        """One signed bar per attribution, red for added risk and green for reduced risk."""
        self._add_section_title(pdf, "Feature Impact Analysis")
        pdf.set_font("Helvetica", size=9)

        for attribution in result.attributions:
            y = pdf.get_y()
            value = attribution.value
            bar_width = abs(value) * self.BAR_SCALE

            pdf.set_xy(self.MARGIN + 5, y)
            pdf.set_text_color(*self.MUTED_COLOR)
            pdf.cell(self.BAR_AXIS_X - self.MARGIN - 35, 7, attribution.feature.value)

            if bar_width > 0:
                pdf.set_fill_color(*(self.RISK_UP_COLOR if value > 0 else self.RISK_DOWN_COLOR))
                bar_x = self.BAR_AXIS_X if value > 0 else self.BAR_AXIS_X - bar_width
                pdf.rect(bar_x, y + 1.5, bar_width, 4, style="F")

            pdf.set_xy(self.VALUE_X, y)
            pdf.set_text_color(*self.TEXT_COLOR)
            pdf.cell(20, 7, format_signed(value))
            pdf.set_y(y + 7)

        pdf.ln(5)

    def _add_suggestions(self, pdf: FPDF, suggestions: Sequence[Suggestion]) -> None:
        """Suggestion list with an impact-coloured dot per item."""
        if pdf.get_y() > self.SECTION_BREAK_Y:
            pdf.add_page()
            pdf.set_y(self.MARGIN)

        self._add_section_title(pdf, "Improvement Recommendations")
        text_x = self.MARGIN + 13
        text_width = self.PAGE_WIDTH - text_x - self.MARGIN

        for suggestion in suggestions:
            if pdf.get_y() > self.ITEM_BREAK_Y:
                pdf.add_page()
                pdf.set_y(self.MARGIN)

            y = pdf.get_y()
            pdf.set_fill_color(*self.IMPACT_COLORS[suggestion.impact])
            pdf.ellipse(self.MARGIN + 5, y + 1.5, 4, 4, style="F")

            pdf.set_xy(text_x, y)
            pdf.set_font("Helvetica", "B", 10)
            pdf.set_text_color(*self.TEXT_COLOR)
            title = f"{suggestion.title} ({suggestion.impact.value} Impact)"
            pdf.cell(text_width, 6, to_latin1(title), new_x="LMARGIN", new_y="NEXT")

            pdf.set_x(text_x)
            pdf.set_font("Helvetica", size=9)
            pdf.set_text_color(*self.MUTED_COLOR)
            pdf.multi_cell(text_width, 4.5, to_latin1(suggestion.description))
            pdf.ln(4)


def render_score_report(
    result: ScoringResult,
    answers: AnswerSet,
    age: Optional[int],
    suggestions: Sequence[Suggestion],
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render a scoring result as PDF bytes."""
    return ScoreReportGenerator().generate(
        result,
        answers,
        age,
        suggestions,
        generated_at=generated_at,
    )
