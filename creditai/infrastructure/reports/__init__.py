"""Report rendering."""

from .pdf_report import ScoreReportGenerator, render_score_report, report_filename

__all__ = [
    "ScoreReportGenerator",
    "render_score_report",
    "report_filename",
]
