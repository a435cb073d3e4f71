from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import DEFAULT_REPORT_TITLE, PDF_MIMETYPE, XLSX_MIMETYPE
from ..core.enums import Role
from ..summaries.model import SummaryReport
from ..summaries.service import SummaryService
from .model import ExportFile
from .pdf import render_pdf
from .spreadsheet import render_spreadsheet

logger = logging.getLogger(__name__)


class ExportService:
    def __init__(
        self,
        summaries: SummaryService,
        *,
        default_title: str = DEFAULT_REPORT_TITLE,
        pdf_font_path: Optional[str] = None,
        pdf_bold_font_path: Optional[str] = None,
    ):
        self._summaries = summaries
        self._default_title = default_title
        self._pdf_font_path = pdf_font_path
        self._pdf_bold_font_path = pdf_bold_font_path

    def _report(self, current_role: Role, start: str, end: str) -> SummaryReport:
        # generate_report performs the admin check and date validation.
        return self._summaries.generate_report(current_role=current_role, start=start, end=end)

    def export_excel(self, *, current_role: Role, start: str, end: str, title: Optional[str] = None) -> ExportFile:
        report = self._report(current_role, start, end)
        content = render_spreadsheet(
            report.summaries,
            title=title or self._default_title,
            start=report.start,
            end=report.end,
        )
        logger.info("Spreadsheet export %s..%s (%d employees)", report.start, report.end, len(report.summaries))
        return ExportFile(
            filename=f"report_{report.start}_{report.end}.xlsx",
            mimetype=XLSX_MIMETYPE,
            content=content,
        )

    def export_pdf(self, *, current_role: Role, start: str, end: str, title: Optional[str] = None) -> ExportFile:
        report = self._report(current_role, start, end)
        content = render_pdf(
            report.summaries,
            title=title or self._default_title,
            start=report.start,
            end=report.end,
            font_path=self._pdf_font_path,
            bold_font_path=self._pdf_bold_font_path,
        )
        logger.info("PDF export %s..%s (%d employees)", report.start, report.end, len(report.summaries))
        return ExportFile(
            filename=f"report_{report.start}_{report.end}.pdf",
            mimetype=PDF_MIMETYPE,
            content=content,
        )
