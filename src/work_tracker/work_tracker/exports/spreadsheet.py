from __future__ import annotations

import io
import logging
from typing import Sequence

import pandas as pd
from openpyxl.styles import Font

from ..core.exceptions import ExportError
from ..summaries.model import EmployeeSummary
from .common import COLUMN_COUNT, summary_row, totals_row

logger = logging.getLogger(__name__)

SHEET_NAME = "Report"
HEADERS = ["Name", "Printing", "Typesetting", "Editing", "Total", "Workdays", "LeaveDays"]
TOTALS_LABEL = "Total"
COLUMN_WIDTHS = [25, 15, 15, 15, 15, 12, 12]

# 1-based row numbers of the fixed layout
HEADER_ROW = 4
FIRST_DATA_ROW = 5


def _pad(row: list) -> list:
    return list(row) + [None] * (COLUMN_COUNT - len(row))


def render_spreadsheet(
    summaries: Sequence[EmployeeSummary],
    *,
    title: str,
    start: str,
    end: str,
) -> bytes:
    """Render summaries into a single-sheet .xlsx workbook.

    Layout: title, date range, blank, header, one row per summary (in the
    given order), blank, totals row.
    """

    rows = [
        [title],
        [f"From: {start} To: {end}"],
        [],
        HEADERS,
        *[summary_row(s) for s in summaries],
        [],
        totals_row(summaries, TOTALS_LABEL),
    ]
    df = pd.DataFrame([_pad(r) for r in rows], dtype=object)

    output = io.BytesIO()
    try:
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, header=False, sheet_name=SHEET_NAME)

            ws = writer.sheets[SHEET_NAME]
            for i, width in enumerate(COLUMN_WIDTHS):
                ws.column_dimensions[chr(ord("A") + i)].width = width
            bold = Font(bold=True)
            ws.cell(row=1, column=1).font = Font(bold=True, size=14)
            for col in range(1, COLUMN_COUNT + 1):
                ws.cell(row=HEADER_ROW, column=col).font = bold
                ws.cell(row=len(rows), column=col).font = bold
    except Exception as e:
        logger.exception("Spreadsheet export failed")
        raise ExportError("Failed to render spreadsheet") from e

    return output.getvalue()
