from __future__ import annotations

import io

import pytest
from openpyxl import load_workbook

from src.work_tracker.work_tracker.core.exceptions import ExportError
from src.work_tracker.work_tracker.exports import spreadsheet
from src.work_tracker.work_tracker.exports.spreadsheet import HEADERS, render_spreadsheet
from src.work_tracker.work_tracker.summaries.model import EmployeeSummary


def _rows(content: bytes) -> list[list]:
    ws = load_workbook(io.BytesIO(content))["Report"]
    return [[None if v == "" else v for v in row] for row in ws.iter_rows(values_only=True)]


SUMMARIES = [
    EmployeeSummary("e2", "Sara", total_editing_pages=8, total_workdays=2),
    EmployeeSummary("e1", "Ali", total_printing_pages=3, total_workdays=1, total_leave_days=1),
]


def test_layout_rows_and_totals():
    content = render_spreadsheet(SUMMARIES, title="Weekly", start="2024-01-01", end="2024-01-07")
    rows = _rows(content)

    assert rows[0][0] == "Weekly"
    assert rows[1][0] == "From: 2024-01-01 To: 2024-01-07"
    assert all(v is None for v in rows[2])
    assert list(rows[3]) == HEADERS
    assert list(rows[4]) == ["Sara", 0, 0, 8, 8, 2, 0]
    assert list(rows[5]) == ["Ali", 3, 0, 0, 3, 1, 1]
    assert all(v is None for v in rows[6])
    assert list(rows[7]) == ["Total", 3, 0, 8, 11, 3, 1]


def test_header_and_totals_are_bold():
    content = render_spreadsheet(SUMMARIES, title="Weekly", start="2024-01-01", end="2024-01-07")
    ws = load_workbook(io.BytesIO(content))["Report"]

    assert ws.cell(row=4, column=1).font.bold
    assert ws.cell(row=ws.max_row, column=5).font.bold
    assert ws.column_dimensions["A"].width == 25


def test_empty_summaries_still_has_zero_totals():
    rows = _rows(render_spreadsheet([], title="Empty", start="2024-01-01", end="2024-01-07"))

    assert list(rows[3]) == HEADERS
    assert list(rows[-1]) == ["Total", 0, 0, 0, 0, 0, 0]


def test_writer_failure_becomes_export_error(monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(spreadsheet.pd, "ExcelWriter", broken)

    with pytest.raises(ExportError):
        render_spreadsheet(SUMMARIES, title="Weekly", start="2024-01-01", end="2024-01-07")
