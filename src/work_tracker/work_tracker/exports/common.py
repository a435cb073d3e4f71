from __future__ import annotations

from typing import List, Sequence

from ..summaries.model import EmployeeSummary

COLUMN_COUNT = 7


def summary_row(s: EmployeeSummary) -> list:
    return [
        s.full_name,
        s.total_printing_pages,
        s.total_typesetting_pages,
        s.total_editing_pages,
        s.total_pages,
        s.total_workdays,
        s.total_leave_days,
    ]


def totals_row(summaries: Sequence[EmployeeSummary], label: str) -> list:
    """Column-wise sums across all summaries, first cell is the label."""
    sums: List[int] = [0] * (COLUMN_COUNT - 1)
    for s in summaries:
        for i, value in enumerate(summary_row(s)[1:]):
            sums[i] += int(value)
    return [label, *sums]
