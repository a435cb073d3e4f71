from __future__ import annotations

import io
from pathlib import Path

import pytest
import reportlab
from pypdf import PdfReader

from src.work_tracker.work_tracker.core.exceptions import ExportError
from src.work_tracker.work_tracker.exports import pdf
from src.work_tracker.work_tracker.exports.pdf import render_pdf, resolve_fonts
from src.work_tracker.work_tracker.summaries.model import EmployeeSummary


def _text(content: bytes) -> tuple[int, str]:
    reader = PdfReader(io.BytesIO(content))
    return len(reader.pages), "\n".join(page.extract_text() for page in reader.pages)


def test_names_and_totals_are_rendered():
    summaries = [
        EmployeeSummary("e2", "Sara", total_editing_pages=8, total_workdays=2),
        EmployeeSummary("e1", "Ali", total_printing_pages=3, total_workdays=1),
    ]

    content = render_pdf(summaries, title="Weekly Report", start="2024-01-01", end="2024-01-07")
    pages, text = _text(content)

    assert content.startswith(b"%PDF")
    assert pages == 1
    assert "Weekly Report" in text
    assert "2024-01-01 - 2024-01-07" in text
    assert "Sara" in text
    assert "Ali" in text
    assert "TOTAL" in text
    assert "11" in text


def test_long_names_are_truncated():
    summaries = [EmployeeSummary("e1", "Abcdefghijklmnopqrstuvwxyz")]

    _, text = _text(render_pdf(summaries, title="T", start="2024-01-01", end="2024-01-07"))

    assert "Abcdefghijklmnopqrst" in text
    assert "Abcdefghijklmnopqrstu" not in text


def test_overflow_continues_on_new_page():
    summaries = [EmployeeSummary(f"e{i}", f"Employee {i:02d}", total_printing_pages=i) for i in range(60)]

    pages, text = _text(render_pdf(summaries, title="Big", start="2024-01-01", end="2024-01-31"))

    assert pages >= 2
    for i in range(60):
        assert f"Employee {i:02d}" in text
    assert "TOTAL" in text


def test_missing_font_file_is_export_error(tmp_path):
    with pytest.raises(ExportError):
        resolve_fonts(str(tmp_path / "missing.ttf"))


def test_default_fonts_are_builtin():
    assert resolve_fonts() == ("Helvetica", "Helvetica-Bold")


def _vera(name: str) -> str:
    path = Path(reportlab.__file__).parent / "fonts" / name
    if not path.exists():
        pytest.skip(f"{name} not shipped with this reportlab build")
    return str(path)


def test_ttf_fonts_are_registered_per_file():
    regular, bold = _vera("Vera.ttf"), _vera("VeraBd.ttf")

    first = resolve_fonts(regular, bold)
    again = resolve_fonts(regular, bold)

    assert first == again
    assert first[0] != first[1]
    assert first[0].startswith("Vera-")
    assert first[1].startswith("VeraBd-")
    assert resolve_fonts(regular) == (first[0], first[0])


def test_render_with_ttf_fonts():
    summaries = [EmployeeSummary("e1", "Ali", total_printing_pages=3)]

    content = render_pdf(
        summaries, title="T", start="2024-01-01", end="2024-01-07",
        font_path=_vera("Vera.ttf"), bold_font_path=_vera("VeraBd.ttf"),
    )

    assert "Ali" in _text(content)[1]


@pytest.mark.parametrize("count", range(30, 45))
def test_totals_rule_never_crowds_header_rule(monkeypatch, count):
    drawn = []
    original = pdf._TableWriter.rule

    def record(self, y):
        drawn.append((self._c.getPageNumber(), y))
        original(self, y)

    monkeypatch.setattr(pdf._TableWriter, "rule", record)
    summaries = [EmployeeSummary(f"e{i}", f"Employee {i:02d}") for i in range(count)]

    render_pdf(summaries, title="T", start="2024-01-01", end="2024-01-07")

    pages = {page for page, _ in drawn}
    for page in pages:
        ys = sorted(y for p, y in drawn if p == page)
        assert len(ys) <= 2
        assert all(b - a >= pdf.ROW_HEIGHT for a, b in zip(ys, ys[1:]))
