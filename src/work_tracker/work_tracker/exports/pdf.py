from __future__ import annotations

import hashlib
import io
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from reportlab.lib.colors import Color
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from ..core.exceptions import ExportError
from ..summaries.model import EmployeeSummary
from .common import summary_row, totals_row

logger = logging.getLogger(__name__)

HEADERS = ["Name", "Print", "Type", "Edit", "Total", "Work", "Leave"]
TOTALS_LABEL = "TOTAL"
COLUMN_WIDTHS = [150, 60, 60, 60, 60, 50, 50]
NAME_MAX_CHARS = 20

MARGIN_X = 50
MARGIN_TOP = 50
MARGIN_BOTTOM = 50
RULE_END_X = 545
ROW_HEIGHT = 18
TOTALS_GAP = 10

PRIMARY = Color(159 / 255, 25 / 255, 24 / 255)
TEXT = Color(26 / 255, 26 / 255, 26 / 255)


def _font_name(path: str) -> str:
    """Registry name for a TTF file, unique per resolved path."""
    resolved = str(Path(path).resolve())
    digest = hashlib.sha1(resolved.encode("utf-8")).hexdigest()[:8]
    return f"{Path(path).stem}-{digest}"


def _register_font(path: str) -> str:
    name = _font_name(path)
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, path))
    return name


def resolve_fonts(font_path: Optional[str] = None, bold_font_path: Optional[str] = None) -> Tuple[str, str]:
    """Return (regular, bold) font names, registering TrueType files if given.

    The built-in Helvetica pair only covers Latin text; names in other
    scripts need a TTF that has their glyphs. reportlab keeps registered
    fonts in a process-wide table; entries are keyed by file path, so a
    given path always maps to the same font and rendering stays repeatable.
    """

    if not font_path:
        return "Helvetica", "Helvetica-Bold"

    try:
        return _register_font(font_path), _register_font(bold_font_path or font_path)
    except Exception as e:
        raise ExportError(f"Cannot load PDF font: {e}") from e


class _TableWriter:
    """Draws rows top-down and starts a new page (repeating the header) on overflow."""

    def __init__(self, c: canvas.Canvas, font: str, bold: str):
        self._c = c
        self._font = font
        self._bold = bold
        self._height = A4[1]
        self.y = self._height - MARGIN_TOP

    def text(self, value: str, *, x: float, size: int, bold: bool = False, color: Color = TEXT) -> None:
        self._c.setFont(self._bold if bold else self._font, size)
        self._c.setFillColor(color)
        self._c.drawString(x, self.y, value)

    def rule(self, y: float) -> None:
        self._c.setStrokeColor(PRIMARY)
        self._c.setLineWidth(1)
        self._c.line(MARGIN_X, y, RULE_END_X, y)

    def cells(self, values: Sequence, *, bold: bool = False, color: Color = TEXT) -> None:
        x = MARGIN_X
        for value, width in zip(values, COLUMN_WIDTHS):
            self.text(str(value), x=x, size=10, bold=bold, color=color)
            x += width

    def header(self) -> None:
        self.cells(HEADERS, bold=True, color=PRIMARY)
        self.y -= 20
        self.rule(self.y + 5)
        self.y -= 5

    def ensure_room(self, needed: float = 0) -> bool:
        """Start a new page if fewer than ``needed`` points remain; True if one was started."""
        if self.y - needed >= MARGIN_BOTTOM:
            return False
        self._c.showPage()
        self.y = self._height - MARGIN_TOP
        self.header()
        return True


def render_pdf(
    summaries: Sequence[EmployeeSummary],
    *,
    title: str,
    start: str,
    end: str,
    font_path: Optional[str] = None,
    bold_font_path: Optional[str] = None,
) -> bytes:
    """Render summaries as an A4 table.

    Rows that do not fit continue on a new page under a repeated header, so
    no summary is ever dropped. The totals row is drawn in bold.
    """

    font, bold = resolve_fonts(font_path, bold_font_path)

    output = io.BytesIO()
    try:
        c = canvas.Canvas(output, pagesize=A4, pageCompression=0)
        c.setTitle(title)
        w = _TableWriter(c, font, bold)

        w.text(title, x=MARGIN_X, size=20, bold=True, color=PRIMARY)
        w.y -= 30
        w.text(f"{start} - {end}", x=MARGIN_X, size=12)
        w.y -= 40
        w.header()

        for s in summaries:
            w.ensure_room()
            row = summary_row(s)
            row[0] = s.full_name[:NAME_MAX_CHARS]
            w.cells(row)
            w.y -= ROW_HEIGHT

        # on a fresh page the header rule already separates the totals
        if not w.ensure_room(TOTALS_GAP):
            w.y -= TOTALS_GAP
            w.rule(w.y + 15)
        w.cells(totals_row(summaries, TOTALS_LABEL), bold=True, color=PRIMARY)

        c.save()
    except ExportError:
        raise
    except Exception as e:
        logger.exception("PDF export failed")
        raise ExportError("Failed to render PDF") from e

    return output.getvalue()
