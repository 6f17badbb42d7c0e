"""Render the receipt tree into a single-page PDF using ReportLab."""
from __future__ import annotations

import io
from typing import Optional

from reportlab.lib.colors import HexColor
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from receipt_renderer.model.document_model import DocumentModel
from receipt_renderer.model.elements import LayoutNode, RowNode, SectionNode, TextNode, collect_style_refs
from receipt_renderer.model.style_model import StyleAttributes, StyleSheet
from receipt_renderer.utils.logger import get_logger
from receipt_renderer.utils.units import page_size

LOGGER = get_logger(__name__)

BASE_TEXT_STYLE = StyleAttributes(
    font_family="Helvetica", font_size=12, font_weight="normal", line_height=1.2, color="#000000"
)
BOLD_SUFFIX = "-Bold"


def _font_name(style: StyleAttributes) -> str:
    family = style.font_family or "Helvetica"
    return f"{family}{BOLD_SUFFIX}" if style.is_bold else family


def _margins(style: StyleAttributes) -> tuple[float, float]:
    vertical = style.margin_vertical or 0
    top = style.margin_top if style.margin_top is not None else vertical
    bottom = style.margin_bottom if style.margin_bottom is not None else vertical
    return top, bottom


class _PagePainter:
    """Draws one page top-down, tracking the vertical cursor."""

    def __init__(self, pdf: canvas.Canvas, styles: StyleSheet, left: float, top: float, width: float, bottom: float):
        self._pdf = pdf
        self._styles = styles
        self._left = left
        self._width = width
        self._bottom = bottom
        self.y = top
        self.overflowed = False

    def style_of(self, node: LayoutNode) -> StyleAttributes:
        if node.style_ref is None:
            return StyleAttributes()
        return self._styles.resolve(node.style_ref)

    def draw_section(self, section: SectionNode, inherited: StyleAttributes) -> None:
        own = self.style_of(section)
        top, bottom = _margins(own)
        self.y -= top
        context = inherited.merge(own.inheritable())
        for child in section.children:
            if isinstance(child, RowNode):
                self.draw_row(child, context)
            else:
                self.draw_text(child, context)
        if own.border_bottom_width:
            self._pdf.setStrokeColor(HexColor(own.border_bottom_color or "#000000"))
            self._pdf.setLineWidth(own.border_bottom_width)
            self._pdf.line(self._left, self.y, self._left + self._width, self.y)
            self.y -= own.border_bottom_width
        self.y -= bottom

    def draw_text(self, node: TextNode, inherited: StyleAttributes) -> None:
        own = self.style_of(node)
        style = inherited.merge(own.inheritable())
        top, bottom = _margins(own)
        self.y -= top
        font = _font_name(style)
        size = style.font_size
        leading = size * style.line_height
        for line in simpleSplit(node.value, font, size, self._width) or [""]:
            if not self._reserve(leading):
                return
            self._draw_string(line, self._left, self._baseline(size, leading), font, size, style.color)
            self.y -= leading
        self.y -= bottom

    def draw_row(self, row: RowNode, inherited: StyleAttributes) -> None:
        own = self.style_of(row)
        context = inherited.merge(own.inheritable())
        cells = []
        for cell in row.cells:
            style = context.merge(self.style_of(cell).inheritable())
            font = _font_name(style)
            cells.append((cell.value, style, font, stringWidth(cell.value, font, style.font_size)))
        if not cells:
            return

        leading = max(style.font_size * style.line_height for _, style, _, _ in cells)
        if not self._reserve(leading):
            return

        gap = 0.0
        if own.justify_content == "space-between" and len(cells) > 1:
            gap = max((self._width - sum(width for *_, width in cells)) / (len(cells) - 1), 0.0)

        x = self._left
        for value, style, font, width in cells:
            self._draw_string(value, x, self._baseline(style.font_size, leading), font, style.font_size, style.color)
            x += width + gap
        self.y -= leading

    def _baseline(self, size: float, leading: float) -> float:
        return self.y - size - (leading - size) / 2

    def _reserve(self, height: float) -> bool:
        if self.y - height >= self._bottom:
            return True
        if not self.overflowed:
            LOGGER.warning("Receipt content exceeds the page; remaining lines are clipped")
        self.overflowed = True
        return False

    def _draw_string(self, text: str, x: float, y: float, font: str, size: float, color: Optional[str]) -> None:
        self._pdf.setFont(font, size)
        self._pdf.setFillColor(HexColor(color or "#000000"))
        self._pdf.drawString(x, y, text)


class PdfRenderer:
    """Draw the receipt onto a ReportLab canvas and return the PDF bytes."""

    def __init__(self, page_size_name: Optional[str] = None, compress: bool = True) -> None:
        self._page_size_name = page_size_name
        self._compress = compress

    def render(self, model: DocumentModel) -> bytes:
        document = model.document
        page = document.page
        model.styles.require(collect_style_refs(document))

        width, height = page_size(self._page_size_name or page.size)
        page_style = BASE_TEXT_STYLE.merge(
            model.styles.resolve(page.style_ref) if page.style_ref else None
        )
        padding = page_style.padding or 0

        buffer = io.BytesIO()
        pdf = canvas.Canvas(
            buffer, pagesize=(width, height), invariant=1, pageCompression=1 if self._compress else 0
        )
        pdf.setTitle(document.title or model.metadata.get("title", "Receipt"))
        if "purchaser" in model.metadata:
            pdf.setSubject(f"Receipt for {model.metadata['purchaser']}")
        pdf.setCreator("receipt_renderer")

        painter = _PagePainter(pdf, model.styles, padding, height - padding, width - 2 * padding, padding)
        inherited = page_style.inheritable()
        for section in page.sections:
            painter.draw_section(section, inherited)

        pdf.showPage()
        pdf.save()
        LOGGER.debug("Rendered PDF receipt (%d bytes)", buffer.tell())
        return buffer.getvalue()
