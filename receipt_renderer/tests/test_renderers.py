"""Tests for the HTML and PDF renderers."""
import unittest
from html import escape

from receipt_renderer.builder.receipt_builder import build_receipt
from receipt_renderer.model.document_model import DocumentModel
from receipt_renderer.model.elements import DocumentNode, PageNode, SectionNode, TextNode, iter_text
from receipt_renderer.model.order_model import OrderRecord
from receipt_renderer.model.style_model import StyleAttributes, UnknownStyleError
from receipt_renderer.renderer.html_renderer import HtmlRenderer
from receipt_renderer.renderer.pdf_renderer import PdfRenderer
from receipt_renderer.renderer.utils import style_to_css


def make_model(**overrides) -> DocumentModel:
    values = dict(
        name="Tom & Jerry <Co>",
        email="tj@example.com",
        plushie="Grumpy Cat",
        qty=4,
        total=9.75,
        date="2026-10-19",
    )
    values.update(overrides)
    return DocumentModel(document=build_receipt(OrderRecord(**values)))


def broken_model() -> DocumentModel:
    page = PageNode(sections=(SectionNode(items=(TextNode("Hi", "headline"),)),))
    return DocumentModel(document=DocumentNode(page=page, title="Broken"))


class StyleToCssTest(unittest.TestCase):
    """CSS conversion of style attributes."""

    def test_converts_lengths_to_pixels(self) -> None:
        css = style_to_css(StyleAttributes(padding=40, font_size=12, line_height=1.5))
        self.assertEqual(css["font-size"], "16px")
        self.assertEqual(css["line-height"], "1.5")
        self.assertTrue(css["padding"].startswith("53.3"))

    def test_flex_and_border(self) -> None:
        css = style_to_css(
            StyleAttributes(
                flex_direction="row",
                justify_content="space-between",
                border_bottom_width=0.75,
                border_bottom_color="#000000",
            )
        )
        self.assertEqual(css["display"], "flex")
        self.assertEqual(css["justify-content"], "space-between")
        self.assertEqual(css["border-bottom"], "1px solid #000000")

    def test_vertical_margin_yields_to_explicit_margins(self) -> None:
        css = style_to_css(StyleAttributes(margin_vertical=6, margin_top=3))
        self.assertEqual(css["margin-top"], "4px")
        self.assertEqual(css["margin-bottom"], "8px")

    def test_bold_weight(self) -> None:
        self.assertEqual(style_to_css(StyleAttributes(font_weight="bold")), {"font-weight": "700"})
        self.assertEqual(style_to_css(StyleAttributes()), {})


class HtmlRendererTest(unittest.TestCase):
    """HTML output carries every text value with stylesheet CSS applied."""

    def setUp(self) -> None:
        self.model = make_model()
        self.html = HtmlRenderer().render(self.model)

    def test_contains_all_text_escaped(self) -> None:
        for value in iter_text(self.model.document):
            self.assertIn(escape(value), self.html)
        self.assertNotIn("<Co>", self.html)

    def test_document_shell(self) -> None:
        self.assertTrue(self.html.startswith("<!DOCTYPE html>"))
        self.assertIn("<title>Ploosh Preorder Receipt</title>", self.html)
        self.assertIn('class="receipt-page"', self.html)

    def test_styles_applied(self) -> None:
        self.assertIn("font-weight: 700", self.html)
        self.assertIn("justify-content: space-between", self.html)
        self.assertIn("border-bottom: 1.33333px solid #000000", self.html)
        self.assertIn("color: #555555", self.html)

    def test_row_cells_render_inline(self) -> None:
        self.assertIn('<span class="receipt-text">Item</span>', self.html)
        self.assertIn('<span class="receipt-text">$39.00</span>', self.html)

    def test_unknown_style_raises(self) -> None:
        with self.assertRaises(UnknownStyleError):
            HtmlRenderer().render(broken_model())


class PdfRendererTest(unittest.TestCase):
    """PDF output is a valid, reproducible single-page document."""

    def test_produces_pdf_bytes(self) -> None:
        data = PdfRenderer().render(make_model())
        self.assertIsInstance(data, bytes)
        self.assertTrue(data.startswith(b"%PDF"))
        self.assertIn(b"%%EOF", data[-32:])

    def test_page_stream_contains_drawn_cells(self) -> None:
        data = PdfRenderer(compress=False).render(make_model())
        for text in (b"($39.00) Tj", b"($9.75) Tj", b"(Grumpy Cat) Tj", b"(Ploosh Preorder Receipt) Tj"):
            self.assertIn(text, data)
        self.assertIn(b"/Helvetica-Bold", data)

    def test_output_is_reproducible(self) -> None:
        model = make_model()
        self.assertEqual(PdfRenderer().render(model), PdfRenderer().render(model))

    def test_letter_override(self) -> None:
        data = PdfRenderer(page_size_name="letter").render(make_model())
        self.assertIn(b"612", data)

    def test_long_text_overflow_is_clipped(self) -> None:
        model = make_model(name="Huge " * 4000)
        with self.assertLogs("receipt_renderer.renderer.pdf_renderer", level="WARNING"):
            data = PdfRenderer().render(model)
        self.assertTrue(data.startswith(b"%PDF"))

    def test_unknown_style_raises(self) -> None:
        with self.assertRaises(UnknownStyleError):
            PdfRenderer().render(broken_model())

    def test_unsupported_page_size(self) -> None:
        with self.assertRaises(ValueError):
            PdfRenderer(page_size_name="tabloid").render(make_model())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
