"""Unit tests for the receipt stylesheet and resolver."""
import unittest

from receipt_renderer.builder.receipt_builder import build_receipt
from receipt_renderer.model.elements import collect_style_refs
from receipt_renderer.model.order_model import OrderRecord
from receipt_renderer.model.style_model import (
    RECEIPT_STYLESHEET,
    StyleAttributes,
    StyleSheet,
    UnknownStyleError,
    get_stylesheet,
    resolve,
)


class StyleSheetTest(unittest.TestCase):
    """Style names resolve to the declared attribute sets."""

    def test_builder_styles_resolve(self) -> None:
        order = OrderRecord("Ada", "ada@example.com", "Sloth", 1, 5, "today")
        for name in collect_style_refs(build_receipt(order)):
            self.assertIsInstance(resolve(name), StyleAttributes)

    def test_declared_names(self) -> None:
        self.assertEqual(
            set(get_stylesheet().all()),
            {"page", "header", "section", "bold", "row", "divider", "footer"},
        )
        self.assertIs(get_stylesheet(), RECEIPT_STYLESHEET)

    def test_attribute_values(self) -> None:
        self.assertEqual(
            resolve("page").as_dict(),
            {"padding": 40, "font_family": "Helvetica", "font_size": 11, "line_height": 1.5},
        )
        self.assertEqual(resolve("header").as_dict(), {"font_size": 16, "font_weight": "bold", "margin_bottom": 10})
        self.assertEqual(resolve("bold").as_dict(), {"font_weight": "bold"})
        self.assertEqual(resolve("row").justify_content, "space-between")
        self.assertEqual(resolve("divider").border_bottom_width, 1)
        self.assertEqual(resolve("footer").color, "#555555")

    def test_unknown_style_is_fatal(self) -> None:
        with self.assertRaises(UnknownStyleError) as ctx:
            resolve("headline")
        self.assertEqual(ctx.exception.style_name, "headline")
        self.assertIn("headline", str(ctx.exception))
        self.assertIsInstance(ctx.exception, KeyError)

    def test_require_checks_every_name(self) -> None:
        RECEIPT_STYLESHEET.require(["page", "row"])
        with self.assertRaises(UnknownStyleError):
            RECEIPT_STYLESHEET.require(["page", "missing"])

    def test_views_are_read_only(self) -> None:
        view = get_stylesheet().all()
        with self.assertRaises(TypeError):
            view["page"] = StyleAttributes()  # type: ignore[index]
        with self.assertRaises(AttributeError):
            view["page"].font_size = 99  # type: ignore[misc]

    def test_stylesheet_copies_source_mapping(self) -> None:
        source = {"only": StyleAttributes(color="#ffffff")}
        sheet = StyleSheet(source)
        source["later"] = StyleAttributes()
        self.assertNotIn("later", sheet.all())
        self.assertIn("only", sheet.all())


class StyleAttributesTest(unittest.TestCase):
    """Cascading helpers used by renderers."""

    def test_merge_overrides_set_fields_only(self) -> None:
        base = StyleAttributes(font_size=11, font_weight="normal", color="#000000")
        merged = base.merge(StyleAttributes(font_weight="bold"))
        self.assertEqual(merged.font_size, 11)
        self.assertTrue(merged.is_bold)
        self.assertEqual(base.font_weight, "normal")
        self.assertIs(base.merge(None), base)

    def test_inheritable_drops_box_attributes(self) -> None:
        inherited = resolve("page").inheritable()
        self.assertIsNone(inherited.padding)
        self.assertEqual(inherited.font_size, 11)
        self.assertEqual(resolve("footer").inheritable().as_dict(), {"font_size": 10, "color": "#555555"})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
