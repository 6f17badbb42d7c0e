"""Render the receipt tree into a standalone HTML document."""
from __future__ import annotations

from html import escape
from typing import List

from receipt_renderer.model.document_model import DocumentModel
from receipt_renderer.model.elements import LayoutNode, PageNode, RowNode, TextNode, collect_style_refs
from receipt_renderer.model.style_model import StyleSheet
from receipt_renderer.renderer.utils import style_to_css
from receipt_renderer.utils.logger import get_logger
from receipt_renderer.utils.units import page_size, points_to_pixels

LOGGER = get_logger(__name__)


class HtmlRenderer:
    """Produce a flow-layout HTML page styled with inline CSS."""

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent

    def render(self, model: DocumentModel) -> str:
        document = model.document
        model.styles.require(collect_style_refs(document))
        body = "\n".join(self._render_node(document.page, model.styles, depth=1, inline=False))
        title = escape(document.title or model.metadata.get("title", "Receipt"))
        LOGGER.debug("Rendered HTML receipt '%s'", title)
        return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
  <meta charset=\"utf-8\" />
  <title>{title}</title>
  <style>
    body {{ margin: 0; padding: 0; background: #eeeeee; }}
    .receipt-page {{ box-sizing: border-box; margin: 0 auto; background: #ffffff; }}
  </style>
</head>
<body>
{body}
</body>
</html>
"""

    def _render_node(self, node: LayoutNode, styles: StyleSheet, depth: int, inline: bool) -> List[str]:
        pad = self._indent * depth
        style_attr = self._style_attr(node, styles)
        if isinstance(node, TextNode):
            tag = "span" if inline else "div"
            return [f"{pad}<{tag} class=\"receipt-text\"{style_attr}>{escape(node.value)}</{tag}>"]

        if isinstance(node, PageNode):
            width, min_height = page_size(node.size)
            sizing = f"width: {points_to_pixels(width):g}px; min-height: {points_to_pixels(min_height):g}px"
            style_attr = self._style_attr(node, styles, extra=sizing)

        lines = [f"{pad}<div class=\"receipt-{node.kind}\"{style_attr}>"]
        child_inline = isinstance(node, RowNode)
        for child in node.children:
            lines.extend(self._render_node(child, styles, depth + 1, child_inline))
        lines.append(f"{pad}</div>")
        return lines

    def _style_attr(self, node: LayoutNode, styles: StyleSheet, extra: str = "") -> str:
        declarations = []
        if node.style_ref is not None:
            css = style_to_css(styles.resolve(node.style_ref))
            declarations.extend(f"{key}: {value}" for key, value in css.items())
        if extra:
            declarations.append(extra)
        if not declarations:
            return ""
        return f" style=\"{escape('; '.join(declarations))}\""
