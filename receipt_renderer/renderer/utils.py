"""Common helpers shared by renderer implementations."""
from __future__ import annotations

from typing import Dict

from receipt_renderer.model.style_model import StyleAttributes
from receipt_renderer.utils.units import points_to_pixels


def _px(value: float) -> str:
    return f"{points_to_pixels(value):g}px"


def style_to_css(style: StyleAttributes) -> Dict[str, str]:
    """Convert style attributes into CSS properties."""
    css: Dict[str, str] = {}
    if style.padding is not None:
        css["padding"] = _px(style.padding)
    if style.margin_vertical is not None:
        css["margin-top"] = _px(style.margin_vertical)
        css["margin-bottom"] = _px(style.margin_vertical)
    if style.margin_top is not None:
        css["margin-top"] = _px(style.margin_top)
    if style.margin_bottom is not None:
        css["margin-bottom"] = _px(style.margin_bottom)
    if style.font_family:
        css["font-family"] = style.font_family
    if style.font_size is not None:
        css["font-size"] = _px(style.font_size)
    if style.is_bold:
        css["font-weight"] = "700"
    if style.line_height is not None:
        css["line-height"] = f"{style.line_height:g}"
    if style.border_bottom_width is not None:
        color = style.border_bottom_color or "currentColor"
        css["border-bottom"] = f"{_px(style.border_bottom_width)} solid {color}"
    if style.color:
        css["color"] = style.color
    if style.flex_direction:
        css["display"] = "flex"
        css["flex-direction"] = style.flex_direction
    if style.justify_content:
        css["justify-content"] = style.justify_content
    return css
