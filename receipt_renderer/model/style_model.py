"""Style model mapping symbolic style names to visual attributes."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

INHERITABLE_ATTRIBUTES = ("font_family", "font_size", "font_weight", "line_height", "color")


class UnknownStyleError(KeyError):
    """A node references a style that the stylesheet does not declare."""

    def __init__(self, style_name: str) -> None:
        super().__init__(style_name)
        self.style_name = style_name

    def __str__(self) -> str:
        return f"Style '{self.style_name}' is not declared in the stylesheet"


@dataclass(frozen=True, slots=True)
class StyleAttributes:
    """Visual attributes attached to a style name. Lengths are in points."""

    padding: Optional[float] = None
    margin_top: Optional[float] = None
    margin_bottom: Optional[float] = None
    margin_vertical: Optional[float] = None
    font_family: Optional[str] = None
    font_size: Optional[float] = None
    font_weight: Optional[str] = None
    line_height: Optional[float] = None
    border_bottom_width: Optional[float] = None
    border_bottom_color: Optional[str] = None
    color: Optional[str] = None
    flex_direction: Optional[str] = None
    justify_content: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        """Return only the attributes that are set."""
        return {key: value for key, value in asdict(self).items() if value is not None}

    def inheritable(self) -> "StyleAttributes":
        """Return the subset of attributes that cascade to child nodes."""
        return StyleAttributes(**{name: getattr(self, name) for name in INHERITABLE_ATTRIBUTES})

    def merge(self, other: Optional["StyleAttributes"]) -> "StyleAttributes":
        """Overlay *other* on top of this set; unset fields in *other* are ignored."""
        if other is None:
            return self
        overrides = {
            item.name: getattr(other, item.name)
            for item in fields(other)
            if getattr(other, item.name) is not None
        }
        return replace(self, **overrides)

    @property
    def is_bold(self) -> bool:
        return self.font_weight == "bold"


class StyleSheet:
    """Read-only lookup table of named styles."""

    def __init__(self, styles: Mapping[str, StyleAttributes]):
        self._styles = MappingProxyType(dict(styles))

    def resolve(self, style_name: str) -> StyleAttributes:
        """Return the attributes for *style_name* or raise :class:`UnknownStyleError`."""
        try:
            return self._styles[style_name]
        except KeyError:
            raise UnknownStyleError(style_name) from None

    def require(self, style_names: Iterable[str]) -> None:
        """Fail on the first name in *style_names* that is not declared."""
        for style_name in sorted(style_names):
            self.resolve(style_name)

    def all(self) -> Mapping[str, StyleAttributes]:
        """Return an immutable view of every declared style."""
        return self._styles


RECEIPT_STYLESHEET = StyleSheet(
    {
        "page": StyleAttributes(padding=40, font_family="Helvetica", font_size=11, line_height=1.5),
        "header": StyleAttributes(font_size=16, font_weight="bold", margin_bottom=10),
        "section": StyleAttributes(margin_bottom=12),
        "bold": StyleAttributes(font_weight="bold"),
        "row": StyleAttributes(flex_direction="row", justify_content="space-between"),
        "divider": StyleAttributes(border_bottom_width=1, border_bottom_color="#000000", margin_vertical=10),
        "footer": StyleAttributes(margin_top=30, font_size=10, color="#555555"),
    }
)


def get_stylesheet() -> StyleSheet:
    """Return the process-wide receipt stylesheet."""
    return RECEIPT_STYLESHEET


def resolve(style_name: str) -> StyleAttributes:
    """Resolve *style_name* against the receipt stylesheet."""
    return RECEIPT_STYLESHEET.resolve(style_name)
