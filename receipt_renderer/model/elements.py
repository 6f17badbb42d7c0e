"""Immutable layout node tree produced by the receipt builder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Set, Tuple, Union


@dataclass(frozen=True, slots=True)
class TextNode:
    """Leaf holding a fully formatted string."""

    value: str
    style_ref: Optional[str] = None

    kind: ClassVar[str] = "text"

    @property
    def children(self) -> Tuple[()]:
        return ()


@dataclass(frozen=True, slots=True)
class RowNode:
    """Horizontal run of text cells aligned as columns."""

    cells: Tuple[TextNode, ...]
    style_ref: Optional[str] = "row"

    kind: ClassVar[str] = "row"

    @property
    def children(self) -> Tuple[TextNode, ...]:
        return self.cells


SectionChild = Union[RowNode, TextNode]


@dataclass(frozen=True, slots=True)
class SectionNode:
    """Vertical block of rows and text lines; empty sections act as rules."""

    items: Tuple[SectionChild, ...] = ()
    style_ref: Optional[str] = "section"

    kind: ClassVar[str] = "section"

    @property
    def children(self) -> Tuple[SectionChild, ...]:
        return self.items


@dataclass(frozen=True, slots=True)
class PageNode:
    """Single printable page."""

    sections: Tuple[SectionNode, ...]
    style_ref: Optional[str] = "page"
    size: str = "A4"

    kind: ClassVar[str] = "page"

    @property
    def children(self) -> Tuple[SectionNode, ...]:
        return self.sections


@dataclass(frozen=True, slots=True)
class DocumentNode:
    """Root of the tree; owns exactly one page."""

    page: PageNode
    title: str = ""
    style_ref: Optional[str] = None

    kind: ClassVar[str] = "document"

    @property
    def children(self) -> Tuple[PageNode]:
        return (self.page,)


LayoutNode = Union[DocumentNode, PageNode, SectionNode, RowNode, TextNode]


def iter_nodes(root: LayoutNode) -> Iterator[LayoutNode]:
    """Yield *root* and all of its descendants depth-first, parents first."""
    yield root
    for child in root.children:
        yield from iter_nodes(child)


def collect_style_refs(root: LayoutNode) -> Set[str]:
    """Return every style name referenced anywhere below *root*."""
    return {node.style_ref for node in iter_nodes(root) if node.style_ref is not None}


def iter_text(root: LayoutNode) -> Iterator[str]:
    """Yield the value of every text leaf in document order."""
    for node in iter_nodes(root):
        if isinstance(node, TextNode):
            yield node.value
