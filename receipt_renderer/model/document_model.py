"""Aggregate model combining the receipt tree with its stylesheet."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from receipt_renderer.model.elements import DocumentNode
from receipt_renderer.model.style_model import RECEIPT_STYLESHEET, StyleSheet


@dataclass(slots=True)
class DocumentModel:
    """Document tree plus everything a renderer needs to draw it."""

    document: DocumentNode
    styles: StyleSheet = RECEIPT_STYLESHEET
    metadata: Dict[str, str] = field(default_factory=dict)
