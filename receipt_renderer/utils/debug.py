"""Helpers to serialise intermediate representations for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any

from receipt_renderer.model.document_model import DocumentModel
from receipt_renderer.model.style_model import StyleSheet


class DebugDumper:
    """Turns the receipt model into JSON for inspection in logs."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def dumps(self, model: DocumentModel) -> str:
        """Return the document model as a JSON string."""
        payload = {
            "metadata": dict(model.metadata),
            "styles": self._serialize(model.styles),
            "document": self._serialize(model.document),
        }
        return json.dumps(payload, indent=self.indent)

    def _serialize(self, value: Any) -> Any:
        if isinstance(value, StyleSheet):
            return {name: attrs.as_dict() for name, attrs in sorted(value.all().items())}
        if is_dataclass(value):
            data = {"kind": value.kind} if hasattr(value, "kind") else {}
            data.update({item.name: self._serialize(getattr(value, item.name)) for item in fields(value)})
            return data
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
