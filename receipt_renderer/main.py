"""Entry-point for the receipt rendering pipeline."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union

from receipt_renderer.builder.receipt_builder import build_receipt
from receipt_renderer.model.document_model import DocumentModel
from receipt_renderer.model.order_model import OrderRecord
from receipt_renderer.model.style_model import get_stylesheet
from receipt_renderer.renderer.html_renderer import HtmlRenderer
from receipt_renderer.renderer.pdf_renderer import PdfRenderer
from receipt_renderer.utils.debug import DebugDumper
from receipt_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

SUPPORTED_FORMATS = ("html", "pdf")

OrderInput = Union[OrderRecord, Mapping[str, Any]]


def build_receipt_model(order: OrderInput) -> DocumentModel:
    """Validate an order, build its layout tree, and wrap it for the renderers."""
    record = order if isinstance(order, OrderRecord) else OrderRecord.from_mapping(order)
    document = build_receipt(record)
    model = DocumentModel(
        document=document,
        styles=get_stylesheet(),
        metadata={"title": document.title, "date": record.date, "purchaser": record.name},
    )
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("Receipt model: %s", DebugDumper().dumps(model))
    return model


def render_outputs(model: DocumentModel, *, html: bool = True, pdf: bool = False) -> Dict[str, Union[str, bytes]]:
    """Render the model into the requested formats, keyed by format name."""
    outputs: Dict[str, Union[str, bytes]] = {}
    if html:
        outputs["html"] = HtmlRenderer().render(model)
    if pdf:
        outputs["pdf"] = PdfRenderer().render(model)
    return outputs


def generate_receipt(order: OrderInput, fmt: str = "pdf") -> Union[str, bytes]:
    """Run the order → layout tree → renderer pipeline for a single format."""
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported receipt format '{fmt}'; expected one of {', '.join(SUPPORTED_FORMATS)}")

    model = build_receipt_model(order)
    LOGGER.info("Rendering %s receipt for %s", fmt.upper(), model.metadata["purchaser"])
    return render_outputs(model, html=fmt == "html", pdf=fmt == "pdf")[fmt]
