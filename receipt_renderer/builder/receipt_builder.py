"""Build the receipt layout tree from a validated order record."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from receipt_renderer.model.elements import DocumentNode, PageNode, RowNode, SectionNode, TextNode
from receipt_renderer.model.order_model import OrderRecord, validate_order
from receipt_renderer.utils.formatters import format_currency
from receipt_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

RECEIPT_TITLE = "Ploosh Preorder Receipt"
TAX_LITERAL = "$0.00"
SUMMARY_COLUMNS = ("Item", "Qty", "Price", "Total")


@dataclass(frozen=True, slots=True)
class MerchantProfile:
    """Sender identity printed in the "From" block and the footer."""

    name: str
    address_lines: Tuple[str, ...]
    support_email: str


PLOOSH_MERCHANT = MerchantProfile(
    name="Ploosh Inc",
    address_lines=("123 Cuddly Lane", "Plushville, NY 10001"),
    support_email="support@ploosh.ai",
)


def _row(*values: str, style_ref: str | None = None) -> RowNode:
    return RowNode(cells=tuple(TextNode(value, style_ref) for value in values))


class ReceiptBuilder:
    """Assemble the receipt sections for a single order."""

    def __init__(self, merchant: MerchantProfile = PLOOSH_MERCHANT) -> None:
        self._merchant = merchant

    def build(self, order: OrderRecord) -> DocumentNode:
        """Validate *order* and return its complete document tree."""
        validate_order(order)
        price_text = format_currency(order.total)
        line_total_text = format_currency(order.qty * order.total)

        LOGGER.debug("Building receipt for %s (%d x %s)", order.plushie, order.qty, price_text)

        sections = (
            self._header(order),
            SectionNode(style_ref="divider"),
            self._bill_to(order),
            self._sender(),
            self._order_summary(order, price_text, line_total_text),
            self._totals(price_text),
            self._footer(),
        )
        return DocumentNode(page=PageNode(sections=sections), title=RECEIPT_TITLE)

    def _header(self, order: OrderRecord) -> SectionNode:
        return SectionNode(
            items=(TextNode(RECEIPT_TITLE, "header"), TextNode(f"Date: {order.date}")),
            style_ref=None,
        )

    def _bill_to(self, order: OrderRecord) -> SectionNode:
        return SectionNode(
            items=(
                TextNode("Bill to:", "bold"),
                TextNode(order.name),
                TextNode(f"Email: {order.email}"),
            )
        )

    def _sender(self) -> SectionNode:
        merchant = self._merchant
        lines = (merchant.name, *merchant.address_lines, merchant.support_email)
        return SectionNode(items=(TextNode("From:", "bold"), *(TextNode(line) for line in lines)))

    def _order_summary(self, order: OrderRecord, price_text: str, line_total_text: str) -> SectionNode:
        return SectionNode(
            items=(
                TextNode("Order Summary:", "bold"),
                _row(*SUMMARY_COLUMNS),
                _row(order.plushie, str(order.qty), price_text, line_total_text),
            )
        )

    def _totals(self, price_text: str) -> SectionNode:
        # Subtotal and Total repeat the unit price; tax is never computed.
        return SectionNode(
            items=(
                _row("Subtotal:", price_text),
                _row("Tax:", TAX_LITERAL),
                _row("Total:", price_text, style_ref="bold"),
            )
        )

    def _footer(self) -> SectionNode:
        message = (
            "Thank you for your preorder! If you have any questions, "
            f"contact us at {self._merchant.support_email}."
        )
        return SectionNode(items=(TextNode(message, "footer"),), style_ref=None)


def build_receipt(order: OrderRecord) -> DocumentNode:
    """Return the receipt document tree for *order* using the default merchant."""
    return ReceiptBuilder().build(order)
