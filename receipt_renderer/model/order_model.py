"""Typed order record consumed by the receipt builder."""
from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping, Union

from receipt_renderer.utils.formatters import to_decimal

TEXT_FIELDS = ("name", "email", "plushie", "date")


class OrderValidationError(ValueError):
    """Raised when an order record cannot be turned into a receipt."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid order field '{field}': {message}")
        self.field = field


@dataclass(frozen=True, slots=True)
class OrderRecord:
    """A single preorder as submitted by checkout.

    ``total`` is the unit price of the plushie, not the order total.
    """

    name: str
    email: str
    plushie: str
    qty: int
    total: Union[int, float, Decimal]
    date: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OrderRecord":
        """Build a record from a loosely typed payload; extra keys are ignored."""
        values = {}
        for record_field in fields(cls):
            if record_field.name not in data:
                raise OrderValidationError(record_field.name, "field is missing")
            values[record_field.name] = data[record_field.name]
        return cls(**values)


def validate_order(order: OrderRecord) -> Decimal:
    """Check every field of *order* and return the unit price as a Decimal."""
    for name in TEXT_FIELDS:
        value = getattr(order, name)
        if not isinstance(value, str):
            raise OrderValidationError(name, f"expected a string, got {type(value).__name__}")
        if not value.strip():
            raise OrderValidationError(name, "must not be empty")

    qty = order.qty
    if isinstance(qty, bool) or not isinstance(qty, int):
        raise OrderValidationError("qty", f"expected an integer, got {type(qty).__name__}")
    if qty < 1:
        raise OrderValidationError("qty", f"must be at least 1, got {qty}")

    try:
        unit_price = to_decimal(order.total)
    except ValueError as exc:
        raise OrderValidationError("total", str(exc)) from exc
    if not unit_price.is_finite():
        raise OrderValidationError("total", f"must be finite, got {order.total!r}")
    if unit_price < 0:
        raise OrderValidationError("total", f"must not be negative, got {order.total!r}")
    return unit_price
