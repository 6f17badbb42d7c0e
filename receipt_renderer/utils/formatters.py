"""Display formatters for monetary and abbreviated numeric values."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Tuple, Union

Number = Union[int, float, Decimal]

CENTS = Decimal("0.01")

_COMPACT_UNITS: Tuple[Tuple[Decimal, str], ...] = (
    (Decimal(1), ""),
    (Decimal(10) ** 3, "K"),
    (Decimal(10) ** 6, "M"),
    (Decimal(10) ** 9, "B"),
    (Decimal(10) ** 12, "T"),
)


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal through its shortest repr, rejecting bools."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError(f"Expected a number, got {type(value).__name__}")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except InvalidOperation as exc:  # pragma: no cover - repr of a float is always parseable
        raise ValueError(f"Cannot convert {value!r} to a decimal") from exc


def format_currency(value: Number) -> str:
    """Format *value* as dollars with exactly two fractional digits.

    Floats are rounded half-up on their exact binary value, the way
    ``Number.prototype.toFixed`` does: ``19.999`` becomes ``$20.00`` but
    ``1.005`` (stored as 1.00499...) becomes ``$1.00``. Negative zero prints
    as ``$0.00``. No grouping separators are inserted.
    """
    amount = to_decimal(value)
    if not amount.is_finite():
        raise ValueError(f"Cannot format non-finite amount {value!r}")
    if isinstance(value, float):
        amount = Decimal(value)
    rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = rounded.copy_abs()
    return f"${rounded:f}"


def _round_compact(value: Decimal) -> Decimal:
    if value >= 10:
        return value.quantize(Decimal(1), rounding=ROUND_HALF_UP)
    if value >= 1:
        return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if value == 0:
        return value
    # two significant digits below one
    return value.quantize(Decimal(1).scaleb(value.adjusted() - 1), rounding=ROUND_HALF_UP)


def format_compact_number(number: Number) -> str:
    """Abbreviate *number* in English short compact notation ("1.2K", "3M")."""
    value = to_decimal(number)
    if not value.is_finite():
        raise ValueError(f"Cannot format non-finite number {number!r}")

    magnitude = abs(value)
    index = 0
    for position, (threshold, _) in enumerate(_COMPACT_UNITS):
        if magnitude >= threshold:
            index = position

    while True:
        divisor, suffix = _COMPACT_UNITS[index]
        rounded = _round_compact(magnitude / divisor)
        if rounded >= 1000 and index + 1 < len(_COMPACT_UNITS):
            index += 1
            continue
        break

    text = f"{rounded.normalize():f}"
    sign = "-" if value < 0 and rounded != 0 else ""
    return f"{sign}{text}{suffix}"
