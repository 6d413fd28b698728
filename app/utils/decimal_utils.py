# app/utils/decimal_utils.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

TWOPLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0.00")
    if isinstance(value, Decimal):
        return value.quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    return Decimal(str(value)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def compute_subtotal(lines: Iterable) -> Decimal:
    """Sum of price * quantity over objects exposing both attributes."""
    subtotal = Decimal("0.00")
    for line in lines:
        subtotal += to_decimal(line.price) * line.quantity
    return subtotal.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def compute_percentage(amount: Decimal, percent: Decimal) -> Decimal:
    return (to_decimal(amount) * Decimal(percent) / HUNDRED).quantize(
        TWOPLACES, rounding=ROUND_HALF_UP
    )


def format_amount(value) -> str:
    return f"{to_decimal(value):.2f}"
