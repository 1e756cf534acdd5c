"""Decimal money helpers"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

CENT = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to two decimal places, half up"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    """Exact decimal sum, Decimal('0') when empty"""
    return sum(values, Decimal("0"))
