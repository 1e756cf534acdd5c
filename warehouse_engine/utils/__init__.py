"""Warehouse Engine Utilities"""

from .money import round_money, sum_money
from .reporting import CategoryReport

__all__ = [
    'round_money',
    'sum_money',
    'CategoryReport'
]
