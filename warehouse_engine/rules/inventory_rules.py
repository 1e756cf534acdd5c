"""Inventory business rules: high-value concentration and category diversity"""

from dataclasses import dataclass
from typing import Sequence

from .. import INVENTORY_POLICY
from ..core.models import Product


@dataclass(frozen=True)
class InventoryValidation:
    """Inventory rule summary"""
    high_value_percentage: float
    category_diversity: int

    @property
    def high_value_warning(self) -> bool:
        return self.high_value_percentage > INVENTORY_POLICY['high_value_warning_pct']

    @property
    def minimum_diversity(self) -> bool:
        return self.category_diversity >= INVENTORY_POLICY['minimum_category_diversity']


class InventoryRules:
    """Evaluates inventory constraints against the fixed policy"""

    def validate(self, products: Sequence[Product]) -> InventoryValidation:
        if not products:
            return InventoryValidation(high_value_percentage=0.0, category_diversity=0)

        threshold = INVENTORY_POLICY['high_value_threshold']
        high_value_count = sum(1 for p in products if p.price >= threshold)
        percentage = high_value_count * 100.0 / len(products)
        diversity = len({p.category for p in products})

        return InventoryValidation(high_value_percentage=percentage, category_diversity=diversity)
