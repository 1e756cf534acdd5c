"""Price Aggregation

Weighted category averages, population standard deviation outlier detection
and inventory statistics. Money stays Decimal; only the outlier statistics
run in floating point.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Sequence
import logging

import numpy as np

from ..core.models import Category, Product
from ..utils.money import round_money, sum_money


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryStatistics:
    """Snapshot statistics for a product collection"""
    total_products: int
    total_value: Decimal
    average_price: Decimal
    expired_count: int
    category_count: int
    most_expensive: Optional[Product]
    cheapest: Optional[Product]


class PriceAggregator:
    """Aggregate price metrics over a product snapshot"""

    def weighted_average_by_category(self, products: Sequence[Product]) -> Dict[Category, Decimal]:
        """Weight-weighted average price per category

        Members with a positive shipping weight contribute price * weight.
        A category without any weighted member uses the plain mean of all
        member prices instead.
        """
        grouped: Dict[Category, List[Product]] = {}
        for product in products:
            grouped.setdefault(product.category, []).append(product)

        averages = {}
        for category, members in grouped.items():
            weighted = [p for p in members if p.is_shippable and p.weight is not None and p.weight > 0]

            if weighted:
                weighted_sum = sum_money(p.price * p.weight for p in weighted)
                weight_sum = sum_money(p.weight for p in weighted)
                average = weighted_sum / weight_sum
            else:
                average = sum_money(p.price for p in members) / len(members)

            averages[category] = round_money(average)

        return averages

    def find_price_outliers(self, products: Sequence[Product],
                            standard_deviations: float) -> List[Product]:
        """Products more than k population standard deviations from the mean

        The deviation is computed over every product, outliers included, so a
        single extreme price widens the threshold for all others.
        """
        if not products:
            return []

        prices = np.array([float(p.price) for p in products])
        mean = prices.mean()
        std = prices.std()  # ddof=0, population
        threshold = standard_deviations * std

        mask = np.abs(prices - mean) > threshold
        outliers = [p for p, is_outlier in zip(products, mask) if is_outlier]

        logger.debug(f"Outlier scan: mean={mean:.4f}, std={std:.4f}, k={standard_deviations}, "
                     f"found {len(outliers)}")
        return outliers

    def inventory_statistics(self, products: Sequence[Product], today: date) -> InventoryStatistics:
        """Totals, averages and price extremes

        Ties on price resolve to the first product in snapshot order.
        """
        total = len(products)
        total_value = sum_money(p.price for p in products)
        average_price = round_money(total_value / total) if total else Decimal("0")

        expired_count = sum(1 for p in products if p.is_perishable and p.is_expired(today))
        category_count = len({p.category for p in products})

        most_expensive = max(products, key=lambda p: p.price, default=None)
        cheapest = min(products, key=lambda p: p.price, default=None)

        return InventoryStatistics(
            total_products=total,
            total_value=total_value,
            average_price=average_price,
            expired_count=expired_count,
            category_count=category_count,
            most_expensive=most_expensive,
            cheapest=cheapest
        )
