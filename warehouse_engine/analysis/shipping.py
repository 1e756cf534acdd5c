"""Shipment grouping with first-fit decreasing bin packing"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Sequence, Tuple
import logging

from ..core.models import Product, Numeric, to_decimal
from ..utils.money import sum_money


logger = logging.getLogger(__name__)


def _weight(product: Product) -> Decimal:
    # Only shippable products carry a weight
    if not product.is_shippable or product.weight is None:
        return Decimal("0")
    return product.weight


@dataclass(frozen=True)
class ShippingGroup:
    """Ordered, immutable group of shippable products"""
    products: Tuple[Product, ...]

    @property
    def total_weight(self) -> Decimal:
        return sum_money(_weight(p) for p in self.products)

    @property
    def total_shipping_cost(self) -> Decimal:
        return sum_money(p.shipping_cost() for p in self.products)

    def __len__(self) -> int:
        return len(self.products)


class ShippingOptimizer:
    """Pack shippable products into weight-limited groups"""

    def optimize_groups(self, products: Sequence[Product], max_weight: Numeric) -> List[ShippingGroup]:
        """First-fit decreasing over shippable products

        Items are visited heaviest first (equal weights keep snapshot order)
        and placed in the first group with room. An item heavier than
        max_weight gets a group of its own.
        """
        max_weight = to_decimal(max_weight)
        items = sorted((p for p in products if p.is_shippable), key=_weight, reverse=True)

        bins: List[List[Product]] = []
        loads: List[Decimal] = []

        for item in items:
            weight = _weight(item)

            if weight > max_weight:
                # Cannot share a group regardless of what is already packed
                logger.warning(f"{item.name} weighs {weight} kg, above group limit {max_weight} kg")
                bins.append([item])
                loads.append(weight)
                continue

            for index, load in enumerate(loads):
                if load + weight <= max_weight:
                    bins[index].append(item)
                    loads[index] = load + weight
                    break
            else:
                bins.append([item])
                loads.append(weight)

        logger.debug(f"Packed {len(items)} shippable products into {len(bins)} groups")
        return [ShippingGroup(tuple(b)) for b in bins]
