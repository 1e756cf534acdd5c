"""Expiration Discount Rules

Date-proximity discount ladder for perishable products. A perishable item
expiring today sells at half price, tomorrow at 70%, within three days at 85%.
Everything else, already expired items included, keeps its price.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Sequence
import logging

from .. import EXPIRATION_DISCOUNT_TIERS
from ..core.models import Product
from ..utils.money import round_money


logger = logging.getLogger(__name__)


class ExpirationDiscountRule:
    """Applies the expiration discount ladder"""

    def __init__(self, tiers: Optional[List[Dict]] = None):
        self.tiers = [dict(t) for t in (tiers if tiers is not None else EXPIRATION_DISCOUNT_TIERS)]

        for tier in self.tiers:
            tier['multiplier'] = Decimal(str(tier['multiplier']))
            if not Decimal("0") <= tier['multiplier'] <= Decimal("1"):
                raise ValueError(f"Discount multiplier must be between 0 and 1, got {tier['multiplier']}")
            if tier['min_days'] > tier['max_days']:
                raise ValueError(f"Tier bounds out of order: {tier['min_days']} > {tier['max_days']}")

    def get_multiplier(self, days_until_expiry: int) -> Decimal:
        """Price multiplier for the first tier containing the day count"""
        for tier in self.tiers:
            if tier['min_days'] <= days_until_expiry <= tier['max_days']:
                return tier['multiplier']
        return Decimal("1")

    def discounted_price(self, product: Product, today: date) -> Decimal:
        """Discounted price for one product; non-perishables are returned unrounded"""
        if not product.is_perishable:
            return product.price

        days_until_expiry = (product.expiration_date - today).days
        return round_money(product.price * self.get_multiplier(days_until_expiry))

    def apply(self, products: Sequence[Product], today: date) -> Dict[Product, Decimal]:
        discounts = {p: self.discounted_price(p, today) for p in products}

        discounted = sum(1 for p, price in discounts.items() if price != p.price)
        logger.debug(f"Expiration discounts applied to {discounted} of {len(discounts)} products")
        return discounts
