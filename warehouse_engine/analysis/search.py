"""Search and filter predicates over a product snapshot"""

from datetime import date, timedelta
from typing import List, Sequence
import logging

from ..core.exceptions import InvalidRangeError
from ..core.models import Product, Numeric, to_decimal


logger = logging.getLogger(__name__)


class ProductFilter:
    """Price, expiration and name filters preserving snapshot order"""

    def find_in_price_range(self, products: Sequence[Product],
                            min_price: Numeric, max_price: Numeric) -> List[Product]:
        """Products with min_price <= price <= max_price"""
        min_price, max_price = to_decimal(min_price), to_decimal(max_price)
        if min_price > max_price:
            raise InvalidRangeError(min_price, max_price)

        result = [p for p in products if min_price <= p.price <= max_price]
        logger.debug(f"Price range [{min_price}, {max_price}] matched {len(result)} products")
        return result

    def find_expiring_within_days(self, products: Sequence[Product], days: int,
                                  today: date) -> List[Product]:
        """Perishables expiring between today and today + days, inclusive"""
        end = today + timedelta(days=days)
        return [p for p in products
                if p.is_perishable and today <= p.expiration_date <= end]

    def search_by_name(self, products: Sequence[Product], term: str) -> List[Product]:
        """Case-insensitive substring match on name"""
        needle = term.casefold()
        return [p for p in products if needle in p.name.casefold()]

    def find_above_price(self, products: Sequence[Product], threshold: Numeric) -> List[Product]:
        threshold = to_decimal(threshold)
        return [p for p in products if p.price > threshold]
