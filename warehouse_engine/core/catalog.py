"""Warehouse catalog

Explicit registry of products in insertion order. Hands out immutable
snapshots for the analytics layer and tracks products whose price changed.
"""

from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Set, Tuple
from uuid import UUID
import logging

from .exceptions import DuplicateProductError, ProductNotFoundError
from .models import Category, Product, Numeric


logger = logging.getLogger(__name__)


class Warehouse:
    """In-memory product store"""

    def __init__(self, name: str = "default"):
        self.name = name
        self._products: Dict[UUID, Product] = {}
        self._changed_products: Set[UUID] = set()

        logger.info(f"Warehouse '{name}' initialized")

    def add_product(self, product: Product):
        """Store a product, rejecting duplicates by id"""
        if product is None:
            raise ValueError("Product cannot be null.")
        if product.id in self._products:
            raise DuplicateProductError(product.id)

        self._products[product.id] = product
        logger.debug(f"Added product {product.id} ({product.name}) to '{self.name}'")

    def get_products(self) -> Tuple[Product, ...]:
        """Immutable snapshot in insertion order"""
        return tuple(self._products.values())

    def get_product_by_id(self, product_id: UUID) -> Optional[Product]:
        return self._products.get(product_id)

    def remove(self, product_id: UUID):
        """Remove a product if present"""
        removed = self._products.pop(product_id, None)
        self._changed_products.discard(product_id)
        if removed is not None:
            logger.debug(f"Removed product {product_id} from '{self.name}'")

    def update_product_price(self, product_id: UUID, new_price: Numeric):
        """Update a stored product's price and mark it as changed"""
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        old_price = product.price
        product.update_price(new_price)
        self._changed_products.add(product_id)

        logger.info(f"Price of {product.name} changed from {old_price} to {product.price}")

    def get_changed_products(self) -> List[Product]:
        return [p for p in self._products.values() if p.id in self._changed_products]

    def expired_products(self, reference_date: Optional[date] = None) -> List[Product]:
        """Perishable products past their expiration date"""
        today = reference_date or date.today()
        return [p for p in self._products.values()
                if p.is_perishable and p.is_expired(today)]

    def shippable_products(self) -> List[Product]:
        return [p for p in self._products.values() if p.is_shippable]

    def perishable_products(self) -> List[Product]:
        return [p for p in self._products.values() if p.is_perishable]

    def get_products_grouped_by_categories(self) -> Dict[Category, List[Product]]:
        grouped = defaultdict(list)
        for product in self._products.values():
            grouped[product.category].append(product)
        return dict(grouped)

    def is_empty(self) -> bool:
        return not self._products

    def clear_products(self):
        self._products.clear()
        self._changed_products.clear()

    def __len__(self) -> int:
        return len(self._products)
