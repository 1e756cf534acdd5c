"""Warehouse Analyzer

Binds a warehouse to the search, aggregation, shipping and rule components.
Every query takes a fresh snapshot of the warehouse and is a pure function of
that snapshot, its arguments and the reference date.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
import logging

import pandas as pd

from . import EXPIRATION_DISCOUNT_TIERS
from .core.catalog import Warehouse
from .core.models import Category, Product, Numeric
from .analysis.search import ProductFilter
from .analysis.aggregation import PriceAggregator, InventoryStatistics
from .analysis.shipping import ShippingOptimizer, ShippingGroup
from .rules.expiration_discounts import ExpirationDiscountRule
from .rules.inventory_rules import InventoryRules, InventoryValidation
from .utils.reporting import CategoryReport


logger = logging.getLogger(__name__)


class WarehouseAnalyzer:
    """Analytical queries over a warehouse's products"""

    def __init__(self, warehouse: Warehouse, config: Optional[Dict] = None,
                 reference_date: Optional[date] = None):
        """Initialize analyzer with optional configuration

        config may carry 'discount_tiers' replacing the default expiration
        ladder. reference_date pins "today"; when omitted the current date is
        read on every query.
        """
        self.warehouse = warehouse
        self.config = config or {}
        self.reference_date = reference_date

        discount_tiers = self.config.get('discount_tiers', EXPIRATION_DISCOUNT_TIERS)

        self.filter = ProductFilter()
        self.aggregator = PriceAggregator()
        self.shipping = ShippingOptimizer()
        self.discount_rule = ExpirationDiscountRule(discount_tiers)
        self.inventory_rules = InventoryRules()
        self.report = CategoryReport()

        logger.info(f"Warehouse analyzer initialized for '{warehouse.name}'")

    def _today(self) -> date:
        return self.reference_date or date.today()

    def _snapshot(self):
        return self.warehouse.get_products()

    # Search and filter

    def find_products_in_price_range(self, min_price: Numeric, max_price: Numeric) -> List[Product]:
        return self.filter.find_in_price_range(self._snapshot(), min_price, max_price)

    def find_products_expiring_within_days(self, days: int) -> List[Product]:
        return self.filter.find_expiring_within_days(self._snapshot(), days, self._today())

    def search_products_by_name(self, search_term: str) -> List[Product]:
        return self.filter.search_by_name(self._snapshot(), search_term)

    def find_products_above_price(self, price: Numeric) -> List[Product]:
        return self.filter.find_above_price(self._snapshot(), price)

    # Analytics

    def calculate_weighted_average_price_by_category(self) -> Dict[Category, Decimal]:
        return self.aggregator.weighted_average_by_category(self._snapshot())

    def find_price_outliers(self, standard_deviations: float) -> List[Product]:
        return self.aggregator.find_price_outliers(self._snapshot(), standard_deviations)

    def optimize_shipping_groups(self, max_weight_per_group: Numeric) -> List[ShippingGroup]:
        return self.shipping.optimize_groups(self._snapshot(), max_weight_per_group)

    # Business rules

    def calculate_expiration_based_discounts(self) -> Dict[Product, Decimal]:
        return self.discount_rule.apply(self._snapshot(), self._today())

    def validate_inventory_constraints(self) -> InventoryValidation:
        return self.inventory_rules.validate(self._snapshot())

    def get_inventory_statistics(self) -> InventoryStatistics:
        return self.aggregator.inventory_statistics(self._snapshot(), self._today())

    # Reporting

    def category_report(self) -> pd.DataFrame:
        return self.report.category_summary(self._snapshot())
