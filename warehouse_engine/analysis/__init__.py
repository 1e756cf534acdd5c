"""Search, aggregation and shipment grouping"""

from .search import ProductFilter
from .aggregation import PriceAggregator, InventoryStatistics
from .shipping import ShippingOptimizer, ShippingGroup

__all__ = [
    'ProductFilter',
    'PriceAggregator',
    'InventoryStatistics',
    'ShippingOptimizer',
    'ShippingGroup'
]
