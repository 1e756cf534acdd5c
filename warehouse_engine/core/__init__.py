"""Core models, catalog and errors"""

from .exceptions import (
    WarehouseError,
    InvalidRangeError,
    ProductNotFoundError,
    DuplicateProductError
)
from .models import (
    Category,
    CategoryRegistry,
    Product,
    FoodProduct,
    ElectronicsProduct
)
from .catalog import Warehouse

__all__ = [
    'WarehouseError',
    'InvalidRangeError',
    'ProductNotFoundError',
    'DuplicateProductError',
    'Category',
    'CategoryRegistry',
    'Product',
    'FoodProduct',
    'ElectronicsProduct',
    'Warehouse'
]
