"""Business rules: expiration discounts and inventory validation"""

from .expiration_discounts import ExpirationDiscountRule
from .inventory_rules import InventoryRules, InventoryValidation

__all__ = [
    'ExpirationDiscountRule',
    'InventoryRules',
    'InventoryValidation'
]
