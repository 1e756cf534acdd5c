"""Warehouse Analytics Engine - Core Module"""

from decimal import Decimal

__version__ = "1.0.0"

# Shipping cost rates per product type
SHIPPING_RATES = {
    'food': {
        'per_kg': Decimal("50"),
    },
    'electronics': {
        'base': Decimal("79"),
        'heavy_surcharge': Decimal("49"),
        'heavy_threshold_kg': Decimal("5.0"),
    }
}

# Expiration discount ladder: (min_days, max_days, price multiplier), inclusive bounds
EXPIRATION_DISCOUNT_TIERS = [
    {'min_days': 0, 'max_days': 0, 'multiplier': Decimal("0.50")},  # Expires today
    {'min_days': 1, 'max_days': 1, 'multiplier': Decimal("0.70")},  # Expires tomorrow
    {'min_days': 2, 'max_days': 3, 'multiplier': Decimal("0.85")},
]

# Inventory business rules (fixed policy)
INVENTORY_POLICY = {
    'high_value_threshold': Decimal("1000"),
    'high_value_warning_pct': 70.0,
    'minimum_category_diversity': 2
}

# Validate tier multipliers stay within [0, 1]
assert all(Decimal("0") <= t['multiplier'] <= Decimal("1") for t in EXPIRATION_DISCOUNT_TIERS), \
    "Discount multipliers must be between 0 and 1"
