from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Optional, Union
from uuid import UUID

from .. import SHIPPING_RATES


Numeric = Union[Decimal, int, float, str]


def to_decimal(value: Optional[Numeric]) -> Optional[Decimal]:
    """Coerce numeric input to Decimal without passing through binary float"""
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Category:
    """Product category label, compared by normalized name"""
    name: str

    def __post_init__(self):
        if self.name is None:
            raise ValueError("Category name can't be null")
        trimmed = self.name.strip()
        if not trimmed:
            raise ValueError("Category name can't be blank")
        # First letter upper case, remainder lower case
        object.__setattr__(self, 'name', trimmed[:1].upper() + trimmed[1:].lower())

    @classmethod
    def of(cls, name: str) -> "Category":
        return cls(name)

    def __str__(self) -> str:
        return self.name


class CategoryRegistry:
    """Caller-owned interning table for categories"""

    def __init__(self):
        self._categories: Dict[str, Category] = {}

    def of(self, name: str) -> Category:
        """Return the shared Category instance for a name"""
        category = Category(name)
        return self._categories.setdefault(category.name, category)

    def __contains__(self, name: str) -> bool:
        try:
            return Category(name).name in self._categories
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._categories)


@dataclass(eq=False)
class Product(ABC):
    """Base product: identity, name, category and price"""
    id: UUID
    name: str
    category: Category
    price: Decimal

    def __post_init__(self):
        if self.id is None:
            raise ValueError("ID cannot be null.")
        if self.name is None or not self.name.strip():
            raise ValueError("Product name cannot be blank.")
        if self.category is None:
            raise ValueError("Category cannot be null.")
        self.price = self._validate_price(self.price)

    @staticmethod
    def _validate_price(price: Optional[Numeric]) -> Decimal:
        if price is None:
            raise ValueError("Price cannot be null.")
        price = to_decimal(price)
        if price < 0:
            raise ValueError("Price cannot be negative.")
        return price

    def update_price(self, new_price: Numeric):
        """Replace the price after validating it"""
        self.price = self._validate_price(new_price)

    @property
    def is_perishable(self) -> bool:
        return False

    @property
    def is_shippable(self) -> bool:
        return False

    @property
    def weight_kg(self) -> float:
        """Shipping weight as float, zero when absent or not shippable"""
        if not self.is_shippable or self.weight is None:
            return 0.0
        return float(self.weight)

    @abstractmethod
    def product_details(self) -> str:
        """Human readable one-line description"""

    def __str__(self) -> str:
        return f"{self.name} ({self.category}) - {self.price}"


@dataclass(eq=False)
class FoodProduct(Product):
    """Perishable and shippable food item"""
    expiration_date: date
    weight: Optional[Decimal]

    def __post_init__(self):
        super().__post_init__()
        if self.expiration_date is None:
            raise ValueError("Expiration date cannot be null")
        self.weight = to_decimal(self.weight)
        if self.weight is not None and self.weight < 0:
            raise ValueError("Weight cannot be negative.")

    @property
    def is_perishable(self) -> bool:
        return True

    @property
    def is_shippable(self) -> bool:
        return True

    def is_expired(self, reference_date: Optional[date] = None) -> bool:
        today = reference_date or date.today()
        return self.expiration_date < today

    def shipping_cost(self) -> Decimal:
        weight = self.weight if self.weight is not None else Decimal("0")
        return weight * SHIPPING_RATES['food']['per_kg']

    def product_details(self) -> str:
        return f"Food: {self.name}, Expires: {self.expiration_date.isoformat()}"


@dataclass(eq=False)
class ElectronicsProduct(Product):
    """Shippable electronics item with a warranty"""
    warranty_months: int
    weight: Optional[Decimal]

    def __post_init__(self):
        super().__post_init__()
        if self.warranty_months < 0:
            raise ValueError("Warranty months cannot be negative.")
        self.weight = to_decimal(self.weight)
        if self.weight is not None and self.weight < 0:
            raise ValueError("Weight cannot be negative.")

    @property
    def is_shippable(self) -> bool:
        return True

    def shipping_cost(self) -> Decimal:
        rates = SHIPPING_RATES['electronics']
        cost = rates['base']
        if self.weight is not None and self.weight > rates['heavy_threshold_kg']:
            cost += rates['heavy_surcharge']
        return cost

    def product_details(self) -> str:
        return f"Electronics: {self.name}, Warranty: {self.warranty_months} months"
