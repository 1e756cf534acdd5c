"""
Pytest fixtures: warehouse, category registry, analyzer pinned to a fixed date
"""

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from warehouse_engine.analyzer import WarehouseAnalyzer
from warehouse_engine.core.catalog import Warehouse
from warehouse_engine.core.models import CategoryRegistry, ElectronicsProduct, FoodProduct


TODAY = date(2025, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def registry() -> CategoryRegistry:
    return CategoryRegistry()


@pytest.fixture
def warehouse() -> Warehouse:
    return Warehouse("test")


@pytest.fixture
def analyzer(warehouse) -> WarehouseAnalyzer:
    return WarehouseAnalyzer(warehouse, reference_date=TODAY)


@pytest.fixture
def make_food(registry):
    """Factory for food products; expires_in counts days from TODAY"""
    def _make(name, price, expires_in=5, weight="1.0", category="Dairy"):
        return FoodProduct(uuid4(), name, registry.of(category), Decimal(str(price)),
                           TODAY + timedelta(days=expires_in), Decimal(str(weight)))
    return _make


@pytest.fixture
def make_electronics(registry):
    def _make(name, price, weight="2.0", warranty_months=12, category="Electronics"):
        return ElectronicsProduct(uuid4(), name, registry.of(category), Decimal(str(price)),
                                  warranty_months, Decimal(str(weight)))
    return _make
