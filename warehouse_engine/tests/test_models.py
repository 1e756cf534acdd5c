"""
Tests for product and category models.

Validates:
- Category normalization and interning
- Product field validation
- Capability flags, expiry and shipping costs
"""

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from warehouse_engine.core.models import (
    Category,
    CategoryRegistry,
    ElectronicsProduct,
    FoodProduct,
    Product,
)


class TestCategory:
    """Test suite for category labels."""

    def test_capitalizes_name(self):
        assert Category.of("dairy").name == "Dairy"
        assert Category.of("  eLECTRONICS ").name == "Electronics"

    def test_equality_by_normalized_name(self):
        assert Category.of("dairy") == Category.of("DAIRY")
        assert hash(Category.of("dairy")) == hash(Category.of("Dairy"))

    def test_rejects_null_name(self):
        with pytest.raises(ValueError, match="null"):
            Category.of(None)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_blank_name(self, name):
        with pytest.raises(ValueError, match="blank"):
            Category.of(name)

    def test_registry_interns_instances(self):
        registry = CategoryRegistry()
        first = registry.of("dairy")
        second = registry.of("Dairy ")
        assert first is second
        assert len(registry) == 1
        assert "DAIRY" in registry
        assert "" not in registry

    def test_registries_are_independent(self):
        a, b = CategoryRegistry(), CategoryRegistry()
        assert a.of("Dairy") is not b.of("Dairy")
        assert a.of("Dairy") == b.of("Dairy")


class TestProductBase:
    """Test suite for the abstract product base."""

    def test_base_product_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Product(uuid4(), "Ghost", Category.of("misc"), Decimal("5"))

    def test_subclass_without_details_is_abstract(self):
        class Bare(Product):
            pass

        with pytest.raises(TypeError):
            Bare(uuid4(), "Ghost", Category.of("misc"), Decimal("5"))

    def test_weight_kg_follows_shippable_capability(self, make_food, make_electronics):
        class Voucher(Product):
            weight = Decimal("3")

            def product_details(self):
                return f"Voucher: {self.name}"

        voucher = Voucher(uuid4(), "Gift Card", Category.of("misc"), Decimal("25"))

        assert not voucher.is_shippable
        assert voucher.weight_kg == 0.0
        assert make_food("Milk", "15", weight="1.2").weight_kg == pytest.approx(1.2)
        assert make_electronics("Laptop", "999", weight="2.5").weight_kg == pytest.approx(2.5)


class TestFoodProduct:
    """Test suite for food products."""

    def test_rejects_negative_price(self):
        with pytest.raises(ValueError, match="Price cannot be negative."):
            FoodProduct(uuid4(), "Expired Milk", Category.of("Dairy"), Decimal("-10.00"),
                        date.today(), Decimal("1"))

    def test_rejects_negative_weight(self):
        with pytest.raises(ValueError, match="Weight cannot be negative."):
            FoodProduct(uuid4(), "Anti-Gravity Milk", Category.of("Dairy"), Decimal("10"),
                        date.today(), Decimal("-1.0"))

    def test_rejects_blank_name(self):
        with pytest.raises(ValueError, match="blank"):
            FoodProduct(uuid4(), " ", Category.of("Dairy"), Decimal("10"), date.today(), Decimal("1"))

    def test_rejects_missing_id(self):
        with pytest.raises(ValueError, match="ID"):
            FoodProduct(None, "Milk", Category.of("Dairy"), Decimal("10"), date.today(), Decimal("1"))

    def test_coerces_price_to_decimal(self):
        milk = FoodProduct(uuid4(), "Milk", Category.of("Dairy"), "15.50", date.today(), 1.2)
        assert milk.price == Decimal("15.50")
        assert milk.weight == Decimal("1.2")

    def test_capabilities(self, make_food):
        milk = make_food("Milk", "15")
        assert milk.is_perishable
        assert milk.is_shippable

    def test_is_expired_relative_to_reference_date(self, make_food, today):
        old = make_food("Old Milk", "10", expires_in=-2)
        fresh = make_food("Fresh Milk", "10", expires_in=0)
        assert old.is_expired(today)
        assert not fresh.is_expired(today)
        assert fresh.is_expired(today + timedelta(days=1))

    def test_shipping_cost_per_kg(self, make_food):
        assert make_food("Milk", "15", weight="1.2").shipping_cost() == Decimal("60.0")

    def test_product_details(self):
        milk = FoodProduct(uuid4(), "Milk", Category.of("Dairy"), Decimal("15.50"),
                           date(2025, 12, 24), Decimal("1.0"))
        assert milk.product_details() == "Food: Milk, Expires: 2025-12-24"

    def test_update_price_validates(self, make_food):
        milk = make_food("Milk", "15")
        milk.update_price("20.00")
        assert milk.price == Decimal("20.00")
        with pytest.raises(ValueError):
            milk.update_price(None)
        with pytest.raises(ValueError):
            milk.update_price("-1")


class TestElectronicsProduct:
    """Test suite for electronics products."""

    def test_rejects_negative_warranty(self):
        with pytest.raises(ValueError, match="Warranty months cannot be negative."):
            ElectronicsProduct(uuid4(), "Time Machine", Category.of("Gadgets"), Decimal("9999"),
                               -12, Decimal("10"))

    def test_not_perishable(self, make_electronics):
        laptop = make_electronics("Laptop", "12999")
        assert laptop.is_shippable
        assert not laptop.is_perishable

    def test_shipping_cost_light(self, make_electronics):
        assert make_electronics("Phone", "500", weight="0.2").shipping_cost() == Decimal("79")

    def test_shipping_cost_heavy(self, make_electronics):
        assert make_electronics("Heavy Laptop", "15000", weight="6.0").shipping_cost() == Decimal("128")

    def test_shipping_cost_at_threshold_has_no_surcharge(self, make_electronics):
        assert make_electronics("Monitor", "300", weight="5.0").shipping_cost() == Decimal("79")

    def test_missing_weight_reads_as_zero(self):
        tablet = ElectronicsProduct(uuid4(), "Tablet", Category.of("Electronics"), Decimal("300"), 12, None)
        assert tablet.weight_kg == 0.0
        assert tablet.shipping_cost() == Decimal("79")

    def test_product_details(self, make_electronics):
        laptop = make_electronics("Laptop", "12999", warranty_months=24)
        assert laptop.product_details() == "Electronics: Laptop, Warranty: 24 months"
