"""Warehouse engine exceptions"""


class WarehouseError(Exception):
    """Base class for warehouse engine errors"""
    pass


class InvalidRangeError(WarehouseError, ValueError):
    """Raised when a range query has its lower bound above the upper bound"""

    def __init__(self, min_value, max_value):
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(f"Minimum {min_value} is greater than maximum {max_value}")


class ProductNotFoundError(WarehouseError, KeyError):
    """Raised when an operation targets a product id that is not stored"""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")

    def __str__(self) -> str:
        return self.args[0]


class DuplicateProductError(WarehouseError, ValueError):
    """Raised when adding a product whose id is already stored"""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__("Product with that id already exists, use update_product_price for updates.")
