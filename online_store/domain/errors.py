# online_store/domain/errors.py


class StoreError(Exception):
    """Bazowy wyjatek domeny sklepu."""


class InvalidParametersError(StoreError, ValueError):
    pass


class ProductNotFoundError(StoreError, LookupError):
    def __init__(self, product_id: int):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class OutOfStockError(StoreError):
    pass


class InsufficientStockError(StoreError):
    def __init__(self, product_name: str):
        super().__init__(f"Insufficient stock for: {product_name}")
        self.product_name = product_name


class EmptyCartError(StoreError):
    pass
