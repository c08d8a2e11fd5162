# online_store/repos/catalog_repo.py
import threading
from dataclasses import replace
from typing import Iterable, List

from online_store.data.models.cart_line import CartLine
from online_store.data.models.product import Product
from online_store.domain.errors import InsufficientStockError, ProductNotFoundError


class CatalogRepo:
    """
    -lista produktow w pamieci
    -jeden lock na cala kolekcje
    -odczyty zwracaja kopie, nigdy referencje do wewnetrznej listy
    """

    def __init__(self, products: Iterable[Product] | None = None):
        self._lock = threading.Lock()
        self._products: List[Product] = [replace(p) for p in products or []]

    def add_product(self, product: Product) -> None:
        # brak sprawdzania duplikatow id, find_by_id zwraca pierwszy
        with self._lock:
            self._products.append(replace(product))

    def find_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._find(product_id)
            return replace(product) if product else None

    def list_products(self) -> List[Product]:
        with self._lock:
            return [replace(p) for p in self._products]

    def is_empty(self) -> bool:
        with self._lock:
            return not self._products

    def decrease_stock(self, product_id: int, qty: int) -> bool:
        with self._lock:
            return self._get(product_id).decrease_stock(qty)

    def increase_stock(self, product_id: int, qty: int) -> None:
        with self._lock:
            self._get(product_id).increase_stock(qty)

    def place_order(self, lines: Iterable[CartLine]) -> None:
        lines = list(lines)
        #walidacja i zdjecie stanu pod jednym lockiem
        with self._lock:
            for line in lines:
                product = self._get(line.product_id)
                if product.stock < line.qty:
                    raise InsufficientStockError(product.name)

            for line in lines:
                self._find(line.product_id).decrease_stock(line.qty)

    # caller must hold self._lock
    def _find(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def _get(self, product_id: int) -> Product:
        product = self._find(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
