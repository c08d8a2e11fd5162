# online_store/services/product_service.py
from typing import List

from online_store.data.models.product import Product
from online_store.domain.errors import ProductNotFoundError
from online_store.repos.catalog_repo import CatalogRepo


class ProductService:
    def __init__(self, catalog: CatalogRepo):
        self.catalog = catalog

    def list_products(self) -> List[Product]:
        return self.catalog.list_products()

    def get_product(self, product_id: int) -> Product:
        product = self.catalog.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
