# online_store/data/seed.py
from online_store.data.models.product import Product
from online_store.repos.catalog_repo import CatalogRepo

DEMO_PRODUCTS = (
    Product(1, "Mechanical Keyboard", "Backlit keyboard", 299.90, 10),
    Product(2, "Gaming Mouse", "High precision mouse", 149.50, 5),
    Product(3, "24-inch Monitor", "Full HD 75Hz", 899.00, 2),
)


def seed(catalog: CatalogRepo) -> int:
    # only seed if empty
    if not catalog.is_empty():
        return 0
    for product in DEMO_PRODUCTS:
        catalog.add_product(product)
    return len(DEMO_PRODUCTS)
