import pytest
from fastapi.testclient import TestClient

from online_store.data.models.product import Product
from online_store.data.seed import seed
from online_store.data.store import InMemoryStore
from online_store.main import create_app
from online_store.repos.cart_repo import CartRepo
from online_store.repos.catalog_repo import CatalogRepo
from online_store.services.cart_service import CartService
from online_store.services.order_service import OrderIdSequence, OrderService
from online_store.services.product_service import ProductService


@pytest.fixture
def catalog():
    catalog = CatalogRepo()
    seed(catalog)
    return catalog


@pytest.fixture
def carts():
    return CartRepo()


@pytest.fixture
def cart_service(catalog, carts):
    return CartService(carts=carts, products=ProductService(catalog))


@pytest.fixture
def order_service(catalog, carts):
    return OrderService(catalog=catalog, carts=carts, order_ids=OrderIdSequence())


@pytest.fixture
def store(catalog, carts):
    return InMemoryStore(catalog=catalog, carts=carts)


@pytest.fixture
def client(store):
    store.catalog.add_product(Product(4, "Webcam", "720p", 59.90, 0))
    app = create_app(store=store, seed_demo_data=False)
    with TestClient(app) as c:
        yield c
