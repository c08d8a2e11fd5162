# online_store/data/store.py
from fastapi import Request

from online_store.repos.cart_repo import CartRepo
from online_store.repos.catalog_repo import CatalogRepo
from online_store.services.order_service import OrderIdSequence


class InMemoryStore:
    """Caly stan aplikacji, tylko w pamieci procesu."""

    def __init__(
        self,
        catalog: CatalogRepo | None = None,
        carts: CartRepo | None = None,
        order_ids: OrderIdSequence | None = None,
    ):
        self.catalog = catalog or CatalogRepo()
        self.carts = carts or CartRepo()
        self.order_ids = order_ids or OrderIdSequence()


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store
