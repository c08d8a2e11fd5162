# online_store/services/order_service.py
import itertools
import threading

from online_store.data.models.order import Order
from online_store.domain.errors import EmptyCartError, InvalidParametersError, StoreError
from online_store.repos.cart_repo import CartRepo
from online_store.repos.catalog_repo import CatalogRepo
from online_store.utils.logging import get_logger

logger = get_logger(__name__)


class OrderIdSequence:
    """Licznik id zamowien, unikalny przez caly czas zycia procesu."""

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class OrderService:
    """
    Serwis odpowiedzialny za checkout.
    Lock katalogu i lock koszykow nigdy nie sa trzymane jednoczesnie.
    """

    def __init__(self, catalog: CatalogRepo, carts: CartRepo, order_ids: OrderIdSequence):
        self.catalog = catalog
        self.carts = carts
        self.order_ids = order_ids

    def checkout(self, customer_id: int) -> Order:
        """
        Use Case: Zamowienie z koszyka.

        1. Waliduje customer_id i to, ze koszyk nie jest pusty
        2. Nadaje id zamowienia
        3. Atomowo sprawdza i zdejmuje stan w katalogu
        4. Czysci koszyk
        """
        if customer_id <= 0:
            raise InvalidParametersError("Invalid customerId")

        items = self.carts.get_cart(customer_id)
        if not items:
            raise EmptyCartError("Cart is empty")

        order = Order(id=self.order_ids.next_id(), items=items)

        try:
            self.catalog.place_order(order.items)
        except StoreError as e:
            logger.warning(f"Checkout {order.id} for customer {customer_id} rejected: {e}")
            raise

        self.carts.clear_cart(customer_id)

        logger.info(f"Order {order.id} placed for customer {customer_id}, total {order.total:.2f}")

        return order
