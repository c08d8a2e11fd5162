# online_store/repos/cart_repo.py
import threading
from dataclasses import replace
from typing import Dict, List

from online_store.data.models.cart_line import CartLine


class CartRepo:
    """Koszyki klientow w pamieci: customer_id -> lista pozycji."""

    def __init__(self):
        self._lock = threading.Lock()
        self._carts: Dict[int, List[CartLine]] = {}

    def add_item(
        self,
        customer_id: int,
        product_id: int,
        name: str,
        price: float,
        qty: int,
    ) -> None:
        with self._lock:
            cart = self._carts.setdefault(customer_id, [])

            #scal z istniejaca pozycja, snapshot nazwy i ceny zostaje pierwszy
            for idx, line in enumerate(cart):
                if line.product_id == product_id:
                    cart[idx] = replace(line, qty=line.qty + qty)
                    return

            cart.append(
                CartLine(
                    product_id=product_id,
                    product_name=name,
                    unit_price=price,
                    qty=qty,
                )
            )

    def get_cart(self, customer_id: int) -> List[CartLine]:
        with self._lock:
            return list(self._carts.get(customer_id, []))

    def clear_cart(self, customer_id: int) -> None:
        with self._lock:
            self._carts.pop(customer_id, None)
