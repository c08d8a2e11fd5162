# online_store/services/cart_service.py
from typing import Dict, Any

from online_store.data.models.order import order_total
from online_store.domain.errors import InvalidParametersError, OutOfStockError
from online_store.repos.cart_repo import CartRepo
from online_store.services.product_service import ProductService
from online_store.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla koszyka
    commands (add) modyfikuja stan
    query (get) tylko odczyt
    """

    def __init__(self, carts: CartRepo, products: ProductService):
        self.carts = carts
        self.products = products

    #query - odczyt
    def get_cart(self, customer_id: int) -> Dict[str, Any]:
        items = self.carts.get_cart(customer_id)

        return {
            "customer_id": customer_id,
            "items": items,
            "subtotal": order_total(items),
        }

    #commands
    def add_to_cart(self, customer_id: int, product_id: int, qty: int) -> None:
        """
        Use Case: Dodanie produktu do koszyka (Command).

        Walidacja:
        - customer_id, product_id, qty > 0
        - produkt istnieje w katalogu
        - produkt ma cokolwiek na stanie

        Stan nie jest rezerwowany, sprawdza go dopiero checkout.
        """
        if customer_id <= 0 or product_id <= 0 or qty <= 0:
            raise InvalidParametersError("Invalid parameters")

        product = self.products.get_product(product_id)

        if product.stock <= 0:
            raise OutOfStockError("Product out of stock")

        self.carts.add_item(
            customer_id=customer_id,
            product_id=product.id,
            name=product.name,
            price=product.price,
            qty=qty,
        )

        logger.info(f"Customer {customer_id}: added {qty} x product {product.id} to cart")
