#wszystkie rekordy domeny w jednym miejscu

from online_store.data.models.product import Product
from online_store.data.models.cart_line import CartLine
from online_store.data.models.order import Order

__all__ = ["Product", "CartLine", "Order"]
