from dataclasses import dataclass, field
from typing import Iterable, Tuple

from online_store.data.models.cart_line import CartLine


@dataclass(frozen=True)
class Order:
    id: int
    items: Tuple[CartLine, ...]
    total: float = field(init=False)

    def __post_init__(self):
        #items zawsze jako tuple, total liczony tylko tutaj
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "total", order_total(self.items))


def order_total(items: Iterable[CartLine]) -> float:
    total = 0.0
    for item in items:
        total += item.subtotal
    return total
