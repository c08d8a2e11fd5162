from dataclasses import dataclass


@dataclass(frozen=True)
class CartLine:
    """Pozycja koszyka, nazwa i cena to snapshot z chwili dodania."""

    product_id: int
    product_name: str
    unit_price: float
    qty: int

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.qty
