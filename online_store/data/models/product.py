#online_store/data/models/product.py
from dataclasses import dataclass


@dataclass
class Product:
    id: int
    name: str
    description: str
    price: float
    stock: int

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("Cena nie moze byc ujemna")
        if self.stock < 0:
            raise ValueError("Stan nie moze byc ujemny")

    def decrease_stock(self, qty: int) -> bool:
        if qty <= 0:
            return False
        if qty > self.stock:
            return False
        self.stock -= qty
        return True

    def increase_stock(self, qty: int) -> None:
        if qty > 0:
            self.stock += qty
