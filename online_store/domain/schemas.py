# online_store/domain/schemas.py
from pydantic import BaseModel, ConfigDict, Field, StrictInt, computed_field
from pydantic.alias_generators import to_camel
from typing import List


class CamelModel(BaseModel):
    """JSON w camelCase, w Pythonie snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CartAddIn(CamelModel):
    """Schema dla dodawania produktu do koszyka. Brakujace id to 0 (odrzucane w serwisie)."""

    customer_id: StrictInt = 0
    product_id: StrictInt = 0
    qty: StrictInt = Field(1, description="Ilosc produktu, domyslnie 1")


class CheckoutIn(CamelModel):
    customer_id: StrictInt = 0


class ProductOut(CamelModel):
    id: int
    name: str
    description: str
    price: float
    stock: int


class CartLineOut(CamelModel):
    product_id: int
    product_name: str
    unit_price: float
    qty: int

    @computed_field
    @property
    def subtotal(self) -> float:
        return self.unit_price * self.qty


class CartOut(CamelModel):
    customer_id: int
    items: List[CartLineOut]
    subtotal: float


class OrderOut(CamelModel):
    id: int
    items: List[CartLineOut]
    total: float


class OkOut(BaseModel):
    ok: bool = True


class HealthOut(BaseModel):
    status: str
