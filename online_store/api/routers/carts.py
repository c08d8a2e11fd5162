#online_store/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Query

from online_store.data.store import InMemoryStore, get_store
from online_store.domain.errors import ProductNotFoundError, StoreError
from online_store.domain.schemas import CartAddIn, CartOut, OkOut
from online_store.services.cart_service import CartService
from online_store.services.product_service import ProductService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(store: InMemoryStore):
    return CartService(
        carts=store.carts,
        products=ProductService(store.catalog),
    )


@router.post("/add", response_model=OkOut)
def add_item(payload: CartAddIn, store: InMemoryStore = Depends(get_store)):
    svc = get_service(store)
    try:
        svc.add_to_cart(
            customer_id=payload.customer_id,
            product_id=payload.product_id,
            qty=payload.qty,
        )
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True}


@router.get("", response_model=CartOut)
def get_cart(
    customer_id: int = Query(..., alias="customerId"),
    store: InMemoryStore = Depends(get_store),
):
    svc = get_service(store)
    return svc.get_cart(customer_id)
