# online_store/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from online_store.data.store import InMemoryStore, get_store
from online_store.domain.errors import (
    EmptyCartError,
    InsufficientStockError,
    InvalidParametersError,
    ProductNotFoundError,
)
from online_store.domain.schemas import CheckoutIn, OrderOut
from online_store.services.order_service import OrderService

router = APIRouter(tags=["orders"])


def get_service(store: InMemoryStore):
    return OrderService(
        catalog=store.catalog,
        carts=store.carts,
        order_ids=store.order_ids,
    )


@router.post("/checkout", response_model=OrderOut)
def checkout(payload: CheckoutIn, store: InMemoryStore = Depends(get_store)):
    """
    Tworzy zamowienie z koszyka klienta i zdejmuje stan produktow.
    Przy bledzie koszyk i stan zostaja bez zmian.
    """
    svc = get_service(store)
    try:
        return svc.checkout(payload.customer_id)
    except (InvalidParametersError, EmptyCartError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (ProductNotFoundError, InsufficientStockError) as e:
        return JSONResponse(status_code=400, content={"ok": False, "error": str(e)})
