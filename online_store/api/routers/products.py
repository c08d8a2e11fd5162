# online_store/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from online_store.data.store import InMemoryStore, get_store
from online_store.domain.errors import ProductNotFoundError
from online_store.domain.schemas import ProductOut
from online_store.services.product_service import ProductService

router = APIRouter(tags=["products"])


def get_service(store: InMemoryStore):
    return ProductService(store.catalog)


@router.get("/products", response_model=List[ProductOut])
def list_products(store: InMemoryStore = Depends(get_store)):
    svc = get_service(store)
    return svc.list_products()


@router.get("/product", response_model=ProductOut)
def get_product(
    product_id: int = Query(..., alias="id"),
    store: InMemoryStore = Depends(get_store),
):
    svc = get_service(store)
    try:
        return svc.get_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
