from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List, Optional

from .auth_routes import require_session
from .database import Stores, get_stores
from .exceptions import NotFoundError
from .inventory_models import Order
from .schemas import OrderCreate, OrderUpdate
from .order_crud import get_all_orders, get_order_by_id, add_order, update_order, delete_order

router = APIRouter(prefix="/api/orders", tags=["orders"], dependencies=[Depends(require_session)])

@router.get("/", response_model=List[Order])
def list_orders(q: Optional[str] = None, stores: Stores = Depends(get_stores)):
    return get_all_orders(stores, q=q)

@router.get("/{order_id}", response_model=Order)
def get_order(order_id: str, stores: Stores = Depends(get_stores)):
    record = get_order_by_id(stores, order_id)
    if not record:
        raise HTTPException(status_code=404, detail="Order not found")
    return record

@router.post("/", status_code=201, response_model=Order)
def api_create_order(payload: OrderCreate, stores: Stores = Depends(get_stores)):
    return add_order(stores, payload.model_dump())

@router.patch("/{order_id}", response_model=Order)
def api_update_order(order_id: str, patch: OrderUpdate, stores: Stores = Depends(get_stores)):
    """Items sent with an id are merged onto that line; items without one are added; lines not sent are dropped."""
    try:
        return update_order(stores, order_id, patch.patch())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{order_id}", status_code=204)
def api_delete_order(order_id: str, stores: Stores = Depends(get_stores)):
    try:
        delete_order(stores, order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
