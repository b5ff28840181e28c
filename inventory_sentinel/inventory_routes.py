from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List, Optional

from .auth_routes import require_session
from .database import Stores, get_stores
from .exceptions import NotFoundError
from .inventory_models import InventoryItem, SessionUser
from .schemas import AssignmentRequest, InventoryItemCreate, InventoryItemUpdate
from .inventory_crud import (
    get_all_inventory_items, get_inventory_item_by_id, get_inventory_items_by_user_id,
    add_inventory_item, update_inventory_item, delete_inventory_item,
    assign_inventory_item, unassign_inventory_item,
)

router = APIRouter(prefix="/api/inventory", tags=["inventory"], dependencies=[Depends(require_session)])

# Inventory items CRUD
@router.get("/", response_model=List[InventoryItem])
def list_items(q: Optional[str] = None, stores: Stores = Depends(get_stores),
               session: SessionUser = Depends(require_session)):
    return get_all_inventory_items(stores, q=q, role=session.role)

@router.get("/by-user/{user_id}", response_model=List[InventoryItem])
def list_items_by_user(user_id: str, stores: Stores = Depends(get_stores)):
    return get_inventory_items_by_user_id(stores, user_id)

@router.get("/{item_id}", response_model=InventoryItem)
def get_item(item_id: str, stores: Stores = Depends(get_stores)):
    item = get_inventory_item_by_id(stores, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item

@router.post("/", status_code=201, response_model=InventoryItem)
def api_create_item(payload: InventoryItemCreate, stores: Stores = Depends(get_stores)):
    try:
        return add_inventory_item(stores, payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.patch("/{item_id}", response_model=InventoryItem)
def api_update_item(item_id: str, patch: InventoryItemUpdate, stores: Stores = Depends(get_stores)):
    try:
        return update_inventory_item(stores, item_id, patch.patch())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{item_id}", status_code=204)
def api_delete_item(item_id: str, stores: Stores = Depends(get_stores)):
    try:
        delete_inventory_item(stores, item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)

# Assign / check-in
@router.post("/{item_id}/assign", response_model=InventoryItem)
def api_assign_item(item_id: str, body: AssignmentRequest, stores: Stores = Depends(get_stores)):
    try:
        return assign_inventory_item(stores, item_id, body.user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/{item_id}/unassign", response_model=InventoryItem)
def api_unassign_item(item_id: str, stores: Stores = Depends(get_stores)):
    try:
        return unassign_inventory_item(stores, item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
