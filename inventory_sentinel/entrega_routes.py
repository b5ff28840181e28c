from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List, Optional

from .auth_routes import require_session
from .database import Stores, get_stores
from .exceptions import NotFoundError
from .inventory_models import Entrega
from .schemas import EntregaCreate, EntregaUpdate
from .entrega_crud import get_all_entregas, get_entrega_by_id, add_entrega, update_entrega, delete_entrega, get_entregas_by_user_id

router = APIRouter(prefix="/api/entregas", tags=["entregas"], dependencies=[Depends(require_session)])

@router.get("/", response_model=List[Entrega])
def list_entregas(q: Optional[str] = None, stores: Stores = Depends(get_stores)):
    return get_all_entregas(stores, q=q)

@router.get("/by-user/{user_id}", response_model=List[Entrega])
def list_entregas_by_user(user_id: str, stores: Stores = Depends(get_stores)):
    return get_entregas_by_user_id(stores, user_id)

@router.get("/{entrega_id}", response_model=Entrega)
def get_entrega(entrega_id: str, stores: Stores = Depends(get_stores)):
    record = get_entrega_by_id(stores, entrega_id)
    if not record:
        raise HTTPException(status_code=404, detail="Entrega not found")
    return record

@router.post("/", status_code=201, response_model=Entrega)
def api_create_entrega(payload: EntregaCreate, stores: Stores = Depends(get_stores)):
    # 404 when user_id does not match a user
    try:
        return add_entrega(stores, payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.patch("/{entrega_id}", response_model=Entrega)
def api_update_entrega(entrega_id: str, patch: EntregaUpdate, stores: Stores = Depends(get_stores)):
    try:
        return update_entrega(stores, entrega_id, patch.patch())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{entrega_id}", status_code=204)
def api_delete_entrega(entrega_id: str, stores: Stores = Depends(get_stores)):
    try:
        delete_entrega(stores, entrega_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
