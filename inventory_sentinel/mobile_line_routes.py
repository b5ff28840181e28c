from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List, Optional

from .auth_routes import require_session
from .database import Stores, get_stores
from .exceptions import NotFoundError
from .inventory_models import MobileLine
from .schemas import MobileLineCreate, MobileLineUpdate
from .mobile_line_crud import get_all_mobile_lines, get_mobile_line_by_id, add_mobile_line, update_mobile_line, delete_mobile_line

router = APIRouter(prefix="/api/mobile-lines", tags=["mobile-lines"], dependencies=[Depends(require_session)])

@router.get("/", response_model=List[MobileLine])
def list_mobile_lines(q: Optional[str] = None, stores: Stores = Depends(get_stores)):
    return get_all_mobile_lines(stores, q=q)

@router.get("/{line_id}", response_model=MobileLine)
def get_mobile_line(line_id: str, stores: Stores = Depends(get_stores)):
    record = get_mobile_line_by_id(stores, line_id)
    if not record:
        raise HTTPException(status_code=404, detail="Mobile line not found")
    return record

@router.post("/", status_code=201, response_model=MobileLine)
def api_create_mobile_line(payload: MobileLineCreate, stores: Stores = Depends(get_stores)):
    try:
        return add_mobile_line(stores, payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.patch("/{line_id}", response_model=MobileLine)
def api_update_mobile_line(line_id: str, patch: MobileLineUpdate, stores: Stores = Depends(get_stores)):
    try:
        return update_mobile_line(stores, line_id, patch.patch())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{line_id}", status_code=204)
def api_delete_mobile_line(line_id: str, stores: Stores = Depends(get_stores)):
    try:
        delete_mobile_line(stores, line_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
