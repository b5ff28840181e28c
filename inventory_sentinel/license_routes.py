from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List, Optional

from .auth_routes import require_session
from .database import Stores, get_stores
from .exceptions import NotFoundError
from .inventory_models import License
from .schemas import LicenseCreate, LicenseUpdate
from .license_crud import get_all_licenses, get_license_by_id, add_license, update_license, delete_license

router = APIRouter(prefix="/api/licenses", tags=["licenses"], dependencies=[Depends(require_session)])

@router.get("/", response_model=List[License])
def list_licenses(q: Optional[str] = None, stores: Stores = Depends(get_stores)):
    return get_all_licenses(stores, q=q)

@router.get("/{license_id}", response_model=License)
def get_license(license_id: str, stores: Stores = Depends(get_stores)):
    record = get_license_by_id(stores, license_id)
    if not record:
        raise HTTPException(status_code=404, detail="License not found")
    return record

@router.post("/", status_code=201, response_model=License)
def api_create_license(payload: LicenseCreate, stores: Stores = Depends(get_stores)):
    return add_license(stores, payload.model_dump())

@router.patch("/{license_id}", response_model=License)
def api_update_license(license_id: str, patch: LicenseUpdate, stores: Stores = Depends(get_stores)):
    try:
        return update_license(stores, license_id, patch.patch())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{license_id}", status_code=204)
def api_delete_license(license_id: str, stores: Stores = Depends(get_stores)):
    try:
        delete_license(stores, license_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
