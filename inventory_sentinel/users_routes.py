from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List, Optional

from .auth_routes import require_session
from .database import Stores, get_stores
from .exceptions import ConflictError, NotFoundError
from .inventory_models import UserRead
from .schemas import ReturnForm, RoleUpdate, UserCreate, UserUpdate
from .user_crud import (
    get_all_users, get_user_by_id, add_user, update_user, update_user_role, delete_user, get_user_return_form,
)

router = APIRouter(prefix="/api/users", tags=["users"], dependencies=[Depends(require_session)])

@router.get("/", response_model=List[UserRead])
def list_users(q: Optional[str] = None, stores: Stores = Depends(get_stores)):
    """Users with their live count of assigned inventory items. Password hashes are never returned."""
    return get_all_users(stores, q=q)

@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, stores: Stores = Depends(get_stores)):
    user = get_user_by_id(stores, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.get("/{user_id}/return-form", response_model=ReturnForm)
def api_return_form(user_id: str, stores: Stores = Depends(get_stores)):
    try:
        return get_user_return_form(stores, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/", status_code=201, response_model=UserRead)
def api_create_user(payload: UserCreate, stores: Stores = Depends(get_stores)):
    try:
        return add_user(stores, payload.model_dump())
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

@router.patch("/{user_id}", response_model=UserRead)
def api_update_user(user_id: str, patch: UserUpdate, stores: Stores = Depends(get_stores)):
    try:
        return update_user(stores, user_id, patch.patch())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

@router.patch("/{user_id}/role", response_model=UserRead)
def api_update_role(user_id: str, body: RoleUpdate, stores: Stores = Depends(get_stores)):
    try:
        return update_user_role(stores, user_id, body.role)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{user_id}", status_code=204)
def api_delete_user(user_id: str, stores: Stores = Depends(get_stores)):
    try:
        delete_user(stores, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return Response(status_code=204)
