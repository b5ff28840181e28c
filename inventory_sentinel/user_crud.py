import logging
from datetime import date
from typing import Dict, List, Optional

from .auth import hash_password
from .database import Stores
from .exceptions import ConflictError, NotFoundError
from .inventory_models import User, UserRole
from .references import propagate_user_identity
from .store import text_matches

logger = logging.getLogger(__name__)


def _with_live_count(stores: Stores, user: User) -> User:
    # assigned_items is derived, never trusted from the stored record
    user.assigned_items = len(stores.inventory.filter(lambda i: i.assigned_to_id == user.id))
    return user

def get_all_users(stores: Stores, q: Optional[str] = None) -> List[User]:
    users = [_with_live_count(stores, u) for u in stores.users.list()]
    if q:
        users = [u for u in users if text_matches(q, u.name, u.email, u.department, u.id, u.role)]
    return users

def get_user_by_id(stores: Stores, user_id: str) -> Optional[User]:
    user = stores.users.get(user_id)
    return _with_live_count(stores, user) if user else None

def get_user_by_email(stores: Stores, email: str) -> Optional[User]:
    email = email.strip().lower()
    return stores.users.find(lambda u: u.email.lower() == email)

def add_user(stores: Stores, payload: dict) -> User:
    payload = dict(payload)
    if get_user_by_email(stores, payload["email"]):
        raise ConflictError(f"email already registered: {payload['email']}")
    password = payload.pop("password", None)
    payload["password_hash"] = hash_password(password) if password else None
    payload["assigned_items"] = 0
    user = stores.users.add(payload)
    logger.info("created user", extra={"entity": user.id})
    return user

def update_user(stores: Stores, user_id: str, patch: dict) -> User:
    """
    Shallow update. A new password is hashed; an empty one is ignored.
    Name/e-mail changes are pushed to every record that carries a copy of them.
    """
    patch = dict(patch)
    patch.pop("assigned_items", None)
    password = patch.pop("password", None)
    if password:
        patch["password_hash"] = hash_password(password)

    before = stores.users.get(user_id)
    if before is None:
        raise NotFoundError("User", user_id)
    if patch.get("email") and patch["email"].lower() != before.email.lower():
        other = get_user_by_email(stores, patch["email"])
        if other and other.id != user_id:
            raise ConflictError(f"email already registered: {patch['email']}")

    user = stores.users.update(user_id, patch)
    if user.name != before.name or user.email != before.email:
        propagate_user_identity(stores, user)
    logger.info("updated user", extra={"entity": user_id, "fields": sorted(patch)})
    return _with_live_count(stores, user)

def update_user_role(stores: Stores, user_id: str, role: UserRole) -> User:
    return update_user(stores, user_id, {"role": role})

def delete_user(stores: Stores, user_id: str) -> None:
    """Refuses while the user still holds inventory items: they must be reassigned or retired first."""
    if stores.users.get(user_id) is None:
        raise NotFoundError("User", user_id)
    held = stores.inventory.filter(lambda i: i.assigned_to_id == user_id)
    if held:
        raise ConflictError(
            f"user {user_id} has {len(held)} assigned item(s); reassign or retire them before deleting")
    stores.users.delete(user_id)
    logger.info("deleted user", extra={"entity": user_id})

def get_user_return_form(stores: Stores, user_id: str) -> Dict:
    """Everything the printable equipment-return form shows for a user."""
    user = get_user_by_id(stores, user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    items = stores.inventory.filter(lambda i: i.assigned_to_id == user_id)
    return {
        "user": user,
        "items": items,
        "mobile_lines": stores.mobile_lines.filter(lambda l: l.assigned_to_user_id == user_id),
        "generated_on": date.today(),
    }
