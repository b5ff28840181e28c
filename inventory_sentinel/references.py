"""
Denormalized user references.

Inventory items, deliveries and mobile lines keep a copy of the assignee's display name next to
the user id. Names are resolved when a record is pointed at a user and pushed to every
referencing record when the user's name or e-mail changes.
"""
import logging
from typing import Dict, Optional

from .exceptions import NotFoundError
from .inventory_models import User

logger = logging.getLogger(__name__)


def inventory_assignee_label(user: User) -> str:
    return f"{user.name} ({user.email})"


def resolve_user(stores, user_id: str) -> User:
    user = stores.users.get(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def resolve_line_assignee(stores, user_id: Optional[str]) -> Dict[str, Optional[str]]:
    """assigned_to_user_id/assigned_to_user_name pair for a mobile line (both None to unassign)."""
    if not user_id:
        return {"assigned_to_user_id": None, "assigned_to_user_name": None}
    user = resolve_user(stores, user_id)
    return {"assigned_to_user_id": user.id, "assigned_to_user_name": user.name}


def propagate_user_identity(stores, user: User) -> Dict[str, int]:
    """Refresh every denormalized copy of ``user``'s name. Returns how many records changed per store."""
    from .mobile_line_crud import update_user_name_on_lines

    label = inventory_assignee_label(user)
    changed = {"inventory": 0, "entregas": 0, "mobile_lines": 0}

    for item in stores.inventory.filter(lambda i: i.assigned_to_id == user.id and i.assigned_to != label):
        stores.inventory.update(item.id, {"assigned_to": label})
        changed["inventory"] += 1

    for entrega in stores.entregas.filter(lambda e: e.user_id == user.id and e.user_name != user.name):
        stores.entregas.update(entrega.id, {"user_name": user.name})
        changed["entregas"] += 1

    changed["mobile_lines"] = update_user_name_on_lines(stores, user.id, user.name)

    logger.info("propagated user identity", extra={"entity": user.id, "changed": changed})
    return changed
