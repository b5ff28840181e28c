import logging
from typing import List, Optional

from .database import Stores
from .exceptions import NotFoundError
from .inventory_models import InventoryItem, InventoryItemStatus, UserRole
from .references import inventory_assignee_label, resolve_user
from .store import text_matches

logger = logging.getLogger(__name__)


def get_all_inventory_items(stores: Stores, q: Optional[str] = None, role: Optional[UserRole] = None) -> List[InventoryItem]:
    items = stores.inventory.list()
    # plain users only get to see what is available in stock
    if role == UserRole.USUARIO:
        items = [i for i in items if i.status == InventoryItemStatus.EN_STOCK]
    if q:
        items = [i for i in items if text_matches(q, i.id, i.name, i.barcode, i.assigned_to, i.type, i.status)]
    return items

def get_inventory_item_by_id(stores: Stores, item_id: str) -> Optional[InventoryItem]:
    return stores.inventory.get(item_id)

def find_inventory_item_by_barcode_or_id(stores: Stores, query: str) -> Optional[InventoryItem]:
    """Scanner lookup: the query may be either the barcode or the asset id."""
    query = (query or "").strip()
    if not query:
        return None
    return stores.inventory.find(lambda i: i.barcode == query or i.id == query)

def get_inventory_items_by_user_id(stores: Stores, user_id: str) -> List[InventoryItem]:
    return stores.inventory.filter(lambda i: i.assigned_to_id == user_id)

def add_inventory_item(stores: Stores, payload: dict) -> InventoryItem:
    payload = dict(payload)
    if payload.get("assigned_to_id"):
        payload["assigned_to"] = inventory_assignee_label(resolve_user(stores, payload["assigned_to_id"]))
    item = stores.inventory.add(payload)
    logger.info("created inventory item", extra={"entity": item.id})
    return item

def update_inventory_item(stores: Stores, item_id: str, patch: dict) -> InventoryItem:
    patch = dict(patch)
    if patch.get("assigned_to_id"):
        patch["assigned_to"] = inventory_assignee_label(resolve_user(stores, patch["assigned_to_id"]))
    elif "assigned_to_id" in patch:
        patch["assigned_to"] = None
    item = stores.inventory.update(item_id, patch)
    if item is None:
        raise NotFoundError("InventoryItem", item_id)
    logger.info("updated inventory item", extra={"entity": item_id, "fields": sorted(patch)})
    return item

def delete_inventory_item(stores: Stores, item_id: str) -> None:
    if not stores.inventory.delete(item_id):
        raise NotFoundError("InventoryItem", item_id)
    logger.info("deleted inventory item", extra={"entity": item_id})

def assign_inventory_item(stores: Stores, item_id: str, user_id: str) -> InventoryItem:
    """
    Hand an item to a user: sets the assignee id and label and moves the item to 'Asignado'.
    Reassigning an already assigned item simply points it at the new user.
    """
    user = resolve_user(stores, user_id)
    item = stores.inventory.update(item_id, {
        "assigned_to_id": user.id,
        "assigned_to": inventory_assignee_label(user),
        "status": InventoryItemStatus.ASIGNADO,
    })
    if item is None:
        raise NotFoundError("InventoryItem", item_id)
    logger.info("assigned inventory item", extra={"entity": item_id, "user_id": user.id})
    return item

def unassign_inventory_item(stores: Stores, item_id: str) -> InventoryItem:
    """Check an item back in: clears the assignee and returns it to 'En Stock'."""
    item = stores.inventory.update(item_id, {
        "assigned_to_id": None,
        "assigned_to": None,
        "status": InventoryItemStatus.EN_STOCK,
    })
    if item is None:
        raise NotFoundError("InventoryItem", item_id)
    logger.info("unassigned inventory item", extra={"entity": item_id})
    return item
