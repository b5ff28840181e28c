import logging
from typing import List, Optional

from .database import Stores
from .exceptions import NotFoundError
from .inventory_models import Entrega
from .references import resolve_user
from .store import text_matches

logger = logging.getLogger(__name__)


def get_all_entregas(stores: Stores, q: Optional[str] = None) -> List[Entrega]:
    entregas = stores.entregas.list()
    if q:
        entregas = [e for e in entregas
                    if text_matches(q, e.id, e.user_name, e.status)
                    or any(text_matches(q, i.item_name) for i in e.items)]
    return entregas

def get_entrega_by_id(stores: Stores, entrega_id: str) -> Optional[Entrega]:
    return stores.entregas.get(entrega_id)

def get_entregas_by_user_id(stores: Stores, user_id: str) -> List[Entrega]:
    return stores.entregas.filter(lambda e: e.user_id == user_id)

def add_entrega(stores: Stores, payload: dict) -> Entrega:
    """
    Register a delivery. The recipient's name is copied from the user store; marking the delivered
    inventory items as assigned is a separate step (see inventory_crud.assign_inventory_item).
    """
    payload = dict(payload)
    payload["user_name"] = resolve_user(stores, payload["user_id"]).name
    entrega = stores.entregas.add(payload)
    logger.info("created entrega", extra={"entity": entrega.id, "user_id": entrega.user_id})
    return entrega

def update_entrega(stores: Stores, entrega_id: str, patch: dict) -> Entrega:
    patch = dict(patch)
    if patch.get("user_id"):
        patch["user_name"] = resolve_user(stores, patch["user_id"]).name
    entrega = stores.entregas.update(entrega_id, patch)
    if entrega is None:
        raise NotFoundError("Entrega", entrega_id)
    logger.info("updated entrega", extra={"entity": entrega_id, "fields": sorted(patch)})
    return entrega

def delete_entrega(stores: Stores, entrega_id: str) -> None:
    if not stores.entregas.delete(entrega_id):
        raise NotFoundError("Entrega", entrega_id)
    logger.info("deleted entrega", extra={"entity": entrega_id})
