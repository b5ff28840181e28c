import logging
from typing import List, Optional

from .database import Stores
from .exceptions import NotFoundError
from .inventory_models import MobileLine
from .references import resolve_line_assignee
from .store import text_matches

logger = logging.getLogger(__name__)


def get_all_mobile_lines(stores: Stores, q: Optional[str] = None) -> List[MobileLine]:
    lines = stores.mobile_lines.list()
    if q:
        lines = [l for l in lines if text_matches(
            q, l.id, l.phone_number, l.carrier, l.status, l.assigned_to_user_name, l.sim_card_number)]
    return lines

def get_mobile_line_by_id(stores: Stores, line_id: str) -> Optional[MobileLine]:
    return stores.mobile_lines.get(line_id)

def add_mobile_line(stores: Stores, payload: dict) -> MobileLine:
    payload = dict(payload)
    payload.update(resolve_line_assignee(stores, payload.get("assigned_to_user_id")))
    line = stores.mobile_lines.add(payload)
    logger.info("created mobile line", extra={"entity": line.id})
    return line

def update_mobile_line(stores: Stores, line_id: str, patch: dict) -> MobileLine:
    patch = dict(patch)
    if "assigned_to_user_id" in patch:
        patch.update(resolve_line_assignee(stores, patch["assigned_to_user_id"]))
    line = stores.mobile_lines.update(line_id, patch)
    if line is None:
        raise NotFoundError("MobileLine", line_id)
    logger.info("updated mobile line", extra={"entity": line_id, "fields": sorted(patch)})
    return line

def delete_mobile_line(stores: Stores, line_id: str) -> None:
    if not stores.mobile_lines.delete(line_id):
        raise NotFoundError("MobileLine", line_id)
    logger.info("deleted mobile line", extra={"entity": line_id})

def update_user_name_on_lines(stores: Stores, user_id: str, new_user_name: str) -> int:
    """Rewrite assigned_to_user_name on every line assigned to ``user_id``; returns the number of lines touched."""
    touched = 0
    for line in stores.mobile_lines.filter(lambda l: l.assigned_to_user_id == user_id):
        if line.assigned_to_user_name != new_user_name:
            stores.mobile_lines.update(line.id, {"assigned_to_user_name": new_user_name})
            touched += 1
    return touched
