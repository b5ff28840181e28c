import logging
from typing import List, Optional

from .database import Stores
from .exceptions import NotFoundError
from .inventory_models import Order
from .store import text_matches

logger = logging.getLogger(__name__)


def get_all_orders(stores: Stores, q: Optional[str] = None) -> List[Order]:
    orders = stores.orders.list()
    if q:
        orders = [o for o in orders
                  if text_matches(q, o.id, o.supplier, o.status, o.tracking_number)
                  or any(text_matches(q, i.item_name) for i in o.items)]
    return orders

def get_order_by_id(stores: Stores, order_id: str) -> Optional[Order]:
    return stores.orders.get(order_id)

def add_order(stores: Stores, payload: dict) -> Order:
    order = stores.orders.add(payload)
    logger.info("created order", extra={"entity": order.id, "items": len(order.items)})
    return order

def update_order(stores: Stores, order_id: str, patch: dict) -> Order:
    order = stores.orders.update(order_id, patch)
    if order is None:
        raise NotFoundError("Order", order_id)
    logger.info("updated order", extra={"entity": order_id, "fields": sorted(patch)})
    return order

def delete_order(stores: Stores, order_id: str) -> None:
    if not stores.orders.delete(order_id):
        raise NotFoundError("Order", order_id)
    logger.info("deleted order", extra={"entity": order_id})
