from collections import Counter
from datetime import date, timedelta
from typing import Dict, Optional

from .inventory_models import EntregaStatus, LicenseStatus, MobileLineStatus, OrderStatus

EXPIRY_WINDOW_DAYS = 30


def _label(value) -> str:
    return getattr(value, "value", value) or "unknown"

def summarize_inventory(stores, today: Optional[date] = None) -> Dict:
    today = today or date.today()
    items = stores.inventory.list()
    licenses = stores.licenses.list()

    by_status = Counter()
    by_type = Counter()
    assignees = set()
    for item in items:
        by_status[_label(item.status)] += 1
        by_type[_label(item.type)] += 1
        if item.assigned_to_id:
            assignees.add(item.assigned_to_id)

    licenses_by_status = Counter(_label(l.status) for l in licenses)
    horizon = today + timedelta(days=EXPIRY_WINDOW_DAYS)
    # active licenses that lapse inside the window (already expired dates included)
    expiring = [
        l.id for l in licenses
        if l.expiration_date and l.status == LicenseStatus.ACTIVA and l.expiration_date <= horizon
    ]

    result = {
        "total_items": len(items),
        "items_by_status": dict(by_status),
        "items_by_type": dict(by_type),
        "users_with_assigned_items": len(assignees),
        "total_users": stores.users.count(),
        "licenses_by_status": dict(licenses_by_status),
        "licenses_expiring": expiring,
        "orders_in_transit": len(stores.orders.filter(lambda o: o.status == OrderStatus.EN_TRANSITO)),
        "pending_entregas": len(stores.entregas.filter(lambda e: e.status == EntregaStatus.PENDIENTE)),
        "active_mobile_lines": len(stores.mobile_lines.filter(lambda l: l.status == MobileLineStatus.ACTIVA)),
    }
    return result
