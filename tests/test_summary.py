from datetime import date

from inventory_sentinel.inventory_models import MobileLineStatus
from inventory_sentinel.mobile_line_crud import update_mobile_line
from inventory_sentinel.summary_utils import summarize_inventory


def test_summary_of_demo_data(stores):
    summary = summarize_inventory(stores, today=date(2024, 12, 15))
    assert summary["total_items"] == 8
    assert summary["items_by_status"] == {"Asignado": 6, "En Stock": 2}
    assert summary["items_by_type"]["Portátil"] == 2
    assert summary["users_with_assigned_items"] == 4
    assert summary["total_users"] == 6
    assert summary["licenses_by_status"] == {"Activa": 3, "Expirada": 1, "Sin Asignar": 1}
    assert summary["licenses_expiring"] == ["LIC-002"]
    assert summary["orders_in_transit"] == 1
    assert summary["pending_entregas"] == 1
    assert summary["active_mobile_lines"] == 2


def test_summary_of_empty_stores(empty_stores):
    summary = summarize_inventory(empty_stores)
    assert summary["total_items"] == 0
    assert summary["items_by_status"] == {}
    assert summary["licenses_expiring"] == []


def test_active_mobile_lines_follow_status(stores):
    update_mobile_line(stores, "LINE-001", {"status": MobileLineStatus.SUSPENDIDA})
    update_mobile_line(stores, "LINE-003", {"status": MobileLineStatus.ACTIVA})
    update_mobile_line(stores, "LINE-004", {"status": MobileLineStatus.ACTIVA})
    assert summarize_inventory(stores)["active_mobile_lines"] == 3
