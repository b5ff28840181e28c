import pytest

from inventory_sentinel.exceptions import NotFoundError
from inventory_sentinel.inventory_crud import (
    add_inventory_item, assign_inventory_item, delete_inventory_item, find_inventory_item_by_barcode_or_id,
    get_all_inventory_items, get_inventory_item_by_id, get_inventory_items_by_user_id, unassign_inventory_item,
    update_inventory_item,
)
from inventory_sentinel.inventory_models import InventoryItemStatus, UserRole


def test_scan_by_barcode_or_id_returns_same_item(stores):
    by_barcode = find_inventory_item_by_barcode_or_id(stores, "123456789012")
    by_id = find_inventory_item_by_barcode_or_id(stores, "ASSET-001")
    assert by_barcode.id == "ASSET-001"
    assert by_barcode.model_dump() == by_id.model_dump()


def test_scan_misses(stores):
    assert find_inventory_item_by_barcode_or_id(stores, "   ") is None
    assert find_inventory_item_by_barcode_or_id(stores, "NOPE") is None


def test_plain_users_only_see_stock(stores):
    items = get_all_inventory_items(stores, role=UserRole.USUARIO)
    assert [i.id for i in items] == ["ASSET-002", "ASSET-004"]
    assert len(get_all_inventory_items(stores, role=UserRole.TECNICO)) == 8


def test_search(stores):
    assert [i.id for i in get_all_inventory_items(stores, q="alice")] == ["ASSET-001", "ASSET-005"]
    assert [i.id for i in get_all_inventory_items(stores, q="servidor")] == ["ASSET-008"]


def test_items_by_user(stores):
    assert [i.id for i in get_inventory_items_by_user_id(stores, "USR-005")] == ["ASSET-007", "ASSET-008"]
    assert get_inventory_items_by_user_id(stores, "USR-003") == []


def test_add_resolves_assignee_label(stores):
    item = add_inventory_item(stores, {"name": "Tablet T1", "type": "Tablet", "status": "Asignado",
                                       "barcode": "TAB0001", "assigned_to_id": "USR-002"})
    assert item.id == "ASSET-009"
    assert item.assigned_to == "Bob Johnson (bjohnson@example.com)"
    assert item.idioma_windows_establecido == "Español"


def test_add_with_unknown_user(stores):
    with pytest.raises(NotFoundError):
        add_inventory_item(stores, {"name": "Tablet T1", "type": "Tablet", "status": "Asignado",
                                    "barcode": "TAB0001", "assigned_to_id": "USR-404"})
    assert stores.inventory.count() == 8


def test_assign_and_unassign(stores):
    item = assign_inventory_item(stores, "ASSET-002", "USR-003")
    assert item.status == InventoryItemStatus.ASIGNADO
    assert item.assigned_to_id == "USR-003"
    assert item.assigned_to == "Charlie Brown (cbrown@example.com)"

    item = unassign_inventory_item(stores, "ASSET-002")
    assert item.status == InventoryItemStatus.EN_STOCK
    assert item.assigned_to_id is None
    assert item.assigned_to is None


def test_assign_errors(stores):
    with pytest.raises(NotFoundError):
        assign_inventory_item(stores, "ASSET-002", "USR-404")
    with pytest.raises(NotFoundError):
        assign_inventory_item(stores, "ASSET-404", "USR-001")
    with pytest.raises(NotFoundError):
        unassign_inventory_item(stores, "ASSET-404")


def test_update_and_delete(stores):
    item = update_inventory_item(stores, "ASSET-004", {"status": "Mantenimiento", "notes": "pantalla rota"})
    assert item.status == InventoryItemStatus.MANTENIMIENTO
    assert get_inventory_item_by_id(stores, "ASSET-004").notes == "pantalla rota"

    delete_inventory_item(stores, "ASSET-004")
    assert get_inventory_item_by_id(stores, "ASSET-004") is None
    with pytest.raises(NotFoundError):
        delete_inventory_item(stores, "ASSET-004")
    with pytest.raises(NotFoundError):
        update_inventory_item(stores, "ASSET-004", {"notes": "x"})


def test_clearing_assignee_clears_label(stores):
    item = update_inventory_item(stores, "ASSET-003", {"assigned_to_id": None, "status": "En Stock"})
    assert item.assigned_to_id is None
    assert item.assigned_to is None
    assert [i.id for i in get_all_inventory_items(stores, q="bob")] == []
