import pytest

from inventory_sentinel.auth import verify_password
from inventory_sentinel.exceptions import ConflictError, NotFoundError
from inventory_sentinel.inventory_models import UserRole
from inventory_sentinel.schemas import UserUpdate
from inventory_sentinel.user_crud import (
    add_user, delete_user, get_all_users, get_user_by_email, get_user_by_id, get_user_return_form,
    update_user, update_user_role,
)


def _new_user(**extra):
    data = {"name": "Frank Castle", "email": "fcastle@example.com", "department": "Logística",
            "password": "s3cretpass"}
    data.update(extra)
    return data


def test_assigned_items_is_live(stores):
    counts = {u.id: u.assigned_items for u in get_all_users(stores)}
    assert counts == {"USR-001": 2, "USR-002": 1, "USR-003": 0, "USR-004": 1, "USR-005": 2, "USR-006": 0}
    stores.inventory.update("ASSET-002", {"assigned_to_id": "USR-003"})
    assert get_user_by_id(stores, "USR-003").assigned_items == 1


def test_add_user_hashes_password(stores):
    user = add_user(stores, _new_user())
    assert user.id == "USR-007"
    assert user.role == UserRole.USUARIO
    assert user.password_hash != "s3cretpass"
    assert verify_password("s3cretpass", user.password_hash)


def test_duplicate_email_is_rejected(stores):
    with pytest.raises(ConflictError):
        add_user(stores, _new_user(email="ASmith@Example.com"))
    assert stores.users.count() == 6


def test_email_lookup_ignores_case(stores):
    assert get_user_by_email(stores, " DPrince@example.com ").id == "USR-004"


def test_rename_propagates_to_references(stores):
    update_user(stores, "USR-001", {"name": "Alice Walker"})
    assert stores.inventory.get("ASSET-001").assigned_to == "Alice Walker (asmith@example.com)"
    assert stores.inventory.get("ASSET-005").assigned_to == "Alice Walker (asmith@example.com)"
    assert stores.entregas.get("ENT-001").user_name == "Alice Walker"
    assert stores.mobile_lines.get("LINE-001").assigned_to_user_name == "Alice Walker"
    # other users' records are untouched
    assert stores.inventory.get("ASSET-003").assigned_to == "Bob Johnson (bjohnson@example.com)"


def test_email_change_updates_inventory_label(stores):
    update_user(stores, "USR-002", {"email": "bob@example.com"})
    assert stores.inventory.get("ASSET-003").assigned_to == "Bob Johnson (bob@example.com)"


def test_email_change_to_taken_address(stores):
    with pytest.raises(ConflictError):
        update_user(stores, "USR-002", {"email": "ehunt@example.com"})


def test_empty_password_keeps_hash(stores):
    before = stores.users.get("USR-003").password_hash
    update_user(stores, "USR-003", UserUpdate(password="", department="Compras").patch())
    after = stores.users.get("USR-003")
    assert after.password_hash == before
    assert after.department == "Compras"

    update_user(stores, "USR-003", UserUpdate(password="otraclave1").patch())
    assert verify_password("otraclave1", stores.users.get("USR-003").password_hash)


def test_update_missing_user(stores):
    with pytest.raises(NotFoundError):
        update_user(stores, "USR-404", {"name": "Nobody"})


def test_role_update(stores):
    assert update_user_role(stores, "USR-003", UserRole.TECNICO).role == UserRole.TECNICO


def test_delete_guard(stores):
    with pytest.raises(ConflictError):
        delete_user(stores, "USR-001")
    assert get_user_by_id(stores, "USR-001") is not None

    delete_user(stores, "USR-003")
    assert get_user_by_id(stores, "USR-003") is None
    with pytest.raises(NotFoundError):
        delete_user(stores, "USR-003")


def test_return_form(stores):
    form = get_user_return_form(stores, "USR-001")
    assert form["user"].name == "Alice Smith"
    assert [i.id for i in form["items"]] == ["ASSET-001", "ASSET-005"]
    assert [l.id for l in form["mobile_lines"]] == ["LINE-001"]
    with pytest.raises(NotFoundError):
        get_user_return_form(stores, "USR-404")


def test_search_users(stores):
    assert [u.id for u in get_all_users(stores, q="tecnico")] == ["USR-001", "USR-005"]
