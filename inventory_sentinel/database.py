import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from .inventory_models import (
    InventoryItem, License, MobileLine, Order, OrderItem, Entrega, EntregaDetalleItem, User,
)
from .store import EntityStore, NestedItemStore
from .auth import AuthGate, SessionStorage, SESSION_FILE
from . import seed

load_dotenv()

# SEED_DEMO_DATA=false starts every store empty (the admin login then has to be created by hand)
SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "true").strip().lower() in ("1", "true", "yes")


@dataclass
class Stores:
    """The six entity stores. Plays the role of the session passed to every crud function."""
    inventory: EntityStore[InventoryItem]
    licenses: EntityStore[License]
    mobile_lines: EntityStore[MobileLine]
    orders: NestedItemStore[Order]
    entregas: NestedItemStore[Entrega]
    users: EntityStore[User]


def create_stores(seeded: bool = True, bcrypt_rounds: Optional[int] = None) -> Stores:
    """
    Build a fresh, independent set of stores.
    Each call returns new instances, so tests never share state with the app or each other.
    """
    return Stores(
        inventory=EntityStore(InventoryItem, "ASSET", seed.inventory_items() if seeded else ()),
        licenses=EntityStore(License, "LIC", seed.licenses() if seeded else ()),
        mobile_lines=EntityStore(MobileLine, "LINE", seed.mobile_lines() if seeded else ()),
        orders=NestedItemStore(Order, "ORD", OrderItem, "ITEM", item_counter_start=99,
                               records=seed.orders() if seeded else ()),
        entregas=NestedItemStore(Entrega, "ENT", EntregaDetalleItem, "DI", item_counter_start=10,
                                 records=seed.entregas() if seeded else ()),
        users=EntityStore(User, "USR", seed.users(bcrypt_rounds) if seeded else ()),
    )


_stores: Optional[Stores] = None
_auth_gate: Optional[AuthGate] = None


def get_stores() -> Stores:
    """
    FastAPI dependency returning the process-wide stores:
        def endpoint(stores: Stores = Depends(get_stores)):
            ...
    """
    global _stores
    if _stores is None:
        _stores = create_stores(seeded=SEED_DEMO_DATA)
    return _stores


def get_auth_gate() -> AuthGate:
    global _auth_gate
    if _auth_gate is None:
        _auth_gate = AuthGate(get_stores().users, SessionStorage(SESSION_FILE))
    return _auth_gate
