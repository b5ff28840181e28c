"""
Request bodies accepted by the API.

Field rules are the ones the add/edit forms enforce. Create schemas reuse the record bases from
inventory_models and tighten the constrained fields; update schemas make every field optional,
but fields that are required on the record may not be sent as null.
"""
import re
from datetime import date
from typing import ClassVar, List, Optional, Tuple

from pydantic import EmailStr, field_validator, model_validator
from sqlmodel import SQLModel, Field

from .inventory_models import (
    EndpointProvisioning, InventoryItemBase, InventoryItemStatus, InventoryItemType,
    LicenseBase, LicenseStatus, LicenseType,
    MobileLineStatus, OrderStatus, EntregaStatus,
    UserProvisioning, UserRole,
    InventoryItem, MobileLine, UserRead,
)

PHONE_RE = re.compile(r"^\+?[0-9\s\-()]*$")


class PartialUpdate(SQLModel):
    """Base for PATCH bodies: ``required_fields`` may be omitted but not nulled."""
    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_nulls(self):
        nulled = [f for f in self.required_fields if f in self.model_fields_set and getattr(self, f) is None]
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def patch(self) -> dict:
        return self.model_dump(exclude_unset=True)


def _check_phone(v: Optional[str]) -> Optional[str]:
    if v is not None and not PHONE_RE.match(v):
        raise ValueError("Formato de número inválido.")
    return v


# -------------------------
# Inventory
# -------------------------
class InventoryItemCreate(InventoryItemBase):
    name: str = Field(min_length=2)
    barcode: str = Field(min_length=5, max_length=50)

    @model_validator(mode="after")
    def _assignment_matches_status(self):
        if self.assigned_to_id and self.status != InventoryItemStatus.ASIGNADO:
            raise ValueError("an item with assigned_to_id must have status 'Asignado'")
        return self

class InventoryItemUpdate(EndpointProvisioning, PartialUpdate):
    required_fields: ClassVar[Tuple[str, ...]] = ("name", "type", "status", "barcode")

    name: Optional[str] = Field(default=None, min_length=2)
    type: Optional[InventoryItemType] = None
    status: Optional[InventoryItemStatus] = None
    barcode: Optional[str] = Field(default=None, min_length=5, max_length=50)
    serial_number: Optional[str] = None
    purchase_date: Optional[date] = None
    warranty_end_date: Optional[date] = None
    notes: Optional[str] = None
    assigned_to: Optional[str] = None
    assigned_to_id: Optional[str] = None

class AssignmentRequest(SQLModel):
    user_id: str


# -------------------------
# Licenses
# -------------------------
class LicenseCreate(LicenseBase):
    software_name: str = Field(min_length=2)
    license_key: str = Field(min_length=5)
    seats: int = Field(default=1, ge=1)
    status: LicenseStatus = LicenseStatus.SIN_ASIGNAR

class LicenseUpdate(PartialUpdate):
    required_fields: ClassVar[Tuple[str, ...]] = ("software_name", "license_key", "license_type", "seats", "status")

    software_name: Optional[str] = Field(default=None, min_length=2)
    license_key: Optional[str] = Field(default=None, min_length=5)
    license_type: Optional[LicenseType] = None
    seats: Optional[int] = Field(default=None, ge=1)
    status: Optional[LicenseStatus] = None
    purchase_date: Optional[date] = None
    expiration_date: Optional[date] = None
    vendor: Optional[str] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None


# -------------------------
# Mobile lines
# -------------------------
class MobileLineCreate(SQLModel):
    phone_number: str = Field(min_length=9)
    carrier: str = Field(min_length=2)
    plan_name: str = Field(min_length=2)
    status: MobileLineStatus
    sim_card_number: Optional[str] = None
    puk_code: Optional[str] = None
    activation_date: Optional[date] = None
    assigned_to_user_id: Optional[str] = None  # name is resolved from the user store
    notes: Optional[str] = None

    @field_validator("phone_number")
    @classmethod
    def _phone_format(cls, v):
        return _check_phone(v)

class MobileLineUpdate(PartialUpdate):
    required_fields: ClassVar[Tuple[str, ...]] = ("phone_number", "carrier", "plan_name", "status")

    phone_number: Optional[str] = Field(default=None, min_length=9)
    carrier: Optional[str] = Field(default=None, min_length=2)
    plan_name: Optional[str] = Field(default=None, min_length=2)
    status: Optional[MobileLineStatus] = None
    sim_card_number: Optional[str] = None
    puk_code: Optional[str] = None
    activation_date: Optional[date] = None
    assigned_to_user_id: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("phone_number")
    @classmethod
    def _phone_format(cls, v):
        return _check_phone(v)


# -------------------------
# Orders
# -------------------------
class OrderItemCreate(SQLModel):
    item_name: str = Field(min_length=2)
    quantity: int = Field(default=1, ge=1)
    category: InventoryItemType
    model: Optional[str] = None
    characteristics: Optional[str] = None

class OrderItemUpdate(OrderItemCreate):
    """A line in an order edit: with ``id`` it is merged onto that line, without it is a new line."""
    id: Optional[str] = None

class OrderCreate(SQLModel):
    order_date: date
    supplier: str = Field(min_length=2)
    status: OrderStatus
    expected_arrival_date: Optional[date] = None
    actual_arrival_date: Optional[date] = None
    tracking_number: Optional[str] = None
    notes: Optional[str] = None
    items: List[OrderItemCreate] = Field(min_length=1)

class OrderUpdate(PartialUpdate):
    required_fields: ClassVar[Tuple[str, ...]] = ("order_date", "supplier", "status", "items")

    order_date: Optional[date] = None
    supplier: Optional[str] = Field(default=None, min_length=2)
    status: Optional[OrderStatus] = None
    expected_arrival_date: Optional[date] = None
    actual_arrival_date: Optional[date] = None
    tracking_number: Optional[str] = None
    notes: Optional[str] = None
    items: Optional[List[OrderItemUpdate]] = Field(default=None, min_length=1)


# -------------------------
# Entregas
# -------------------------
class EntregaDetalleItemCreate(SQLModel):
    inventory_item_id: Optional[str] = None
    item_name: str = Field(min_length=2)
    quantity: int = Field(default=1, ge=1)
    serial_number: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("inventory_item_id")
    @classmethod
    def _blank_is_none(cls, v):
        return v or None

class EntregaDetalleItemUpdate(EntregaDetalleItemCreate):
    id: Optional[str] = None

class EntregaCreate(SQLModel):
    user_id: str = Field(min_length=1)
    delivery_date: date
    status: EntregaStatus = EntregaStatus.PENDIENTE
    notes: Optional[str] = None
    items: List[EntregaDetalleItemCreate] = Field(min_length=1)

class EntregaUpdate(PartialUpdate):
    required_fields: ClassVar[Tuple[str, ...]] = ("user_id", "delivery_date", "status", "items")

    user_id: Optional[str] = Field(default=None, min_length=1)
    delivery_date: Optional[date] = None
    status: Optional[EntregaStatus] = None
    notes: Optional[str] = None
    items: Optional[List[EntregaDetalleItemUpdate]] = Field(default=None, min_length=1)


# -------------------------
# Users
# -------------------------
class UserCreate(UserProvisioning):
    name: str = Field(min_length=2)
    email: EmailStr
    department: str = Field(min_length=2)
    phone: Optional[str] = None
    join_date: Optional[date] = None
    role: UserRole = UserRole.USUARIO
    password: str = Field(min_length=8)

class UserUpdate(UserProvisioning, PartialUpdate):
    required_fields: ClassVar[Tuple[str, ...]] = ("name", "email", "department", "role")

    name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[EmailStr] = None
    department: Optional[str] = Field(default=None, min_length=2)
    phone: Optional[str] = None
    join_date: Optional[date] = None
    role: Optional[UserRole] = None
    # empty string keeps the current password
    password: Optional[str] = None

    @field_validator("password")
    @classmethod
    def _password_length(cls, v):
        if v and len(v) < 8:
            raise ValueError("La contraseña debe tener al menos 8 caracteres.")
        return v

    def patch(self) -> dict:
        data = super().patch()
        if not data.get("password"):
            data.pop("password", None)
        return data

class RoleUpdate(SQLModel):
    role: UserRole


# -------------------------
# Auth
# -------------------------
class LoginRequest(SQLModel):
    email: str
    password: str


# -------------------------
# Responses
# -------------------------
class ReturnForm(SQLModel):
    user: UserRead
    items: List[InventoryItem]
    mobile_lines: List[MobileLine]
    generated_on: date

class RouteDecision(SQLModel):
    path: str
    redirect_to: Optional[str] = None
