"""Warehouse models (REST resource)."""

from datetime import datetime

from shiphero.models.base import Address, ShipHeroModel


class Contact(ShipHeroModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class Warehouse(ShipHeroModel):
    id: str | None = None
    name: str | None = None
    code: str | None = None
    address: Address | None = None
    contact: Contact | None = None
    is_active: bool | None = None
    type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateWarehouseRequest(ShipHeroModel):
    name: str
    code: str | None = None
    address: Address | None = None
    contact: Contact | None = None
    type: str | None = None


class UpdateWarehouseRequest(ShipHeroModel):
    name: str | None = None
    code: str | None = None
    address: Address | None = None
    contact: Contact | None = None
    is_active: bool | None = None
    type: str | None = None
