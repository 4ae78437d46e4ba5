"""Inventory models (REST resource)."""

from datetime import datetime

from shiphero.models.base import ShipHeroModel


class Inventory(ShipHeroModel):
    """Stock level of one SKU, optionally scoped to a warehouse."""

    sku: str | None = None
    name: str | None = None
    available_quantity: int = 0
    reserved_quantity: int = 0
    total_quantity: int = 0
    warehouse_id: str | None = None
    warehouse_name: str | None = None
    updated_at: datetime | None = None


class UpdateInventoryRequest(ShipHeroModel):
    """Relative stock adjustment; ``quantity_change`` may be negative."""

    sku: str
    warehouse_id: str | None = None
    quantity_change: int = 0
    reason: str | None = None


class InventoryHistory(ShipHeroModel):
    id: str | None = None
    sku: str | None = None
    warehouse_id: str | None = None
    quantity_change: int = 0
    previous_quantity: int = 0
    new_quantity: int = 0
    reason: str | None = None
    changed_by: str | None = None
    changed_at: datetime | None = None
