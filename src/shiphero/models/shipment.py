"""Shipment and tracking models (REST resource)."""

from datetime import datetime

from shiphero.models.base import Address, Amount, Dimensions, ShipHeroModel


class ShipmentItem(ShipHeroModel):
    id: str | None = None
    sku: str | None = None
    name: str | None = None
    quantity: int = 0
    unit_price: Amount | None = None


class Shipment(ShipHeroModel):
    id: str | None = None
    shipment_number: str | None = None
    order_id: str | None = None
    order_number: str | None = None
    status: str | None = None
    shipping_method: str | None = None
    tracking_number: str | None = None
    carrier: str | None = None
    items: list[ShipmentItem] | None = None
    shipping_address: Address | None = None
    weight: Amount | None = None
    dimensions: Dimensions | None = None
    shipping_cost: Amount | None = None
    shipped_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateShipmentRequest(ShipHeroModel):
    order_id: str
    shipping_method: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None
    items: list[ShipmentItem] | None = None
    shipping_address: Address | None = None
    weight: Amount | None = None
    dimensions: Dimensions | None = None
    shipping_cost: Amount | None = None


class UpdateShipmentRequest(ShipHeroModel):
    status: str | None = None
    shipping_method: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None
    items: list[ShipmentItem] | None = None
    shipping_address: Address | None = None
    weight: Amount | None = None
    dimensions: Dimensions | None = None
    shipping_cost: Amount | None = None


class TrackingEvent(ShipHeroModel):
    timestamp: datetime | None = None
    location: str | None = None
    description: str | None = None
    status: str | None = None


class TrackingInfo(ShipHeroModel):
    """Carrier tracking status and event history for one tracking number."""

    tracking_number: str | None = None
    carrier: str | None = None
    status: str | None = None
    estimated_delivery: datetime | None = None
    events: list[TrackingEvent] | None = None
