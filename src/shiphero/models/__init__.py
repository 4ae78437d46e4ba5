"""Request and response models for the ShipHero API."""

from .auth import AuthResponse
from .base import Address, Dimensions, ShipHeroModel
from .inventory import Inventory, InventoryHistory, UpdateInventoryRequest
from .order import (
    CreateOrderRequest,
    Customer,
    Order,
    OrderItem,
    UpdateOrderRequest,
)
from .product import (
    CreateProductRequest,
    DeleteResult,
    Product,
    UpdateProductRequest,
)
from .shipment import (
    CreateShipmentRequest,
    Shipment,
    ShipmentItem,
    TrackingEvent,
    TrackingInfo,
    UpdateShipmentRequest,
)
from .warehouse import (
    Contact,
    CreateWarehouseRequest,
    UpdateWarehouseRequest,
    Warehouse,
)

__all__ = [
    "Address",
    "AuthResponse",
    "Contact",
    "CreateOrderRequest",
    "CreateProductRequest",
    "CreateShipmentRequest",
    "CreateWarehouseRequest",
    "Customer",
    "DeleteResult",
    "Dimensions",
    "Inventory",
    "InventoryHistory",
    "Order",
    "OrderItem",
    "Product",
    "ShipHeroModel",
    "Shipment",
    "ShipmentItem",
    "TrackingEvent",
    "TrackingInfo",
    "UpdateInventoryRequest",
    "UpdateOrderRequest",
    "UpdateProductRequest",
    "UpdateShipmentRequest",
    "UpdateWarehouseRequest",
    "Warehouse",
]
