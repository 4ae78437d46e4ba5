"""Resource APIs for the ShipHero SDK."""

from .inventory import InventoryApi
from .orders import OrdersApi
from .products import ProductsApi
from .shipments import ShipmentsApi
from .warehouses import WarehousesApi

__all__ = [
    "InventoryApi",
    "OrdersApi",
    "ProductsApi",
    "ShipmentsApi",
    "WarehousesApi",
]
