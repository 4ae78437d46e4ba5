"""Inventory API (REST)."""

from shiphero.http import ShipHeroHttpClient
from shiphero.logging_config import get_logger
from shiphero.models import Inventory, InventoryHistory, UpdateInventoryRequest

from .base import build_path, require_result

logger = get_logger(__name__)


class InventoryApi:
    """Stock levels and stock movements per SKU."""

    def __init__(self, client: ShipHeroHttpClient):
        self._client = client

    def get_all(self) -> list[Inventory]:
        logger.info("Getting all inventory levels")
        return self._client.get("/inventory", list[Inventory]) or []

    def get_by_sku(self, sku: str) -> Inventory | None:
        logger.info("Getting inventory for SKU", extra={"sku": sku})
        return self._client.get(build_path("inventory", sku), Inventory)

    def update(self, request: UpdateInventoryRequest) -> Inventory:
        """Apply a relative stock adjustment and return the new level."""
        logger.info(
            "Updating inventory",
            extra={"sku": request.sku, "quantity_change": request.quantity_change},
        )
        result = self._client.post("/inventory/update", request, Inventory)
        return require_result(result, "update inventory")

    def get_history(self, sku: str) -> list[InventoryHistory]:
        logger.info("Getting inventory history for SKU", extra={"sku": sku})
        return self._client.get(build_path("inventory", sku, "history"), list[InventoryHistory]) or []
