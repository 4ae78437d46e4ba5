"""Warehouses API (REST)."""

from shiphero.http import ShipHeroHttpClient
from shiphero.logging_config import get_logger
from shiphero.models import CreateWarehouseRequest, UpdateWarehouseRequest, Warehouse

from .base import build_path, require_result

logger = get_logger(__name__)


class WarehousesApi:
    def __init__(self, client: ShipHeroHttpClient):
        self._client = client

    def get_all(self) -> list[Warehouse]:
        logger.info("Getting all warehouses")
        return self._client.get("/warehouses", list[Warehouse]) or []

    def get_by_id(self, warehouse_id: str) -> Warehouse | None:
        logger.info("Getting warehouse by ID", extra={"warehouse_id": warehouse_id})
        return self._client.get(build_path("warehouses", warehouse_id), Warehouse)

    def create(self, request: CreateWarehouseRequest) -> Warehouse:
        logger.info("Creating warehouse", extra={"warehouse_name": request.name})
        result = self._client.post("/warehouses", request, Warehouse)
        return require_result(result, "create warehouse")

    def update(self, warehouse_id: str, request: UpdateWarehouseRequest) -> Warehouse:
        logger.info("Updating warehouse", extra={"warehouse_id": warehouse_id})
        result = self._client.put(build_path("warehouses", warehouse_id), request, Warehouse)
        return require_result(result, "update warehouse")

    def delete(self, warehouse_id: str) -> None:
        logger.info("Deleting warehouse", extra={"warehouse_id": warehouse_id})
        self._client.delete(build_path("warehouses", warehouse_id))
