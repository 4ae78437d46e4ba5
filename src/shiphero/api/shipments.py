"""Shipments API (REST), including carrier tracking."""

from shiphero.http import ShipHeroHttpClient
from shiphero.logging_config import get_logger
from shiphero.models import (
    CreateShipmentRequest,
    Shipment,
    TrackingInfo,
    UpdateShipmentRequest,
)

from .base import build_path, require_result

logger = get_logger(__name__)


class ShipmentsApi:
    def __init__(self, client: ShipHeroHttpClient):
        self._client = client

    def get_all(self) -> list[Shipment]:
        logger.info("Getting all shipments")
        return self._client.get("/shipments", list[Shipment]) or []

    def get_by_id(self, shipment_id: str) -> Shipment | None:
        logger.info("Getting shipment by ID", extra={"shipment_id": shipment_id})
        return self._client.get(build_path("shipments", shipment_id), Shipment)

    def get_by_shipment_number(self, shipment_number: str) -> Shipment | None:
        logger.info(
            "Getting shipment by shipment number",
            extra={"shipment_number": shipment_number},
        )
        return self._client.get(build_path("shipments", "number", shipment_number), Shipment)

    def create(self, request: CreateShipmentRequest) -> Shipment:
        logger.info("Creating shipment", extra={"order_id": request.order_id})
        result = self._client.post("/shipments", request, Shipment)
        return require_result(result, "create shipment")

    def update(self, shipment_id: str, request: UpdateShipmentRequest) -> Shipment:
        logger.info("Updating shipment", extra={"shipment_id": shipment_id})
        result = self._client.put(build_path("shipments", shipment_id), request, Shipment)
        return require_result(result, "update shipment")

    def track(self, tracking_number: str, carrier: str | None = None) -> TrackingInfo | None:
        """Look up carrier tracking for a tracking number.

        Args:
            tracking_number: Carrier tracking number.
            carrier: Optional carrier code to disambiguate the lookup.

        Returns:
            Tracking status and events, or None if the API returned nothing.
        """
        logger.info(
            "Tracking shipment",
            extra={"tracking_number": tracking_number, "carrier": carrier},
        )
        params = {"carrier": carrier} if carrier is not None else None
        return self._client.get(
            build_path("shipments", "track", tracking_number),
            TrackingInfo,
            params=params,
        )
