"""Orders API (REST)."""

from shiphero.http import ShipHeroHttpClient
from shiphero.logging_config import get_logger
from shiphero.models import CreateOrderRequest, Order, UpdateOrderRequest

from .base import build_path, require_result

logger = get_logger(__name__)


class OrdersApi:
    def __init__(self, client: ShipHeroHttpClient):
        self._client = client

    def get_all(self) -> list[Order]:
        logger.info("Getting all orders")
        return self._client.get("/orders", list[Order]) or []

    def get_by_id(self, order_id: str) -> Order | None:
        logger.info("Getting order by ID", extra={"order_id": order_id})
        return self._client.get(build_path("orders", order_id), Order)

    def get_by_order_number(self, order_number: str) -> Order | None:
        logger.info("Getting order by order number", extra={"order_number": order_number})
        return self._client.get(build_path("orders", "number", order_number), Order)

    def create(self, request: CreateOrderRequest) -> Order:
        logger.info("Creating order", extra={"order_number": request.order_number})
        result = self._client.post("/orders", request, Order)
        return require_result(result, "create order")

    def update(self, order_id: str, request: UpdateOrderRequest) -> Order:
        logger.info("Updating order", extra={"order_id": order_id})
        result = self._client.put(build_path("orders", order_id), request, Order)
        return require_result(result, "update order")

    def cancel(self, order_id: str) -> Order:
        """Cancel an order and return its new state."""
        logger.info("Cancelling order", extra={"order_id": order_id})
        result = self._client.post(build_path("orders", order_id, "cancel"), response_type=Order)
        return require_result(result, "cancel order")
