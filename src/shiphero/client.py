"""Top-level ShipHero client bundling every resource API."""

from typing import Any

import requests

from shiphero.api import (
    InventoryApi,
    OrdersApi,
    ProductsApi,
    ShipmentsApi,
    WarehousesApi,
)
from shiphero.config import ShipHeroSettings, get_settings
from shiphero.http import ShipHeroGraphQLClient
from shiphero.logging_config import get_logger
from shiphero.models import AuthResponse

logger = get_logger(__name__)


class ShipHeroClient:
    """Single entry point to the ShipHero API.

    One transport instance backs every resource API, so products (GraphQL)
    and the REST resources share a session and an access token. Calling
    :meth:`authenticate` up front is optional; the first API call
    authenticates on its own.

    Example:
        >>> with ShipHeroClient.from_credentials("me@example.com", "secret") as client:
        ...     product = client.products.get_by_sku("SKU-001")
        ...     orders = client.orders.get_all()
    """

    def __init__(
        self,
        settings: ShipHeroSettings | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            settings: SDK settings. If None, loads from environment.
            session: HTTP session for the transport. If None, one is created.

        Raises:
            ValueError: If username, password or base URL is empty.
        """
        self.settings = settings or get_settings()

        if not self.settings.username:
            raise ValueError("Username is required")
        if not self.settings.password:
            raise ValueError("Password is required")
        if not self.settings.base_url:
            raise ValueError("Base URL is required")

        self._transport = ShipHeroGraphQLClient(self.settings, session=session)

        self.products = ProductsApi(self._transport)
        self.orders = OrdersApi(self._transport)
        self.inventory = InventoryApi(self._transport)
        self.warehouses = WarehousesApi(self._transport)
        self.shipments = ShipmentsApi(self._transport)

        logger.debug("ShipHero client created", extra={"base_url": self.settings.base_url})

    @classmethod
    def from_credentials(
        cls,
        username: str,
        password: str,
        *,
        session: requests.Session | None = None,
        **overrides: Any,
    ) -> "ShipHeroClient":
        """Build a client from explicit credentials instead of the environment.

        Args:
            username: ShipHero username or email.
            password: ShipHero password.
            session: Optional HTTP session for the transport.
            **overrides: Any other ShipHeroSettings field, e.g. ``base_url``.
        """
        settings = ShipHeroSettings(
            username=username,
            password=password,
            _env_file=None,
            **overrides,
        )
        return cls(settings, session=session)

    @property
    def transport(self) -> ShipHeroGraphQLClient:
        """The underlying transport, for raw queries or REST calls."""
        return self._transport

    def authenticate(self) -> AuthResponse:
        """Authenticate with ShipHero and store the access token."""
        return self._transport.authenticate()

    def refresh_token(self) -> AuthResponse:
        """Refresh the access token using the held refresh token."""
        return self._transport.refresh_token()

    def close(self) -> None:
        """Close the HTTP session."""
        self._transport.close()

    def __enter__(self) -> "ShipHeroClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes the session."""
        self.close()
