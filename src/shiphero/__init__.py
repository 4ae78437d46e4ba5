"""Typed Python client for the ShipHero fulfillment API."""

import logging

from .client import ShipHeroClient
from .config import RetryPolicy, ShipHeroSettings, get_settings
from .exceptions import (
    ApiError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ShipHeroError,
    ValidationError,
)
from .http import ShipHeroGraphQLClient, ShipHeroHttpClient
from .logging_config import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "RetryPolicy",
    "ShipHeroClient",
    "ShipHeroError",
    "ShipHeroGraphQLClient",
    "ShipHeroHttpClient",
    "ShipHeroSettings",
    "ValidationError",
    "get_settings",
    "setup_logging",
]
