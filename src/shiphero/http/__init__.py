"""HTTP and GraphQL transports for the ShipHero API."""

from .client import ShipHeroHttpClient
from .graphql import ShipHeroGraphQLClient

__all__ = ["ShipHeroHttpClient", "ShipHeroGraphQLClient"]
