"""Product models (GraphQL resource)."""

from datetime import datetime

from shiphero.models.base import Amount, Dimensions, ShipHeroModel


class Product(ShipHeroModel):
    id: str | None = None
    sku: str | None = None
    name: str | None = None
    description: str | None = None
    price: Amount | None = None
    weight: Amount | None = None
    dimensions: Dimensions | None = None
    category: str | None = None
    brand: str | None = None
    images: list[str] | None = None
    tags: list[str] | None = None
    is_active: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateProductRequest(ShipHeroModel):
    sku: str
    name: str
    description: str | None = None
    price: Amount | None = None
    weight: Amount | None = None
    dimensions: Dimensions | None = None
    category: str | None = None
    brand: str | None = None
    images: list[str] | None = None
    tags: list[str] | None = None


class UpdateProductRequest(ShipHeroModel):
    name: str | None = None
    description: str | None = None
    price: Amount | None = None
    weight: Amount | None = None
    dimensions: Dimensions | None = None
    category: str | None = None
    brand: str | None = None
    images: list[str] | None = None
    tags: list[str] | None = None
    is_active: bool | None = None


class DeleteResult(ShipHeroModel):
    """Outcome of a delete mutation."""

    success: bool = False
    message: str | None = None
