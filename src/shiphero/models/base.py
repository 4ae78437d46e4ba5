"""Shared base model and value types for ShipHero DTOs."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

# Decimal in Python, exact JSON number on the wire.
Amount = Annotated[Decimal, Field(allow_inf_nan=False)]


def _jsonable(value: Any) -> Any:
    """Convert dumped values to JSON types, leaving Decimals untouched."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return to_jsonable_python(value)


class ShipHeroModel(BaseModel):
    """Base for every request and response model.

    Fields are snake_case in Python and camelCase on the wire. Unknown fields
    in API responses are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a request body, omitting unset fields.

        Everything is JSON-ready except amounts, which stay ``Decimal`` so the
        transport can write them without going through ``float``.
        """
        return _jsonable(self.model_dump(by_alias=True, exclude_none=True))


class Address(ShipHeroModel):
    """Postal address used by orders, shipments and warehouses."""

    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None


class Dimensions(ShipHeroModel):
    """Package or product dimensions."""

    length: Amount | None = None
    width: Amount | None = None
    height: Amount | None = None
