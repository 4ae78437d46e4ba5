"""Order models (REST resource)."""

from datetime import datetime

from shiphero.models.base import Address, Amount, ShipHeroModel


class Customer(ShipHeroModel):
    id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


class OrderItem(ShipHeroModel):
    id: str | None = None
    sku: str | None = None
    name: str | None = None
    quantity: int = 0
    unit_price: Amount | None = None
    total_price: Amount | None = None


class Order(ShipHeroModel):
    id: str | None = None
    order_number: str | None = None
    status: str | None = None
    customer: Customer | None = None
    items: list[OrderItem] | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    total: Amount | None = None
    shipping_cost: Amount | None = None
    tax_amount: Amount | None = None
    currency: str | None = None
    payment_method: str | None = None
    shipping_method: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateOrderRequest(ShipHeroModel):
    order_number: str
    items: list[OrderItem]
    customer: Customer | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    total: Amount | None = None
    shipping_cost: Amount | None = None
    tax_amount: Amount | None = None
    currency: str | None = None
    payment_method: str | None = None
    shipping_method: str | None = None
    notes: str | None = None


class UpdateOrderRequest(ShipHeroModel):
    status: str | None = None
    customer: Customer | None = None
    items: list[OrderItem] | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    total: Amount | None = None
    shipping_cost: Amount | None = None
    tax_amount: Amount | None = None
    currency: str | None = None
    payment_method: str | None = None
    shipping_method: str | None = None
    notes: str | None = None
