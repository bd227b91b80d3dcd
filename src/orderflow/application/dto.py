"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timezone

from orderflow.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one cart entry (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class NewOrder:
    """Input: everything checkout knows about a new order."""

    account_id: int
    items: list[OrderItemSpec]
    full_name: str = ""
    email: str = ""
    phone_number: str = ""
    address: str = ""
    note: str = ""
    shipping_method: str = ""
    shipping_address: str = ""
    shipping_date: date | None = None
    payment_method: str = ""
    payment_reference: str | None = None
    coupon_code: str | None = None


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line item as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    account_id: int
    status: str
    total: str
    active: bool
    created_at: str
    full_name: str = ""
    email: str = ""
    phone_number: str = ""
    address: str = ""
    note: str = ""
    shipping_method: str = ""
    shipping_address: str = ""
    shipping_date: str | None = None
    payment_method: str = ""
    payment_reference: str | None = None
    coupon_code: str | None = None
    items: list[OrderLineDTO] = field(default_factory=list)


@dataclass(frozen=True)
class OrderPageDTO:
    """Output: one page of search results."""

    items: list[OrderDTO]
    page: int
    size: int
    total_items: int
    total_pages: int


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        account_id=order.account_id,
        status=order.status.value,
        total=str(order.total_money),
        active=order.active,
        created_at=order.created_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        full_name=order.full_name,
        email=order.email,
        phone_number=order.phone_number,
        address=order.address,
        note=order.note,
        shipping_method=order.shipping_method,
        shipping_address=order.shipping_address,
        shipping_date=order.shipping_date.isoformat() if order.shipping_date else None,
        payment_method=order.payment_method,
        payment_reference=order.payment_reference,
        coupon_code=order.coupon_code,
        items=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
    )
