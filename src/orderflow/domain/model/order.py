"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.  Its monetary
value lives in ``total_money`` and is only ever written by
``recompute_total()``, which delegates to ``order_total()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum

from orderflow.domain.exceptions import InvalidShippingDateError, ValidationError
from orderflow.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class OrderLine:
    """One product quantity within an order.

    ``unit_price`` is the catalog price at materialization time.  Lines
    are frozen: a later price change in the catalog cannot reach them.
    """

    order_id: int | None
    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # snapshot

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


def order_total(lines: Iterable[OrderLine]) -> Money:
    """Sum the line totals of an order."""
    result: Money | None = None
    for line in lines:
        result = line.line_total if result is None else result + line.line_total
    return result if result is not None else Money.zero()


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces the
    shipping date rule and the initial state.  The ``__init__`` is kept
    simple so the repository can reconstitute persisted orders without
    re-validating.
    """

    id: int | None
    account_id: int
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
    status: OrderStatus = OrderStatus.PENDING
    total_money: Money = field(default_factory=Money.zero)
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now().astimezone())
    lines: list[OrderLine] = field(default_factory=list)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: int | None,
        account_id: int,
        created_at: datetime,
        shipping_date: date | None = None,
        coupon_code: str | None = None,
        full_name: str = "",
        email: str = "",
        phone_number: str = "",
        address: str = "",
        note: str = "",
        shipping_method: str = "",
        shipping_address: str = "",
        payment_method: str = "",
        payment_reference: str | None = None,
    ) -> Order:
        """Open a new PENDING, active order without lines.

        The shipping date defaults to the creation day and may not be
        earlier than it.
        """
        today = created_at.date()
        if shipping_date is None:
            shipping_date = today
        elif shipping_date < today:
            raise InvalidShippingDateError(
                f"Shipping date {shipping_date.isoformat()} must be at least today "
                f"({today.isoformat()})"
            )

        return Order(
            id=order_id,
            account_id=account_id,
            full_name=full_name.strip(),
            email=email.strip(),
            phone_number=phone_number.strip(),
            address=address.strip(),
            note=note.strip(),
            shipping_method=shipping_method.strip(),
            shipping_address=shipping_address.strip(),
            shipping_date=shipping_date,
            payment_method=payment_method.strip(),
            payment_reference=payment_reference,
            coupon_code=coupon_code,
            status=OrderStatus.PENDING,
            active=True,
            created_at=created_at,
        )

    # --- Lines and totals -----------------------------------------------------

    def attach_lines(self, lines: list[OrderLine]) -> None:
        """Replace the full line collection and recompute the total."""
        if not lines:
            raise ValidationError("Order must contain at least one item")
        for line in lines:
            if line.order_id != self.id:
                raise ValidationError(
                    f"Line for product {line.product_id} belongs to order "
                    f"{line.order_id}, not {self.id}"
                )
        self.lines = list(lines)
        self.recompute_total()

    def recompute_total(self) -> None:
        self.total_money = order_total(self.lines)

    # --- Lifecycle ------------------------------------------------------------

    def soft_delete(self) -> None:
        self.active = False


# ---------------------------------------------------------------------------
# Partial updates
# ---------------------------------------------------------------------------

_PATCHABLE_TEXT_FIELDS = (
    "full_name",
    "email",
    "phone_number",
    "address",
    "note",
    "shipping_method",
    "shipping_address",
    "payment_method",
)


@dataclass(frozen=True)
class OrderUpdate:
    """A patch for an order header.  ``None`` means "leave as is".

    Status and total are not patchable: status changes go through the
    transition engine and the total is derived from the lines.
    """

    account_id: int | None = None
    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    note: str | None = None
    shipping_method: str | None = None
    shipping_address: str | None = None
    shipping_date: date | None = None
    payment_method: str | None = None


def merge_order_update(order: Order, update: OrderUpdate) -> Order:
    """Return a copy of *order* with the present fields of *update* applied.

    Text fields only overwrite when non-blank after trimming and are
    stored trimmed.  The input order is not modified.
    """
    changes: dict[str, object] = {}

    if update.account_id is not None:
        changes["account_id"] = update.account_id

    for name in _PATCHABLE_TEXT_FIELDS:
        value = getattr(update, name)
        if value is not None and value.strip():
            changes[name] = value.strip()

    if update.shipping_date is not None:
        created_on = order.created_at.date()
        if update.shipping_date < created_on:
            raise InvalidShippingDateError(
                f"Shipping date {update.shipping_date.isoformat()} is earlier than "
                f"the order date {created_on.isoformat()}"
            )
        changes["shipping_date"] = update.shipping_date

    return replace(order, lines=list(order.lines), **changes)
