"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Everything that can fail (account, coupon, shipping date, products,
quantities) is checked before the single ``save`` call, so a rejected
checkout never leaves a partial order behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from orderflow.application.dto import NewOrder, OrderDTO, order_to_dto
from orderflow.domain.exceptions import AccountNotFoundError
from orderflow.domain.model.order import Order
from orderflow.domain.repository.account_repository import AccountRepository
from orderflow.domain.repository.coupon_repository import CouponRepository
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.service.coupon_validator import CouponValidator
from orderflow.domain.service.line_item_materializer import LineItemMaterializer

logger = logging.getLogger(__name__)


def local_now() -> datetime:
    """Aware local time; its date is the calendar day shipping dates are checked against."""
    return datetime.now().astimezone()


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        account_repo: AccountRepository,
        product_repo: ProductRepository,
        coupon_repo: CouponRepository,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._order_repo = order_repo
        self._account_repo = account_repo
        self._coupons = CouponValidator(coupon_repo)
        self._materializer = LineItemMaterializer(product_repo)
        self._clock = clock

    def handle(self, request: NewOrder) -> OrderDTO:
        """Create a new order from a cart.

        Steps:
        1. Resolve the owning account (fail if not found).
        2. Open a PENDING order; the shipping date defaults to today.
        3. Validate the coupon code, if any.
        4. Build lines with *current* prices (snapshot) and the total.
        5. Persist and return a DTO.
        """
        account = self._account_repo.get_by_id(request.account_id)
        if account is None:
            raise AccountNotFoundError(
                f"Cannot find account with id: {request.account_id}"
            )

        coupon = self._coupons.apply(request.coupon_code)

        order = Order.create(
            order_id=self._order_repo.next_id(),
            account_id=account.id,
            created_at=self._clock(),
            shipping_date=request.shipping_date,
            coupon_code=coupon.code if coupon is not None else None,
            full_name=request.full_name,
            email=request.email,
            phone_number=request.phone_number,
            address=request.address,
            note=request.note,
            shipping_method=request.shipping_method,
            shipping_address=request.shipping_address,
            payment_method=request.payment_method,
            payment_reference=request.payment_reference,
        )

        lines = self._materializer.materialize(
            order, [(spec.product_id, spec.quantity) for spec in request.items]
        )
        order.attach_lines(lines)

        self._order_repo.save(order)
        logger.info(
            "Created order %s for account %s (%d lines, total %s)",
            order.id, account.id, len(order.lines), order.total_money,
        )
        return order_to_dto(order)
