"""Domain service: find an order by ID or payment reference.

Payment gateway callbacks only carry the gateway's own reference token,
so every lookup by identifier falls back to the payment reference when
no order has that primary ID.
"""

from __future__ import annotations

import logging

from orderflow.domain.model.order import Order
from orderflow.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderLocator:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def resolve(self, identifier: int | str) -> Order | None:
        order = None
        order_id = _as_order_id(identifier)
        if order_id is not None:
            order = self._order_repo.get_by_id(order_id)
        if order is None:
            order = self._order_repo.get_by_payment_reference(str(identifier).strip())
            if order is not None:
                logger.debug("Order %s resolved by payment reference %r", order.id, identifier)
        return order


def _as_order_id(identifier: int | str) -> int | None:
    if isinstance(identifier, bool):
        return None
    if isinstance(identifier, int):
        return identifier
    text = str(identifier).strip()
    return int(text) if text.isascii() and text.isdigit() else None
