"""Application service: Replace Order Lines use case.

Swaps the whole line collection of a PENDING order for a new cart and
recomputes the total.  New lines are materialized before anything is
written, so a missing product leaves the stored order as it was.
"""

from __future__ import annotations

import logging

from orderflow.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from orderflow.domain.exceptions import OrderNotFoundError, ValidationError
from orderflow.domain.model.order import OrderStatus
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.service.line_item_materializer import LineItemMaterializer
from orderflow.domain.service.order_locator import OrderLocator

logger = logging.getLogger(__name__)


class ReplaceOrderLinesHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._locator = OrderLocator(order_repo)
        self._materializer = LineItemMaterializer(product_repo)

    def handle(self, identifier: int | str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        order = self._locator.resolve(identifier)
        if order is None:
            raise OrderNotFoundError(f"Order '{identifier}' not found")
        if order.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Lines of order {order.id} can only be replaced while PENDING, "
                f"current status is {order.status.value}"
            )

        lines = self._materializer.materialize(
            order, [(spec.product_id, spec.quantity) for spec in item_specs]
        )
        order.attach_lines(lines)

        self._order_repo.save(order)
        logger.info(
            "Replaced lines of order %s (%d lines, total %s)",
            order.id, len(order.lines), order.total_money,
        )
        return order_to_dto(order)
