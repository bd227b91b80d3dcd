"""Application service: Update Order Status use case."""

from __future__ import annotations

import logging

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.exceptions import IllegalTransitionError, OrderNotFoundError
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.service.order_locator import OrderLocator
from orderflow.domain.service.status_transition import StatusTransitionEngine

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        engine: StatusTransitionEngine | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._locator = OrderLocator(order_repo)
        self._engine = engine or StatusTransitionEngine()

    def handle(self, identifier: int | str, status: str | None) -> OrderDTO:
        order = self._locator.resolve(identifier)
        if order is None:
            raise OrderNotFoundError(f"Order '{identifier}' not found")

        previous = order.status
        try:
            self._engine.apply(order, status)
        except IllegalTransitionError as exc:
            logger.warning("Rejected status change for order %s: %s", order.id, exc)
            raise

        self._order_repo.save(order)
        logger.info(
            "Order %s status %s -> %s", order.id, previous.value, order.status.value
        )
        return order_to_dto(order)
