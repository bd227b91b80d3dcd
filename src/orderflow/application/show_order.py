"""Application service: Show Order use case (query)."""

from __future__ import annotations

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.exceptions import OrderNotFoundError
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.service.order_locator import OrderLocator


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._locator = OrderLocator(order_repo)

    def handle(self, identifier: int | str) -> OrderDTO:
        order = self._locator.resolve(identifier)
        if order is None:
            raise OrderNotFoundError(f"Order '{identifier}' not found")
        return order_to_dto(order)
