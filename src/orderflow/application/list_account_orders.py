"""Application service: List an account's orders (query)."""

from __future__ import annotations

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.repository.order_repository import OrderRepository


class ListAccountOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, account_id: int, include_inactive: bool = False) -> list[OrderDTO]:
        orders = self._order_repo.list_by_account(account_id)
        return [
            order_to_dto(order)
            for order in orders
            if include_inactive or order.active
        ]
