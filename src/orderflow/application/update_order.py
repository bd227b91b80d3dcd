"""Application service: Update Order use case (partial patch).

Only the fields present in the ``OrderUpdate`` are written; the merge
itself is the pure ``merge_order_update`` function on the domain model.
"""

from __future__ import annotations

import logging

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.exceptions import AccountNotFoundError, OrderNotFoundError
from orderflow.domain.model.order import OrderUpdate, merge_order_update
from orderflow.domain.repository.account_repository import AccountRepository
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.service.order_locator import OrderLocator

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._order_repo = order_repo
        self._account_repo = account_repo
        self._locator = OrderLocator(order_repo)

    def handle(self, identifier: int | str, update: OrderUpdate) -> OrderDTO:
        order = self._locator.resolve(identifier)
        if order is None:
            raise OrderNotFoundError(f"Order '{identifier}' not found")

        account_id = update.account_id if update.account_id is not None else order.account_id
        if self._account_repo.get_by_id(account_id) is None:
            raise AccountNotFoundError(f"Cannot find account with id: {account_id}")

        updated = merge_order_update(order, update)
        self._order_repo.save(updated)
        logger.info("Updated order %s", updated.id)
        return order_to_dto(updated)
