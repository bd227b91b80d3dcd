"""Application service: Delete Order use case.

Orders are never removed from storage; deleting one only clears its
``active`` flag.  Deleting an unknown order is a no-op.
"""

from __future__ import annotations

import logging

from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.service.order_locator import OrderLocator

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo
        self._locator = OrderLocator(order_repo)

    def handle(self, identifier: int | str) -> None:
        order = self._locator.resolve(identifier)
        if order is None:
            logger.debug("Delete of unknown order '%s' ignored", identifier)
            return

        order.soft_delete()
        self._order_repo.save(order)
        logger.info("Soft-deleted order %s", order.id)
