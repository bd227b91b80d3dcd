"""Domain service: order status transitions.

The lifecycle runs forward from PENDING through processing to
DELIVERED.  Cancellation is possible from PENDING, and a DELIVERED
order may still be cancelled; CANCELLED is terminal.

Rules are checked in a fixed order and the first failure wins:

1. the requested status is non-blank and in the configured set;
2. a DELIVERED order may only move to CANCELLED;
3. a CANCELLED order may not move at all;
4. otherwise CANCELLED may only be reached from PENDING.
"""

from __future__ import annotations

from collections.abc import Iterable

from orderflow.domain.exceptions import IllegalTransitionError, InvalidStatusError
from orderflow.domain.model.order import Order, OrderStatus


class StatusTransitionEngine:

    def __init__(self, valid_statuses: Iterable[OrderStatus] | None = None) -> None:
        self._valid = frozenset(valid_statuses if valid_statuses is not None else OrderStatus)

    @property
    def valid_statuses(self) -> frozenset[OrderStatus]:
        return self._valid

    def parse(self, requested: str | None) -> OrderStatus:
        """Turn raw input into a member of the configured status set."""
        if requested is None or not requested.strip():
            raise InvalidStatusError("Status cannot be empty")
        value = requested.strip()
        for status in self._valid:
            if status.value == value:
                return status
        raise InvalidStatusError(f"Invalid status: {value}")

    def check(self, current: OrderStatus, target: OrderStatus) -> None:
        """Raise IllegalTransitionError if *current* -> *target* is not allowed."""
        if current == OrderStatus.DELIVERED:
            if target != OrderStatus.CANCELLED:
                raise IllegalTransitionError(
                    current.value,
                    target.value,
                    f"Cannot change status from DELIVERED to {target.value}",
                )
            return

        if current == OrderStatus.CANCELLED:
            raise IllegalTransitionError(
                current.value,
                target.value,
                "Cannot change status of a CANCELLED order",
            )

        if target == OrderStatus.CANCELLED and current != OrderStatus.PENDING:
            raise IllegalTransitionError(
                current.value,
                target.value,
                f"Order can only be cancelled from PENDING status, not {current.value}",
            )

    def apply(self, order: Order, requested: str | None) -> OrderStatus:
        """Validate and apply a status change to *order* in place."""
        target = self.parse(requested)
        self.check(order.status, target)
        order.status = target
        return target
