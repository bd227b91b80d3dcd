"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from orderflow.domain.model.order import Order


@dataclass(frozen=True)
class OrderPage:
    """One page of a keyword search."""

    items: list[Order]
    page: int
    size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_items // self.size)


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_payment_reference(self, reference: str) -> Order | None:
        """Return the order carrying a payment gateway reference, or None."""

    @abstractmethod
    def list_by_account(self, account_id: int) -> list[Order]:
        """Return every order (active or not) owned by an account, by ID."""

    @abstractmethod
    def search(self, keyword: str, page: int, size: int) -> OrderPage:
        """Return a page of active orders matching *keyword*, by ID.

        Matching is a case-insensitive substring test on full name, email,
        phone number, address and note.  A blank keyword matches all.
        """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order together with its lines."""


def matches_keyword(order: Order, keyword: str) -> bool:
    """Shared keyword predicate for repository implementations."""
    needle = keyword.strip().lower()
    if not needle:
        return True
    haystack = (
        order.full_name,
        order.email,
        order.phone_number,
        order.address,
        order.note,
    )
    return any(needle in value.lower() for value in haystack)
