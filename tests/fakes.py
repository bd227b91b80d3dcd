"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from orderflow.domain.model.account import Account
from orderflow.domain.model.coupon import Coupon
from orderflow.domain.model.order import Order
from orderflow.domain.model.product import Product
from orderflow.domain.repository.account_repository import AccountRepository
from orderflow.domain.repository.coupon_repository import CouponRepository
from orderflow.domain.repository.order_repository import (
    OrderPage,
    OrderRepository,
    matches_keyword,
)
from orderflow.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):
    """Stores deep copies so handlers only change state through ``save``."""

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.save_count = 0
        for order in orders or []:
            self.save(order)
        self.save_count = 0

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def get_by_payment_reference(self, reference: str) -> Order | None:
        for order in self._store.values():
            if order.payment_reference == reference:
                return copy.deepcopy(order)
        return None

    def list_by_account(self, account_id: int) -> list[Order]:
        return [
            copy.deepcopy(o)
            for o in sorted(self._store.values(), key=lambda o: o.id)
            if o.account_id == account_id
        ]

    def search(self, keyword: str, page: int, size: int) -> OrderPage:
        matching = [
            copy.deepcopy(o)
            for o in sorted(self._store.values(), key=lambda o: o.id)
            if o.active and matches_keyword(o, keyword)
        ]
        start = page * size
        return OrderPage(matching[start:start + size], page, size, len(matching))

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
        self._next_id = max(self._next_id, order.id + 1)
        self._store[order.id] = copy.deepcopy(order)
        self.save_count += 1

    def all(self) -> list[Order]:
        return list(self._store.values())


class FakeAccountRepository(AccountRepository):

    def __init__(self, accounts: list[Account] | None = None) -> None:
        self._store = {a.id: a for a in accounts or []}

    def get_by_id(self, account_id: int) -> Account | None:
        return self._store.get(account_id)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeCouponRepository(CouponRepository):

    def __init__(self, coupons: list[Coupon] | None = None) -> None:
        self._store = {c.code: c for c in coupons or []}

    def get_by_code(self, code: str) -> Coupon | None:
        return self._store.get(code)
