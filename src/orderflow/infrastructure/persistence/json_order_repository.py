"""JSON-file-backed implementation of OrderRepository.

Each order is stored as one record holding its header and its lines,
so a ``save`` writes both in the same file replacement.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path

from orderflow.domain.model.order import Order, OrderLine, OrderStatus
from orderflow.domain.model.value_objects import Money, Quantity
from orderflow.domain.repository.order_repository import (
    OrderPage,
    OrderRepository,
    matches_keyword,
)
from orderflow.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._file.load()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_by_payment_reference(self, reference: str) -> Order | None:
        for raw in self._file.load():
            if raw.get("payment_reference") == reference:
                return self._to_domain(raw)
        return None

    def list_by_account(self, account_id: int) -> list[Order]:
        orders = [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["account_id"] == account_id
        ]
        return sorted(orders, key=lambda o: o.id)

    def search(self, keyword: str, page: int, size: int) -> OrderPage:
        matching = sorted(
            (
                order
                for order in map(self._to_domain, self._file.load())
                if order.active and matches_keyword(order, keyword)
            ),
            key=lambda o: o.id,
        )
        start = page * size
        return OrderPage(
            items=matching[start:start + size],
            page=page,
            size=size,
            total_items=len(matching),
        )

    def save(self, order: Order) -> None:
        orders = self._file.load()

        if order.id is None:
            order.id = max((o["id"] for o in orders), default=0) + 1

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._file.dump(orders)
        logger.debug("Wrote order %s to %s", order.id, self._file.path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "account_id": order.account_id,
            "full_name": order.full_name,
            "email": order.email,
            "phone_number": order.phone_number,
            "address": order.address,
            "note": order.note,
            "shipping_method": order.shipping_method,
            "shipping_address": order.shipping_address,
            "shipping_date": order.shipping_date.isoformat() if order.shipping_date else None,
            "payment_method": order.payment_method,
            "payment_reference": order.payment_reference,
            "coupon_code": order.coupon_code,
            "status": order.status.value,
            "total_money": str(order.total_money.amount),
            "currency": order.total_money.currency,
            "active": order.active,
            "created_at": order.created_at.isoformat(),
            "lines": [
                {
                    "order_id": line.order_id,
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = [
            OrderLine(
                order_id=line["order_id"],
                product_id=line["product_id"],
                product_name=line["product_name"],
                quantity=Quantity(line["quantity"]),
                unit_price=Money.of(line["unit_price"], line.get("currency", "USD")),
            )
            for line in raw["lines"]
        ]
        shipping_date = raw.get("shipping_date")
        return Order(
            id=raw["id"],
            account_id=raw["account_id"],
            full_name=raw.get("full_name", ""),
            email=raw.get("email", ""),
            phone_number=raw.get("phone_number", ""),
            address=raw.get("address", ""),
            note=raw.get("note", ""),
            shipping_method=raw.get("shipping_method", ""),
            shipping_address=raw.get("shipping_address", ""),
            shipping_date=date.fromisoformat(shipping_date) if shipping_date else None,
            payment_method=raw.get("payment_method", ""),
            payment_reference=raw.get("payment_reference"),
            coupon_code=raw.get("coupon_code"),
            status=OrderStatus(raw["status"]),
            total_money=Money.of(raw["total_money"], raw.get("currency", "USD")),
            active=raw.get("active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            lines=lines,
        )
