"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from orderflow.domain.service.status_transition import StatusTransitionEngine
from orderflow.infrastructure.persistence.json_account_repository import (
    JsonAccountRepository,
)
from orderflow.infrastructure.persistence.json_coupon_repository import (
    JsonCouponRepository,
)
from orderflow.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderflow.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from orderflow.infrastructure.settings import Settings, load_settings


@lru_cache(maxsize=1)
def settings() -> Settings:
    return load_settings()


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def account_repository() -> JsonAccountRepository:
    return JsonAccountRepository(settings().data_dir / "accounts.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def coupon_repository() -> JsonCouponRepository:
    return JsonCouponRepository(settings().data_dir / "coupons.json")


def status_engine() -> StatusTransitionEngine:
    return StatusTransitionEngine(settings().valid_statuses)
