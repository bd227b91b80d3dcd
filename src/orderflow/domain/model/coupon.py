"""Promotional coupon referenced by orders.

Coupon definitions are managed elsewhere; the ordering side only checks
that a code exists and is active before attaching it to a new order.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coupon:

    id: int
    code: str
    active: bool = True
