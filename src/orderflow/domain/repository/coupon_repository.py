"""Abstract repository for coupons."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.coupon import Coupon


class CouponRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> Coupon | None:
        """Return the coupon with exactly this code, or None."""
