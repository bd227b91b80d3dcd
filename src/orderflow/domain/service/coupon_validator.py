"""Domain service: decide which coupon, if any, a new order carries."""

from __future__ import annotations

from orderflow.domain.exceptions import CouponNotFoundError, InactiveCouponError
from orderflow.domain.model.coupon import Coupon
from orderflow.domain.repository.coupon_repository import CouponRepository


class CouponValidator:

    def __init__(self, coupon_repo: CouponRepository) -> None:
        self._coupon_repo = coupon_repo

    def apply(self, code: str | None) -> Coupon | None:
        """Return the coupon to attach, or None when no code was given.

        Raises CouponNotFoundError for an unknown code and
        InactiveCouponError for a known but disabled one.
        """
        if code is None or not code.strip():
            return None

        coupon = self._coupon_repo.get_by_code(code.strip())
        if coupon is None:
            raise CouponNotFoundError(f"Coupon not found: '{code.strip()}'")
        if not coupon.active:
            raise InactiveCouponError(f"Coupon '{coupon.code}' is not active")
        return coupon
