"""JSON-file-backed implementation of CouponRepository."""

from __future__ import annotations

from pathlib import Path

from orderflow.domain.model.coupon import Coupon
from orderflow.domain.repository.coupon_repository import CouponRepository
from orderflow.infrastructure.persistence.json_file import JsonFile


class JsonCouponRepository(CouponRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_code(self, code: str) -> Coupon | None:
        for raw in self._file.load():
            if raw["code"] == code:
                return Coupon(
                    id=raw["id"],
                    code=raw["code"],
                    active=raw.get("active", True),
                )
        return None
