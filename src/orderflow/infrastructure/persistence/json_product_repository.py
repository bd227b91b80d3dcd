"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, product_id: int) -> Product | None:
        for item in self._file.load():
            if item["id"] == product_id:
                return Product(
                    id=item["id"],
                    name=item["name"],
                    price=Money.of(item["price"], item.get("currency", "USD")),
                )
        return None
