"""Domain service: turn cart entries into order lines.

Every product is looked up and every quantity validated before any
line is returned, so a bad entry anywhere in the cart produces no lines
at all and the caller has nothing half-built to persist.
"""

from __future__ import annotations

from collections.abc import Iterable

from orderflow.domain.exceptions import ProductNotFoundError
from orderflow.domain.model.order import Order, OrderLine
from orderflow.domain.model.value_objects import Quantity
from orderflow.domain.repository.product_repository import ProductRepository


class LineItemMaterializer:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def materialize(
        self,
        order: Order,
        items: Iterable[tuple[int, int]],
    ) -> list[OrderLine]:
        """Build lines for *order* from ``(product_id, quantity)`` pairs.

        The product's current price is copied into the line.
        """
        lines: list[OrderLine] = []
        for product_id, quantity in items:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(f"Product not found with id: {product_id}")

            lines.append(
                OrderLine(
                    order_id=order.id,
                    product_id=product.id,
                    product_name=product.name,
                    quantity=Quantity(quantity),
                    unit_price=product.price,  # <-- price snapshot
                )
            )
        return lines
