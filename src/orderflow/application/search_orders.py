"""Application service: Search Orders use case (paginated query)."""

from __future__ import annotations

from orderflow.application.dto import OrderPageDTO, order_to_dto
from orderflow.domain.exceptions import ValidationError
from orderflow.domain.repository.order_repository import OrderRepository

DEFAULT_PAGE_SIZE = 10


class SearchOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        keyword: str | None,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
    ) -> OrderPageDTO:
        """Return one page (zero-based) of active orders matching *keyword*."""
        if page < 0:
            raise ValidationError("Page index cannot be negative")
        if size < 1:
            raise ValidationError("Page size must be at least 1")

        result = self._order_repo.search(keyword or "", page, size)
        return OrderPageDTO(
            items=[order_to_dto(order) for order in result.items],
            page=result.page,
            size=result.size,
            total_items=result.total_items,
            total_pages=result.total_pages,
        )
