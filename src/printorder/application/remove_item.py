"""Application service: Remove Item use case."""

from __future__ import annotations

from printorder.application.dto import PrintOrderDTO
from printorder.application.mapping import to_order_dto
from printorder.domain.exceptions import EntityNotFoundError
from printorder.domain.repository.order_repository import OrderRepository
from printorder.domain.service.recalculation import RecalculationService


class RemoveItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        recalculation: RecalculationService,
    ) -> None:
        self._order_repo = order_repo
        self._recalculation = recalculation

    def handle(self, order_id: int, row_id: int) -> PrintOrderDTO:
        """Delete a row; the totals no longer include it afterwards."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        self._recalculation.item_removed(order, row_id)
        self._order_repo.save(order)
        return to_order_dto(order)
