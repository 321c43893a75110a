"""Application service: Add Item use case."""

from __future__ import annotations

from printorder.application.dto import ItemSpec, PrintOrderDTO
from printorder.application.mapping import build_item, to_order_dto
from printorder.domain.exceptions import EntityNotFoundError
from printorder.domain.repository.order_repository import OrderRepository
from printorder.domain.service.recalculation import RecalculationService


class AddItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        recalculation: RecalculationService,
    ) -> None:
        self._order_repo = order_repo
        self._recalculation = recalculation

    def handle(self, order_id: int, spec: ItemSpec) -> PrintOrderDTO:
        """Append one row; unset fields inherit the order defaults."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        self._recalculation.item_added(order, build_item(spec))
        self._order_repo.save(order)
        return to_order_dto(order)
