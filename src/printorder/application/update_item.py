"""Application service: Update Item use case.

Applies one field change to one row. Changes to fields the quantities
depend on recalculate the whole order.
"""

from __future__ import annotations

from printorder.application.dto import PrintOrderDTO
from printorder.application.mapping import to_order_dto
from printorder.domain.exceptions import EntityNotFoundError
from printorder.domain.model.fields import ItemField
from printorder.domain.repository.order_repository import OrderRepository
from printorder.domain.service.recalculation import RecalculationService


class UpdateItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        recalculation: RecalculationService,
    ) -> None:
        self._order_repo = order_repo
        self._recalculation = recalculation

    def handle(
        self,
        order_id: int,
        row_id: int,
        field_name: str,
        value: str | None,
    ) -> PrintOrderDTO:
        field = ItemField.parse(field_name)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        self._recalculation.item_field_changed(order, row_id, field, value)
        self._order_repo.save(order)
        return to_order_dto(order)
