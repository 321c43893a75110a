"""Application service: Update Default use case.

A changed default is written into every row (unless it was cleared) and
the order is recalculated once afterwards.
"""

from __future__ import annotations

from printorder.application.dto import PrintOrderDTO
from printorder.application.mapping import to_order_dto
from printorder.domain.exceptions import EntityNotFoundError
from printorder.domain.model.fields import DefaultField
from printorder.domain.repository.order_repository import OrderRepository
from printorder.domain.service.recalculation import RecalculationService


class UpdateDefaultHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        recalculation: RecalculationService,
    ) -> None:
        self._order_repo = order_repo
        self._recalculation = recalculation

    def handle(self, order_id: int, field_name: str, value: str | None) -> PrintOrderDTO:
        field = DefaultField.parse(field_name)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        self._recalculation.default_changed(order, field, value)
        self._order_repo.save(order)
        return to_order_dto(order)
