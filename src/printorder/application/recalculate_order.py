"""Application service: Recalculate Order use case.

Re-runs the pipeline from the stored inputs, e.g. after the precision
configuration changed. Safe to repeat; the result does not change.
"""

from __future__ import annotations

from printorder.application.dto import PrintOrderDTO
from printorder.application.mapping import to_order_dto
from printorder.domain.exceptions import EntityNotFoundError
from printorder.domain.repository.order_repository import OrderRepository
from printorder.domain.service.recalculation import RecalculationService


class RecalculateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        recalculation: RecalculationService,
    ) -> None:
        self._order_repo = order_repo
        self._recalculation = recalculation

    def handle(self, order_id: int) -> PrintOrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        self._recalculation.recalculate(order)
        self._order_repo.save(order)
        return to_order_dto(order)
