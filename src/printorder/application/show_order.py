"""Application service: Show Order use cases (queries)."""

from __future__ import annotations

from printorder.application.dto import PrintOrderDTO
from printorder.application.mapping import to_order_dto
from printorder.domain.exceptions import EntityNotFoundError
from printorder.domain.repository.order_repository import OrderRepository


class ShowPrintOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> PrintOrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)


class ListPrintOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[PrintOrderDTO]:
        return [to_order_dto(order) for order in self._order_repo.list_all()]
