"""Application service: Import Items use case.

Bulk insertion of rows, e.g. one per uploaded design. All specs are
validated before the order is touched, and the order is recalculated once
after the last row instead of once per row.
"""

from __future__ import annotations

import logging

from printorder.application.dto import ItemSpec, PrintOrderDTO
from printorder.application.mapping import build_item, to_order_dto
from printorder.domain.exceptions import EntityNotFoundError, ValidationError
from printorder.domain.repository.order_repository import OrderRepository
from printorder.domain.service.recalculation import RecalculationService

logger = logging.getLogger(__name__)


class ImportItemsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        recalculation: RecalculationService,
    ) -> None:
        self._order_repo = order_repo
        self._recalculation = recalculation

    def handle(self, order_id: int, specs: list[ItemSpec]) -> PrintOrderDTO:
        if not specs:
            raise ValidationError("Nothing to import")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        items = [build_item(spec) for spec in specs]

        with self._recalculation.batch(order) as batch:
            for item in items:
                batch.add_item(item)

        self._order_repo.save(order)
        logger.info("Imported %d rows into order #%s", len(items), order_id)
        return to_order_dto(order)
