"""Application service: Create Print Order use case.

Creates the order, stores its defaults (with the same side effects as
changing them later), then inserts every item in one batch so the order
is recalculated once.
"""

from __future__ import annotations

import logging

from printorder.application.dto import ItemSpec, OrderDefaultsSpec, PrintOrderDTO
from printorder.application.mapping import build_item, to_order_dto
from printorder.domain.model.fields import DefaultField
from printorder.domain.model.order import PrintOrder
from printorder.domain.repository.order_repository import OrderRepository
from printorder.domain.service.default_propagation import update_default
from printorder.domain.service.recalculation import RecalculationService

logger = logging.getLogger(__name__)


class CreatePrintOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        recalculation: RecalculationService,
    ) -> None:
        self._order_repo = order_repo
        self._recalculation = recalculation

    def handle(
        self,
        customer_name: str,
        defaults: OrderDefaultsSpec | None = None,
        item_specs: list[ItemSpec] | None = None,
    ) -> PrintOrderDTO:
        """Create a new print order.

        Steps:
        1. Validate every item spec (fail before anything is created).
        2. Create the order and store its defaults.
        3. Insert the items in one batch; defaults fill unset fields.
        4. Persist and return a DTO.
        """
        items = [build_item(spec) for spec in item_specs or []]

        order = PrintOrder.create(customer_name)
        self._store_defaults(order, defaults or OrderDefaultsSpec())

        with self._recalculation.batch(order) as batch:
            for item in items:
                batch.add_item(item)

        self._order_repo.save(order)
        logger.info("Created print order #%s with %d rows", order.id, len(order.items))
        return to_order_dto(order)

    @staticmethod
    def _store_defaults(order: PrintOrder, defaults: OrderDefaultsSpec) -> None:
        # Units before the qty type so an explicit type is not overwritten
        # by the one a qty unit implies, except for panels.
        values = [
            (DefaultField.GAP, defaults.gap),
            (DefaultField.QTY, defaults.qty),
            (DefaultField.QTY_UNIT, defaults.qty_unit),
            (DefaultField.LENGTH_UNIT, defaults.length_unit),
            (DefaultField.QTY_TYPE, defaults.qty_type),
            (DefaultField.WASTAGE, defaults.wastage),
        ]
        for field, raw in values:
            if raw is not None:
                update_default(order, field, raw)
