"""Domain service: when the quantity pipeline must re-run.

The dependency rule is static: a change to any field in
``LINE_TRIGGER_FIELDS``, a row insertion or a row removal recalculates the
whole order. Changing an order default first cascades it into the rows and
then recalculates once.

Bulk insertion goes through ``batch()``: rows are added without
recalculating and the order is recalculated exactly once when the scope
closes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from printorder.domain.model.fields import DefaultField, ItemField
from printorder.domain.model.order import PrintOrder, PrintOrderItem
from printorder.domain.model.value_objects import (
    LengthUnit,
    QtyType,
    QtyUnit,
    to_decimal,
)
from printorder.domain.service.default_propagation import (
    apply_all_defaults,
    apply_default,
    update_default,
)
from printorder.domain.service.totals_aggregator import OrderTotals, TotalsAggregator

logger = logging.getLogger(__name__)

LINE_TRIGGER_FIELDS = frozenset(
    {
        ItemField.DESIGN_HEIGHT,
        ItemField.DESIGN_GAP,
        ItemField.QTY,
        ItemField.QTY_UNIT,
        ItemField.QTY_TYPE,
        ItemField.WASTAGE,
        ItemField.LENGTH_UNIT,
        ItemField.STOCK_UNIT,
    }
)

RefreshHook = Callable[[PrintOrder], None]


def requires_recalculation(field: ItemField) -> bool:
    return field in LINE_TRIGGER_FIELDS


def set_item_field(item: PrintOrderItem, field: ItemField, raw) -> None:
    """Parse *raw* for *field* and write it through the item's typed setter."""
    if field is ItemField.DESIGN_NAME:
        item.design_name = str(raw or "").strip()
    elif field is ItemField.DESIGN_HEIGHT:
        item.design_height = to_decimal(raw)
    elif field is ItemField.DESIGN_GAP:
        item.design_gap = to_decimal(raw)
    elif field is ItemField.QTY:
        item.qty = to_decimal(raw)
    elif field is ItemField.QTY_UNIT:
        item.set_qty_unit(QtyUnit.parse(raw))
    elif field is ItemField.QTY_TYPE:
        item.set_qty_type(QtyType.parse(raw))
    elif field is ItemField.WASTAGE:
        item.wastage_percent = to_decimal(raw)
    elif field is ItemField.LENGTH_UNIT:
        item.length_unit = LengthUnit.parse(raw)
    elif field is ItemField.STOCK_UNIT:
        item.stock_unit = str(raw or "").strip()


class RecalculationBatch:
    """Rows added through a batch are recalculated once, at batch end."""

    def __init__(self, order: PrintOrder) -> None:
        self._order = order
        self.added: list[PrintOrderItem] = []

    def add_item(self, item: PrintOrderItem) -> PrintOrderItem:
        self._order.append_item(item)
        apply_all_defaults(self._order, item)
        self.added.append(item)
        return item


class RecalculationService:

    def __init__(
        self,
        aggregator: TotalsAggregator,
        on_refresh: RefreshHook | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._on_refresh = on_refresh

    # --- Row lifecycle --------------------------------------------------------

    def item_added(self, order: PrintOrder, item: PrintOrderItem) -> PrintOrderItem:
        with self.batch(order) as batch:
            batch.add_item(item)
        return item

    def item_removed(self, order: PrintOrder, row_id: int) -> PrintOrderItem:
        item = order.remove_item(row_id)
        self.recalculate(order)
        return item

    # --- Field changes --------------------------------------------------------

    def item_field_changed(
        self,
        order: PrintOrder,
        row_id: int,
        field: ItemField,
        value,
    ) -> None:
        item = order.find_item(row_id)
        set_item_field(item, field, value)
        if requires_recalculation(field):
            self.recalculate(order)

    def default_changed(self, order: PrintOrder, field: DefaultField, value) -> None:
        for changed in update_default(order, field, value):
            apply_default(order, changed)
        self.recalculate(order)

    # --- Pipeline -------------------------------------------------------------

    @contextmanager
    def batch(self, order: PrintOrder) -> Iterator[RecalculationBatch]:
        batch = RecalculationBatch(order)
        yield batch
        if batch.added:
            logger.debug("Batch of %d rows closed, recalculating", len(batch.added))
            self.recalculate(order)

    def recalculate(self, order: PrintOrder) -> OrderTotals:
        totals = self._aggregator.recompute_totals(order)
        if self._on_refresh is not None:
            self._on_refresh(order)
        return totals
