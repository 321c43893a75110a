"""Domain service: order totals.

Totals are recomputed from scratch on every call and are always the
rounded sum of the already-rounded per-line values, so calling it twice
yields identical results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from printorder.domain.model.order import PrintOrder
from printorder.domain.model.precision import PrecisionPolicy
from printorder.domain.model.value_objects import QtyType, QtyUnit, flt
from printorder.domain.service.line_calculator import LineCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderTotals:
    print_length: Decimal
    fabric_length: Decimal
    panel_qty: Decimal


class TotalsAggregator:

    def __init__(
        self,
        calculator: LineCalculator,
        precision_policy: PrecisionPolicy,
    ) -> None:
        self._calculator = calculator
        self._precision = precision_policy

    def recompute_totals(self, order: PrintOrder) -> OrderTotals:
        """Recalculate every line of *order* and fold them into its totals."""
        if order.default_qty_unit is QtyUnit.PANEL:
            order.default_qty_type = QtyType.PRINT_QTY

        order.reset_totals()
        total_print_length = order.total_print_length
        total_fabric_length = order.total_fabric_length
        total_panel_qty = order.total_panel_qty

        for item in order.items:
            if item.is_panel:
                item.qty_type = QtyType.PRINT_QTY
            self._calculator.round_inputs(item)
            self._calculator.compute(item).apply_to(item)

            total_print_length += item.stock_print_length
            total_fabric_length += item.stock_fabric_length
            total_panel_qty += item.panel_qty

        order.total_print_length = self._round(total_print_length, "total_print_length", order)
        order.total_fabric_length = self._round(total_fabric_length, "total_fabric_length", order)
        order.total_panel_qty = self._round(total_panel_qty, "total_panel_qty", order)

        logger.info(
            "Order %s recalculated over %d rows: print=%s fabric=%s panels=%s",
            order.id,
            len(order.items),
            order.total_print_length,
            order.total_fabric_length,
            order.total_panel_qty,
        )
        return OrderTotals(
            print_length=order.total_print_length,
            fabric_length=order.total_fabric_length,
            panel_qty=order.total_panel_qty,
        )

    def _round(self, value: Decimal, field: str, order: PrintOrder) -> Decimal:
        return flt(value, self._precision.precision(field, order))
