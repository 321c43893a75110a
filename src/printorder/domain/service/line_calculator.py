"""Domain service: per-line length calculation.

Turns one line item's geometry, quantity and wastage into print length,
fabric length, stock-unit lengths and panel count.

Wastage relates print length (what ends up printed) to fabric length (what
is consumed). Whichever of the two the quantity does not state directly is
derived from it through the wastage percentage. At 100% wastage or more
the derived length is zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from printorder.domain.model.conversion import (
    INCH_TO_METER,
    YARD_TO_METER,
    conversion_factor,
)
from printorder.domain.model.order import PrintOrderItem
from printorder.domain.model.precision import PrecisionPolicy
from printorder.domain.model.value_objects import ZERO, QtyType, flt

logger = logging.getLogger(__name__)

ONE = Decimal("1")
HUNDRED = Decimal("100")

INPUT_FIELDS = ("design_height", "design_gap", "qty", "wastage_percent")


@dataclass(frozen=True)
class LineResult:
    """Derived fields of one line item."""

    panel_length_inch: Decimal
    panel_length_meter: Decimal
    panel_length_yard: Decimal
    print_length: Decimal
    fabric_length: Decimal
    stock_print_length: Decimal
    stock_fabric_length: Decimal
    panel_qty: Decimal

    def apply_to(self, item: PrintOrderItem) -> None:
        item.panel_length_inch = self.panel_length_inch
        item.panel_length_meter = self.panel_length_meter
        item.panel_length_yard = self.panel_length_yard
        item.print_length = self.print_length
        item.fabric_length = self.fabric_length
        item.stock_print_length = self.stock_print_length
        item.stock_fabric_length = self.stock_fabric_length
        item.panel_qty = self.panel_qty


def _remove_wastage(length: Decimal, waste: Decimal) -> Decimal:
    return length * (ONE - waste) if waste < ONE else ZERO


def _add_wastage(length: Decimal, waste: Decimal) -> Decimal:
    return length / (ONE - waste) if waste < ONE else ZERO


class LineCalculator:

    def __init__(self, precision_policy: PrecisionPolicy) -> None:
        self._precision = precision_policy

    def round_inputs(self, item: PrintOrderItem) -> None:
        """Round the user-entered numbers of *item* to their precisions."""
        for name in INPUT_FIELDS:
            setattr(item, name, self._round(getattr(item, name), name, item))

    def compute(self, item: PrintOrderItem) -> LineResult:
        """Derive every calculated field of *item* without mutating it.

        Steps:
        1. Panel length is design height plus gap, in the item's length unit.
        2. Panel length in meters and yards.
        3. Print and fabric length, from either the quantity directly or
           the panel count times one panel's length in stock units.
        4. Stock-unit lengths and the panel count they amount to.
        """
        panel_length_inch = item.design_height + item.design_gap
        panel_length_meter = panel_length_inch * INCH_TO_METER
        panel_length_yard = panel_length_meter / YARD_TO_METER

        waste = item.wastage_percent / HUNDRED
        factor = conversion_factor(item.length_unit, item.stock_unit)

        if not item.is_panel:
            qty_type = item.effective_qty_type
            if qty_type is QtyType.PRINT_QTY:
                print_length = item.qty
                fabric_length = _add_wastage(item.qty, waste)
            else:
                print_length = _remove_wastage(item.qty, waste)
                fabric_length = item.qty
        else:
            # qty is a panel count here
            print_length = item.qty * panel_length_meter / factor
            fabric_length = _add_wastage(print_length, waste)

        # Both lengths share one precision so they stay consistent.
        print_length = self._round(print_length, "print_length", item)
        fabric_length = self._round(fabric_length, "print_length", item)

        stock_print_length = self._round(print_length * factor, "stock_print_length", item)
        stock_fabric_length = self._round(fabric_length * factor, "stock_fabric_length", item)

        if panel_length_meter:
            panel_qty = stock_print_length / panel_length_meter
        else:
            panel_qty = ZERO
        panel_qty = self._round(panel_qty, "panel_qty", item)

        result = LineResult(
            panel_length_inch=self._round(panel_length_inch, "panel_length_inch", item),
            panel_length_meter=self._round(panel_length_meter, "panel_length_meter", item),
            panel_length_yard=self._round(panel_length_yard, "panel_length_yard", item),
            print_length=print_length,
            fabric_length=fabric_length,
            stock_print_length=stock_print_length,
            stock_fabric_length=stock_fabric_length,
            panel_qty=panel_qty,
        )
        logger.debug("Row %s computed: %s", item.row_id, result)
        return result

    def _round(self, value: Decimal, field: str, item: PrintOrderItem) -> Decimal:
        return flt(value, self._precision.precision(field, item))
