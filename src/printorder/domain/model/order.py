"""PrintOrder aggregate — the order and the line items it owns.

Line items carry the design geometry and quantity entered by the user plus
the lengths derived from them. Derived fields are written only by the line
calculator; order totals only by the totals aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from printorder.domain.exceptions import ValidationError
from printorder.domain.model.value_objects import (
    ZERO,
    LengthUnit,
    QtyType,
    QtyUnit,
)

DEFAULT_STOCK_UNIT = "Meter"


@dataclass
class PrintOrderItem:
    """One design printed on fabric, ordered by panel count or by length.

    Unset units are ``None``; unset numbers are zero. Both count as "left
    unset" when order defaults are applied to a new row.
    """

    row_id: int | None = None
    design_name: str = ""
    design_height: Decimal = ZERO
    design_gap: Decimal = ZERO
    qty: Decimal = ZERO
    qty_unit: QtyUnit | None = None
    qty_type: QtyType | None = None
    wastage_percent: Decimal = ZERO
    length_unit: LengthUnit | None = None
    stock_unit: str = DEFAULT_STOCK_UNIT

    # Derived
    panel_length_inch: Decimal = ZERO
    panel_length_meter: Decimal = ZERO
    panel_length_yard: Decimal = ZERO
    print_length: Decimal = ZERO
    fabric_length: Decimal = ZERO
    stock_print_length: Decimal = ZERO
    stock_fabric_length: Decimal = ZERO
    panel_qty: Decimal = ZERO

    @property
    def is_panel(self) -> bool:
        return self.qty_unit is not None and self.qty_unit.is_panel

    @property
    def effective_qty_type(self) -> QtyType:
        return self.qty_type or QtyType.PRINT_QTY

    def set_qty_unit(self, unit: QtyUnit | None, keep_length_unit: bool = False) -> None:
        """Change the quantity unit.

        Panels are always counted as print quantity. A length unit also
        becomes the unit the design geometry is measured in, unless
        *keep_length_unit* is set and the row already has one.
        """
        self.qty_unit = unit
        if unit is None:
            return
        if unit.is_panel:
            self.qty_type = QtyType.PRINT_QTY
        elif not (keep_length_unit and self.length_unit is not None):
            self.length_unit = unit.length_unit

    def set_qty_type(self, qty_type: QtyType | None) -> None:
        if self.is_panel:
            qty_type = QtyType.PRINT_QTY
        self.qty_type = qty_type


@dataclass
class PrintOrder:
    """Aggregate root for print orders.

    Use ``PrintOrder.create()`` for new orders. The ``__init__`` stays
    simple so the repository can reconstitute persisted orders as they were
    stored, derived fields included.
    """

    id: int | None
    customer_name: str
    items: list[PrintOrderItem] = field(default_factory=list)

    default_gap: Decimal = ZERO
    default_qty: Decimal = ZERO
    default_qty_unit: QtyUnit | None = None
    default_qty_type: QtyType | None = None
    default_wastage: Decimal = ZERO
    default_length_unit: LengthUnit | None = None

    # Derived, overwritten on every recalculation
    total_print_length: Decimal = ZERO
    total_fabric_length: Decimal = ZERO
    total_panel_qty: Decimal = ZERO

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer_name: str, **defaults) -> PrintOrder:
        """Create a new, empty order with the given defaults."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        return PrintOrder(id=None, customer_name=customer_name.strip(), **defaults)

    # --- Rows -----------------------------------------------------------------

    def append_item(self, item: PrintOrderItem) -> PrintOrderItem:
        """Take ownership of *item*, assigning it the next row id."""
        item.row_id = self._next_row_id()
        self.items.append(item)
        return item

    def remove_item(self, row_id: int) -> PrintOrderItem:
        item = self.find_item(row_id)
        self.items.remove(item)
        return item

    def find_item(self, row_id: int) -> PrintOrderItem:
        for item in self.items:
            if item.row_id == row_id:
                return item
        raise ValidationError(f"Row {row_id} not found in this order")

    def reset_totals(self) -> None:
        self.total_print_length = ZERO
        self.total_fabric_length = ZERO
        self.total_panel_qty = ZERO

    # --- Internal helpers -----------------------------------------------------

    def _next_row_id(self) -> int:
        return max((item.row_id or 0 for item in self.items), default=0) + 1
