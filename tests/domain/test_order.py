"""Unit tests for the PrintOrder aggregate and its line items."""

import pytest

from printorder.domain.exceptions import ValidationError
from printorder.domain.model.order import PrintOrder, PrintOrderItem
from printorder.domain.model.value_objects import LengthUnit, QtyType, QtyUnit


class TestOrderCreation:

    def test_happy_path(self):
        order = PrintOrder.create("  Alice  ")
        assert order.customer_name == "Alice"
        assert order.id is None  # assigned by repository
        assert order.items == []

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer name"):
            PrintOrder.create("   ")


class TestRows:

    def test_rows_numbered_in_entry_order(self):
        order = PrintOrder.create("Alice")
        first = order.append_item(PrintOrderItem())
        second = order.append_item(PrintOrderItem())
        assert (first.row_id, second.row_id) == (1, 2)

    def test_removed_row_is_gone(self):
        order = PrintOrder.create("Alice")
        order.append_item(PrintOrderItem(design_name="A"))
        order.append_item(PrintOrderItem(design_name="B"))
        removed = order.remove_item(1)
        assert removed.design_name == "A"
        assert [i.design_name for i in order.items] == ["B"]

    def test_next_row_follows_highest(self):
        order = PrintOrder.create("Alice")
        order.append_item(PrintOrderItem())
        order.append_item(PrintOrderItem())
        order.remove_item(1)
        assert order.append_item(PrintOrderItem()).row_id == 3

    def test_unknown_row_rejected(self):
        order = PrintOrder.create("Alice")
        with pytest.raises(ValidationError, match="Row 9 not found"):
            order.find_item(9)


class TestQtyUnitRules:

    def test_panel_forces_print_qty(self):
        item = PrintOrderItem(qty_type=QtyType.FABRIC_QTY)
        item.set_qty_unit(QtyUnit.PANEL)
        assert item.qty_type is QtyType.PRINT_QTY
        assert item.is_panel

    def test_length_qty_unit_sets_length_unit(self):
        item = PrintOrderItem(length_unit=LengthUnit.INCH)
        item.set_qty_unit(QtyUnit.YARD)
        assert item.length_unit is LengthUnit.YARD

    def test_panel_keeps_length_unit(self):
        item = PrintOrderItem(length_unit=LengthUnit.INCH)
        item.set_qty_unit(QtyUnit.PANEL)
        assert item.length_unit is LengthUnit.INCH

    def test_fabric_qty_refused_on_panel_row(self):
        item = PrintOrderItem()
        item.set_qty_unit(QtyUnit.PANEL)
        item.set_qty_type(QtyType.FABRIC_QTY)
        assert item.qty_type is QtyType.PRINT_QTY

    def test_fabric_qty_allowed_on_length_row(self):
        item = PrintOrderItem()
        item.set_qty_unit(QtyUnit.METER)
        item.set_qty_type(QtyType.FABRIC_QTY)
        assert item.qty_type is QtyType.FABRIC_QTY
