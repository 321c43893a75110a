"""Unit tests for the recalculation trigger rules and service."""

from decimal import Decimal

import pytest

from printorder.domain.exceptions import ValidationError
from printorder.domain.model.fields import DefaultField, ItemField
from printorder.domain.model.order import PrintOrder, PrintOrderItem
from printorder.domain.model.value_objects import LengthUnit, QtyType, QtyUnit
from printorder.domain.service.recalculation import (
    LINE_TRIGGER_FIELDS,
    requires_recalculation,
)
from tests.fakes import RefreshRecorder, make_service


def _setup() -> tuple:
    refresh = RefreshRecorder()
    service = make_service(on_refresh=refresh)
    order = PrintOrder.create(
        "Alice",
        default_qty_unit=QtyUnit.METER,
        default_length_unit=LengthUnit.METER,
    )
    return service, order, refresh


class TestTriggerRule:

    @pytest.mark.parametrize(
        "field",
        [
            ItemField.DESIGN_GAP,
            ItemField.QTY,
            ItemField.QTY_UNIT,
            ItemField.QTY_TYPE,
            ItemField.WASTAGE,
            ItemField.LENGTH_UNIT,
        ],
    )
    def test_quantity_fields_trigger(self, field):
        assert requires_recalculation(field)

    def test_design_name_does_not_trigger(self):
        assert not requires_recalculation(ItemField.DESIGN_NAME)
        assert ItemField.DESIGN_NAME not in LINE_TRIGGER_FIELDS


class TestRowLifecycle:

    def test_added_row_inherits_defaults_and_is_calculated(self):
        service, order, refresh = _setup()
        order.default_wastage = Decimal("20")
        item = service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        assert item.qty_unit is QtyUnit.METER
        assert item.fabric_length == Decimal("62.5")
        assert order.total_fabric_length == Decimal("62.5")
        assert refresh.count == 1

    def test_removed_row_leaves_no_residue(self):
        service, order, refresh = _setup()
        service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        service.item_added(order, PrintOrderItem(qty=Decimal("30")))
        service.item_removed(order, 1)
        assert order.total_print_length == Decimal("30")
        assert order.total_fabric_length == Decimal("30")
        assert refresh.count == 3

    def test_removing_unknown_row_rejected(self):
        service, order, refresh = _setup()
        with pytest.raises(ValidationError, match="Row 4 not found"):
            service.item_removed(order, 4)
        assert refresh.count == 0


class TestFieldChanges:

    def test_qty_change_recalculates(self):
        service, order, refresh = _setup()
        service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        service.item_field_changed(order, 1, ItemField.QTY, "80")
        assert order.total_print_length == Decimal("80")
        assert refresh.count == 2

    def test_design_name_change_does_not_recalculate(self):
        service, order, refresh = _setup()
        service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        service.item_field_changed(order, 1, ItemField.DESIGN_NAME, "Roses")
        assert order.items[0].design_name == "Roses"
        assert refresh.count == 1

    def test_panel_unit_forces_print_qty(self):
        service, order, _ = _setup()
        service.item_added(
            order, PrintOrderItem(qty=Decimal("5"), qty_type=QtyType.FABRIC_QTY)
        )
        service.item_field_changed(order, 1, ItemField.QTY_UNIT, "Panel")
        assert order.items[0].qty_type is QtyType.PRINT_QTY

    def test_unsupported_unit_rejected_before_calculation(self):
        service, order, refresh = _setup()
        service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        with pytest.raises(ValidationError, match="Unsupported quantity unit"):
            service.item_field_changed(order, 1, ItemField.QTY_UNIT, "Bolt")
        assert order.items[0].qty_unit is QtyUnit.METER
        assert refresh.count == 1


class TestDefaultChanges:

    def test_default_cascades_then_recalculates_once(self):
        service, order, refresh = _setup()
        service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        service.default_changed(order, DefaultField.WASTAGE, "20")
        assert all(i.wastage_percent == Decimal("20") for i in order.items)
        assert order.total_fabric_length == Decimal("125")
        assert refresh.count == 3

    def test_panel_default_cascades_print_qty(self):
        service, order, _ = _setup()
        service.item_added(
            order, PrintOrderItem(qty=Decimal("5"), qty_type=QtyType.FABRIC_QTY)
        )
        service.default_changed(order, DefaultField.QTY_UNIT, "Panel")
        assert order.default_qty_type is QtyType.PRINT_QTY
        assert order.items[0].is_panel
        assert order.items[0].qty_type is QtyType.PRINT_QTY

    def test_cleared_default_keeps_rows(self):
        service, order, _ = _setup()
        service.item_added(order, PrintOrderItem(qty=Decimal("50")))
        service.default_changed(order, DefaultField.QTY, "0")
        assert order.items[0].qty == Decimal("50")


class TestBatch:

    def test_batch_recalculates_once(self):
        service, order, refresh = _setup()
        with service.batch(order) as batch:
            for qty in ("10", "20", "30"):
                batch.add_item(PrintOrderItem(qty=Decimal(qty)))
            assert refresh.count == 0
            assert order.total_print_length == Decimal("0")
        assert refresh.count == 1
        assert order.total_print_length == Decimal("60")

    def test_empty_batch_does_not_recalculate(self):
        service, order, refresh = _setup()
        with service.batch(order):
            pass
        assert refresh.count == 0

    def test_failed_batch_does_not_recalculate(self):
        service, order, refresh = _setup()
        with pytest.raises(RuntimeError):
            with service.batch(order) as batch:
                batch.add_item(PrintOrderItem(qty=Decimal("10")))
                raise RuntimeError("import aborted")
        assert refresh.count == 0
