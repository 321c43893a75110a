"""Unit tests for the per-line length calculation."""

from decimal import Decimal

import pytest

from printorder.domain.model.order import PrintOrderItem
from printorder.domain.model.precision import FieldPrecisionPolicy, PrecisionPolicy
from printorder.domain.model.value_objects import LengthUnit, QtyType, QtyUnit
from printorder.domain.service.line_calculator import LineCalculator


class _Unrounded(PrecisionPolicy):

    def precision(self, field, context=None):
        return None


def _calculator(**overrides) -> LineCalculator:
    return LineCalculator(FieldPrecisionPolicy(overrides=overrides))


def _length_item(
    qty: str = "50",
    unit: QtyUnit = QtyUnit.METER,
    qty_type: QtyType = QtyType.PRINT_QTY,
    wastage: str = "0",
    stock_unit: str = "Meter",
) -> PrintOrderItem:
    item = PrintOrderItem(
        qty=Decimal(qty),
        qty_type=qty_type,
        wastage_percent=Decimal(wastage),
        stock_unit=stock_unit,
    )
    item.set_qty_unit(unit)
    return item


def _panel_item(qty: str = "10", wastage: str = "0") -> PrintOrderItem:
    item = PrintOrderItem(
        design_height=Decimal("100"),
        design_gap=Decimal("2"),
        qty=Decimal(qty),
        wastage_percent=Decimal(wastage),
        length_unit=LengthUnit.INCH,
        stock_unit="Meter",
    )
    item.set_qty_unit(QtyUnit.PANEL)
    return item


class TestPanelGeometry:

    def test_panel_lengths(self):
        result = _calculator().compute(_panel_item())
        assert result.panel_length_inch == Decimal("102")
        assert result.panel_length_meter == Decimal("2.5908")
        assert result.panel_length_yard == Decimal("2.833333")

    def test_high_precision_override(self):
        result = _calculator(panel_length_meter=30).compute(_panel_item())
        assert result.panel_length_meter == Decimal("2.5908")


class TestContinuousLength:

    def test_print_qty_adds_wastage_to_fabric(self):
        result = _calculator().compute(_length_item(wastage="20"))
        assert result.print_length == Decimal("50")
        assert result.fabric_length == Decimal("62.5")

    def test_fabric_qty_removes_wastage_from_print(self):
        item = _length_item(qty="62.5", qty_type=QtyType.FABRIC_QTY, wastage="20")
        result = _calculator().compute(item)
        assert result.print_length == Decimal("50")
        assert result.fabric_length == Decimal("62.5")

    @pytest.mark.parametrize("wastage", ["0", "12.5", "33", "99.9"])
    def test_fabric_length_relation(self, wastage):
        item = _length_item(qty="40", wastage=wastage)
        result = LineCalculator(_Unrounded()).compute(item)
        expected = Decimal("40") / (1 - Decimal(wastage) / 100)
        assert result.fabric_length == expected

    def test_full_wastage_zeroes_fabric_for_print_qty(self):
        result = _calculator().compute(_length_item(wastage="100"))
        assert result.print_length == Decimal("50")
        assert result.fabric_length == Decimal("0")

    def test_full_wastage_zeroes_print_for_fabric_qty(self):
        item = _length_item(qty_type=QtyType.FABRIC_QTY, wastage="120")
        result = _calculator().compute(item)
        assert result.print_length == Decimal("0")
        assert result.fabric_length == Decimal("50")

    def test_unset_qty_type_counts_as_print(self):
        item = _length_item(wastage="20")
        item.qty_type = None
        result = _calculator().compute(item)
        assert result.print_length == Decimal("50")
        assert result.fabric_length == Decimal("62.5")

    def test_yards_convert_to_meter_stock(self):
        result = _calculator().compute(_length_item(qty="10", unit=QtyUnit.YARD))
        assert result.print_length == Decimal("10")
        assert result.stock_print_length == Decimal("9.144")

    def test_unregistered_stock_unit_uses_identity(self):
        result = _calculator().compute(_length_item(qty="10", stock_unit="Roll"))
        assert result.stock_print_length == Decimal("10")

    def test_derived_length_rounded_to_print_length_precision(self):
        result = _calculator().compute(_length_item(qty="10", wastage="25"))
        assert result.fabric_length == Decimal("13.333")

    def test_fabric_length_follows_print_length_precision(self):
        calculator = _calculator(print_length=1, fabric_length=5)
        result = calculator.compute(_length_item(qty="10", wastage="25"))
        assert result.fabric_length == Decimal("13.3")

    def test_panel_qty_from_stock_length(self):
        item = _length_item()
        item.design_height = Decimal("100")
        item.design_gap = Decimal("2")
        result = _calculator().compute(item)
        assert result.panel_qty == Decimal("19.299")


class TestPanelOrdering:

    def test_reference_panel_example(self):
        result = _calculator().compute(_panel_item())
        assert result.print_length == Decimal("1020")
        assert result.fabric_length == Decimal("1020")
        assert result.stock_print_length == Decimal("25.908")
        assert result.panel_qty == Decimal("10")

    def test_wastage_inflates_fabric(self):
        result = _calculator().compute(_panel_item(wastage="20"))
        assert result.fabric_length == Decimal("1275")
        assert result.stock_fabric_length == Decimal("32.385")

    def test_full_wastage(self):
        result = _calculator().compute(_panel_item(wastage="100"))
        assert result.print_length == Decimal("1020")
        assert result.fabric_length == Decimal("0")

    def test_zero_panel_length_gives_zero_panels(self):
        item = _panel_item()
        item.design_height = Decimal("0")
        item.design_gap = Decimal("0")
        result = _calculator().compute(item)
        assert result.print_length == Decimal("0")
        assert result.panel_qty == Decimal("0")


class TestPurity:

    def test_compute_does_not_mutate(self):
        item = _panel_item()
        _calculator().compute(item)
        assert item.print_length == Decimal("0")
        assert item.panel_qty == Decimal("0")

    def test_apply_to_writes_derived_fields(self):
        item = _panel_item()
        _calculator().compute(item).apply_to(item)
        assert item.print_length == Decimal("1020")
        assert item.panel_length_meter == Decimal("2.5908")

    def test_round_inputs(self):
        item = _length_item(qty="10.12345", wastage="12.34567")
        _calculator().round_inputs(item)
        assert item.qty == Decimal("10.123")
        assert item.wastage_percent == Decimal("12.346")
