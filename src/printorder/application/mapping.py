"""Mapping between domain objects and DTOs."""

from __future__ import annotations

from enum import Enum

from printorder.application.dto import ItemSpec, PrintOrderDTO, PrintOrderItemDTO
from printorder.domain.model.fields import ItemField
from printorder.domain.model.order import PrintOrder, PrintOrderItem
from printorder.domain.service.recalculation import set_item_field


def _label(value: Enum | None) -> str:
    return value.value if value is not None else ""


def build_item(spec: ItemSpec) -> PrintOrderItem:
    """Build an unattached line item from raw input.

    Raises ValidationError for unsupported units, types or numbers, so
    bad input is rejected before the calculator ever sees it.
    """
    item = PrintOrderItem()
    values = {
        ItemField.DESIGN_NAME: spec.design_name,
        ItemField.DESIGN_HEIGHT: spec.design_height,
        ItemField.DESIGN_GAP: spec.design_gap,
        ItemField.QTY: spec.qty,
        # Qty unit first: an explicit length unit or qty type wins over
        # what the qty unit implies, except that panels stay print qty.
        ItemField.QTY_UNIT: spec.qty_unit,
        ItemField.LENGTH_UNIT: spec.length_unit,
        ItemField.QTY_TYPE: spec.qty_type,
        ItemField.WASTAGE: spec.wastage_percent,
    }
    for field, raw in values.items():
        if raw is not None:
            set_item_field(item, field, raw)
    if spec.stock_unit:
        set_item_field(item, ItemField.STOCK_UNIT, spec.stock_unit)
    return item


def to_item_dto(item: PrintOrderItem) -> PrintOrderItemDTO:
    return PrintOrderItemDTO(
        row_id=item.row_id,  # type: ignore[arg-type]
        design_name=item.design_name,
        design_height=str(item.design_height),
        design_gap=str(item.design_gap),
        qty=str(item.qty),
        qty_unit=_label(item.qty_unit),
        qty_type=_label(item.qty_type),
        wastage_percent=str(item.wastage_percent),
        length_unit=_label(item.length_unit),
        stock_unit=item.stock_unit,
        panel_length_inch=str(item.panel_length_inch),
        panel_length_meter=str(item.panel_length_meter),
        panel_length_yard=str(item.panel_length_yard),
        print_length=str(item.print_length),
        fabric_length=str(item.fabric_length),
        stock_print_length=str(item.stock_print_length),
        stock_fabric_length=str(item.stock_fabric_length),
        panel_qty=str(item.panel_qty),
    )


def to_order_dto(order: PrintOrder) -> PrintOrderDTO:
    return PrintOrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        defaults={
            "gap": str(order.default_gap),
            "qty": str(order.default_qty),
            "qty_unit": _label(order.default_qty_unit),
            "qty_type": _label(order.default_qty_type),
            "wastage": str(order.default_wastage),
            "length_unit": _label(order.default_length_unit),
        },
        items=[to_item_dto(item) for item in order.items],
        total_print_length=str(order.total_print_length),
        total_fabric_length=str(order.total_fabric_length),
        total_panel_qty=str(order.total_panel_qty),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
