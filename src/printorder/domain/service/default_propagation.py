"""Domain service: cascading order defaults into line items.

Each cascading default is bound to a typed reader on the order and a typed
writer on the item. A falsy default (zero or unset) is never written, so a
cleared default leaves the rows as they are. Nothing here recalculates;
that is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from printorder.domain.model.fields import DefaultField
from printorder.domain.model.order import PrintOrder, PrintOrderItem
from printorder.domain.model.value_objects import (
    LengthUnit,
    QtyType,
    QtyUnit,
    to_decimal,
)

logger = logging.getLogger(__name__)


def _set_gap(item: PrintOrderItem, value) -> None:
    item.design_gap = value


def _set_qty(item: PrintOrderItem, value) -> None:
    item.qty = value


def _set_wastage(item: PrintOrderItem, value) -> None:
    item.wastage_percent = value


def _set_length_unit(item: PrintOrderItem, value) -> None:
    item.length_unit = value


# field -> (order default reader, item value reader, item writer)
_CASCADES: dict[
    DefaultField,
    tuple[
        Callable[[PrintOrder], Any],
        Callable[[PrintOrderItem], Any],
        Callable[[PrintOrderItem, Any], None],
    ],
] = {
    DefaultField.GAP: (lambda o: o.default_gap, lambda i: i.design_gap, _set_gap),
    DefaultField.QTY: (lambda o: o.default_qty, lambda i: i.qty, _set_qty),
    DefaultField.QTY_UNIT: (
        lambda o: o.default_qty_unit,
        lambda i: i.qty_unit,
        PrintOrderItem.set_qty_unit,
    ),
    DefaultField.QTY_TYPE: (
        lambda o: o.default_qty_type,
        lambda i: i.qty_type,
        PrintOrderItem.set_qty_type,
    ),
    DefaultField.WASTAGE: (
        lambda o: o.default_wastage,
        lambda i: i.wastage_percent,
        _set_wastage,
    ),
    DefaultField.LENGTH_UNIT: (
        lambda o: o.default_length_unit,
        lambda i: i.length_unit,
        _set_length_unit,
    ),
}


def apply_default(order: PrintOrder, field: DefaultField) -> None:
    """Write the order's current default for *field* into every row."""
    read_default, _, write = _CASCADES[field]
    value = read_default(order)
    if not value:
        return
    for item in order.items:
        write(item, value)
    logger.debug("Default %s=%s applied to %d rows", field.value, value, len(order.items))


def apply_all_defaults(order: PrintOrder, item: PrintOrderItem) -> None:
    """Fill every field *item* left unset from the order defaults.

    A length unit the row already carries is kept even when the inherited
    quantity unit implies a different one.
    """
    for field, (read_default, read_item, write) in _CASCADES.items():
        value = read_default(order)
        if not value or read_item(item):
            continue
        if field is DefaultField.QTY_UNIT:
            item.set_qty_unit(value, keep_length_unit=True)
        else:
            write(item, value)


def update_default(order: PrintOrder, field: DefaultField, raw) -> list[DefaultField]:
    """Store a new order default and return every default that changed.

    Choosing panels as the default quantity unit also makes print
    quantity the default type. Choosing a length unit also makes it the
    default length unit.
    """
    changed = [field]

    if field is DefaultField.GAP:
        order.default_gap = to_decimal(raw)
    elif field is DefaultField.QTY:
        order.default_qty = to_decimal(raw)
    elif field is DefaultField.WASTAGE:
        order.default_wastage = to_decimal(raw)
    elif field is DefaultField.QTY_TYPE:
        qty_type = QtyType.parse(raw)
        if order.default_qty_unit is QtyUnit.PANEL:
            qty_type = QtyType.PRINT_QTY
        order.default_qty_type = qty_type
    elif field is DefaultField.LENGTH_UNIT:
        order.default_length_unit = LengthUnit.parse(raw)
    elif field is DefaultField.QTY_UNIT:
        unit = QtyUnit.parse(raw)
        order.default_qty_unit = unit
        if unit is QtyUnit.PANEL:
            order.default_qty_type = QtyType.PRINT_QTY
            changed.append(DefaultField.QTY_TYPE)
        elif unit is not None:
            order.default_length_unit = unit.length_unit
            changed.append(DefaultField.LENGTH_UNIT)

    return changed
