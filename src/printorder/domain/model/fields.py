"""Enumerated editable fields of a print order and its line items.

Field changes arrive from the host by name. Parsing them into these enums
keeps every later write typed; the host's own column names are accepted as
aliases.
"""

from __future__ import annotations

from enum import Enum

from printorder.domain.exceptions import ValidationError


class _FieldEnum(Enum):

    @classmethod
    def parse(cls, name):
        if isinstance(name, cls):
            return name
        key = str(name or "").strip().lower().replace("-", "_")
        for member in cls:
            if key == member.value or key in _ALIASES.get(member, ()):
                return member
        raise ValidationError(f"Unknown {cls._label()}: {name!r}")

    @classmethod
    def _label(cls) -> str:
        return "field"


class DefaultField(_FieldEnum):
    """Order-level defaults that cascade into line items."""

    GAP = "gap"
    QTY = "qty"
    QTY_UNIT = "qty_unit"
    QTY_TYPE = "qty_type"
    WASTAGE = "wastage"
    LENGTH_UNIT = "length_unit"

    @property
    def item_field(self) -> ItemField:
        return _DEFAULT_TO_ITEM[self]

    @classmethod
    def _label(cls) -> str:
        return "default field"


class ItemField(_FieldEnum):
    """Editable (non-derived) fields of a line item."""

    DESIGN_NAME = "design_name"
    DESIGN_HEIGHT = "design_height"
    DESIGN_GAP = "design_gap"
    QTY = "qty"
    QTY_UNIT = "qty_unit"
    QTY_TYPE = "qty_type"
    WASTAGE = "wastage_percent"
    LENGTH_UNIT = "length_unit"
    STOCK_UNIT = "stock_unit"

    @classmethod
    def _label(cls) -> str:
        return "item field"


_DEFAULT_TO_ITEM = {
    DefaultField.GAP: ItemField.DESIGN_GAP,
    DefaultField.QTY: ItemField.QTY,
    DefaultField.QTY_UNIT: ItemField.QTY_UNIT,
    DefaultField.QTY_TYPE: ItemField.QTY_TYPE,
    DefaultField.WASTAGE: ItemField.WASTAGE,
    DefaultField.LENGTH_UNIT: ItemField.LENGTH_UNIT,
}

_ALIASES: dict[Enum, tuple[str, ...]] = {
    DefaultField.GAP: ("default_gap", "design_gap"),
    DefaultField.QTY: ("default_qty",),
    DefaultField.QTY_UNIT: ("default_qty_unit", "default_uom", "uom"),
    DefaultField.QTY_TYPE: ("default_qty_type",),
    DefaultField.WASTAGE: ("default_wastage", "wastage_percent", "per_wastage"),
    DefaultField.LENGTH_UNIT: ("default_length_unit", "default_length_uom", "length_uom"),
    ItemField.DESIGN_GAP: ("gap",),
    ItemField.QTY_UNIT: ("uom",),
    ItemField.WASTAGE: ("wastage", "per_wastage"),
    ItemField.LENGTH_UNIT: ("length_uom",),
    ItemField.STOCK_UNIT: ("stock_uom",),
}
