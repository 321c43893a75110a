"""Data Transfer Objects — plain containers that cross layer boundaries.

Inputs carry raw host values (usually strings); parsing into units and
Decimals happens in the application layer before any calculation.
Outputs carry formatted values for display.
"""

from __future__ import annotations

from dataclasses import dataclass

RawValue = str | int | float | None


@dataclass(frozen=True)
class ItemSpec:
    """Input: one line item as entered or imported.

    Fields left as None are filled from the order defaults.
    """

    design_name: str = ""
    design_height: RawValue = None
    design_gap: RawValue = None
    qty: RawValue = None
    qty_unit: str | None = None
    qty_type: str | None = None
    wastage_percent: RawValue = None
    length_unit: str | None = None
    stock_unit: str | None = None


@dataclass(frozen=True)
class OrderDefaultsSpec:
    """Input: order-level defaults that cascade into line items."""

    gap: RawValue = None
    qty: RawValue = None
    qty_unit: str | None = None
    qty_type: str | None = None
    wastage: RawValue = None
    length_unit: str | None = None


@dataclass(frozen=True)
class PrintOrderItemDTO:
    """Output: a single line item as displayed to the user."""

    row_id: int
    design_name: str
    design_height: str
    design_gap: str
    qty: str
    qty_unit: str
    qty_type: str
    wastage_percent: str
    length_unit: str
    stock_unit: str
    panel_length_inch: str
    panel_length_meter: str
    panel_length_yard: str
    print_length: str
    fabric_length: str
    stock_print_length: str
    stock_fabric_length: str
    panel_qty: str


@dataclass(frozen=True)
class PrintOrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    defaults: dict[str, str]
    items: list[PrintOrderItemDTO]
    total_print_length: str
    total_fabric_length: str
    total_panel_qty: str
    created_at: str
