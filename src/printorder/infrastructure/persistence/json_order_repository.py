"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from printorder.domain.model.order import (
    DEFAULT_STOCK_UNIT,
    PrintOrder,
    PrintOrderItem,
)
from printorder.domain.model.value_objects import LengthUnit, QtyType, QtyUnit
from printorder.domain.repository.order_repository import OrderRepository

_ITEM_DECIMALS = (
    "design_height",
    "design_gap",
    "qty",
    "wastage_percent",
    "panel_length_inch",
    "panel_length_meter",
    "panel_length_yard",
    "print_length",
    "fabric_length",
    "stock_print_length",
    "stock_fabric_length",
    "panel_qty",
)

_ORDER_DECIMALS = (
    "default_gap",
    "default_qty",
    "default_wastage",
    "total_print_length",
    "total_fabric_length",
    "total_panel_qty",
)


def _enum_value(member) -> str | None:
    return member.value if member is not None else None


def _enum_or_none(enum_cls, raw):
    return enum_cls(raw) if raw else None


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> PrintOrder | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[PrintOrder]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: PrintOrder) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _item_to_raw(item: PrintOrderItem) -> dict:
        raw = {
            "row_id": item.row_id,
            "design_name": item.design_name,
            "qty_unit": _enum_value(item.qty_unit),
            "qty_type": _enum_value(item.qty_type),
            "length_unit": _enum_value(item.length_unit),
            "stock_unit": item.stock_unit,
        }
        for name in _ITEM_DECIMALS:
            raw[name] = str(getattr(item, name))
        return raw

    @staticmethod
    def _item_to_domain(raw: dict) -> PrintOrderItem:
        return PrintOrderItem(
            row_id=raw["row_id"],
            design_name=raw.get("design_name", ""),
            qty_unit=_enum_or_none(QtyUnit, raw.get("qty_unit")),
            qty_type=_enum_or_none(QtyType, raw.get("qty_type")),
            length_unit=_enum_or_none(LengthUnit, raw.get("length_unit")),
            stock_unit=raw.get("stock_unit", DEFAULT_STOCK_UNIT),
            **{name: Decimal(raw.get(name, "0")) for name in _ITEM_DECIMALS},
        )

    def _to_raw(self, order: PrintOrder) -> dict:
        raw = {
            "id": order.id,
            "customer_name": order.customer_name,
            "created_at": order.created_at.isoformat(),
            "default_qty_unit": _enum_value(order.default_qty_unit),
            "default_qty_type": _enum_value(order.default_qty_type),
            "default_length_unit": _enum_value(order.default_length_unit),
        }
        for name in _ORDER_DECIMALS:
            raw[name] = str(getattr(order, name))
        raw["items"] = [self._item_to_raw(item) for item in order.items]
        return raw

    def _to_domain(self, raw: dict) -> PrintOrder:
        return PrintOrder(
            id=raw["id"],
            customer_name=raw["customer_name"],
            items=[self._item_to_domain(i) for i in raw["items"]],
            default_qty_unit=_enum_or_none(QtyUnit, raw.get("default_qty_unit")),
            default_qty_type=_enum_or_none(QtyType, raw.get("default_qty_type")),
            default_length_unit=_enum_or_none(LengthUnit, raw.get("default_length_unit")),
            created_at=datetime.fromisoformat(raw["created_at"]),
            **{name: Decimal(raw.get(name, "0")) for name in _ORDER_DECIMALS},
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
