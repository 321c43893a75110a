"""Decimal precision policy, looked up per field name.

The host document schema declares a precision per column. The calculator
and aggregator receive a policy object instead of reaching for ambient
schema state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

DEFAULT_FLOAT_PRECISION = 3

DEFAULT_FIELD_PRECISION: dict[str, int] = {
    "design_height": 3,
    "design_gap": 3,
    "qty": 3,
    "wastage_percent": 3,
    "panel_length_inch": 6,
    "panel_length_meter": 6,
    "panel_length_yard": 6,
    "print_length": 3,
    "fabric_length": 3,
    "stock_print_length": 3,
    "stock_fabric_length": 3,
    "panel_qty": 3,
    "total_print_length": 3,
    "total_fabric_length": 3,
    "total_panel_qty": 3,
}


class PrecisionPolicy(ABC):

    @abstractmethod
    def precision(self, field: str, context: object | None = None) -> int | None:
        """Decimal places for *field*; None means "do not round".

        *context* is the row or order the value belongs to.
        """


class FieldPrecisionPolicy(PrecisionPolicy):
    """Static per-field precisions with a fallback for unlisted fields."""

    def __init__(
        self,
        overrides: Mapping[str, int] | None = None,
        default: int | None = DEFAULT_FLOAT_PRECISION,
    ) -> None:
        self._precisions = {**DEFAULT_FIELD_PRECISION, **(overrides or {})}
        self._default = default

    def precision(self, field: str, context: object | None = None) -> int | None:
        return self._precisions.get(field, self._default)
