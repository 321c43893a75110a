"""Length conversion factors between entry units and stock units.

Lookup never fails: an unregistered pair converts with factor 1 so an
unexpected stock-unit / length-unit combination still calculates.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)

CONVERSION_FACTORS: dict[str, Decimal] = {
    "inch_to_meter": Decimal("0.0254"),
    "yard_to_meter": Decimal("0.9144"),
    "meter_to_meter": Decimal("1"),
}

IDENTITY = Decimal("1")
INCH_TO_METER = CONVERSION_FACTORS["inch_to_meter"]
YARD_TO_METER = CONVERSION_FACTORS["yard_to_meter"]


def _unit_name(unit: Enum | str | None) -> str:
    if unit is None:
        return ""
    if isinstance(unit, Enum):
        return str(unit.value)
    return str(unit)


def conversion_key(from_unit: Enum | str | None, to_unit: Enum | str | None) -> str:
    return f"{_unit_name(from_unit)}_to_{_unit_name(to_unit)}".lower()


def conversion_factor(from_unit: Enum | str | None, to_unit: Enum | str | None) -> Decimal:
    """Multiplier converting a length in *from_unit* into *to_unit*."""
    key = conversion_key(from_unit, to_unit)
    factor = CONVERSION_FACTORS.get(key)
    if factor is None:
        logger.debug("No conversion factor for %r, using identity", key)
        return IDENTITY
    return factor
