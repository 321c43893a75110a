"""Value Objects shared across the domain.

Units and quantity types are closed enumerations. Parsing happens at the
boundary so an unsupported unit or type never reaches the calculator.
Lengths are Decimals so repeated recalculation is exact and reproducible.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from enum import Enum

from printorder.domain.exceptions import ValidationError

ZERO = Decimal("0")

# Largest input magnitude accepted for any length, count or percentage.
MAX_MAGNITUDE = Decimal("1e15")


def _normalize(raw: str) -> str:
    return raw.replace(" ", "").replace("_", "").lower()


class _ParsableEnum(Enum):
    """Enum that parses host input case-insensitively by value or name."""

    @classmethod
    def parse(cls, raw):
        """Return the member for *raw*, or None when *raw* is unset.

        Raises ValidationError for anything that is not a known member.
        """
        if raw is None or isinstance(raw, cls):
            return raw
        text = str(raw.value if isinstance(raw, Enum) else raw).strip()
        if not text:
            return None
        wanted = _normalize(text)
        for member in cls:
            if wanted in (_normalize(member.value), _normalize(member.name)):
                return member
        raise ValidationError(f"Unsupported {cls._label()}: {raw!r}")

    @classmethod
    def _label(cls) -> str:
        return cls.__name__


class LengthUnit(_ParsableEnum):
    INCH = "Inch"
    YARD = "Yard"
    METER = "Meter"

    @classmethod
    def _label(cls) -> str:
        return "length unit"


class QtyUnit(_ParsableEnum):
    """Unit a line quantity is entered in: a panel count or a length."""

    PANEL = "Panel"
    INCH = "Inch"
    YARD = "Yard"
    METER = "Meter"

    @property
    def is_panel(self) -> bool:
        return self is QtyUnit.PANEL

    @property
    def length_unit(self) -> LengthUnit | None:
        if self.is_panel:
            return None
        return LengthUnit(self.value)

    @classmethod
    def _label(cls) -> str:
        return "quantity unit"


class QtyType(_ParsableEnum):
    """Whether a continuous quantity measures printed or consumed fabric."""

    PRINT_QTY = "Print Qty"
    FABRIC_QTY = "Fabric Qty"

    @classmethod
    def _label(cls) -> str:
        return "quantity type"


# --- Numbers ------------------------------------------------------------------


def to_decimal(value: str | float | int | Decimal | None) -> Decimal:
    """Coerce host input to Decimal; unset input becomes zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    text = str(value).strip()
    if not text:
        return ZERO
    try:
        result = Decimal(text)
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid number: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid number: {value!r}")
    if abs(result) >= MAX_MAGNITUDE:
        raise ValidationError(f"Number out of range: {value!r}")
    return result


def flt(value: Decimal, precision: int | None) -> Decimal:
    """Round *value* to *precision* decimal places (banker's rounding).

    ``None`` precision leaves the value as it is. The working precision is
    widened so that any finite value can be quantized.
    """
    if precision is None:
        return value
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
        return value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_EVEN)
