"""Loads per-field decimal precision overrides from ``precision.json``.

The file maps field names to decimal places, plus an optional
``"default"`` entry for fields it does not list::

    {"print_length": 2, "total_print_length": 2, "default": 3}

A missing file means the built-in precisions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from printorder.domain.exceptions import ValidationError
from printorder.domain.model.precision import (
    DEFAULT_FLOAT_PRECISION,
    FieldPrecisionPolicy,
)

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"
MAX_PRECISION = 12


def load_precision_policy(path: Path) -> FieldPrecisionPolicy:
    if not path.exists():
        logger.debug("No precision config at %s, using defaults", path)
        return FieldPrecisionPolicy()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid precision config {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValidationError(f"Precision config {path} must be a JSON object")

    precisions: dict[str, int] = {}
    for field, places in raw.items():
        if isinstance(places, bool) or not isinstance(places, int) or places < 0:
            raise ValidationError(
                f"Precision for '{field}' must be a non-negative integer, got {places!r}"
            )
        if places > MAX_PRECISION:
            raise ValidationError(
                f"Precision for '{field}' must be at most {MAX_PRECISION}, got {places}"
            )
        precisions[field] = places

    default = precisions.pop(DEFAULT_KEY, DEFAULT_FLOAT_PRECISION)
    logger.debug("Loaded %d precision overrides from %s", len(precisions), path)
    return FieldPrecisionPolicy(overrides=precisions, default=default)
