"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from printorder.domain.model.precision import FieldPrecisionPolicy
from printorder.domain.service.line_calculator import LineCalculator
from printorder.domain.service.recalculation import RecalculationService
from printorder.domain.service.totals_aggregator import TotalsAggregator
from printorder.infrastructure.config.precision_config import load_precision_policy
from printorder.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

DATA_DIR_ENV = "PRINTORDER_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def precision_policy() -> FieldPrecisionPolicy:
    return load_precision_policy(data_dir() / "precision.json")


def recalculation_service() -> RecalculationService:
    policy = precision_policy()
    aggregator = TotalsAggregator(LineCalculator(policy), policy)
    return RecalculationService(aggregator)
