"""Abstract repository for PrintOrder aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from printorder.domain.model.order import PrintOrder


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> PrintOrder | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[PrintOrder]:
        """Return every stored order."""

    @abstractmethod
    def save(self, order: PrintOrder) -> None:
        """Persist a new or updated order."""
