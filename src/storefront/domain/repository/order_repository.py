"""Abstract repository for PlacedOrder records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import PlacedOrder


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: PlacedOrder) -> None:
        """Record a new order.

        Raises OrderStoreError if the order cannot be recorded,
        including when its ``order_id`` is already taken.
        """

    @abstractmethod
    def get_by_order_id(self, order_id: str) -> PlacedOrder | None:
        """Return an order by its identifier, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[PlacedOrder]:
        """Return every recorded order, oldest first."""
