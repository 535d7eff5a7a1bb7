"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Product | None:
        """Return a product by its persistent ID, or None if not found."""

    @abstractmethod
    def get_by_product_id(self, product_id: str) -> Product | None:
        """Return a product by its human-readable code, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    def list_in_stock(self) -> list[Product]:
        """Return the products a shopper can currently buy."""
        return [p for p in self.list_all() if p.is_in_stock]

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
