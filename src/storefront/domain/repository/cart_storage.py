"""Abstract local storage for the shopper's cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLine


class CartStorage(ABC):

    @abstractmethod
    def load(self) -> list[CartLine]:
        """Return the saved lines, or an empty list if nothing is saved.

        Raises CartStorageError if saved data exists but cannot be read.
        """

    @abstractmethod
    def save(self, lines: list[CartLine]) -> None:
        """Replace the saved cart with *lines*.

        Raises CartStorageError if the write fails.
        """
