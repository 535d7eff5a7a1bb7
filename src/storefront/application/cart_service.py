"""Application service: the Cart Engine.

One ``CartService`` per shopper session owns the authoritative in-memory
``Cart`` and mirrors it to local storage after every change
(write-through).  Storage problems are logged and never surfaced: the
in-memory cart stays authoritative for the rest of the session.
"""

from __future__ import annotations

import logging

from storefront.application.notifications import (
    Notifier,
    NullNotifier,
    notification_for_cart_change,
)
from storefront.domain.exceptions import CartStorageError, ValidationError
from storefront.domain.model.cart import Cart, CartChange, CartItemInput, CartLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_storage import CartStorage

logger = logging.getLogger("storefront.cart")


class CartService:

    def __init__(self, storage: CartStorage, notifier: Notifier | None = None) -> None:
        self._storage = storage
        self._notifier = notifier or NullNotifier()
        self._cart = Cart()

    # --- Persistence ----------------------------------------------------------

    def load(self) -> None:
        """Replace the in-memory cart with the saved one (best effort)."""
        try:
            self._cart = Cart(self._storage.load())
        except (CartStorageError, ValidationError) as exc:
            logger.warning("Discarding unreadable saved cart: %s", exc)
            self._cart = Cart()

    def persist(self) -> bool:
        """Write the cart through to storage; False if the write failed."""
        try:
            self._storage.save(self._cart.lines)
        except CartStorageError as exc:
            logger.error("Failed to persist cart: %s", exc)
            return False
        return True

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: CartItemInput) -> CartChange:
        return self._apply(self._cart.add(item))

    def remove_item(self, item_id: str) -> CartChange:
        return self._apply(self._cart.remove(item_id))

    def set_quantity(self, item_id: str, quantity: int) -> CartChange:
        return self._apply(self._cart.set_quantity(item_id, quantity))

    def clear(self, silent: bool = False) -> CartChange:
        """Empty the cart.

        ``silent`` suppresses the notification, for callers that report
        the outcome themselves (checkout).
        """
        return self._apply(self._cart.clear(), notify=not silent)

    # --- Queries --------------------------------------------------------------

    @property
    def cart(self) -> Cart:
        """A copy of the current cart, safe to hand to other components."""
        return Cart(self._cart.lines)

    @property
    def lines(self) -> list[CartLine]:
        return self._cart.lines

    def is_in_cart(self, item_id: str) -> bool:
        return self._cart.contains(item_id)

    @property
    def total_item_count(self) -> int:
        return self._cart.total_item_count

    @property
    def subtotal(self) -> Money:
        return self._cart.subtotal

    # --- Internal helpers -----------------------------------------------------

    def _apply(self, change: CartChange, notify: bool = True) -> CartChange:
        # Persist only real changes, then tell the user exactly once.
        if change.changed:
            self.persist()
        logger.debug("Cart change: %s", change.outcome.value)
        if not notify:
            return change
        notification = notification_for_cart_change(change)
        if notification is not None:
            self._notifier.notify(notification)
        return change
