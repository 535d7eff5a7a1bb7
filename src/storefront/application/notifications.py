"""User-facing notifications for cart and checkout outcomes.

Mutations report *what* happened (``CartChange``, ``SubmitResult``);
this module decides *how* that reads to the shopper.  Presentation
layers plug in a ``Notifier`` (toast, terminal, ...) to display them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from storefront.domain.model.cart import CartChange, CartOutcome


class NotificationLevel(Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    level: NotificationLevel = NotificationLevel.INFO


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show *notification* to the user."""


class NullNotifier(Notifier):
    """Drops every notification (headless use)."""

    def notify(self, notification: Notification) -> None:
        return None


def notification_for_cart_change(change: CartChange) -> Notification | None:
    """Map a cart outcome to its notification; None for silent no-ops."""
    outcome = change.outcome
    name = change.line.display_name if change.line is not None else ""

    if outcome is CartOutcome.ADDED:
        return Notification("Added to cart", f"{name} was added to your cart")
    if outcome is CartOutcome.QUANTITY_INCREASED:
        return Notification("Cart updated", f"Quantity of {name} increased")
    if outcome is CartOutcome.QUANTITY_UPDATED:
        return Notification("Cart updated", f"Quantity of {name} set to {change.line.quantity}")
    if outcome is CartOutcome.QUANTITY_LIMITED:
        return Notification(
            "Limited stock",
            f"Quantity of {name} adjusted to the {change.line.quantity} available",
            NotificationLevel.ERROR,
        )
    if outcome is CartOutcome.STOCK_EXCEEDED:
        return Notification(
            "Insufficient stock",
            "Sorry, no more of this product can be added",
            NotificationLevel.ERROR,
        )
    if outcome is CartOutcome.REMOVED:
        return Notification("Removed from cart", f"{name} was removed from your cart")
    if outcome is CartOutcome.CLEARED:
        return Notification("Cart cleared", "All products were removed from your cart")
    return None


def order_submitted(order_id: str) -> Notification:
    return Notification(
        "Order submitted",
        f"Order number: {order_id}. We will call you shortly to confirm it.",
    )


def order_invalid(reasons: list[str]) -> Notification:
    return Notification(
        "Missing information",
        "; ".join(reasons),
        NotificationLevel.ERROR,
    )


def order_failed() -> Notification:
    return Notification(
        "Order not sent",
        "Something went wrong while sending your order. Please try again.",
        NotificationLevel.ERROR,
    )
