"""PlacedOrder — the durable record of a successful checkout.

Orders are append-only from the storefront's point of view: they are
written once at submission and never updated by the checkout flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    UNPAID = "unpaid"


class DeliveryStatus(Enum):
    PENDING = "pending"
    SHIPPING = "shipping"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderLineItem:
    """Price snapshot of one cart line at submission time."""

    item_id: str
    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class PlacedOrder:
    order_id: str
    total_amount: Money
    notes: str
    items: list[OrderLineItem] = field(default_factory=list)
    payment_status: PaymentStatus = PaymentStatus.PENDING
    delivery_status: DeliveryStatus = DeliveryStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.order_id or not self.order_id.strip():
            raise ValidationError("Order identifier is required")
