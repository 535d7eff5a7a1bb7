"""OrderDraft — checkout-time staging of cart contents plus customer input.

A draft is built fresh for every checkout attempt and holds its own copy
of the cart lines, so later cart edits never leak into a submission that
is already under way.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.shipping import ShippingMethod
from storefront.domain.model.value_objects import Quantity


class PaymentMethod(Enum):
    CASH_ON_DELIVERY = "cod"
    CARD = "card"
    BANK = "bank"

    @property
    def label(self) -> str:
        return _PAYMENT_LABELS[self]

    @property
    def is_available(self) -> bool:
        # Online card payment is not offered yet.
        return self is not PaymentMethod.CARD


_PAYMENT_LABELS = {
    PaymentMethod.CASH_ON_DELIVERY: "Cash on delivery",
    PaymentMethod.CARD: "Bank card",
    PaymentMethod.BANK: "Bank transfer",
}


@dataclass(frozen=True)
class CustomerInfo:
    full_name: str
    phone: str
    address: str
    region: str
    sub_region: str
    email: str | None = None
    notes: str | None = None

    # (attribute, label) for every field that must be non-blank
    REQUIRED_FIELDS = (
        ("full_name", "full name"),
        ("phone", "phone"),
        ("address", "address"),
        ("region", "region"),
        ("sub_region", "sub-region"),
    )

    def missing_fields(self) -> list[str]:
        missing = []
        for attr, label in self.REQUIRED_FIELDS:
            value = getattr(self, attr)
            if value is None or not str(value).strip():
                missing.append(label)
        return missing


@dataclass(frozen=True)
class OrderDraft:
    customer: CustomerInfo
    payment_method: PaymentMethod
    shipping_method: ShippingMethod
    lines: tuple[CartLine, ...]

    @staticmethod
    def from_cart(
        cart: Cart,
        customer: CustomerInfo,
        payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY,
        shipping_method: ShippingMethod = ShippingMethod.STANDARD,
    ) -> OrderDraft:
        return OrderDraft(
            customer=customer,
            payment_method=payment_method,
            shipping_method=shipping_method,
            lines=tuple(cart.lines),
        )

    def problems(self) -> list[str]:
        """Every reason this draft cannot be submitted, empty if none."""
        reasons: list[str] = []
        if not self.lines:
            reasons.append("Cart is empty")
        for label in self.customer.missing_fields():
            reasons.append(f"Missing required field: {label}")
        if not self.payment_method.is_available:
            reasons.append(
                f"Payment method '{self.payment_method.label}' is not available yet"
            )
        return reasons

    def line_items(self) -> list[OrderLineItem]:
        return [
            OrderLineItem(
                item_id=line.item_id,
                product_id=line.product_id,
                product_name=line.display_name,
                quantity=Quantity(line.quantity),
                unit_price=line.unit_price,
            )
            for line in self.lines
        ]

    def summary_notes(self) -> str:
        """Free-text order notes: contact, address, payment and shipping."""
        customer = self.customer
        rows = [
            f"Customer: {customer.full_name.strip()}",
            f"Phone: {customer.phone.strip()}",
        ]
        if customer.email and customer.email.strip():
            rows.append(f"Email: {customer.email.strip()}")
        rows.append(
            f"Address: {customer.address.strip()}, "
            f"{customer.sub_region.strip()}, {customer.region.strip()}"
        )
        rows.append(f"Payment method: {self.payment_method.label}")
        rows.append(f"Shipping method: {self.shipping_method.label}")
        extra = customer.notes.strip() if customer.notes else ""
        rows.append(f"Notes: {extra or 'none'}")
        return "\n".join(rows)
