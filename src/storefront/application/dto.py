"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the shopper."""

    item_id: str
    product_id: str
    display_name: str
    quantity: int
    available_stock: int
    unit_price: str  # formatted, e.g. "45,000.00 DZD"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart with its totals."""

    lines: list[CartLineDTO]
    total_item_count: int
    subtotal: str
    shipping_method: str | None = None
    shipping: str | None = None
    total: str | None = None


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the back office."""

    order_id: str
    total_amount: str
    payment_status: str
    delivery_status: str
    notes: str
    items: list[OrderLineItemDTO]
    created_at: str
