"""Domain service: cart pricing.

Pure functions from a snapshot of cart lines (plus a shipping method) to
amounts.  Nothing here touches state or I/O, so the same inputs always
produce the same totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from storefront.domain.model.shipping import (
    DEFAULT_SHIPPING_RATES,
    ShippingMethod,
    ShippingRates,
)
from storefront.domain.model.value_objects import Money

if TYPE_CHECKING:
    from storefront.domain.model.cart import CartLine


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Money
    shipping: Money
    total: Money


def compute_subtotal(lines: Iterable[CartLine]) -> Money:
    """Sum of ``unit_price * quantity``; zero for no lines."""
    result: Money | None = None
    for line in lines:
        line_total = line.unit_price * line.quantity
        result = line_total if result is None else result + line_total
    return result if result is not None else Money.zero()


def compute_shipping_cost(
    method: ShippingMethod,
    rates: ShippingRates = DEFAULT_SHIPPING_RATES,
) -> Money:
    return rates.cost_for(method)


def compute_total(
    lines: Iterable[CartLine],
    method: ShippingMethod,
    rates: ShippingRates = DEFAULT_SHIPPING_RATES,
) -> Money:
    return compute_subtotal(lines) + compute_shipping_cost(method, rates)


def price_breakdown(
    lines: Iterable[CartLine],
    method: ShippingMethod,
    rates: ShippingRates = DEFAULT_SHIPPING_RATES,
) -> PriceBreakdown:
    subtotal = compute_subtotal(lines)
    shipping = compute_shipping_cost(method, rates)
    return PriceBreakdown(subtotal=subtotal, shipping=shipping, total=subtotal + shipping)
