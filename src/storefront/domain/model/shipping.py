"""Shipping options and their flat-rate tiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.model.value_objects import Money


class ShippingMethod(Enum):
    STANDARD = "standard"
    EXPRESS = "express"

    @property
    def label(self) -> str:
        return _SHIPPING_LABELS[self]


_SHIPPING_LABELS = {
    ShippingMethod.STANDARD: "Standard shipping (3-5 business days)",
    ShippingMethod.EXPRESS: "Express shipping (24-48 hours)",
}


@dataclass(frozen=True)
class ShippingRates:
    """Flat cost per shipping method.

    This is configuration, not derived state; the composition root may
    build a different table from the environment.
    """

    standard: Money
    express: Money

    def cost_for(self, method: ShippingMethod) -> Money:
        if method is ShippingMethod.EXPRESS:
            return self.express
        return self.standard


DEFAULT_SHIPPING_RATES = ShippingRates(
    standard=Money.of(500),
    express=Money.of(1000),
)
