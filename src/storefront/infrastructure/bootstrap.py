"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

    STOREFRONT_DATA_DIR           directory holding the JSON stores
    STOREFRONT_SHIPPING_STANDARD  flat cost of standard shipping (500)
    STOREFRONT_SHIPPING_EXPRESS   flat cost of express shipping (1000)
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.application.cart_service import CartService
from storefront.application.checkout import CheckoutFlow
from storefront.application.notifications import Notifier
from storefront.domain.model.shipping import DEFAULT_SHIPPING_RATES, ShippingRates
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_cart_storage import JsonCartStorage
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("STOREFRONT_DATA_DIR", _DEFAULT_DATA_DIR))


def shipping_rates() -> ShippingRates:
    standard = os.environ.get("STOREFRONT_SHIPPING_STANDARD")
    express = os.environ.get("STOREFRONT_SHIPPING_EXPRESS")
    return ShippingRates(
        standard=Money.of(standard) if standard else DEFAULT_SHIPPING_RATES.standard,
        express=Money.of(express) if express else DEFAULT_SHIPPING_RATES.express,
    )


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def cart_storage() -> JsonCartStorage:
    return JsonCartStorage(data_dir() / "local_storage.json")


def cart_service(notifier: Notifier | None = None) -> CartService:
    """A session's Cart Engine, already loaded from local storage."""
    service = CartService(cart_storage(), notifier)
    service.load()
    return service


def checkout_flow(service: CartService, notifier: Notifier | None = None) -> CheckoutFlow:
    return CheckoutFlow(
        cart_service=service,
        order_repo=order_repository(),
        shipping_rates=shipping_rates(),
        notifier=notifier,
    )
