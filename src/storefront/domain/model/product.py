"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, stock is replenished and sold off.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is the persistent identifier; ``product_id`` is the
    human-readable product code shown on labels and invoices.
    """

    id: str
    product_id: str
    name: str
    price: Money
    stock_quantity: int = 0
    image_url: str | None = None

    @property
    def is_in_stock(self) -> bool:
        return self.stock_quantity > 0

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.stock_quantity = quantity
