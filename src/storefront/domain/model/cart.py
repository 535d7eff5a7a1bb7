"""Cart aggregate — the shopper's lines, bounded by available stock.

The Cart is a value-like aggregate: every public mutation either applies
completely or not at all, and reports what happened as a ``CartChange``
instead of raising.  Stock limits are soft rules here (clamp or reject),
never errors.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing import compute_subtotal


class CartOutcome(Enum):
    ADDED = "ADDED"
    QUANTITY_INCREASED = "QUANTITY_INCREASED"
    QUANTITY_UPDATED = "QUANTITY_UPDATED"
    QUANTITY_LIMITED = "QUANTITY_LIMITED"
    STOCK_EXCEEDED = "STOCK_EXCEEDED"
    REMOVED = "REMOVED"
    NOT_IN_CART = "NOT_IN_CART"
    CLEARED = "CLEARED"


# Outcomes that leave the cart exactly as it was.
UNCHANGED_OUTCOMES = frozenset({CartOutcome.STOCK_EXCEEDED, CartOutcome.NOT_IN_CART})


@dataclass(frozen=True)
class CartItemInput:
    """Input: a catalog item as offered to the cart (stock read at call time)."""

    item_id: str
    product_id: str
    display_name: str
    unit_price: Money
    available_stock: int
    image_ref: str | None = None

    @staticmethod
    def from_product(product: Product) -> CartItemInput:
        return CartItemInput(
            item_id=product.id,
            product_id=product.product_id,
            display_name=product.name,
            unit_price=product.price,
            available_stock=product.stock_quantity,
            image_ref=product.image_url,
        )


@dataclass
class CartLine:
    """One product's presence in the cart.

    ``unit_price`` is captured when the line is first added.
    ``available_stock`` is a snapshot refreshed on every successful add.
    """

    item_id: str
    product_id: str
    display_name: str
    unit_price: Money
    available_stock: int
    quantity: int = 1
    image_ref: str | None = None

    def __post_init__(self) -> None:
        if self.available_stock < 0:
            raise ValidationError("Available stock cannot be negative")
        if self.quantity < 1:
            raise ValidationError("Cart quantity must be positive")
        if self.quantity > self.available_stock:
            raise ValidationError(
                f"Cart quantity {self.quantity} of {self.display_name} "
                f"exceeds available stock {self.available_stock}"
            )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    def copy(self) -> CartLine:
        return replace(self)


@dataclass(frozen=True)
class CartChange:
    """What a cart mutation did.

    ``line`` is a copy of the affected line after the change (or the
    removed line for ``REMOVED``); ``requested_quantity`` is set when a
    quantity was asked for explicitly.
    """

    outcome: CartOutcome
    line: CartLine | None = None
    requested_quantity: int | None = None

    @property
    def changed(self) -> bool:
        return self.outcome not in UNCHANGED_OUTCOMES


class Cart:
    """Ordered collection of CartLines keyed by ``item_id``."""

    def __init__(self, lines: Iterable[CartLine] = ()) -> None:
        self._lines: dict[str, CartLine] = {}
        for line in lines:
            if line.item_id in self._lines:
                raise ValidationError(f"Duplicate cart line for item '{line.item_id}'")
            self._lines[line.item_id] = line.copy()

    # --- Mutations ------------------------------------------------------------

    def add(self, item: CartItemInput) -> CartChange:
        """Add one unit of *item*.

        A new line starts at quantity 1.  An existing line grows by one,
        unless it already holds all the available stock, in which case
        nothing changes.
        """
        line = self._lines.get(item.item_id)

        if line is None:
            if item.available_stock < 1:
                return CartChange(CartOutcome.STOCK_EXCEEDED)
            line = CartLine(
                item_id=item.item_id,
                product_id=item.product_id,
                display_name=item.display_name,
                unit_price=item.unit_price,
                available_stock=item.available_stock,
                quantity=1,
                image_ref=item.image_ref,
            )
            self._lines[line.item_id] = line
            return CartChange(CartOutcome.ADDED, line.copy())

        if line.quantity >= item.available_stock:
            return CartChange(CartOutcome.STOCK_EXCEEDED, line.copy())

        line.available_stock = item.available_stock
        line.quantity += 1
        return CartChange(CartOutcome.QUANTITY_INCREASED, line.copy())

    def remove(self, item_id: str) -> CartChange:
        line = self._lines.pop(item_id, None)
        if line is None:
            return CartChange(CartOutcome.NOT_IN_CART)
        return CartChange(CartOutcome.REMOVED, line)

    def set_quantity(self, item_id: str, quantity: int) -> CartChange:
        """Set a line's quantity, clamped to ``[1, available_stock]``.

        Zero or a negative quantity removes the line.
        """
        if quantity <= 0:
            return self.remove(item_id)

        line = self._lines.get(item_id)
        if line is None:
            return CartChange(CartOutcome.NOT_IN_CART, requested_quantity=quantity)

        line.quantity = min(quantity, line.available_stock)
        outcome = (
            CartOutcome.QUANTITY_LIMITED
            if line.quantity != quantity
            else CartOutcome.QUANTITY_UPDATED
        )
        return CartChange(outcome, line.copy(), requested_quantity=quantity)

    def clear(self) -> CartChange:
        self._lines.clear()
        return CartChange(CartOutcome.CLEARED)

    # --- Queries --------------------------------------------------------------

    def contains(self, item_id: str) -> bool:
        return item_id in self._lines

    def get(self, item_id: str) -> CartLine | None:
        line = self._lines.get(item_id)
        return line.copy() if line is not None else None

    @property
    def lines(self) -> list[CartLine]:
        """Copies of the lines, in insertion order."""
        return [line.copy() for line in self._lines.values()]

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def subtotal(self) -> Money:
        return compute_subtotal(self._lines.values())

    def __len__(self) -> int:
        return len(self._lines)
