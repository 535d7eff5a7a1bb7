"""JSON-file-backed local storage for the cart.

The file is a small string-valued key/value store (one JSON object).
The cart lives under a single key as a JSON-encoded list of lines, so
other client-side values can share the same file.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import CartStorageError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.cart_storage import CartStorage

CART_KEY = "cart"


class JsonCartStorage(CartStorage):

    def __init__(self, file_path: Path, key: str = CART_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartStorage interface ------------------------------------------------

    def load(self) -> list[CartLine]:
        value = self._read_store().get(self._key)
        if value is None:
            return []
        try:
            raw_lines = json.loads(value)
            if not isinstance(raw_lines, list):
                raise CartStorageError(f"Saved cart under '{self._key}' is corrupt: not a list")
            return [self._to_domain(raw) for raw in raw_lines]
        except (ValueError, TypeError, KeyError, InvalidOperation, ValidationError) as exc:
            raise CartStorageError(f"Saved cart under '{self._key}' is corrupt: {exc}") from exc

    def save(self, lines: list[CartLine]) -> None:
        try:
            store = self._read_store()
        except CartStorageError:
            # Unreadable store: start over rather than keep failing writes.
            store = {}
        store[self._key] = json.dumps([self._to_raw(line) for line in lines], ensure_ascii=False)
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(store, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise CartStorageError(f"Cannot write cart storage: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "id": line.item_id,
            "product_id": line.product_id,
            "product_name": line.display_name,
            "selling_price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
            "image_url": line.image_ref,
            "quantity": line.quantity,
            "stock_quantity": line.available_stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLine:
        quantity = raw["quantity"]
        stock = raw["stock_quantity"]
        if not isinstance(quantity, int) or not isinstance(stock, int):
            raise TypeError("quantity and stock_quantity must be integers")
        return CartLine(
            item_id=str(raw["id"]),
            product_id=str(raw["product_id"]),
            display_name=str(raw["product_name"]),
            unit_price=Money(Decimal(str(raw["selling_price"])), raw.get("currency", DEFAULT_CURRENCY)),
            available_stock=stock,
            quantity=quantity,
            image_ref=raw.get("image_url"),
        )

    # --- File helpers ---------------------------------------------------------

    def _read_store(self) -> dict:
        if not self._file_path.exists():
            return {}
        try:
            store = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CartStorageError(f"Cannot read cart storage: {exc}") from exc
        if not isinstance(store, dict):
            raise CartStorageError("Cart storage file is not a key/value object")
        return store
