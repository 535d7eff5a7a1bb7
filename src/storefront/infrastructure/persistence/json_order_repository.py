"""JSON-file-backed implementation of OrderRepository.

Orders are appended, never rewritten.  Every I/O or format problem is
reported as OrderStoreError so the checkout flow can treat it as a
retry-able submission failure.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import OrderStoreError
from storefront.domain.model.order import (
    DeliveryStatus,
    OrderLineItem,
    PaymentStatus,
    PlacedOrder,
)
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: PlacedOrder) -> None:
        orders = self._load_raw()
        if any(raw["order_id"] == order.order_id for raw in orders):
            raise OrderStoreError(f"Order {order.order_id} already exists")
        orders.append(self._to_raw(order))
        self._persist_raw(orders)

    def get_by_order_id(self, order_id: str) -> PlacedOrder | None:
        for raw in self._load_raw():
            if raw["order_id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[PlacedOrder]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: PlacedOrder) -> dict:
        return {
            "order_id": order.order_id,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "payment_status": order.payment_status.value,
            "delivery_status": order.delivery_status.value,
            "notes": order.notes,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "item_id": item.item_id,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "total_price": str(item.line_total.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> PlacedOrder:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        items = [
            OrderLineItem(
                item_id=i["item_id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
            )
            for i in raw.get("items", [])
        ]
        return PlacedOrder(
            order_id=raw["order_id"],
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            notes=raw.get("notes") or "",
            items=items,
            payment_status=PaymentStatus(raw["payment_status"]),
            delivery_status=DeliveryStatus(raw["delivery_status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        if not self._file_path.exists():
            return []
        try:
            orders = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise OrderStoreError(f"Cannot read order store: {exc}") from exc
        if not isinstance(orders, list) or not all(
            isinstance(raw, dict) and "order_id" in raw for raw in orders
        ):
            raise OrderStoreError("Cannot read order store: expected a list of orders")
        return orders

    def _persist_raw(self, orders: list[dict]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(orders, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise OrderStoreError(f"Cannot write order store: {exc}") from exc
