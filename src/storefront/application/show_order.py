"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineItemDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import PlacedOrder
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_order_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: PlacedOrder) -> OrderDTO:
        return OrderDTO(
            order_id=order.order_id,
            total_amount=str(order.total_amount),
            payment_status=order.payment_status.value,
            delivery_status=order.delivery_status.value,
            notes=order.notes,
            items=[
                OrderLineItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
