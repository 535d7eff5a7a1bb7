"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.shipping import DEFAULT_SHIPPING_RATES, ShippingMethod, ShippingRates
from storefront.domain.service.pricing import price_breakdown


class ShowCartHandler:

    def __init__(
        self,
        cart_service: CartService,
        shipping_rates: ShippingRates = DEFAULT_SHIPPING_RATES,
    ) -> None:
        self._cart_service = cart_service
        self._shipping_rates = shipping_rates

    def handle(self, shipping_method: ShippingMethod | None = None) -> CartDTO:
        """Summarize the cart; with a shipping method, include the grand total."""
        lines = self._cart_service.lines
        line_dtos = [
            CartLineDTO(
                item_id=line.item_id,
                product_id=line.product_id,
                display_name=line.display_name,
                quantity=line.quantity,
                available_stock=line.available_stock,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in lines
        ]
        count = self._cart_service.total_item_count

        if shipping_method is None:
            return CartDTO(
                lines=line_dtos,
                total_item_count=count,
                subtotal=str(self._cart_service.subtotal),
            )

        breakdown = price_breakdown(lines, shipping_method, self._shipping_rates)
        return CartDTO(
            lines=line_dtos,
            total_item_count=count,
            subtotal=str(breakdown.subtotal),
            shipping_method=shipping_method.label,
            shipping=str(breakdown.shipping),
            total=str(breakdown.total),
        )
