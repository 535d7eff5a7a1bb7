"""Application service: Add To Cart use case.

Reads the product from the catalog at call time, so the stock snapshot
handed to the cart is as fresh as the catalog itself.
"""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartChange, CartItemInput
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, cart_service: CartService, product_repo: ProductRepository) -> None:
        self._cart_service = cart_service
        self._product_repo = product_repo

    def handle(self, item_id: str) -> CartChange:
        product = self._product_repo.get_by_id(item_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{item_id}' not found")
        return self._cart_service.add_item(CartItemInput.from_product(product))
