"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        product_id: str,
        price: str,
        stock: int = 0,
        image_url: str | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not product_id or not product_id.strip():
            raise ValidationError("Product code is required")

        if self._product_repo.get_by_product_id(product_id.strip()) is not None:
            raise ValidationError(f"Product code '{product_id}' already exists")

        # Ids are opaque; only purely numeric ones take part in numbering.
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(numeric_ids, default=0) + 1)

        product = Product(
            id=next_id,
            product_id=product_id.strip(),
            name=name.strip(),
            price=Money.of(price),
            image_url=image_url or None,
        )
        product.set_stock(stock)
        self._product_repo.save(product)
        return product
