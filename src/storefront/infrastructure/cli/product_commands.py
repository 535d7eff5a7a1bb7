"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--code", "product_code", required=True, help="Product code (e.g. PH-001).")
@click.option("--price", required=True, help="Selling price (e.g. 45000).")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
@click.option("--image", "image_url", default=None, help="Image URL.")
def product_add(
    name: str, product_code: str, price: str, stock: int, image_url: str | None
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            product_id=product_code,
            price=price,
            stock=stock,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock_quantity} in stock)"
    )


@click.command("list")
@click.option("--in-stock", is_flag=True, default=False, help="Only products that can be bought.")
def product_list(in_stock: bool) -> None:
    """List products in the catalog."""
    repo = product_repository()
    products = repo.list_in_stock() if in_stock else repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<10} {'Name':<24} {'Price':>18} {'Stock':>6}")
    click.echo("-" * 68)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.product_id:<10} {p.name:<24} {str(p.price):>18} {p.stock_quantity:>6}"
        )
