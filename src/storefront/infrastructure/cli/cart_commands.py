"""CLI commands for the shopper's cart.

Each invocation is one short session: the cart is loaded from local
storage, changed, and written straight back.
"""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.shipping import ShippingMethod
from storefront.infrastructure.bootstrap import (
    cart_service,
    product_repository,
    shipping_rates,
)
from storefront.infrastructure.cli.notifier import ClickNotifier

SHIPPING_CHOICES = click.Choice([m.value for m in ShippingMethod])


@click.command("add")
@click.option("--id", "item_id", required=True, help="Product ID to add.")
def cart_add(item_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(
        cart_service=cart_service(ClickNotifier()),
        product_repo=product_repository(),
    )

    try:
        handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("remove")
@click.option("--id", "item_id", required=True, help="Product ID to remove.")
def cart_remove(item_id: str) -> None:
    """Remove a product from the cart."""
    change = cart_service(ClickNotifier()).remove_item(item_id)
    if not change.changed:
        click.echo(f"Product {item_id} is not in the cart.")


@click.command("set")
@click.option("--id", "item_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_set(item_id: str, quantity: int) -> None:
    """Set the quantity of a product in the cart."""
    change = cart_service(ClickNotifier()).set_quantity(item_id, quantity)
    if not change.changed:
        click.echo(f"Product {item_id} is not in the cart.")


@click.command("clear")
def cart_clear() -> None:
    """Remove every product from the cart."""
    cart_service(ClickNotifier()).clear()


@click.command("show")
@click.option("--shipping", type=SHIPPING_CHOICES, default=None, help="Include shipping and total.")
def cart_show(shipping: str | None) -> None:
    """Show the cart contents and totals."""
    handler = ShowCartHandler(cart_service(), shipping_rates())
    dto = handler.handle(ShippingMethod(shipping) if shipping else None)

    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>18} {'Total':>18}")
    click.echo(f"  {'-'*68}")
    for line in dto.lines:
        click.echo(
            f"  {line.display_name:<24} {line.quantity:>5} {line.unit_price:>18} {line.line_total:>18}"
        )
    click.echo(f"  {'-'*68}")
    click.echo(f"  {'Items':<30} {dto.total_item_count:>38}")
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>38}")
    if dto.total is not None:
        click.echo(f"  {'Shipping':<30} {dto.shipping:>38}")
        click.echo(f"  {'Total':<30} {dto.total:>38}")
