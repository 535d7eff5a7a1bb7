"""CLI commands for checkout and placed orders."""

from __future__ import annotations

import click

from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order_draft import CustomerInfo, OrderDraft, PaymentMethod
from storefront.domain.model.shipping import ShippingMethod
from storefront.infrastructure.bootstrap import (
    cart_service,
    checkout_flow,
    order_repository,
)
from storefront.infrastructure.cli.notifier import ClickNotifier


@click.command("checkout")
@click.option("--name", "full_name", default="", help="Customer full name.")
@click.option("--phone", default="", help="Contact phone.")
@click.option("--email", default=None, help="Contact email (optional).")
@click.option("--address", default="", help="Detailed delivery address.")
@click.option("--region", default="", help="Region (wilaya).")
@click.option("--sub-region", "sub_region", default="", help="Sub-region (commune).")
@click.option("--notes", default=None, help="Extra notes for the order.")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CASH_ON_DELIVERY.value,
    show_default=True,
    help="Payment method.",
)
@click.option(
    "--shipping",
    type=click.Choice([m.value for m in ShippingMethod]),
    default=ShippingMethod.STANDARD.value,
    show_default=True,
    help="Shipping method.",
)
@click.pass_context
def checkout(
    ctx: click.Context,
    full_name: str,
    phone: str,
    email: str | None,
    address: str,
    region: str,
    sub_region: str,
    notes: str | None,
    payment: str,
    shipping: str,
) -> None:
    """Submit the cart as an order."""
    notifier = ClickNotifier()
    service = cart_service(notifier)
    flow = checkout_flow(service, notifier)

    draft = OrderDraft.from_cart(
        service.cart,
        CustomerInfo(
            full_name=full_name,
            phone=phone,
            address=address,
            region=region,
            sub_region=sub_region,
            email=email,
            notes=notes,
        ),
        payment_method=PaymentMethod(payment),
        shipping_method=ShippingMethod(shipping),
    )

    result = flow.submit(draft)
    if result.rejected:
        raise click.ClickException(result.error or "Order submission failed")
    if not result.ok:
        # The notifier has already reported the failure.
        ctx.exit(1)

    click.echo(f"Order {result.order_id} placed  (total={result.total})")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of a placed order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_id}  (payment={dto.payment_status}, delivery={dto.delivery_status})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>18} {'Total':>18}")
    click.echo(f"  {'-'*68}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>18} {item.line_total:>18}"
        )
    click.echo(f"  {'-'*68}")
    click.echo(f"  {'Order Total':<30} {dto.total_amount:>38}")
    click.echo()
    click.echo(dto.notes)
