"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from lessonshop.application.dto import OrderLineSpec, OrderRequest
from lessonshop.application.list_orders import ListOrdersHandler
from lessonshop.application.place_order import PlaceOrderHandler
from lessonshop.application.show_order import ShowOrderHandler
from lessonshop.domain.exceptions import DomainException
from lessonshop.infrastructure import bootstrap


def _parse_items(raw: str) -> list[OrderLineSpec]:
    """Parse 'LESSON_ID:2,LESSON_ID:1' into OrderLineSpec list."""
    specs: list[OrderLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'LessonID:Quantity'."
            )
        lesson_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for lesson '{lesson_id}'."
            )
        specs.append(OrderLineSpec(lesson_id=lesson_id.strip(), quantity=qty))
    return specs


@click.command("place")
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--address", required=True)
@click.option("--city", required=True)
@click.option("--country", required=True)
@click.option("--postcode", required=True)
@click.option("--phone", required=True)
@click.option("--email", required=True)
@click.option("--items", required=True, help="Items as 'LessonID:Qty,LessonID:Qty'.")
@click.option("--payment", "payment_method", default="card", show_default=True,
              help="Payment method: card, paypal or anything else.")
@click.option("--card-last4", default=None, help="Last four card digits.")
@click.option("--card-brand", default=None, help="Card brand, e.g. Visa.")
@click.pass_obj
def order_place(store, items: str, **fields) -> None:
    """Place an order, taking seats from every listed lesson."""
    request = OrderRequest(lines=_parse_items(items), **fields)
    handler = PlaceOrderHandler(bootstrap.unit_of_work(store))

    try:
        result = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {result.order_id} placed  (total={result.total})")
    click.echo(f"Payment: {result.payment_status} - {result.payment_message}")


@click.command("list")
@click.pass_obj
def order_list(store) -> None:
    """List all orders."""
    orders = ListOrdersHandler(bootstrap.order_repository(store)).handle()

    if not orders:
        click.echo("No orders found.")
        return

    for dto in orders:
        name = f"{dto.customer['first_name']} {dto.customer['last_name']}"
        click.echo(f"Order {dto.id}  {dto.created_at}  {name}  payment={dto.payment_status}")
        for item in dto.items:
            click.echo(
                f"  {item.topic:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
            )
        click.echo(f"  {'Order Total':<27} {dto.total:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def order_show(store, order_id: str) -> None:
    """Show details of a single order."""
    try:
        dto = ShowOrderHandler(bootstrap.order_repository(store)).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    customer = dto.customer
    click.echo(f"Order:    {dto.id}")
    click.echo(f"Placed:   {dto.created_at}")
    click.echo(f"Customer: {customer['first_name']} {customer['last_name']} <{customer['email']}>")
    click.echo(f"Address:  {customer['address']}, {customer['city']}, {customer['postcode']}, {customer['country']}")
    click.echo(f"Payment:  {dto.payment_method} {dto.payment_status} - {dto.payment_message}")
    click.echo("")
    click.echo(f"  {'Lesson':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    for item in dto.items:
        click.echo(
            f"  {item.topic:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'Order Total':<37} {dto.total:>10}")
