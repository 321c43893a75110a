"""CLI commands for the PrintOrder aggregate."""

from __future__ import annotations

import click

from printorder.application.create_order import CreatePrintOrderHandler
from printorder.application.dto import OrderDefaultsSpec
from printorder.application.recalculate_order import RecalculateOrderHandler
from printorder.application.show_order import (
    ListPrintOrdersHandler,
    ShowPrintOrderHandler,
)
from printorder.application.update_default import UpdateDefaultHandler
from printorder.domain.exceptions import DomainException
from printorder.infrastructure.bootstrap import order_repository, recalculation_service
from printorder.infrastructure.cli.display import display_order


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--gap", default=None, help="Default gap between panels.")
@click.option("--qty", default=None, help="Default quantity.")
@click.option("--qty-unit", default=None, help="Default quantity unit (Panel, Inch, Yard, Meter).")
@click.option("--qty-type", default=None, help="Default quantity type (Print Qty, Fabric Qty).")
@click.option("--wastage", default=None, help="Default wastage percentage.")
@click.option("--length-unit", default=None, help="Default length unit (Inch, Yard, Meter).")
def order_create(
    customer: str,
    gap: str | None,
    qty: str | None,
    qty_unit: str | None,
    qty_type: str | None,
    wastage: str | None,
    length_unit: str | None,
) -> None:
    """Create a new, empty print order."""
    handler = CreatePrintOrderHandler(
        order_repo=order_repository(),
        recalculation=recalculation_service(),
    )
    defaults = OrderDefaultsSpec(
        gap=gap,
        qty=qty,
        qty_unit=qty_unit,
        qty_type=qty_type,
        wastage=wastage,
        length_unit=length_unit,
    )

    try:
        dto = handler.handle(customer_name=customer, defaults=defaults)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Print Order #{dto.id} created for {dto.customer_name}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show an order with its rows and totals."""
    handler = ShowPrintOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all print orders."""
    dtos = ListPrintOrdersHandler(order_repo=order_repository()).handle()

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Rows':>5} {'Print':>12} {'Fabric':>12}")
    click.echo("-" * 59)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.customer_name:<20} {len(dto.items):>5} "
            f"{dto.total_print_length:>12} {dto.total_fabric_length:>12}"
        )


@click.command("set-default")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--field", "field_name", required=True, help="Default to change (e.g. gap, qty_unit, wastage).")
@click.option("--value", required=True, help="New value; empty clears it.")
def order_set_default(order_id: int, field_name: str, value: str) -> None:
    """Change an order default and cascade it into every row."""
    handler = UpdateDefaultHandler(
        order_repo=order_repository(),
        recalculation=recalculation_service(),
    )

    try:
        dto = handler.handle(order_id, field_name, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("recalculate")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_recalculate(order_id: int) -> None:
    """Recompute every row and the order totals."""
    handler = RecalculateOrderHandler(
        order_repo=order_repository(),
        recalculation=recalculation_service(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
