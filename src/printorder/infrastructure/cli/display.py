"""Shared formatting for displaying print orders."""

from __future__ import annotations

import click

from printorder.application.dto import PrintOrderDTO


def display_order(dto: PrintOrderDTO) -> None:
    click.echo(f"Print Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    defaults = ", ".join(f"{k}={v}" for k, v in dto.defaults.items() if v and v != "0")
    click.echo(f"Defaults: {defaults or '-'}")
    click.echo()

    header = (
        f"  {'Row':>3} {'Design':<16} {'Qty':>10} {'Unit':<6} {'Type':<10} "
        f"{'Waste%':>7} {'Print':>10} {'Fabric':>10} {'Stock Print':>12} "
        f"{'Stock Fabric':>12} {'Panels':>8}"
    )
    rule = f"  {'-' * (len(header) - 2)}"
    click.echo(header)
    click.echo(rule)
    for item in dto.items:
        click.echo(
            f"  {item.row_id:>3} {item.design_name:<16} {item.qty:>10} "
            f"{item.qty_unit:<6} {item.qty_type:<10} {item.wastage_percent:>7} "
            f"{item.print_length:>10} {item.fabric_length:>10} "
            f"{item.stock_print_length:>12} {item.stock_fabric_length:>12} "
            f"{item.panel_qty:>8}"
        )
    click.echo(rule)
    click.echo(f"  {'Total Print Length':<24} {dto.total_print_length:>12}")
    click.echo(f"  {'Total Fabric Length':<24} {dto.total_fabric_length:>12}")
    click.echo(f"  {'Total Panel Qty':<24} {dto.total_panel_qty:>12}")
