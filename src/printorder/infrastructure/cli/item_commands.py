"""CLI commands for print order line items."""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path

import click

from printorder.application.add_item import AddItemHandler
from printorder.application.dto import ItemSpec
from printorder.application.import_items import ImportItemsHandler
from printorder.application.remove_item import RemoveItemHandler
from printorder.application.update_item import UpdateItemHandler
from printorder.domain.exceptions import DomainException
from printorder.infrastructure.bootstrap import order_repository, recalculation_service
from printorder.infrastructure.cli.display import display_order

_SPEC_KEYS = {f.name for f in fields(ItemSpec)}


def _parse_import_file(path: Path) -> list[ItemSpec]:
    """Parse a JSON array of item objects into ItemSpec list."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON in '{path}': {exc}")

    if not isinstance(raw, list):
        raise click.BadParameter(f"'{path}' must contain a JSON array of items.")

    specs: list[ItemSpec] = []
    for index, entry in enumerate(raw, start=1):
        if not isinstance(entry, dict):
            raise click.BadParameter(f"Item {index} in '{path}' is not an object.")
        unknown = set(entry) - _SPEC_KEYS
        if unknown:
            raise click.BadParameter(
                f"Item {index} has unknown keys: {', '.join(sorted(unknown))}"
            )
        specs.append(ItemSpec(**entry))
    return specs


@click.command("add")
@click.option("--order", "order_id", required=True, type=int, help="Order ID.")
@click.option("--name", "design_name", default="", help="Design name.")
@click.option("--height", "design_height", default=None, help="Design height.")
@click.option("--gap", "design_gap", default=None, help="Gap between panels.")
@click.option("--qty", default=None, help="Quantity (panels or length).")
@click.option("--qty-unit", default=None, help="Panel, Inch, Yard or Meter.")
@click.option("--qty-type", default=None, help="Print Qty or Fabric Qty.")
@click.option("--wastage", "wastage_percent", default=None, help="Wastage percentage.")
@click.option("--length-unit", default=None, help="Inch, Yard or Meter.")
@click.option("--stock-unit", default=None, help="Inventory unit of the fabric.")
def item_add(order_id: int, **spec_fields: str | None) -> None:
    """Add a row to an order; unset fields inherit the order defaults."""
    handler = AddItemHandler(
        order_repo=order_repository(),
        recalculation=recalculation_service(),
    )

    try:
        dto = handler.handle(order_id, ItemSpec(**spec_fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("set")
@click.option("--order", "order_id", required=True, type=int, help="Order ID.")
@click.option("--row", "row_id", required=True, type=int, help="Row number.")
@click.option("--field", "field_name", required=True, help="Field to change (e.g. qty, uom, per_wastage).")
@click.option("--value", required=True, help="New value.")
def item_set(order_id: int, row_id: int, field_name: str, value: str) -> None:
    """Change one field of a row."""
    handler = UpdateItemHandler(
        order_repo=order_repository(),
        recalculation=recalculation_service(),
    )

    try:
        dto = handler.handle(order_id, row_id, field_name, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("remove")
@click.option("--order", "order_id", required=True, type=int, help="Order ID.")
@click.option("--row", "row_id", required=True, type=int, help="Row number.")
def item_remove(order_id: int, row_id: int) -> None:
    """Remove a row from an order."""
    handler = RemoveItemHandler(
        order_repo=order_repository(),
        recalculation=recalculation_service(),
    )

    try:
        dto = handler.handle(order_id, row_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("import")
@click.option("--order", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--file",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON array of items.",
)
def item_import(order_id: int, file_path: Path) -> None:
    """Add many rows at once; the order is recalculated once at the end."""
    specs = _parse_import_file(file_path)

    handler = ImportItemsHandler(
        order_repo=order_repository(),
        recalculation=recalculation_service(),
    )

    try:
        dto = handler.handle(order_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Imported {len(specs)} rows into Print Order #{dto.id}")
    display_order(dto)
