import logging

import click

from printorder.infrastructure.cli.item_commands import (
    item_add,
    item_import,
    item_remove,
    item_set,
)
from printorder.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_recalculate,
    order_set_default,
    order_show,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log calculation details.")
def cli(verbose: bool) -> None:
    """Print Order — panel and fabric length calculator"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage print orders."""


@cli.group()
def item() -> None:
    """Manage order rows."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_recalculate)
order.add_command(order_set_default)
order.add_command(order_show)
item.add_command(item_add)
item.add_command(item_import)
item.add_command(item_remove)
item.add_command(item_set)
