import click

from fulfillment.infrastructure.cli.order_commands import (
    order_create,
    order_process,
    order_show,
)
from fulfillment.infrastructure.cli.product_commands import product_add, product_list
from fulfillment.infrastructure.config import get_settings
from fulfillment.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Order fulfillment: stock policies for normal, seasonal and expirable products"""
    configure_logging(get_settings())


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_process)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
