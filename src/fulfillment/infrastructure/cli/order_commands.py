"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from fulfillment.application.create_order import CreateOrderHandler
from fulfillment.application.dto import OrderDTO
from fulfillment.application.process_order import ProcessOrderHandler
from fulfillment.application.show_order import ShowOrderHandler
from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import (
    order_repository,
    product_policy_service,
    product_repository,
)


def _parse_product_ids(raw: str) -> list[int]:
    """Parse '1,1,2' into [1, 1, 2]; a repeated ID buys another unit."""
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(
                f"Invalid product ID '{part}'. Expected a comma-separated list of integers."
            )
    return ids


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  ({dto.unit_count} units)")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'ID':<5} {'Product':<20} {'Units':>6}")
    click.echo(f"  {'-'*33}")
    for line in dto.lines:
        click.echo(f"  {line.product_id:<5} {line.product_name:<20} {line.units:>6}")


@click.command("create")
@click.option("--products", required=True, help="Product IDs, one per unit: '1,1,2'.")
def order_create(products: str) -> None:
    """Create a new order."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(product_ids=_parse_product_ids(products))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
def order_process(order_id: int) -> None:
    """Process an order: sell each unit or notify why it cannot be sold."""
    product_repo = product_repository()
    handler = ProcessOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repo,
        policy_service=product_policy_service(product_repo),
    )

    try:
        processed_id = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{processed_id} processed.")
