"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from fulfillment.application.add_product import AddProductHandler
from fulfillment.application.list_products import ListProductsHandler
from fulfillment.domain.exceptions import DomainException
from fulfillment.domain.model.product import ProductType, as_utc
from fulfillment.infrastructure.bootstrap import product_repository


def _as_utc(value: datetime | None) -> datetime | None:
    """click.DateTime yields naive values; they are taken as UTC."""
    return as_utc(value) if value is not None else None


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option(
    "--type",
    "product_type",
    required=True,
    type=click.Choice([t.value for t in ProductType], case_sensitive=False),
    help="Lifecycle policy.",
)
@click.option("--available", default=0, show_default=True, type=int, help="Units in stock.")
@click.option("--lead-time", default=0, show_default=True, type=int, help="Days until restock.")
@click.option("--expiry-date", type=click.DateTime(), default=None, help="EXPIRABLE only.")
@click.option("--season-start", type=click.DateTime(), default=None, help="SEASONAL only.")
@click.option("--season-end", type=click.DateTime(), default=None, help="SEASONAL only.")
def product_add(
    name: str,
    product_type: str,
    available: int,
    lead_time: int,
    expiry_date: datetime | None,
    season_start: datetime | None,
    season_end: datetime | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            product_type=product_type,
            available=available,
            lead_time=lead_time,
            expiry_date=_as_utc(expiry_date),
            season_start_date=_as_utc(season_start),
            season_end_date=_as_utc(season_end),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added "
        f"({product.type.value}, {product.available} available)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<5} {'Name':<20} {'Type':<10} {'Avail':>6} {'Lead':>5} "
        f"{'Expires':<11} {'Season'}"
    )
    click.echo("-" * 84)
    for p in products:
        click.echo(
            f"{p.id:<5} {p.name:<20} {p.type:<10} {p.available:>6} {p.lead_time:>5} "
            f"{p.expiry_date:<11} {p.season}"
        )
