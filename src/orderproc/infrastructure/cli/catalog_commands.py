"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from orderproc.domain.exceptions import DomainException
from orderproc.infrastructure.bootstrap import build_app, read_catalog
from orderproc.infrastructure.settings import Settings


@click.command("products")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        app = build_app(read_catalog(settings), settings.currency)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    products = app.products.list_all()
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<15} {'Price':>15}")
    click.echo("-" * 59)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<15} {str(p.price):>15}")


@click.command("customers")
@click.pass_obj
def customer_list(settings: Settings) -> None:
    """List all customers in the catalog."""
    try:
        app = build_app(read_catalog(settings), settings.currency)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    customers = app.customers.list_all()
    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<30}")
    click.echo("-" * 58)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<20} {c.email:<30}")
