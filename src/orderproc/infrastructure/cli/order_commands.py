"""CLI commands for processing orders."""

from __future__ import annotations

import click

from orderproc.application.notifiers import CustomerNotifier, LogisticsNotifier
from orderproc.domain.exceptions import DomainException
from orderproc.domain.model.order import OrderStatus, allowed_targets
from orderproc.infrastructure.bootstrap import build_app, read_catalog
from orderproc.infrastructure.settings import Settings

_STATUS_NAMES = [s.value for s in OrderStatus]


@click.command("run")
@click.option(
    "--through",
    type=click.Choice(_STATUS_NAMES, case_sensitive=False),
    default=OrderStatus.SHIPPED.value,
    show_default=True,
    help="Advance every order up to this status.",
)
@click.pass_obj
def order_run(settings: Settings, through: str) -> None:
    """Create the catalog's orders, advance them and print their reports."""
    target = next(s for s in OrderStatus if s.value.lower() == through.lower())

    try:
        seed = read_catalog(settings)
        app = build_app(seed, settings.currency)
        app.dispatcher.subscribe(CustomerNotifier(emit=click.echo))
        app.dispatcher.subscribe(LogisticsNotifier(emit=click.echo))

        orders = app.load_orders(seed)
        if not orders:
            click.echo("No orders in catalog.")
            return

        for order in orders:
            for result in app.process_order.handle(order.id, through=target):
                if not result.success:
                    click.echo(f"Order #{order.id}: {result.error}", err=True)

        for order in orders:
            click.echo()
            click.echo(app.generate_report.handle(order.id))
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("transitions")
def transition_table() -> None:
    """Show the legal status transitions."""
    for status in OrderStatus:
        targets = allowed_targets(status)
        if targets:
            click.echo(f"{status.value:<10} -> {', '.join(t.value for t in targets)}")
        else:
            click.echo(f"{status.value:<10} (terminal)")
