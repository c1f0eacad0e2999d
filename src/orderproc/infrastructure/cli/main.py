import logging
from pathlib import Path

import click
import pydantic

from orderproc.infrastructure.cli.catalog_commands import customer_list, product_list
from orderproc.infrastructure.cli.order_commands import order_run, transition_table
from orderproc.infrastructure.settings import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group()
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Catalog JSON file (defaults to $ORDERPROC_CATALOG_PATH or built-in sample data).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to $ORDERPROC_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, catalog: str | None, log_level: str | None) -> None:
    """Order Processing: order lifecycle, notifications and reports."""
    try:
        settings = Settings().override(
            catalog_path=catalog and Path(catalog),
            log_level=log_level and log_level.upper(),
        )
    except pydantic.ValidationError as exc:
        raise click.ClickException(str(exc))

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    ctx.obj = settings


# Register subcommands
cli.add_command(order_run)
cli.add_command(transition_table)
cli.add_command(product_list)
cli.add_command(customer_list)
