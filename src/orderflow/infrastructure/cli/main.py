import logging

import click

from orderflow.infrastructure.bootstrap import settings
from orderflow.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_replace_lines,
    order_search,
    order_show,
    order_status,
    order_update,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override ORDERFLOW_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """orderflow: order lifecycle management"""
    level = (log_level or settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_replace_lines)
order.add_command(order_search)
order.add_command(order_show)
order.add_command(order_status)
order.add_command(order_update)
