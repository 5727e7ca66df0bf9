import logging

import click

from smartstock.infrastructure.cli.backup_commands import backup_create, backup_restore
from smartstock.infrastructure.cli.dashboard_commands import dashboard
from smartstock.infrastructure.cli.product_commands import (
    product_add,
    product_adjust,
    product_clear,
    product_delete,
    product_list,
    product_scan,
    product_show,
    product_update,
)
from smartstock.infrastructure.cli.settings_commands import theme_set, theme_show, theme_toggle


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """SmartStock inventory tracker."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def backup() -> None:
    """Back up and restore products as CSV."""


@cli.group()
def theme() -> None:
    """Manage the display theme preference."""


# Register subcommands
cli.add_command(dashboard)
product.add_command(product_add)
product.add_command(product_adjust)
product.add_command(product_clear)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_scan)
product.add_command(product_show)
product.add_command(product_update)
backup.add_command(backup_create)
backup.add_command(backup_restore)
theme.add_command(theme_set)
theme.add_command(theme_show)
theme.add_command(theme_toggle)
