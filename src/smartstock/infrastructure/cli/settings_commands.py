"""CLI commands for the theme preference."""

from __future__ import annotations

import click

from smartstock.domain.exceptions import DomainException
from smartstock.infrastructure.bootstrap import settings_repository
from smartstock.infrastructure.persistence.json_settings_repository import THEMES


@click.command("show")
def theme_show() -> None:
    """Show the current theme."""
    click.echo(settings_repository().get_theme())


@click.command("set")
@click.argument("name", type=click.Choice(THEMES))
def theme_set(name: str) -> None:
    """Set the theme."""
    try:
        settings_repository().set_theme(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Theme set to {name}")


@click.command("toggle")
def theme_toggle() -> None:
    """Switch between light and dark."""
    try:
        theme = settings_repository().toggle_theme()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Theme set to {theme}")
