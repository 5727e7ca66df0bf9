"""CLI command for the stock dashboard."""

from __future__ import annotations

import click

from smartstock.application.show_dashboard import DEFAULT_TOP_N, ShowDashboardHandler
from smartstock.infrastructure.bootstrap import product_repository


@click.command("dashboard")
@click.option("--top", "top_n", default=DEFAULT_TOP_N, show_default=True,
              type=click.IntRange(min=0), help="How many best-stocked products to show.")
def dashboard(top_n: int) -> None:
    """Show stock totals, low-stock alerts and the best-stocked products."""
    handler = ShowDashboardHandler(product_repo=product_repository())
    dto = handler.handle(top_n=top_n)

    click.echo(f"Total products:    {dto.total_products}")
    click.echo(f"Total stock:       {dto.total_stock}")
    click.echo(f"Low stock alerts:  {dto.low_stock_count}")
    click.echo()

    click.echo("Low stock")
    click.echo("-" * 38)
    if dto.low_stock_items:
        for item in dto.low_stock_items:
            click.echo(f"{item.name:<20} Stock: {item.stock} (Min: {item.min_stock})")
    else:
        click.echo("No low stock items. Great job!")
    click.echo()

    if dto.top_stocked:
        click.echo(f"{'Top stocked':<20} {'Stock':>7} {'Min':>7}")
        click.echo("-" * 38)
        for item in dto.top_stocked:
            click.echo(f"{item.name:<20} {item.stock:>7} {item.min_stock:>7}")
