"""CLI commands for products."""

from __future__ import annotations

import click

from smartstock.application.add_product import AddProductHandler
from smartstock.application.adjust_stock import AdjustStockHandler
from smartstock.application.clear_products import ClearProductsHandler
from smartstock.application.delete_product import DeleteProductHandler
from smartstock.application.list_products import ListProductsHandler
from smartstock.application.scan_barcode import ScanBarcodeHandler
from smartstock.application.update_product import UpdateProductHandler
from smartstock.domain.exceptions import DomainException
from smartstock.domain.model.product import Product
from smartstock.infrastructure.bootstrap import product_repository

_COUNT = click.IntRange(min=0)


def _display_products(products: list[Product]) -> None:
    click.echo(f"{'ID':<14} {'Name':<20} {'Stock':>7} {'Min':>7}  {'Barcode':<14}")
    click.echo("-" * 66)
    for p in products:
        flag = "  LOW" if p.is_low_stock else ""
        click.echo(
            f"{p.id:<14} {p.name:<20} {p.stock:>7} {p.min_stock:>7}  {p.barcode:<14}{flag}"
        )


def _display_product(p: Product) -> None:
    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"Stock:    {p.stock}" + ("  (low stock)" if p.is_low_stock else ""))
    click.echo(f"Minimum:  {p.min_stock}")
    click.echo(f"Barcode:  {p.barcode or '-'}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--stock", default=0, type=_COUNT, show_default=True, help="Quantity on hand.")
@click.option("--min-stock", default=0, type=_COUNT, show_default=True, help="Low-stock threshold.")
@click.option("--barcode", default="", help="Barcode for scanner lookups.")
def product_add(name: str, stock: int, min_stock: int, barcode: str) -> None:
    """Add a new product."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, stock=stock, min_stock=min_stock, barcode=barcode)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added with stock {product.stock}")


@click.command("list")
@click.option("--search", default="", help="Filter by name or barcode.")
def product_list(search: str) -> None:
    """List products."""
    handler = ListProductsHandler(product_repo=product_repository())
    products = handler.handle(search=search)

    if not products:
        click.echo("No products found.")
        return

    _display_products(products)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    product = product_repository().get_by_id(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")
    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--stock", default=None, type=_COUNT, help="New quantity on hand.")
@click.option("--min-stock", default=None, type=_COUNT, help="New low-stock threshold.")
@click.option("--barcode", default=None, help="New barcode.")
def product_update(
    product_id: str,
    name: str | None,
    stock: int | None,
    min_stock: int | None,
    barcode: str | None,
) -> None:
    """Edit an existing product."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            stock=stock,
            min_stock=min_stock,
            barcode=barcode,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated.")


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--by", "delta", required=True, type=int, help="Amount to add (negative to remove).")
def product_adjust(product_id: str, delta: int) -> None:
    """Increase or decrease stock (never below zero)."""
    handler = AdjustStockHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, delta=delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} stock is now {product.stock}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def product_delete(product_id: str, yes: bool) -> None:
    """Delete a product."""
    if not yes:
        click.confirm("Are you sure you want to delete this product?", abort=True)

    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        existed = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if existed:
        click.echo(f"Product #{product_id} deleted.")
    else:
        click.echo(f"No product with ID '{product_id}'; nothing deleted.")


@click.command("clear")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def product_clear(yes: bool) -> None:
    """Delete ALL products."""
    if not yes:
        click.confirm(
            "Are you sure you want to delete all product data? This action cannot be undone.",
            abort=True,
        )

    handler = ClearProductsHandler(product_repo=product_repository())

    try:
        removed = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"All product data has been cleared ({removed} removed).")


@click.command("scan")
@click.option("--barcode", required=True, help="Decoded barcode from the scanner.")
def product_scan(barcode: str) -> None:
    """Look up a scanned barcode."""
    handler = ScanBarcodeHandler(product_repo=product_repository())

    try:
        result = handler.handle(barcode)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.is_known:
        _display_product(result.product)
        click.echo()
        click.echo(f"Edit with: smartstock product update --id {result.product.id} ...")
    else:
        click.echo(f"No product with barcode '{result.barcode}'.")
        click.echo(f"Create with: smartstock product add --barcode {result.barcode} --name ...")
