"""CLI commands for CSV backup and restore."""

from __future__ import annotations

from pathlib import Path

import click

from smartstock.application.backup_products import BackupProductsHandler
from smartstock.application.restore_products import RestoreProductsHandler
from smartstock.domain.exceptions import DomainException
from smartstock.infrastructure.bootstrap import product_repository


@click.command("create")
@click.option(
    "--dir", "out_dir", default=".", show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to write the backup file into.",
)
def backup_create(out_dir: Path) -> None:
    """Write all products to a dated CSV file."""
    handler = BackupProductsHandler(product_repo=product_repository())

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    out_dir.mkdir(parents=True, exist_ok=True)
    target = out_dir / dto.filename
    target.write_text(dto.content, encoding="utf-8")
    click.echo(f"Backed up {dto.product_count} products to {target}")


@click.command("restore")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def backup_restore(csv_file: Path, yes: bool) -> None:
    """Replace ALL products with those in CSV_FILE."""
    handler = RestoreProductsHandler(product_repo=product_repository())

    def _confirm(found: int) -> bool:
        if yes:
            return True
        return click.confirm(
            f"Found {found} products. This will overwrite all current data. Continue?"
        )

    try:
        text = csv_file.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read {csv_file}: {exc}")

    try:
        result = handler.handle(text, confirm=_confirm)
    except DomainException as exc:
        raise click.ClickException(f"Restore failed, nothing was changed. {exc}")

    if result.applied:
        click.echo(f"Data restored successfully! ({result.found} products)")
    else:
        click.echo("Restore cancelled.")
