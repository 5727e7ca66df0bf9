"""Application service: Backup Products use case."""

from __future__ import annotations

from datetime import date

from smartstock.application.dto import BackupDTO
from smartstock.domain.exceptions import ValidationError
from smartstock.domain.repository.product_repository import ProductRepository
from smartstock.domain.service.csv_codec import backup_filename, export_products


class BackupProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, today: date | None = None) -> BackupDTO:
        products = self._product_repo.list_all()
        if not products:
            raise ValidationError("No products to back up.")
        return BackupDTO(
            filename=backup_filename(today or date.today()),
            content=export_products(products),
            product_count=len(products),
        )
