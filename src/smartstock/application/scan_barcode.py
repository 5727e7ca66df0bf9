"""Application service: Scan Barcode use case.

A scanner hands over one decoded string per detected code. A known
barcode routes to editing that product; an unknown one routes to
creating a product with the barcode already filled in.
"""

from __future__ import annotations

from smartstock.application.dto import ScanResultDTO
from smartstock.domain.exceptions import ValidationError
from smartstock.domain.repository.product_repository import ProductRepository
from smartstock.domain.service import stock_report


class ScanBarcodeHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, barcode: str) -> ScanResultDTO:
        if not barcode:
            raise ValidationError("Scanned barcode is empty")
        product = stock_report.find_by_barcode(self._product_repo, barcode)
        return ScanResultDTO(barcode=barcode, product=product)
