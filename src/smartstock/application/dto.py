"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry query results from the application layer to the CLI
without the CLI having to know how they were computed.
"""

from __future__ import annotations

from dataclasses import dataclass

from smartstock.domain.model.product import Product


@dataclass(frozen=True)
class DashboardDTO:
    total_products: int
    total_stock: int
    low_stock_items: list[Product]
    top_stocked: list[Product]

    @property
    def low_stock_count(self) -> int:
        return len(self.low_stock_items)


@dataclass(frozen=True)
class ScanResultDTO:
    """Outcome of a barcode scan.

    A known barcode carries the matching product (edit it); an unknown
    one carries only the barcode, to prefill a new product.
    """

    barcode: str
    product: Product | None = None

    @property
    def is_known(self) -> bool:
        return self.product is not None


@dataclass(frozen=True)
class BackupDTO:
    filename: str
    content: str
    product_count: int


@dataclass(frozen=True)
class RestoreResultDTO:
    found: int
    applied: bool
