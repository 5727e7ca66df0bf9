"""Read-only views derived from a product snapshot.

Nothing here is cached: every function recomputes from the snapshot it
is given, so a view is always consistent with the list it came from.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from smartstock.domain.model.product import Product
from smartstock.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class StockTotals:
    count: int
    total_stock: int


def low_stock(snapshot: Sequence[Product]) -> list[Product]:
    """Products whose stock is at or below their minimum."""
    return [p for p in snapshot if p.is_low_stock]


def totals(snapshot: Sequence[Product]) -> StockTotals:
    return StockTotals(
        count=len(snapshot),
        total_stock=sum(p.stock for p in snapshot),
    )


def top_n_by_stock(snapshot: Sequence[Product], n: int) -> list[Product]:
    """The ``n`` best-stocked products, highest first.

    ``sorted`` is stable, so products with equal stock keep their
    collection order.
    """
    if n <= 0:
        return []
    return sorted(snapshot, key=lambda p: p.stock, reverse=True)[:n]


def find_by_barcode(repo: ProductRepository, barcode: str) -> Product | None:
    return repo.get_by_barcode(barcode)


def search(snapshot: Sequence[Product], term: str) -> list[Product]:
    """Filter by name (case-insensitive) or barcode (exact case) substring."""
    if not term:
        return list(snapshot)
    lowered = term.lower()
    return [
        p for p in snapshot if lowered in p.name.lower() or term in p.barcode
    ]
