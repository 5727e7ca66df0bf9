"""Application service: Add Product use case."""

from __future__ import annotations

from smartstock.domain.model.product import Product, ProductDraft
from smartstock.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, name: str, stock: int = 0, min_stock: int = 0, barcode: str = ""
    ) -> Product:
        """Add a new product; the store assigns its id."""
        draft = ProductDraft(
            name=name.strip(), stock=stock, min_stock=min_stock, barcode=barcode.strip()
        )
        return self._product_repo.add(draft)
