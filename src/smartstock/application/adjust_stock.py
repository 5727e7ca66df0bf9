"""Application service: Adjust Stock use case (the +/- buttons)."""

from __future__ import annotations

from smartstock.domain.exceptions import EntityNotFoundError
from smartstock.domain.model.product import Product
from smartstock.domain.repository.product_repository import ProductRepository


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, delta: int) -> Product:
        """Add ``delta`` (possibly negative) to stock; never goes below zero."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        adjusted = product.with_stock_adjusted(delta)
        self._product_repo.update(adjusted)
        return adjusted
