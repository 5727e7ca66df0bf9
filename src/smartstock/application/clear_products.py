"""Application service: Clear Products use case."""

from __future__ import annotations

from smartstock.domain.repository.product_repository import ProductRepository


class ClearProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> int:
        """Delete every product. Returns how many were removed."""
        removed = len(self._product_repo.list_all())
        self._product_repo.clear_all()
        return removed
