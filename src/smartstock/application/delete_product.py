"""Application service: Delete Product use case."""

from __future__ import annotations

from smartstock.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> bool:
        """Delete a product. Returns False if there was nothing to delete."""
        existed = self._product_repo.get_by_id(product_id) is not None
        self._product_repo.delete(product_id)
        return existed
