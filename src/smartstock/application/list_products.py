"""Application service: List Products use case (query)."""

from __future__ import annotations

from smartstock.domain.model.product import Product
from smartstock.domain.repository.product_repository import ProductRepository
from smartstock.domain.service import stock_report


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, search: str = "") -> list[Product]:
        return stock_report.search(self._product_repo.list_all(), search)
