"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from smartstock.application.dto import DashboardDTO
from smartstock.domain.repository.product_repository import ProductRepository
from smartstock.domain.service import stock_report

DEFAULT_TOP_N = 10


class ShowDashboardHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, top_n: int = DEFAULT_TOP_N) -> DashboardDTO:
        # One snapshot for every figure so they agree with each other
        snapshot = self._product_repo.list_all()
        summary = stock_report.totals(snapshot)
        return DashboardDTO(
            total_products=summary.count,
            total_stock=summary.total_stock,
            low_stock_items=stock_report.low_stock(snapshot),
            top_stocked=stock_report.top_n_by_stock(snapshot, top_n),
        )
