"""Application service: Restore Products use case.

Restoring is destructive: the current collection is replaced, never
merged. The file is parsed and validated in full first, so a bad file
leaves the store exactly as it was.
"""

from __future__ import annotations

from collections.abc import Callable

from smartstock.application.dto import RestoreResultDTO
from smartstock.domain.repository.product_repository import ProductRepository
from smartstock.domain.service.csv_codec import parse_products


class RestoreProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        text: str,
        confirm: Callable[[int], bool] | None = None,
    ) -> RestoreResultDTO:
        """Replace all products with those in ``text``.

        ``confirm`` receives the number of products found and may veto
        the restore; without it the restore is applied unconditionally.
        """
        products = parse_products(text)
        if confirm is not None and not confirm(len(products)):
            return RestoreResultDTO(found=len(products), applied=False)

        self._product_repo.import_all(products)
        return RestoreResultDTO(found=len(products), applied=True)
