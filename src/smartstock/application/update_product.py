"""Application service: Update Product use case (the edit screen)."""

from __future__ import annotations

from smartstock.domain.exceptions import EntityNotFoundError
from smartstock.domain.model.product import Product
from smartstock.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        stock: int | None = None,
        min_stock: int | None = None,
        barcode: str | None = None,
    ) -> Product:
        """Replace the given fields of an existing product.

        Fields left as None keep their current value. The store treats
        an unknown id as a no-op, so the lookup happens here to give the
        user a clear message instead of silently doing nothing.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        updated = product.with_details(
            name=product.name if name is None else name.strip(),
            stock=product.stock if stock is None else stock,
            min_stock=product.min_stock if min_stock is None else min_stock,
            barcode=product.barcode if barcode is None else barcode.strip(),
        )
        self._product_repo.update(updated)
        return updated
