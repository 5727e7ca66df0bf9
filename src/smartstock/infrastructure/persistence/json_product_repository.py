"""JSON-file-backed implementation of ProductRepository.

The whole collection lives in one file (the store's fixed key) as a JSON
array of ``{"id", "name", "stock", "minStock", "barcode"}`` objects. The
file is read once on construction; afterwards the in-memory snapshot is
authoritative and every mutation rewrites the file in full.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from smartstock.domain.exceptions import (
    StorageReadError,
    StorageWriteError,
    ValidationError,
)
from smartstock.domain.model.product import Product, ProductDraft
from smartstock.domain.repository.product_repository import (
    ProductIdGenerator,
    ProductRepository,
)

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(
        self, file_path: Path, id_generator: ProductIdGenerator | None = None
    ) -> None:
        self._file_path = file_path
        self._id_generator = id_generator or ProductIdGenerator()
        try:
            self._products = self._load()
        except StorageReadError as exc:
            logger.warning("Starting with an empty product list: %s", exc)
            self._products = []

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return list(self._products)

    def add(self, draft: ProductDraft) -> Product:
        product = Product.from_draft(self._id_generator.next_id(self._products), draft)
        if any(p.id == product.id for p in self._products):
            raise RuntimeError(f"Generated product id {product.id!r} already in use")
        self._commit([*self._products, product])
        return product

    def update(self, product: Product) -> None:
        if not any(p.id == product.id for p in self._products):
            logger.debug("update: no product with id %s, ignoring", product.id)
            return
        self._commit([product if p.id == product.id else p for p in self._products])

    def delete(self, product_id: str) -> None:
        remaining = [p for p in self._products if p.id != product_id]
        if len(remaining) == len(self._products):
            logger.debug("delete: no product with id %s, ignoring", product_id)
            return
        self._commit(remaining)

    def clear_all(self) -> None:
        self._commit([])
        logger.info("Cleared all products")

    def import_all(self, products: Sequence[Product]) -> None:
        self._commit(list(products))
        logger.info("Replaced product list with %d imported products", len(products))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "stock": product.stock,
            "minStock": product.min_stock,
            "barcode": product.barcode,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            stock=raw["stock"],
            min_stock=raw["minStock"],
            barcode=raw.get("barcode", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> list[Product]:
        if not self._file_path.exists():
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageReadError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(raw, list):
            raise StorageReadError(f"{self._file_path} does not hold a JSON array")
        try:
            products = [self._to_domain(item) for item in raw]
        except (KeyError, TypeError, ValidationError) as exc:
            raise StorageReadError(
                f"Malformed product record in {self._file_path}: {exc}"
            ) from exc
        if len({p.id for p in products}) != len(products):
            raise StorageReadError(f"Duplicate product ids in {self._file_path}")
        return products

    def _commit(self, products: list[Product]) -> None:
        """Write ``products`` durably, then make them the current snapshot."""
        self._persist([self._to_raw(p) for p in products])
        self._products = products

    def _persist(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2) + "\n"
        tmp_name = None
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".products-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            logger.error("Failed to save products to %s: %s", self._file_path, exc)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(f"Could not save products: {exc}") from exc
