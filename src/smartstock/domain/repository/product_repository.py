"""Abstract store for the Product collection.

Defined in the domain layer so the domain never depends on
infrastructure. Callers receive a ProductRepository explicitly, which
lets tests swap in an in-memory fake.

Every mutator replaces the whole snapshot: an implementation must make
the new collection durable *before* it becomes visible to readers, and
must leave the previous snapshot in place if the write fails.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence

from smartstock.domain.model.product import Product, ProductDraft


class ProductIdGenerator:
    """Issues product ids from the wall clock, in milliseconds.

    Ids only ever grow: each one is at least the clock reading, above every id this
    generator has issued before, and above every numeric id in the
    snapshot it is given. Deleting the newest product therefore never
    frees its id for the next ``add``. Non-numeric ids (possible after a
    restore) cannot collide with a numeric one.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last_issued = 0

    def next_id(self, existing: Iterable[Product]) -> str:
        highest = self._last_issued
        for product in existing:
            if product.id.isascii() and product.id.isdigit():
                highest = max(highest, int(product.id))
        issued = max(int(self._clock() * 1000), highest + 1)
        self._last_issued = issued
        return str(issued)


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return the current snapshot in insertion order."""

    @abstractmethod
    def add(self, draft: ProductDraft) -> Product:
        """Assign a fresh id, append, persist and return the new product."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace the entry with the same id; no-op when there is none."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove the entry with this id; no-op when there is none."""

    @abstractmethod
    def clear_all(self) -> None:
        """Replace the collection with an empty one."""

    @abstractmethod
    def import_all(self, products: Sequence[Product]) -> None:
        """Replace the collection with ``products`` verbatim."""

    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its id, or None if not found."""
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None

    def get_by_barcode(self, barcode: str) -> Product | None:
        """Return the first product (in list order) with exactly this barcode."""
        for product in self.list_all():
            if product.barcode == barcode:
                return product
        return None
