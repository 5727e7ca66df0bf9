"""Product entity, the only thing the inventory tracks.

A product carries its on-hand stock, the minimum level below (or at)
which it is considered low, and a barcode used for scanner lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from smartstock.domain.exceptions import ValidationError


def _check_text(field_name: str, value: object) -> None:
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be text, got {type(value).__name__}"
        )


def _check_count(field_name: str, value: object) -> None:
    # bool is an int subclass; True is not a stock level
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{field_name} cannot be negative, got {value}")


@dataclass(frozen=True)
class ProductDraft:
    """A product that has not been given an id yet (input to ``add``)."""

    name: str
    stock: int = 0
    min_stock: int = 0
    barcode: str = ""

    def __post_init__(self) -> None:
        _check_text("Product name", self.name)
        _check_text("Barcode", self.barcode)
        if not self.name.strip():
            raise ValidationError("Product name is required")
        _check_count("Stock", self.stock)
        _check_count("Minimum stock", self.min_stock)


@dataclass(frozen=True)
class Product:
    """A tracked product.

    Invariants:
    - ``id``, ``name`` and ``barcode`` are strings; ``id`` and ``name`` are non-empty
    - ``stock`` and ``min_stock`` are non-negative integers

    Frozen so a product handed out by a store can never drift from the
    store's snapshot; edits produce a new instance that is passed back
    through ``ProductRepository.update``.
    """

    id: str
    name: str
    stock: int
    min_stock: int
    barcode: str = ""

    def __post_init__(self) -> None:
        _check_text("Product id", self.id)
        _check_text("Product name", self.name)
        _check_text("Barcode", self.barcode)
        if not self.id:
            raise ValidationError("Product id is required")
        if not self.name.strip():
            raise ValidationError("Product name is required")
        _check_count("Stock", self.stock)
        _check_count("Minimum stock", self.min_stock)

    @classmethod
    def from_draft(cls, product_id: str, draft: ProductDraft) -> Product:
        return cls(
            id=product_id,
            name=draft.name,
            stock=draft.stock,
            min_stock=draft.min_stock,
            barcode=draft.barcode,
        )

    @property
    def is_low_stock(self) -> bool:
        """True when stock has reached the minimum (equality counts)."""
        return self.stock <= self.min_stock

    def with_stock_adjusted(self, delta: int) -> Product:
        """Return a copy with ``delta`` applied to stock, floored at zero."""
        return replace(self, stock=max(0, self.stock + delta))

    def with_details(
        self, name: str, stock: int, min_stock: int, barcode: str
    ) -> Product:
        """Return a copy with every field except ``id`` replaced."""
        return replace(
            self, name=name, stock=stock, min_stock=min_stock, barcode=barcode
        )
