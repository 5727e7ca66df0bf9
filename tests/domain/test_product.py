"""Unit tests for the Product entity."""

import pytest

from smartstock.domain.exceptions import ValidationError
from smartstock.domain.model.product import Product, ProductDraft


def _widget(**overrides) -> Product:
    fields = dict(id="1", name="Widget", stock=5, min_stock=10, barcode="111")
    fields.update(overrides)
    return Product(**fields)


class TestProductInvariants:

    def test_valid_product(self):
        p = _widget()
        assert p.stock == 5
        assert p.min_stock == 10

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            _widget(stock=-1)

    def test_negative_min_stock_rejected(self):
        with pytest.raises(ValidationError, match="Minimum stock cannot be negative"):
            _widget(min_stock=-3)

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _widget(stock=2.5)

    def test_bool_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _widget(stock=True)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _widget(name="   ")

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError, match="id is required"):
            _widget(id="")

    def test_integer_id_rejected(self):
        with pytest.raises(ValidationError, match="Product id must be text"):
            _widget(id=1)

    def test_non_text_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name must be text"):
            _widget(name=5)

    def test_non_text_barcode_rejected(self):
        with pytest.raises(ValidationError, match="Barcode must be text"):
            _widget(barcode=None)

    def test_draft_validates_too(self):
        with pytest.raises(ValidationError):
            ProductDraft(name="Gadget", stock=-5)


class TestLowStock:

    def test_below_minimum_is_low(self):
        assert _widget(stock=5, min_stock=10).is_low_stock

    def test_equal_to_minimum_is_low(self):
        assert _widget(stock=10, min_stock=10).is_low_stock

    def test_above_minimum_is_not_low(self):
        assert not _widget(stock=11, min_stock=10).is_low_stock

    def test_zero_zero_is_low(self):
        assert _widget(stock=0, min_stock=0).is_low_stock


class TestStockAdjust:

    def test_increase(self):
        assert _widget(stock=5).with_stock_adjusted(3).stock == 8

    def test_decrease_clamps_at_zero(self):
        assert _widget(stock=2).with_stock_adjusted(-5).stock == 0

    def test_original_unchanged(self):
        p = _widget(stock=5)
        p.with_stock_adjusted(1)
        assert p.stock == 5

    def test_with_details_keeps_id(self):
        p = _widget().with_details(name="Sprocket", stock=1, min_stock=2, barcode="999")
        assert p.id == "1"
        assert p.name == "Sprocket"
        assert p.barcode == "999"
