"""Tests for the JSON-file-backed product store."""

import json
import logging

import pytest

from smartstock.domain.exceptions import StorageWriteError
from smartstock.domain.model.product import Product, ProductDraft
from smartstock.domain.repository.product_repository import ProductIdGenerator
from smartstock.infrastructure.persistence import json_product_repository
from smartstock.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "data" / "products.json"


def _draft(name="Widget", stock=5, min_stock=10, barcode="111") -> ProductDraft:
    return ProductDraft(name=name, stock=stock, min_stock=min_stock, barcode=barcode)


class TestLoading:

    def test_missing_file_is_empty(self, store_path):
        repo = JsonProductRepository(store_path)
        assert repo.list_all() == []
        assert not store_path.exists()

    def test_reads_external_record_format(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps([
            {"id": "1", "name": "Widget", "stock": 5, "minStock": 10, "barcode": "111"},
        ]), encoding="utf-8")
        repo = JsonProductRepository(store_path)
        assert repo.list_all() == [
            Product(id="1", name="Widget", stock=5, min_stock=10, barcode="111")
        ]

    @pytest.mark.parametrize("content", [
        "{not json",
        '{"id": "1"}',
        '[{"id": "1", "name": "Widget"}]',
        '[{"id": "1", "name": "Widget", "stock": -1, "minStock": 0}]',
        '[{"id": "1", "name": 5, "stock": 1, "minStock": 1}]',
        '[{"id": 1, "name": "Widget", "stock": 1, "minStock": 1}]',
        '[{"id": "1", "name": "Widget", "stock": 1, "minStock": 1, "barcode": null}]',
        '["Widget"]',
    ])
    def test_malformed_content_falls_back_to_empty(self, store_path, content, caplog):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(content, encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            repo = JsonProductRepository(store_path)
        assert repo.list_all() == []
        assert "empty product list" in caplog.text


class TestPersistence:

    def test_add_persists_and_reloads(self, store_path):
        repo = JsonProductRepository(store_path)
        created = repo.add(_draft())

        reloaded = JsonProductRepository(store_path)
        assert reloaded.list_all() == [created]
        raw = json.loads(store_path.read_text(encoding="utf-8"))
        assert raw == [{
            "id": created.id, "name": "Widget", "stock": 5,
            "minStock": 10, "barcode": "111",
        }]

    def test_add_assigns_unique_ids(self, store_path):
        repo = JsonProductRepository(store_path)
        ids = {repo.add(_draft(name=f"P{i}")).id for i in range(5)}
        assert len(ids) == 5

    def test_deleted_id_is_not_reused(self, store_path):
        repo = JsonProductRepository(store_path, ProductIdGenerator(clock=lambda: 0.0))
        repo.add(_draft(name="A"))
        b = repo.add(_draft(name="B"))
        repo.delete(b.id)
        c = repo.add(_draft(name="C"))
        assert c.id != b.id

        reloaded = JsonProductRepository(store_path)
        reloaded.delete(c.id)
        assert reloaded.add(_draft(name="D")).id not in {b.id, c.id}

    def test_update_replaces_in_place(self, store_path):
        repo = JsonProductRepository(store_path)
        first = repo.add(_draft(name="A"))
        repo.add(_draft(name="B"))
        repo.update(first.with_stock_adjusted(10))

        reloaded = JsonProductRepository(store_path)
        assert [p.name for p in reloaded.list_all()] == ["A", "B"]
        assert reloaded.get_by_id(first.id).stock == 15

    def test_update_missing_id_does_not_insert(self, store_path):
        repo = JsonProductRepository(store_path)
        repo.add(_draft())
        repo.update(Product(id="42", name="Ghost", stock=0, min_stock=0))
        assert len(JsonProductRepository(store_path).list_all()) == 1

    def test_delete(self, store_path):
        repo = JsonProductRepository(store_path)
        a = repo.add(_draft(name="A"))
        b = repo.add(_draft(name="B"))
        repo.delete(a.id)
        repo.delete("nope")
        assert JsonProductRepository(store_path).list_all() == [b]

    def test_get_by_barcode_returns_first_match(self, store_path):
        repo = JsonProductRepository(store_path)
        first = repo.add(_draft(name="A", barcode="dup"))
        repo.add(_draft(name="B", barcode="dup"))
        assert repo.get_by_barcode("dup") == first
        assert repo.get_by_barcode("DUP") is None

    def test_clear_all(self, store_path):
        repo = JsonProductRepository(store_path)
        repo.add(_draft())
        repo.clear_all()
        assert JsonProductRepository(store_path).list_all() == []

    def test_import_all_replaces_verbatim(self, store_path):
        repo = JsonProductRepository(store_path, ProductIdGenerator(clock=lambda: 0.0))
        repo.add(_draft())
        incoming = [
            Product(id="abc", name="X", stock=1, min_stock=2, barcode=""),
            Product(id="7", name="Y", stock=3, min_stock=4, barcode="9"),
        ]
        repo.import_all(incoming)
        assert JsonProductRepository(store_path).list_all() == incoming
        assert repo.add(_draft()).id == "8"

    def test_list_is_a_copy(self, store_path):
        repo = JsonProductRepository(store_path)
        repo.add(_draft())
        repo.list_all().clear()
        assert len(repo.list_all()) == 1


class TestWriteFailure:

    def test_failed_write_keeps_memory_and_disk_in_sync(self, store_path, monkeypatch):
        repo = JsonProductRepository(store_path)
        existing = repo.add(_draft(name="A"))

        def _disk_full(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(json_product_repository.os, "replace", _disk_full)

        with pytest.raises(StorageWriteError, match="No space left"):
            repo.add(_draft(name="B"))
        with pytest.raises(StorageWriteError):
            repo.clear_all()

        assert repo.list_all() == [existing]
        monkeypatch.undo()
        assert JsonProductRepository(store_path).list_all() == [existing]
        assert list(store_path.parent.glob("*.tmp")) == []
