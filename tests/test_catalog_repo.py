"""
Tests for catalog loading and scoping.
"""

import pytest

from core import catalog_repo
from core.catalog_repo import (
    CatalogError,
    load_catalog_csv,
    load_catalog_mongo,
    scope_catalog,
    storage_key,
)
from core.schemas import CatalogItem


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    def sort(self, field, direction):
        return FakeCursor(sorted(self.docs, key=lambda d: d.get(field) or 0, reverse=direction < 0))

    def __iter__(self):
        return iter(self.docs)


class FakeCollection:
    def __init__(self, docs):
        self.docs = docs
        self.queries = []

    def find(self, query, projection=None):
        self.queries.append(query)
        return FakeCursor([d for d in self.docs if d.get("catalog_type") == query["catalog_type"]])


class TestScoping:

    def test_scope_takes_first_items(self, catalog):
        assert [item.id for item in scope_catalog(catalog, 3)] == [1, 2, 3]
        assert len(scope_catalog(catalog, 50)) == 5
        assert scope_catalog(catalog, 0) == []

    def test_storage_key(self):
        assert storage_key("kanji", 5) == "kanji-5"
        assert storage_key("vocab", 12) != storage_key("vocab", 11)


class TestCsvCatalog:

    def test_load_csv(self, tmp_path):
        path = tmp_path / "kanji.csv"
        path.write_text(
            "id,prompt,answer\n"
            "1,日,day\n"
            "2,月,moon\n"
            "2,火,duplicate\n"
            "3,,missing prompt\n"
            "x,水,bad id\n"
            "4,木, tree \n",
            encoding="utf-8",
        )

        items = load_catalog_csv(path)

        assert items == [
            CatalogItem(id=1, prompt="日", answer="day"),
            CatalogItem(id=2, prompt="月", answer="moon"),
            CatalogItem(id=4, prompt="木", answer="tree"),
        ]

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "broken.csv"
        path.write_text("id,term\n1,日\n", encoding="utf-8")

        with pytest.raises(CatalogError, match="answer"):
            load_catalog_csv(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog_csv(tmp_path / "nope.csv")

    @pytest.mark.parametrize("catalog_type", ["kanji", "vocab"])
    def test_bundled_catalogs_load(self, catalog_type, monkeypatch):
        monkeypatch.delenv("CATALOG_DIR", raising=False)

        items = catalog_repo.load_bundled_catalog(catalog_type)

        assert len(items) >= 4
        assert len({item.id for item in items}) == len(items)

    def test_unknown_source(self, monkeypatch):
        monkeypatch.setenv("CATALOG_SOURCE", "ftp")

        with pytest.raises(CatalogError):
            catalog_repo.load_catalog("kanji")


class TestMongoCatalog:

    def test_load_sorted_and_filtered(self):
        collection = FakeCollection([
            {"catalog_type": "kanji", "item_id": 2, "prompt": "月", "answer": "moon"},
            {"catalog_type": "kanji", "item_id": 1, "prompt": "日", "answer": "day"},
            {"catalog_type": "kanji", "item_id": 3, "prompt": "火"},
            {"catalog_type": "vocab", "item_id": 1, "prompt": "ねこ", "answer": "cat"},
        ])

        items = load_catalog_mongo("kanji", collection=collection)

        assert [item.id for item in items] == [1, 2]
        assert collection.queries == [{"catalog_type": "kanji"}]

    def test_missing_uri(self, monkeypatch):
        monkeypatch.delenv("MONGO_URI", raising=False)
        monkeypatch.setattr(catalog_repo, "_collection", None)

        with pytest.raises(CatalogError):
            catalog_repo.get_collection()
