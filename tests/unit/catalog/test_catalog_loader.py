"""Unit tests for catalog.catalog_loader module."""

import pytest

from gis_docs.catalog.catalog_loader import BUNDLED_CATALOG_PATH, CatalogLoader
from gis_docs.catalog.errors import CatalogError
from gis_docs.catalog.models import DEFAULT_DESCRIPTION, ApiEntry
from gis_docs.storage.errors import StorageError


def _write(tmp_path, content):
    path = tmp_path / "catalog.yaml"
    path.write_text(content, encoding="utf-8")
    return str(path)


VALID_CATALOG = """
categories:
  - key: search
    title: Search APIs
    description: Поиск
apis:
  - name: places
    path: search/places/overview
    category: search
    title: Places API
  - name: extra
    path: extra/overview
"""


class TestBundledCatalog:
    """Test cases for the catalog shipped with the package."""

    def test_loads_sixteen_apis_in_two_categories(self):
        catalog = CatalogLoader.load()

        assert len(catalog.apis) == 16
        assert [c.key for c in catalog.categories] == ["search", "navigation"]

    def test_default_path_is_bundled(self):
        assert BUNDLED_CATALOG_PATH.endswith("catalog.yaml")
        assert len(CatalogLoader.load(BUNDLED_CATALOG_PATH).apis) == 16

    def test_group_sizes(self):
        grouped = CatalogLoader.load().by_category()

        assert len(grouped["search"]) == 6
        assert len(grouped["navigation"]) == 10

    def test_known_entries(self):
        catalog = CatalogLoader.load()

        places = catalog.get_api("places")
        assert places.path == "search/places/overview"
        assert places.category == "search"
        assert places.display_title == "Places API"
        assert catalog.get_api("distance-matrix").category == "navigation"

    def test_every_entry_has_title_and_description(self):
        for api in CatalogLoader.load().apis:
            assert api.title
            assert api.description


class TestLoadFromFile:
    """Test cases for loading custom catalog files."""

    def test_valid_catalog(self, tmp_path):
        catalog = CatalogLoader.load(_write(tmp_path, VALID_CATALOG))

        assert [api.name for api in catalog.apis] == ["places", "extra"]
        assert catalog.get_api("extra").category is None
        assert catalog.get_api("extra").display_title == "extra API"
        assert catalog.get_category("search").description == "Поиск"

    def test_categories_optional(self, tmp_path):
        path = _write(tmp_path, "apis:\n  - name: a\n    path: a/overview\n")

        catalog = CatalogLoader.load(path)

        assert catalog.categories == []
        assert catalog.uncategorized()[0].name == "a"

    def test_missing_file_raises_storage_error(self, tmp_path):
        path = str(tmp_path / "missing.yaml")

        with pytest.raises(StorageError) as exc_info:
            CatalogLoader.load(path)

        assert exc_info.value.file_path == path
        assert exc_info.value.operation == "read"

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path, "apis: [unclosed")

        with pytest.raises(CatalogError, match="Invalid YAML syntax"):
            CatalogLoader.load(path)

    def test_empty_file(self, tmp_path):
        with pytest.raises(CatalogError, match="empty"):
            CatalogLoader.load(_write(tmp_path, ""))

    def test_not_a_dictionary(self, tmp_path):
        with pytest.raises(CatalogError, match="dictionary"):
            CatalogLoader.load(_write(tmp_path, "- a\n- b\n"))

    def test_missing_apis_field(self, tmp_path):
        with pytest.raises(CatalogError, match="apis"):
            CatalogLoader.load(_write(tmp_path, "categories: []\n"))

    def test_empty_apis_list(self, tmp_path):
        with pytest.raises(CatalogError) as exc_info:
            CatalogLoader.load(_write(tmp_path, "apis: []\n"))

        assert exc_info.value.catalog_field == "apis"

    def test_api_missing_path(self, tmp_path):
        with pytest.raises(CatalogError) as exc_info:
            CatalogLoader.load(_write(tmp_path, "apis:\n  - name: a\n"))

        assert exc_info.value.catalog_field == "apis[0]"
        assert "path" in str(exc_info.value)

    def test_duplicate_api_name(self, tmp_path):
        content = (
            "apis:\n"
            "  - name: a\n    path: a/overview\n"
            "  - name: a\n    path: b/overview\n"
        )

        with pytest.raises(CatalogError, match="Duplicate API name 'a'"):
            CatalogLoader.load(_write(tmp_path, content))

    def test_unknown_category(self, tmp_path):
        content = "apis:\n  - name: a\n    path: a/overview\n    category: maps\n"

        with pytest.raises(CatalogError, match="Unknown category 'maps'"):
            CatalogLoader.load(_write(tmp_path, content))

    def test_category_missing_title(self, tmp_path):
        content = (
            "categories:\n  - key: search\n"
            "apis:\n  - name: a\n    path: a/overview\n"
        )

        with pytest.raises(CatalogError) as exc_info:
            CatalogLoader.load(_write(tmp_path, content))

        assert exc_info.value.catalog_field == "categories[0]"


class TestCatalogModel:
    """Test cases for ApiCatalog lookups."""

    def test_select_keeps_catalog_order(self):
        catalog = CatalogLoader.load()

        selected = catalog.select(["tsp", "places"])

        assert [api.name for api in selected.apis] == ["places", "tsp"]
        assert selected.categories == catalog.categories

    def test_display_fallbacks(self):
        bare = ApiEntry(name="unknown", path="unknown/overview")

        assert bare.display_title == "unknown API"
        assert bare.display_description == DEFAULT_DESCRIPTION
        assert CatalogLoader.load().get_api("geocoder").display_title == "Geocoder API"

    def test_file_names(self):
        api = CatalogLoader.load().get_api("public-transport")

        assert api.doc_filename == "public-transport-api.md"
        assert api.openapi_filename == "public-transport.json"
