"""YAML catalog loading and validation.

The list of documented APIs, their titles, descriptions and category
groupings is declarative data kept in catalog.yaml next to this module.
A different catalog file can be supplied to document another set of APIs.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from gis_docs.storage.errors import StorageError

from .errors import CatalogError
from .models import ApiCatalog, ApiEntry, Category

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'catalog.yaml')


class CatalogLoader:
    """Loads and validates the API catalog.

    Catalog file structure:
        categories:
          - key: search
            title: Search APIs
            description: APIs для поиска ...
        apis:
          - name: places
            path: search/places/overview
            category: search          # optional
            title: Places API         # optional
            description: Поиск ...    # optional
    """

    REQUIRED_TOP_LEVEL_FIELDS = {'apis'}
    REQUIRED_API_FIELDS = {'name', 'path'}
    REQUIRED_CATEGORY_FIELDS = {'key', 'title'}

    @classmethod
    def load(cls, catalog_path: Optional[str] = None) -> ApiCatalog:
        """Load the catalog from catalog_path, or the bundled catalog if None.

        Raises:
            StorageError: If the file cannot be read
            CatalogError: If the catalog is invalid or malformed
        """
        path = catalog_path or BUNDLED_CATALOG_PATH

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise StorageError(path, 'read', 'Catalog file not found')
        except PermissionError:
            raise StorageError(path, 'read', 'Permission denied')
        except OSError as e:
            raise StorageError(path, 'read', str(e)) from e

        try:
            catalog_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML syntax: {str(e)}")

        if catalog_dict is None:
            raise CatalogError("Catalog file is empty")

        if not isinstance(catalog_dict, dict):
            raise CatalogError(
                f"Catalog must be a YAML dictionary, got {type(catalog_dict).__name__}"
            )

        catalog = cls._parse_catalog(catalog_dict)
        logger.debug(
            f"Loaded catalog from {path}: {len(catalog.apis)} API(s), "
            f"{len(catalog.categories)} categor(y/ies)"
        )
        return catalog

    @classmethod
    def _parse_catalog(cls, catalog_dict: Dict[str, Any]) -> ApiCatalog:
        missing_fields = cls.REQUIRED_TOP_LEVEL_FIELDS - set(catalog_dict.keys())
        if missing_fields:
            raise CatalogError(
                f"Missing required fields: {', '.join(sorted(missing_fields))}"
            )

        categories = cls._parse_categories(catalog_dict.get('categories') or [])
        known_keys = {category.key for category in categories}

        apis_raw = catalog_dict.get('apis')
        if not isinstance(apis_raw, list) or not apis_raw:
            raise CatalogError("Field 'apis' must be a non-empty list", 'apis')

        apis: List[ApiEntry] = []
        seen_names = set()
        for i, api_dict in enumerate(apis_raw):
            if not isinstance(api_dict, dict):
                raise CatalogError(
                    f"API entry at index {i} must be a dictionary",
                    f'apis[{i}]'
                )

            missing_api_fields = cls.REQUIRED_API_FIELDS - set(api_dict.keys())
            if missing_api_fields:
                raise CatalogError(
                    f"Missing required fields in API {i}: {', '.join(sorted(missing_api_fields))}",
                    f'apis[{i}]'
                )

            name = str(api_dict['name']).strip()
            path = str(api_dict['path']).strip()
            category = api_dict.get('category')

            if not name:
                raise CatalogError(f"Field 'name' in API {i} cannot be empty", f'apis[{i}].name')
            if not path:
                raise CatalogError(f"Field 'path' in API {i} cannot be empty", f'apis[{i}].path')
            if name in seen_names:
                raise CatalogError(f"Duplicate API name '{name}'", f'apis[{i}].name')
            if category is not None:
                category = str(category)
                if category not in known_keys:
                    raise CatalogError(
                        f"Unknown category '{category}' for API '{name}'",
                        f'apis[{i}].category'
                    )

            seen_names.add(name)
            apis.append(ApiEntry(
                name=name,
                path=path,
                category=category,
                title=str(api_dict.get('title') or ''),
                description=str(api_dict.get('description') or ''),
            ))

        return ApiCatalog(categories=categories, apis=apis)

    @classmethod
    def _parse_categories(cls, categories_raw: Any) -> List[Category]:
        if not isinstance(categories_raw, list):
            raise CatalogError("Field 'categories' must be a list", 'categories')

        categories = []
        for i, category_dict in enumerate(categories_raw):
            if not isinstance(category_dict, dict):
                raise CatalogError(
                    f"Category at index {i} must be a dictionary",
                    f'categories[{i}]'
                )
            missing = cls.REQUIRED_CATEGORY_FIELDS - set(category_dict.keys())
            if missing:
                raise CatalogError(
                    f"Missing required fields in category {i}: {', '.join(sorted(missing))}",
                    f'categories[{i}]'
                )
            key = str(category_dict['key']).strip()
            if not key:
                raise CatalogError(
                    f"Field 'key' in category {i} cannot be empty",
                    f'categories[{i}].key'
                )
            categories.append(Category(
                key=key,
                title=str(category_dict['title']),
                description=str(category_dict.get('description') or ''),
            ))
        return categories
