"""API catalog for the documentation parser.

This package holds the declarative list of documented APIs (catalog.yaml),
its loader and validation, and the renderer for index and README pages.
"""

from .models import ApiCatalog, ApiEntry, Category, DEFAULT_DESCRIPTION
from .errors import CatalogError
from .catalog_loader import CatalogLoader, BUNDLED_CATALOG_PATH
from .index_builder import IndexBuilder, README_FILENAME

__all__ = [
    'ApiCatalog',
    'ApiEntry',
    'Category',
    'DEFAULT_DESCRIPTION',
    'CatalogError',
    'CatalogLoader',
    'BUNDLED_CATALOG_PATH',
    'IndexBuilder',
    'README_FILENAME',
]
