"""Exceptions for catalog loading and validation."""

from typing import Optional

from gis_docs.scraper.errors import DocsParserError


class CatalogError(DocsParserError):
    """Raised when the API catalog is malformed or fails validation."""

    def __init__(self, message: str, catalog_field: Optional[str] = None):
        if catalog_field:
            full_message = f"Catalog error in field '{catalog_field}': {message}"
        else:
            full_message = f"Catalog error: {message}"
        super().__init__(full_message)
        self.catalog_field = catalog_field
        self.original_message = message
