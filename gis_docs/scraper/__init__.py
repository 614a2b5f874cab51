"""HTTP client for the documentation site.

This package fetches HTML documentation pages and probes candidate URLs for
OpenAPI specs, translating failures into a typed exception hierarchy.
"""

from .errors import (
    DocsParserError,
    ScraperError,
    PageFetchError,
    OpenAPINotFoundError,
)
from .scraper import Scraper, DEFAULT_OPENAPI_URL_TEMPLATES

__all__ = [
    "Scraper",
    "DEFAULT_OPENAPI_URL_TEMPLATES",
    "DocsParserError",
    "ScraperError",
    "PageFetchError",
    "OpenAPINotFoundError",
]
