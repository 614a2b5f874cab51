"""Typed exception hierarchy for documentation fetching errors.

This module defines the root exception for the whole tool and the errors
raised by the scraper. All exceptions carry the failing target (URL or API
name) and the underlying cause to help with debugging.
"""

from typing import List, Optional


class DocsParserError(Exception):
    """Base exception for all gis-docs errors.

    Use this to catch any application-level error from the parser.
    """
    pass


class ScraperError(DocsParserError):
    """Base exception for all fetching errors."""
    pass


class PageFetchError(ScraperError):
    """Raised when a page request fails or returns a non-success status."""

    def __init__(self, url: str, reason: Optional[str] = None):
        message = f"Failed to fetch page {url}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.url = url
        self.reason = reason


class OpenAPINotFoundError(ScraperError):
    """Raised when no candidate URL yields an OpenAPI spec."""

    def __init__(self, api_name: str, tried_urls: Optional[List[str]] = None):
        super().__init__(f"OpenAPI spec not found for {api_name}")
        self.api_name = api_name
        self.tried_urls = list(tried_urls or [])
