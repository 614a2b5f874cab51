"""HTTP fetching for documentation pages and OpenAPI specs.

This module wraps a requests Session and translates transport and HTTP
failures into the typed exceptions from errors.py. OpenAPI specs are not
published at a fixed location, so fetch_openapi probes an ordered list of
candidate URL patterns and returns the first one that answers.
"""

import logging
from typing import List, Optional, Sequence

import requests

from .errors import OpenAPINotFoundError, PageFetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; gis-docs-parser/0.1.0)"

# Tried in order; {base_url}, {language} and {name} are substituted.
DEFAULT_OPENAPI_URL_TEMPLATES = (
    "{base_url}/{language}/api/search/{name}/openapi.json",
    "{base_url}/{language}/api/navigation/{name}/openapi.json",
    "{base_url}/{language}/api/{name}/openapi.json",
)


class Scraper:
    """Fetches documentation pages and OpenAPI specs over HTTP.

    Example:
        >>> scraper = Scraper("https://docs.2gis.com")
        >>> html = scraper.fetch_page("https://docs.2gis.com/ru/api/search/places/overview")
        >>> spec = scraper.fetch_openapi("places")
    """

    def __init__(
        self,
        base_url: str,
        language: str = "ru",
        timeout: float = 30,
        url_templates: Optional[Sequence[str]] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the scraper.

        Args:
            base_url: Documentation site root, e.g. https://docs.2gis.com
            language: Documentation language segment of the URL
            timeout: Per-request timeout in seconds
            url_templates: Candidate OpenAPI URL patterns (defaults to the 2GIS layout)
            session: Optional pre-configured requests Session
        """
        self.base_url = base_url.rstrip('/')
        self.language = language
        self.timeout = timeout
        self.url_templates = tuple(url_templates or DEFAULT_OPENAPI_URL_TEMPLATES)

        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": DEFAULT_USER_AGENT})
        self._session = session

    def doc_url(self, doc_path: str) -> str:
        """Build the documentation page URL for a catalog path."""
        return f"{self.base_url}/{self.language}/api/{doc_path.strip('/')}"

    def fetch_page(self, url: str) -> str:
        """GET url and return the response body as text.

        Args:
            url: Absolute URL to fetch

        Returns:
            Decoded response body

        Raises:
            PageFetchError: On transport failure or a non-2xx status
        """
        logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise PageFetchError(url, str(e) or type(e).__name__) from e

        if not 200 <= response.status_code < 300:
            raise PageFetchError(url, f"HTTP error! status: {response.status_code}")

        # requests falls back to ISO-8859-1 for text/* without a charset,
        # which garbles the Cyrillic pages.
        content_type = response.headers.get('content-type', '')
        if 'charset' not in content_type.lower():
            response.encoding = response.apparent_encoding

        return response.text

    def openapi_candidates(self, api_name: str) -> List[str]:
        """Return the candidate OpenAPI URLs for api_name, in probing order."""
        return [
            template.format(base_url=self.base_url, language=self.language, name=api_name)
            for template in self.url_templates
        ]

    def fetch_openapi(self, api_name: str) -> str:
        """Fetch the OpenAPI spec for api_name from the first candidate that succeeds.

        Candidates after the first success are never requested.

        Raises:
            OpenAPINotFoundError: If every candidate URL fails
        """
        tried = []
        for url in self.openapi_candidates(api_name):
            tried.append(url)
            try:
                content = self.fetch_page(url)
            except PageFetchError as e:
                logger.debug(f"OpenAPI candidate rejected: {e}")
                continue
            logger.info(f"Found OpenAPI spec for {api_name} at {url}")
            return content

        raise OpenAPINotFoundError(api_name, tried)
