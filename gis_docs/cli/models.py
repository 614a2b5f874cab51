"""Data models for CLI operations.

All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

from gis_docs.scraper.scraper import DEFAULT_OPENAPI_URL_TEMPLATES


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Run completed (individual API failures are reported, not fatal)
    - GENERAL_ERROR (1): Configuration, catalog or index writing failure

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1


@dataclass
class Config:
    """Runtime settings for a documentation run.

    Attributes:
        output_dir: Root directory for generated Markdown, JSON and indexes
        base_url: Documentation site root
        language: Language segment of documentation URLs
        request_timeout: Per-request timeout in seconds
        catalog_path: Catalog YAML override (None for the bundled catalog)
        openapi_url_templates: Candidate OpenAPI URL patterns, tried in order

    Example:
        >>> config = Config(output_dir="./docs", base_url="https://docs.2gis.com")
    """
    output_dir: str = "./docs"
    base_url: str = "https://docs.2gis.com"
    language: str = "ru"
    request_timeout: float = 30.0
    catalog_path: Optional[str] = None
    openapi_url_templates: Tuple[str, ...] = DEFAULT_OPENAPI_URL_TEMPLATES


@dataclass
class RunSummary:
    """Outcome of a documentation run, for display to the user.

    Attributes:
        docs_saved: Names of APIs whose documentation was written
        docs_failed: Names of APIs whose documentation could not be fetched or saved
        openapi_saved: Names of APIs whose OpenAPI spec was written
        openapi_missing: Names of APIs with no OpenAPI spec found or saved
        index_files: Paths of the generated index and README files
    """
    docs_saved: List[str] = field(default_factory=list)
    docs_failed: List[str] = field(default_factory=list)
    openapi_saved: List[str] = field(default_factory=list)
    openapi_missing: List[str] = field(default_factory=list)
    index_files: List[str] = field(default_factory=list)
