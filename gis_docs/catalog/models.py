"""Data models for the API catalog.

All models use dataclasses. The catalog is read-only configuration data:
entries are frozen and lookups never mutate the catalog.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

DEFAULT_DESCRIPTION = "Описание недоступно"


@dataclass(frozen=True)
class Category:
    """A group of APIs with its own index page.

    Attributes:
        key: Directory name and identifier (e.g., "search")
        title: Human readable title (e.g., "Search APIs")
        description: One-line summary shown in indexes
    """
    key: str
    title: str
    description: str = ""


@dataclass(frozen=True)
class ApiEntry:
    """One documented API endpoint.

    Attributes:
        name: Short identifier used in file names (e.g., "places")
        path: Documentation path below /<language>/api/ (e.g., "search/places/overview")
        category: Category key, or None for APIs saved at the output root
        title: Display title; empty means "<name> API"
        description: One-line summary; empty means DEFAULT_DESCRIPTION

    Example:
        >>> entry = ApiEntry(name="places", path="search/places/overview", category="search")
        >>> entry.doc_filename
        'places-api.md'
    """
    name: str
    path: str
    category: Optional[str] = None
    title: str = ""
    description: str = ""

    @property
    def display_title(self) -> str:
        return self.title or f"{self.name} API"

    @property
    def display_description(self) -> str:
        return self.description or DEFAULT_DESCRIPTION

    @property
    def doc_filename(self) -> str:
        return f"{self.name}-api.md"

    @property
    def openapi_filename(self) -> str:
        return f"{self.name}.json"


@dataclass
class ApiCatalog:
    """Ordered collection of categories and API entries.

    Attributes:
        categories: Categories in display order
        apis: API entries in processing order
    """
    categories: List[Category] = field(default_factory=list)
    apis: List[ApiEntry] = field(default_factory=list)

    def get_category(self, key: str) -> Optional[Category]:
        for category in self.categories:
            if category.key == key:
                return category
        return None

    def get_api(self, name: str) -> Optional[ApiEntry]:
        for api in self.apis:
            if api.name == name:
                return api
        return None

    def by_category(self) -> Dict[str, List[ApiEntry]]:
        """Group categorized entries by category key.

        Keys follow the category order of the catalog; entries keep catalog
        order within each group. Categories without entries are omitted.
        """
        grouped: Dict[str, List[ApiEntry]] = {}
        for category in self.categories:
            members = [api for api in self.apis if api.category == category.key]
            if members:
                grouped[category.key] = members
        return grouped

    def uncategorized(self) -> List[ApiEntry]:
        return [api for api in self.apis if api.category is None]

    def select(self, names: List[str]) -> "ApiCatalog":
        """Return a catalog restricted to the named APIs (catalog order kept)."""
        wanted = set(names)
        return ApiCatalog(
            categories=list(self.categories),
            apis=[api for api in self.apis if api.name in wanted],
        )
