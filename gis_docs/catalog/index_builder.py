"""Rendering of category index pages and the top-level README."""

from datetime import datetime
from typing import List, Optional

from .models import ApiCatalog, ApiEntry, Category

README_FILENAME = "README.md"
TIMESTAMP_FORMAT = "%d.%m.%Y, %H:%M:%S"


class IndexBuilder:
    """Builds Markdown index documents from the API catalog.

    Example:
        >>> builder = IndexBuilder(catalog, base_url="https://docs.2gis.com")
        >>> readme = builder.render_main_readme()
    """

    def __init__(self, catalog: ApiCatalog, base_url: str = "https://docs.2gis.com"):
        self.catalog = catalog
        self.base_url = base_url.rstrip('/')

    def render_category_index(self, category: Category, apis: List[ApiEntry]) -> str:
        """Render <output>/<category>/README.md for one category."""
        lines = [
            f"# {category.title}",
            "",
            category.description,
            "",
            "## Доступные API",
            "",
        ]
        for api in apis:
            lines.append(
                f"- [{api.display_title}](./{api.doc_filename}) - {api.display_description}"
            )
        return "\n".join(lines) + "\n"

    def render_main_readme(self, generated_at: Optional[datetime] = None) -> str:
        """Render the top-level README summarizing every category."""
        generated_at = generated_at or datetime.now()

        lines = [
            "# 2GIS API Documentation",
            "",
            "Документация всех доступных API 2GIS, извлеченная из официальных источников.",
            "",
            "## Категории API",
            "",
        ]

        for key, apis in self.catalog.by_category().items():
            category = self.catalog.get_category(key)
            lines.append(f"### [{category.title}](./{key}/{README_FILENAME})")
            lines.append("")
            lines.append(category.description)
            lines.append("")
            for api in apis:
                lines.append(f"- [{api.display_title}](./{key}/{api.doc_filename})")
            lines.append("")

        uncategorized = self.catalog.uncategorized()
        if uncategorized:
            lines.append("### Другие API")
            lines.append("")
            for api in uncategorized:
                lines.append(
                    f"- [{api.display_title}](./{api.doc_filename}) - {api.display_description}"
                )
            lines.append("")

        lines.extend([
            "## Обновление документации",
            "",
            "Документация автоматически обновляется из официальных источников 2GIS.",
            f"Последнее обновление: {generated_at.strftime(TIMESTAMP_FORMAT)}",
            "",
            "## Источник",
            "",
            f"Официальная документация: {self.base_url}/",
        ])
        return "\n".join(lines) + "\n"
