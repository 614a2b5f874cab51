"""Parser that downloads 2GIS API documentation and saves it as Markdown.

Subpackages:
    content_converter: HTML to Markdown conversion
    scraper: HTTP fetching of documentation pages and OpenAPI specs
    storage: Writing generated files
    catalog: The list of documented APIs and index rendering
    cli: The gis-docs command
"""

__version__ = "0.1.0"
