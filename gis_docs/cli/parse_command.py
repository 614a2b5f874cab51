"""Parse command orchestration for CLI.

This module provides the ParseCommand class that drives a documentation
run: for every catalog entry it fetches the documentation page, converts
it to Markdown and saves it, then probes for the API's OpenAPI spec.
Category indexes and the top-level README are written last.
"""

import logging
import os
from datetime import datetime
from typing import List, Optional

from gis_docs.catalog import (
    README_FILENAME,
    ApiCatalog,
    ApiEntry,
    CatalogError,
    CatalogLoader,
    IndexBuilder,
)
from gis_docs.cli.errors import CLIError, ConfigError
from gis_docs.cli.models import Config, ExitCode, RunSummary
from gis_docs.cli.output import OutputHandler
from gis_docs.content_converter import MarkdownConverter
from gis_docs.scraper import OpenAPINotFoundError, Scraper
from gis_docs.scraper.errors import DocsParserError
from gis_docs.storage import FileStorage, StorageError

logger = logging.getLogger(__name__)

OPENAPI_DIRNAME = "openapi"


class ParseCommand:
    """Orchestrates a complete documentation run.

    Components:
    - Scraper: fetches documentation pages and OpenAPI specs
    - MarkdownConverter: turns page HTML into Markdown
    - FileStorage: writes documents and indexes below the output directory
    - IndexBuilder: renders category indexes and the main README
    - OutputHandler: terminal output with progress indication

    APIs are processed one at a time. A failure for one API is reported
    and the run moves on to the next; only catalog problems and index
    writing failures abort the run.

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> parse_cmd = ParseCommand(config=Config(), output_handler=output)
        >>> exit_code = parse_cmd.run()
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        scraper: Optional[Scraper] = None,
        converter: Optional[MarkdownConverter] = None,
        storage: Optional[FileStorage] = None,
        catalog: Optional[ApiCatalog] = None,
        index_builder: Optional[IndexBuilder] = None,
        output_handler: Optional[OutputHandler] = None,
    ):
        """Initialize parse command with dependencies.

        Args:
            config: Runtime settings (defaults to Config())
            scraper: Scraper for HTTP fetching (optional)
            converter: MarkdownConverter for HTML conversion (optional)
            storage: FileStorage for writing output (optional)
            catalog: ApiCatalog to process (optional, loaded from config.catalog_path)
            index_builder: IndexBuilder for index pages (optional)
            output_handler: OutputHandler for terminal output (optional)

        Note:
            Missing dependencies are created from the config when run() starts.
        """
        self.config = config or Config()
        self.scraper = scraper
        self.converter = converter or MarkdownConverter()
        self.storage = storage or FileStorage()
        self.catalog = catalog
        self.index_builder = index_builder
        self.output_handler = output_handler or OutputHandler()
        self.summary = RunSummary()

    def run(
        self,
        api_names: Optional[List[str]] = None,
        skip_openapi: bool = False,
        generated_at: Optional[datetime] = None,
    ) -> ExitCode:
        """Execute the documentation run.

        Args:
            api_names: Restrict the run to these catalog entries (None for all)
            skip_openapi: If True, do not probe for OpenAPI specs
            generated_at: Timestamp for the main README (defaults to now)

        Returns:
            ExitCode.SUCCESS when the run completes, even if some APIs failed;
            ExitCode.GENERAL_ERROR for catalog, configuration or index failures
        """
        self.summary = RunSummary()

        try:
            if self.catalog is None:
                source = self.config.catalog_path or "bundled catalog"
                logger.info(f"Loading catalog from {source}")
                self.catalog = CatalogLoader.load(self.config.catalog_path)

            if self.scraper is None:
                self.scraper = Scraper(
                    self.config.base_url,
                    language=self.config.language,
                    timeout=self.config.request_timeout,
                    url_templates=self.config.openapi_url_templates,
                )

            if self.index_builder is None:
                self.index_builder = IndexBuilder(self.catalog, self.config.base_url)

            apis = self._select_apis(api_names)

            self.output_handler.info(f"Output directory: {self.config.output_dir}")
            self.storage.ensure_directory_exists(self.config.output_dir)

            logger.info(f"Parsing {len(apis)} API(s)")
            with self.output_handler.progress_bar(len(apis), "Parsing APIs") as (progress, task):
                for api in apis:
                    progress.update(task, description=f"Parsing {api.name}")
                    if self._process_api(api) and not skip_openapi:
                        self._process_openapi(api)
                    progress.update(task, advance=1)

            self._write_indexes(generated_at)

            logger.info(
                f"Run finished: {len(self.summary.docs_saved)} saved, "
                f"{len(self.summary.docs_failed)} failed"
            )
            self.output_handler.print_summary(self.summary)
            return ExitCode.SUCCESS

        except CatalogError as e:
            logger.error(f"Catalog error: {e}")
            self.output_handler.error(f"Catalog error: {e}")
            return ExitCode.GENERAL_ERROR

        except StorageError as e:
            logger.error(f"Storage error: {e}")
            self.output_handler.error(f"Storage error: {e}")
            return ExitCode.GENERAL_ERROR

        except CLIError as e:
            logger.error(f"CLI error: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during parsing")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def doc_path(self, api: ApiEntry) -> str:
        """Return <output>/<category>/<name>-api.md (no category dir if uncategorized)."""
        if api.category:
            return os.path.join(self.config.output_dir, api.category, api.doc_filename)
        return os.path.join(self.config.output_dir, api.doc_filename)

    def openapi_path(self, api: ApiEntry) -> str:
        """Return <output>/openapi/<category>/<name>.json."""
        if api.category:
            return os.path.join(
                self.config.output_dir, OPENAPI_DIRNAME, api.category, api.openapi_filename
            )
        return os.path.join(self.config.output_dir, OPENAPI_DIRNAME, api.openapi_filename)

    def _select_apis(self, api_names: Optional[List[str]]) -> List[ApiEntry]:
        if not api_names:
            return list(self.catalog.apis)

        unknown = [name for name in api_names if self.catalog.get_api(name) is None]
        if unknown:
            raise ConfigError(f"Unknown API name(s): {', '.join(unknown)}", 'api')
        return self.catalog.select(api_names).apis

    def _process_api(self, api: ApiEntry) -> bool:
        """Fetch, convert and save one documentation page.

        Returns:
            True if the document was saved
        """
        url = self.scraper.doc_url(api.path)
        logger.info(f"Parsing {api.name}: {url}")

        try:
            html = self.scraper.fetch_page(url)
            markdown = self.converter.html_to_markdown(html)
            path = self.doc_path(api)
            self.storage.save_file(markdown, path)
        except DocsParserError as e:
            logger.error(f"Failed to parse {api.name}: {e}")
            self.output_handler.error(f"Failed to parse {api.name}: {e}")
            self.summary.docs_failed.append(api.name)
            return False
        except Exception as e:
            logger.exception(f"Unexpected error while parsing {api.name}")
            self.output_handler.error(f"Failed to parse {api.name}: {e}")
            self.summary.docs_failed.append(api.name)
            return False

        self.output_handler.success(f"Saved {path}")
        self.summary.docs_saved.append(api.name)
        return True

    def _process_openapi(self, api: ApiEntry) -> None:
        try:
            spec = self.scraper.fetch_openapi(api.name)
            path = self.openapi_path(api)
            self.storage.save_file(spec, path)
        except OpenAPINotFoundError as e:
            logger.warning(str(e))
            self.output_handler.warning(f"OpenAPI spec not found for {api.name}")
            self.summary.openapi_missing.append(api.name)
            return
        except DocsParserError as e:
            logger.warning(f"Failed to save OpenAPI spec for {api.name}: {e}")
            self.output_handler.warning(f"Failed to save OpenAPI spec for {api.name}: {e}")
            self.summary.openapi_missing.append(api.name)
            return
        except Exception as e:
            logger.exception(f"Unexpected error while fetching OpenAPI spec for {api.name}")
            self.output_handler.warning(f"Failed to save OpenAPI spec for {api.name}: {e}")
            self.summary.openapi_missing.append(api.name)
            return

        self.output_handler.debug(f"Saved OpenAPI spec {path}")
        self.summary.openapi_saved.append(api.name)

    def _write_indexes(self, generated_at: Optional[datetime]) -> None:
        """Write one README per category and the top-level README.

        Indexes always describe the whole catalog, including entries that
        were not part of this run.

        Raises:
            StorageError: If an index file cannot be written
        """
        logger.info("Generating indexes")
        for key, apis in self.catalog.by_category().items():
            category = self.catalog.get_category(key)
            path = os.path.join(self.config.output_dir, key, README_FILENAME)
            self.storage.save_file(self.index_builder.render_category_index(category, apis), path)
            self.summary.index_files.append(path)

        path = os.path.join(self.config.output_dir, README_FILENAME)
        self.storage.save_file(self.index_builder.render_main_readme(generated_at), path)
        self.summary.index_files.append(path)
        self.output_handler.success(f"Indexes written to {self.config.output_dir}")
