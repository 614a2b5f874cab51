"""Main CLI entry point for the gis-docs command.

This module provides the Typer application that serves as the entry point
for the gis-docs command-line tool. A run needs no arguments: by default
every API in the bundled catalog is parsed into ./docs.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from gis_docs import __version__
from gis_docs.cli.config import load_config
from gis_docs.cli.errors import ConfigError
from gis_docs.cli.models import ExitCode
from gis_docs.cli.output import OutputHandler
from gis_docs.cli.parse_command import ParseCommand

app = typer.Typer(
    name="gis-docs",
    help="""Download 2GIS API documentation and save it as Markdown.

QUICK START:
  gis-docs                                  # Parse every API into ./docs
  gis-docs --output-dir ./out               # Choose the output directory
  gis-docs --api places --api geocoder      # Parse selected APIs only
  gis-docs --skip-openapi                   # Skip OpenAPI spec probing""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


_VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(logdir: str, level: int) -> logging.FileHandler:
    """Create a handler writing to <logdir>/gis-docs_<timestamp>.log."""
    log_path = Path(logdir)
    log_path.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    handler = logging.FileHandler(log_path / f"gis-docs_{timestamp}.log", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt=_DATE_FORMAT
    ))
    return handler


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure the 'gis_docs' logger for the requested verbosity.

    The root logger and third-party libraries are left unchanged. Handlers
    from a previous call are closed and replaced.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2 or more=DEBUG)
        logdir: Optional directory for a timestamped log file
    """
    level = _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)

    app_logger = logging.getLogger("gis_docs")
    app_logger.setLevel(level)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)8s] %(message)s", datefmt=_DATE_FORMAT)
    )
    app_logger.addHandler(console_handler)

    if logdir:
        file_handler = _file_handler(logdir, level)
        app_logger.addHandler(file_handler)
        logger.info(f"Logging to file: {file_handler.baseFilename}")


@app.command()
def main_command(
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Output directory (default: $OUTPUT_DIR or ./docs)",
        metavar="DIR",
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Documentation site root (default: $BASE_URL or https://docs.2gis.com)",
        metavar="URL",
    ),
    catalog: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Catalog YAML file listing the APIs to parse (default: bundled catalog)",
        metavar="FILE",
    ),
    api: Optional[List[str]] = typer.Option(
        None,
        "--api",
        help="Parse only this API (can be used multiple times)",
        metavar="NAME",
    ),
    skip_openapi: bool = typer.Option(
        False,
        "--skip-openapi",
        help="Do not download OpenAPI specs",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Download 2GIS API documentation and save it as Markdown.

    \b
    Documents are written to <output>/<category>/<name>-api.md, OpenAPI
    specs to <output>/openapi/<category>/<name>.json, followed by a
    README.md per category and one at the output root.
    """
    if version:
        typer.echo(f"gis-docs version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        config = load_config(
            output_dir=output_dir,
            base_url=base_url,
            catalog_path=catalog,
        )
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    parse_cmd = ParseCommand(config=config, output_handler=output)
    exit_code = parse_cmd.run(api_names=api or None, skip_openapi=skip_openapi)

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m gis_docs.cli.main
if __name__ == "__main__":
    main()
