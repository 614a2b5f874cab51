"""Runtime configuration loading.

Settings are read from environment variables after python-dotenv loads a
.env file from the working directory. Values passed explicitly (from CLI
options) take precedence over the environment.

Environment variables:
    OUTPUT_DIR: Output root (default ./docs)
    BASE_URL: Documentation site root (default https://docs.2gis.com)
    DOCS_LANGUAGE: Language segment of documentation URLs (default ru)
    REQUEST_TIMEOUT: Per-request timeout in seconds (default 30)
    CATALOG_PATH: Catalog YAML override (default: bundled catalog)
"""

import logging
import os
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from gis_docs.cli.errors import ConfigError
from gis_docs.cli.models import Config

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "./docs"
DEFAULT_BASE_URL = "https://docs.2gis.com"
DEFAULT_LANGUAGE = "ru"
DEFAULT_REQUEST_TIMEOUT = 30.0


def load_config(
    output_dir: Optional[str] = None,
    base_url: Optional[str] = None,
    catalog_path: Optional[str] = None,
    language: Optional[str] = None,
    request_timeout: Optional[float] = None,
) -> Config:
    """Build a Config from explicit values, the environment and defaults.

    Args:
        output_dir: Output root override
        base_url: Documentation site root override
        catalog_path: Catalog YAML override
        language: Documentation language override
        request_timeout: Request timeout override, in seconds

    Returns:
        Validated Config

    Raises:
        ConfigError: If a setting has an invalid value
    """
    load_dotenv()

    output_dir = output_dir or os.getenv('OUTPUT_DIR') or DEFAULT_OUTPUT_DIR
    base_url = base_url or os.getenv('BASE_URL') or DEFAULT_BASE_URL
    catalog_path = catalog_path or os.getenv('CATALOG_PATH') or None
    language = language or os.getenv('DOCS_LANGUAGE') or DEFAULT_LANGUAGE

    if request_timeout is None:
        request_timeout = _parse_timeout(os.getenv('REQUEST_TIMEOUT'))
    elif request_timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {request_timeout}", 'REQUEST_TIMEOUT')

    parsed = urlparse(base_url)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise ConfigError(f"Expected an http(s) URL, got '{base_url}'", 'BASE_URL')

    language = language.strip().strip('/')
    if not language:
        raise ConfigError("Language cannot be empty", 'DOCS_LANGUAGE')

    config = Config(
        output_dir=output_dir,
        base_url=base_url.rstrip('/'),
        language=language,
        request_timeout=request_timeout,
        catalog_path=catalog_path,
    )
    logger.debug(f"Loaded configuration: {config}")
    return config


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"Expected a number of seconds, got '{raw}'", 'REQUEST_TIMEOUT')
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {raw}", 'REQUEST_TIMEOUT')
    return timeout
