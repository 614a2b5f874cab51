"""Unit tests for cli.config module."""

from unittest.mock import patch

import pytest

from gis_docs.cli.config import load_config
from gis_docs.cli.errors import ConfigError
from gis_docs.scraper.scraper import DEFAULT_OPENAPI_URL_TEMPLATES

ENV_VARS = ["OUTPUT_DIR", "BASE_URL", "DOCS_LANGUAGE", "REQUEST_TIMEOUT", "CATALOG_PATH"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the caller's environment and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("gis_docs.cli.config.load_dotenv") as mock_load_dotenv:
        yield mock_load_dotenv


class TestDefaults:
    """Test cases for default configuration."""

    def test_defaults(self):
        config = load_config()

        assert config.output_dir == "./docs"
        assert config.base_url == "https://docs.2gis.com"
        assert config.language == "ru"
        assert config.request_timeout == 30.0
        assert config.catalog_path is None
        assert config.openapi_url_templates == DEFAULT_OPENAPI_URL_TEMPLATES

    def test_loads_dotenv(self, clean_env):
        load_config()

        clean_env.assert_called_once_with()


class TestEnvironment:
    """Test cases for environment variable overrides."""

    def test_environment_values(self, monkeypatch):
        monkeypatch.setenv("OUTPUT_DIR", "/tmp/out")
        monkeypatch.setenv("BASE_URL", "http://localhost:8080/")
        monkeypatch.setenv("DOCS_LANGUAGE", "en")
        monkeypatch.setenv("REQUEST_TIMEOUT", "5.5")
        monkeypatch.setenv("CATALOG_PATH", "my-catalog.yaml")

        config = load_config()

        assert config.output_dir == "/tmp/out"
        assert config.base_url == "http://localhost:8080"
        assert config.language == "en"
        assert config.request_timeout == 5.5
        assert config.catalog_path == "my-catalog.yaml"

    def test_explicit_values_override_environment(self, monkeypatch):
        monkeypatch.setenv("OUTPUT_DIR", "/tmp/env")
        monkeypatch.setenv("BASE_URL", "https://env.example.com")

        config = load_config(output_dir="./cli", base_url="https://cli.example.com")

        assert config.output_dir == "./cli"
        assert config.base_url == "https://cli.example.com"

    def test_blank_timeout_uses_default(self, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT", "  ")

        assert load_config().request_timeout == 30.0


class TestValidation:
    """Test cases for invalid settings."""

    def test_non_numeric_timeout(self, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT", "soon")

        with pytest.raises(ConfigError) as exc_info:
            load_config()

        assert exc_info.value.setting == "REQUEST_TIMEOUT"
        assert "soon" in str(exc_info.value)

    def test_negative_timeout(self, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT", "-1")

        with pytest.raises(ConfigError, match="positive"):
            load_config()

    def test_zero_timeout_argument(self):
        with pytest.raises(ConfigError):
            load_config(request_timeout=0)

    def test_base_url_without_scheme(self):
        with pytest.raises(ConfigError) as exc_info:
            load_config(base_url="docs.2gis.com")

        assert exc_info.value.setting == "BASE_URL"

    def test_base_url_with_unsupported_scheme(self):
        with pytest.raises(ConfigError):
            load_config(base_url="ftp://docs.2gis.com")

    def test_message_format(self):
        error = ConfigError("bad value", "BASE_URL")

        assert str(error) == "Configuration error in setting 'BASE_URL': bad value"
        assert str(ConfigError("bad value")) == "Configuration error: bad value"
