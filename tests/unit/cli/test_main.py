"""Unit tests for main CLI entry point (main.py).

Tests the Typer CLI application using CliRunner.
"""

import logging
from unittest.mock import MagicMock, Mock, patch

import pytest
from typer.testing import CliRunner

from gis_docs import __version__
from gis_docs.cli.errors import ConfigError
from gis_docs.cli.main import _configure_logging, app
from gis_docs.cli.models import Config, ExitCode


runner = CliRunner()


@pytest.fixture
def app_logger():
    """The package logger, with handlers removed after the test."""
    logger = logging.getLogger("gis_docs")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Test cases for _configure_logging function."""

    def test_verbosity_0_sets_warning_level(self):
        """Verbosity 0 sets logging to WARNING level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(0)

            mock_get_logger.assert_any_call("gis_docs")
            mock_app_logger.setLevel.assert_called_with(logging.WARNING)

    def test_verbosity_1_sets_info_level(self):
        """Verbosity 1 sets logging to INFO level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(1)

            mock_app_logger.setLevel.assert_called_with(logging.INFO)

    def test_verbosity_2_sets_debug_level(self):
        """Verbosity 2+ sets logging to DEBUG level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(3)

            mock_app_logger.setLevel.assert_called_with(logging.DEBUG)

    def test_root_logger_untouched(self, app_logger):
        root_level = logging.getLogger().level

        _configure_logging(2)

        assert logging.getLogger().level == root_level
        assert app_logger.level == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self, app_logger):
        _configure_logging(1)
        _configure_logging(1)

        assert len(app_logger.handlers) == 1

    def test_logdir_creates_timestamped_file(self, app_logger, tmp_path):
        logdir = tmp_path / "logs"

        _configure_logging(1, str(logdir))

        log_files = list(logdir.glob("gis-docs_*.log"))
        assert len(log_files) == 1
        assert len(app_logger.handlers) == 2

    def test_reconfiguring_closes_previous_file_handler(self, app_logger, tmp_path):
        _configure_logging(1, str(tmp_path / "logs"))
        old_handler = next(
            h for h in app_logger.handlers if isinstance(h, logging.FileHandler)
        )

        _configure_logging(1)

        assert old_handler.stream is None
        assert old_handler not in app_logger.handlers
        assert len(app_logger.handlers) == 1


@patch('gis_docs.cli.main._configure_logging')
@patch('gis_docs.cli.main.OutputHandler')
class TestMainCommand:
    """Test cases for the gis-docs command."""

    @patch('gis_docs.cli.main.ParseCommand')
    @patch('gis_docs.cli.main.load_config')
    def test_default_run(self, mock_load_config, mock_parse_cmd, mock_output, mock_logging):
        """Running without options parses every API."""
        config = Config()
        mock_load_config.return_value = config
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.SUCCESS
        mock_parse_cmd.return_value = mock_instance

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.SUCCESS
        mock_load_config.assert_called_once_with(output_dir=None, base_url=None, catalog_path=None)
        mock_parse_cmd.assert_called_once_with(config=config, output_handler=mock_output.return_value)
        mock_instance.run.assert_called_once_with(api_names=None, skip_openapi=False)
        mock_logging.assert_called_once_with(0, None)

    @patch('gis_docs.cli.main.ParseCommand')
    @patch('gis_docs.cli.main.load_config')
    def test_options_passed_through(self, mock_load_config, mock_parse_cmd, mock_output, mock_logging):
        mock_load_config.return_value = Config()
        mock_parse_cmd.return_value.run.return_value = ExitCode.SUCCESS

        result = runner.invoke(app, [
            "--output-dir", "./out",
            "--base-url", "https://example.com",
            "--catalog", "catalog.yaml",
            "--api", "places",
            "--api", "tsp",
            "--skip-openapi",
            "-v", "2",
            "--logdir", "./logs",
            "--no-color",
        ])

        assert result.exit_code == ExitCode.SUCCESS
        mock_load_config.assert_called_once_with(
            output_dir="./out",
            base_url="https://example.com",
            catalog_path="catalog.yaml",
        )
        mock_parse_cmd.return_value.run.assert_called_once_with(
            api_names=["places", "tsp"],
            skip_openapi=True,
        )
        mock_output.assert_called_once_with(verbosity=2, no_color=True)
        mock_logging.assert_called_once_with(2, "./logs")

    @patch('gis_docs.cli.main.ParseCommand')
    @patch('gis_docs.cli.main.load_config')
    def test_run_failure_exit_code(self, mock_load_config, mock_parse_cmd, mock_output, mock_logging):
        mock_load_config.return_value = Config()
        mock_parse_cmd.return_value.run.return_value = ExitCode.GENERAL_ERROR

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.GENERAL_ERROR

    @patch('gis_docs.cli.main.ParseCommand')
    @patch('gis_docs.cli.main.load_config')
    def test_config_error_exits_1(self, mock_load_config, mock_parse_cmd, mock_output, mock_logging):
        mock_load_config.side_effect = ConfigError("Timeout must be positive", "REQUEST_TIMEOUT")

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        mock_parse_cmd.assert_not_called()
        mock_output.return_value.error.assert_called_once()

    @patch('gis_docs.cli.main.ParseCommand')
    def test_invalid_base_url_exits_1(self, mock_parse_cmd, mock_output, mock_logging):
        result = runner.invoke(app, ["--base-url", "not-a-url"])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        mock_parse_cmd.assert_not_called()

    def test_version(self, mock_output, mock_logging):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"gis-docs version {__version__}" in result.output
        mock_logging.assert_not_called()

    def test_help(self, mock_output, mock_logging):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "--skip-openapi" in result.output
