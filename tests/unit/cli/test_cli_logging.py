"""Unit tests for CLI logging features.

Tests for --log-level, --log-file and --trace handling.
"""

import logging
from unittest.mock import patch

import pytest

from orgwriter.ast import Document, ast_to_json
from orgwriter.cli import main
from orgwriter.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for level name resolution."""

    @pytest.mark.parametrize(
        "value,expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" warning ", logging.WARNING), (logging.ERROR, 40)],
    )
    def test_known_levels(self, value, expected) -> None:
        assert resolve_log_level(value) == expected

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_log_level("LOUD")


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for root logger configuration."""

    def test_console_handler_only(self, restore_root_logger) -> None:
        root = configure_logging("INFO")
        assert root is logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_replaces_existing_handlers(self, restore_root_logger) -> None:
        configure_logging("INFO")
        root = configure_logging("ERROR")
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.ERROR

    def test_log_file(self, tmp_path, restore_root_logger) -> None:
        log_file = tmp_path / "run.log"
        root = configure_logging(logging.DEBUG, log_file=str(log_file))
        assert len(root.handlers) == 2

        logging.getLogger("orgwriter.test").warning("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_unopenable_log_file_warns(self, tmp_path, restore_root_logger) -> None:
        with patch.object(logging.Logger, "warning") as warning:
            root = configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))
        assert len(root.handlers) == 1
        warning.assert_called_once()

    def test_trace_forces_debug_and_detailed_format(self, restore_root_logger) -> None:
        root = configure_logging("ERROR", trace_mode=True)
        assert root.level == logging.DEBUG
        format_str = root.handlers[0].formatter._fmt
        assert "asctime" in format_str
        assert "name" in format_str

    def test_plain_format(self, restore_root_logger) -> None:
        root = configure_logging("WARNING")
        assert root.handlers[0].formatter._fmt == "%(levelname)s: %(message)s"


@pytest.mark.unit
@pytest.mark.cli
class TestCliLoggingFlags:
    """Tests for logging flags passed through main()."""

    @pytest.fixture(autouse=True)
    def _no_discovered_config(self, monkeypatch, restore_root_logger):
        monkeypatch.delenv("ORGWRITER_CONFIG", raising=False)
        monkeypatch.delenv("ORGWRITER_LOG_LEVEL", raising=False)
        monkeypatch.setattr("orgwriter.cli.config.discover_config_file", lambda: None)

    def test_trace_writes_debug_records_to_log_file(self, tmp_path) -> None:
        tree = tmp_path / "tree.json"
        tree.write_text(ast_to_json(Document()), encoding="utf-8")
        log_file = tmp_path / "trace.log"

        assert main([str(tree), "--trace", "--log-file", str(log_file)]) == 0

        for handler in logging.getLogger().handlers:
            handler.flush()
        contents = log_file.read_text(encoding="utf-8")
        assert "[DEBUG]" in contents
        assert "Rendering" in contents

    def test_log_level_flag(self, tmp_path) -> None:
        tree = tmp_path / "tree.json"
        tree.write_text(ast_to_json(Document()), encoding="utf-8")

        assert main([str(tree), "--log-level", "error"]) == 0
        assert logging.getLogger().level == logging.ERROR
