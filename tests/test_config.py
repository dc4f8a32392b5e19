"""Tests for environment configuration and logging setup."""

import json
import logging

import pytest

from tabsql.core.config import load_config
from tabsql.utils.logging import JsonFormatter, setup_logging


class TestConfig:
    """Tests for TabSQLConfig."""

    def test_defaults(self, monkeypatch):
        for key in (
            "TABSQL_LOG_LEVEL",
            "TABSQL_LOG_FORMAT",
            "TABSQL_DIALECT",
            "TABSQL_PROFILE_PATH",
            "TABSQL_DEFAULT_TABLE_NAME",
            "TABSQL_ECHO_SQL",
        ):
            monkeypatch.delenv(key, raising=False)
        cfg = load_config()
        assert cfg.log_level == "INFO"
        assert cfg.log_format == "text"
        assert cfg.dialect == "iris"
        assert cfg.profile_path is None
        assert cfg.default_table_name == "export"
        assert cfg.echo_sql is False

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TABSQL_LOG_LEVEL", "debug")
        monkeypatch.setenv("TABSQL_DIALECT", "SQLite")
        monkeypatch.setenv("TABSQL_PROFILE_PATH", str(tmp_path / "p.yaml"))
        monkeypatch.setenv("TABSQL_ECHO_SQL", "yes")
        cfg = load_config()
        assert cfg.log_level == "DEBUG"
        assert cfg.dialect == "sqlite"
        assert cfg.profile_path == tmp_path / "p.yaml"
        assert cfg.echo_sql is True
        assert cfg.as_dict()["profile_path"] == str(tmp_path / "p.yaml")

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("TABSQL_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="TABSQL_LOG_LEVEL"):
            load_config()

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("TABSQL_LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="TABSQL_LOG_FORMAT"):
            load_config()

    def test_blank_table_name(self, monkeypatch):
        monkeypatch.setenv("TABSQL_DEFAULT_TABLE_NAME", "  ")
        with pytest.raises(ValueError):
            load_config()


class TestLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("tabsql")
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_setup_replaces_handlers(self):
        logger = setup_logging("WARNING", "text")
        setup_logging("DEBUG", "json")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)
        assert logger.level == logging.DEBUG

    def test_json_formatter(self):
        record = logging.LogRecord("tabsql.x", logging.ERROR, __file__, 1, "bad %s", ("row",), None)
        payload = json.loads(JsonFormatter().format(record))
        assert payload["level"] == "ERROR"
        assert payload["logger"] == "tabsql.x"
        assert payload["message"] == "bad row"
