"""Tests for settings and logging setup."""

import json
import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from courseplanner.config.observability import JSONFormatter, setup_logging
from courseplanner.config.settings import DEFAULT_CATALOG, Settings


def test_defaults(isolated_home):
    settings = Settings.load()
    assert settings.catalog_path == Path(DEFAULT_CATALOG)
    assert settings.delimiter == ","
    assert settings.key_length == 7
    assert settings.reference_set_capacity == 27


def test_load_from_yaml(isolated_home):
    config_dir = isolated_home / ".courseplanner"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(yaml.dump({
        "catalog_path": "/data/catalog.csv",
        "key_length": 6,
    }))
    settings = Settings.load()
    assert settings.catalog_path == Path("/data/catalog.csv")
    assert settings.key_length == 6


def test_environment_overrides_file(isolated_home, monkeypatch):
    config_dir = isolated_home / ".courseplanner"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("catalog_path: from_file.csv\n")
    monkeypatch.setenv("COURSEPLANNER_CATALOG", "from_env.csv")
    monkeypatch.setenv("COURSEPLANNER_LOG_LEVEL", "DEBUG")
    settings = Settings.load()
    assert settings.catalog_path == Path("from_env.csv")
    assert settings.log_level == "DEBUG"


def test_save_round_trip(tmp_path):
    settings = Settings(data_dir=tmp_path / "cfg", key_length=5)
    settings.save()
    loaded = Settings.load(tmp_path / "cfg" / "config.yaml")
    assert loaded.key_length == 5


@pytest.mark.parametrize("bad", [
    {"delimiter": ""},
    {"delimiter": ",,"},
    {"key_length": 0},
    {"reference_set_capacity": -1},
    {"log_format": "xml"},
])
def test_invalid_values(bad):
    with pytest.raises(ValidationError):
        Settings(**bad)


def test_setup_logging_replaces_handlers():
    setup_logging("info")
    handler = setup_logging("debug", "json")
    logger = logging.getLogger("courseplanner")
    assert logger.handlers == [handler]
    assert logger.level == logging.DEBUG
    assert isinstance(handler.formatter, JSONFormatter)


def test_json_formatter():
    record = logging.LogRecord(
        "courseplanner.test", logging.WARNING, __file__, 1, "loaded %d", (3,), None,
    )
    data = json.loads(JSONFormatter().format(record))
    assert data["level"] == "WARNING"
    assert data["logger"] == "courseplanner.test"
    assert data["message"] == "loaded 3"
