import logging

import pytest

from realestate_calc.config import AppSettings, TABS, configure_logging, load_settings
from realestate_calc.data.loader import IngestOptions


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("REC_SKIP_FIRST_ROW", "REC_DROP_INCOMPLETE_ROWS", "REC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings()
    assert settings == AppSettings(skip_first_row=True, drop_incomplete=True, log_level="INFO")
    assert settings.ingest_options() == IngestOptions()


@pytest.mark.parametrize("raw, expected", [("0", False), ("false", False), ("No", False), ("ON", True), ("1", True)])
def test_boolean_env_values(clean_env, raw, expected):
    clean_env.setenv("REC_SKIP_FIRST_ROW", raw)
    clean_env.setenv("REC_DROP_INCOMPLETE_ROWS", raw)
    settings = load_settings()
    assert settings.skip_first_row is expected
    assert settings.ingest_options().drop_incomplete is expected


def test_invalid_values_fall_back_to_defaults(clean_env):
    clean_env.setenv("REC_SKIP_FIRST_ROW", "maybe")
    clean_env.setenv("REC_LOG_LEVEL", "chatty")
    settings = load_settings()
    assert settings.skip_first_row is True
    assert settings.log_level == "INFO"


def test_log_level_is_normalised(clean_env):
    clean_env.setenv("REC_LOG_LEVEL", " debug ")
    assert load_settings().log_level == "DEBUG"


def test_configure_logging_sets_package_level():
    configure_logging("WARNING")
    assert logging.getLogger("realestate_calc").level == logging.WARNING


def test_tabs_have_unique_keys():
    keys = [tab.key for tab in TABS]
    assert keys == ["calculator", "data_quality"]
