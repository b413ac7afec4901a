import logging

import pytest
from shipping_fee_logging import configure_logging
from shipping_fee_settings import Settings, get_settings


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    get_settings.cache_clear()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    get_settings.cache_clear()


class TestConfigureLogging:

    def test_explicit_level(self):
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("bogus")
        assert logging.getLogger().level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIPPING_FEE_LOG_LEVEL", "WARNING")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING


class TestSettings:

    def test_default_log_level(self, monkeypatch):
        monkeypatch.delenv("SHIPPING_FEE_LOG_LEVEL", raising=False)
        assert Settings(_env_file=None).log_level == "INFO"
