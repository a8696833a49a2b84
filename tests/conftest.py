import logging
import os

import pytest

from geocoords.config.settings import get_logging_config, get_settings
from geocoords.core.env import load_dotenv_if_present

_ENV_VARS = ("GEOCOORDS_CONFIG_PATH", "GEOCOORDS_ENV_FILE", "GEOCOORDS_LOG_LEVEL", "GEOCOORDS_DELIMITER")


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_logging_config.cache_clear()
    load_dotenv_if_present.cache_clear()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    # Settings are lru_cached and may be populated from env/.env; start every test clean.
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    root_level = root.level
    root_handlers = list(root.handlers)
    _clear_caches()
    yield
    _clear_caches()
    # `.env` loading writes straight into os.environ, outside monkeypatch's bookkeeping.
    for name in _ENV_VARS:
        os.environ.pop(name, None)
    root.setLevel(root_level)
    # configure_logging() installs a console handler bound to this test's captured stderr.
    for handler in list(root.handlers):
        if handler not in root_handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
