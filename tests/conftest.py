import os
import tempfile

# Keep the developer's ~/.fansite untouched; must run before fansite imports.
os.environ.setdefault("FANSITE_CONFIG_DIR", tempfile.mkdtemp(prefix="fansite-test-"))

import pytest

from fansite import config as config_module
from fansite import i18n
from fansite.api import request_locale, routes_settings, routes_videos
from fansite.fixtures import reset_fixture_store
from fansite.lang import Locale
from fansite.preferences import MemoryPreferenceStore, set_preference_store


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "_config_dir", tmp_path)
    monkeypatch.setattr(config_module, "_config_file", tmp_path / "config.json")
    for name in ("FANSITE_DATA_DIR", "FANSITE_DEV_MODE", "FANSITE_DEFAULT_LOCALE"):
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    reset_fixture_store()
    store = MemoryPreferenceStore(default=Locale.EN)
    set_preference_store(store)
    routes_settings.reset_catalog()
    request_locale.clear_views()
    routes_videos.clear_cache()
    yield store
    config_module.reset_config()
    reset_fixture_store()
    set_preference_store(None)
    routes_settings.reset_catalog()
    request_locale.clear_views()
    routes_videos.clear_cache()
    i18n._cache.clear()


@pytest.fixture
def preference_store(isolated_config):
    return isolated_config


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from fansite.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def dev_mode():
    cfg = config_module.get_config()
    cfg.dev_mode = True
    cfg.audit.enabled = True
    return cfg
