import json

import pytest

from fansite import i18n
from fansite.i18n import MessageCatalog, get_messages, t
from fansite.lang import Locale


@pytest.fixture
def locales_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(i18n, "_locales_dir", tmp_path)
    i18n._cache.clear()
    (tmp_path / "en.json").write_text(json.dumps({"nav": {"home": "Home"}}), encoding="utf-8")
    return tmp_path


def test_bundles_have_matching_keys():
    def keys(node, prefix=""):
        out = set()
        for k, v in node.items():
            path = f"{prefix}{k}"
            out |= keys(v, f"{path}.") if isinstance(v, dict) else {path}
        return out

    assert keys(get_messages("en")) == keys(get_messages("zh"))


def test_dotted_lookup_and_formatting():
    assert t("nav.home") == "Home"
    assert t("nav.home", "zh") != "Home"
    assert t("videos.views", count=12) == "12 views"


def test_missing_key_returns_key():
    assert t("nav.missing") == "nav.missing"
    assert t("nav") == "nav"


def test_missing_bundle_is_empty(locales_dir):
    assert get_messages("zh") == {}
    assert t("nav.home", "zh") == "nav.home"


def test_catalog_switch(caplog):
    catalog = MessageCatalog(Locale.EN)
    assert catalog.t("nav.home") == "Home"
    assert catalog.switch("zh") is Locale.ZH
    assert catalog.locale is Locale.ZH
    assert catalog.t("nav.home") != "Home"


def test_failed_switch_keeps_previous_bundle(locales_dir, caplog):
    catalog = MessageCatalog(Locale.EN)
    assert catalog.switch(Locale.ZH) is Locale.EN
    assert catalog.locale is Locale.EN
    assert catalog.t("nav.home") == "Home"
    assert "Failed to change locale" in caplog.text


def test_unsupported_switch_is_rejected():
    catalog = MessageCatalog(Locale.EN)
    assert catalog.switch("fr") is Locale.EN


def test_malformed_bundle(locales_dir):
    (locales_dir / "zh.json").write_text("[1, 2]", encoding="utf-8")
    assert get_messages("zh") == {}


def test_bad_format_arguments_return_unformatted_text(caplog):
    catalog = MessageCatalog(Locale.EN)
    assert catalog.t("videos.views", wrong=1) == "{count} views"
    assert t("videos.views", wrong=1) == "{count} views"
    assert "Bad format arguments for message videos.views" in caplog.text
    assert catalog.t("videos.views", count=3) == "3 views"
