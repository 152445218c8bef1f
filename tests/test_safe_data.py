from fansite.lang import Locale
from fansite.preferences import MemoryPreferenceStore
from fansite.safe_data import SafeData, use_safe_data, use_safe_text


def test_value_is_memoized_per_source_and_locale():
    source = {"name": "杨瀚森"}
    locale = [Locale.EN]
    view = SafeData(source, lambda: locale[0])

    first = view.value
    assert first == {"name": "Yang Hansen"}
    assert view.value is first

    locale[0] = Locale.ZH
    assert view.value is source

    locale[0] = Locale.EN
    again = view.value
    assert again == first
    assert again is not first


def test_new_source_object_recomputes():
    view = SafeData({"team": "波特兰开拓者"}, lambda: "en")
    first = view.value
    view.source = {"team": "孟菲斯灰熊"}
    assert view.value == {"team": "Memphis Grizzlies"}
    assert view.value is not first


def test_equal_but_distinct_source_recomputes():
    view = SafeData({"team": "中锋"}, lambda: "en")
    first = view.value
    view.source = {"team": "中锋"}
    assert view.value is not first


def test_unsupported_locale_falls_back_to_english():
    view = SafeData({"name": "杨瀚森"}, lambda: "fr")
    assert view.locale is Locale.EN
    assert view.value == {"name": "Yang Hansen"}


def test_bind_follows_store_changes():
    store = MemoryPreferenceStore()
    source = {"position": "中锋"}
    view = SafeData.bind(source, store)

    assert view.value == {"position": "Center"}
    store.set(Locale.ZH)
    assert view.value is source
    store.set(Locale.EN)
    assert view.value == {"position": "Center"}
    view.close()
    assert store._listeners == []


def test_invalidate_drops_cached_value():
    view = SafeData({"a": "中锋"}, lambda: "en")
    first = view.value
    view.invalidate()
    assert view.value is not first


def test_use_safe_data():
    assert use_safe_data({"name": "杨瀚森"}, "en") == {"name": "Yang Hansen"}


def test_use_safe_text():
    assert use_safe_text("中锋", "en") == "Center"
    assert use_safe_text("中锋", "zh") == "中锋"
    assert use_safe_text("Hello", "en") == "Hello"
