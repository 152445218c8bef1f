"""Memoized locale-filtered views over fixture data."""

from typing import Any, Callable, Generic, Optional, TypeVar

from .data_filter import filter_chinese_content
from .lang import Locale, parse_locale
from .preferences import PreferenceStore

T = TypeVar("T")

_UNSET = object()


class SafeData(Generic[T]):
    """Filtered value for the active locale.

    The filtered result is cached against the source object (by identity)
    and the locale, and recomputed only when one of them changes.
    """

    def __init__(self, source: T, locale_provider: Callable[[], Any]):
        self.source = source
        self._locale_provider = locale_provider
        self._cached_source: Any = _UNSET
        self._cached_locale: Optional[Locale] = None
        self._cached: Any = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @classmethod
    def bind(cls, source: T, store: PreferenceStore) -> "SafeData[T]":
        """Follow ``store``; a locale change drops the cached value."""
        view = cls(source, store.get)
        view._unsubscribe = store.on_change(lambda _locale: view.invalidate())
        return view

    @property
    def locale(self) -> Locale:
        return parse_locale(self._locale_provider(), Locale.EN)

    @property
    def value(self) -> T:
        locale = self.locale
        if self._cached_source is not self.source or self._cached_locale is not locale:
            self._cached = filter_chinese_content(self.source, locale)
            self._cached_source = self.source
            self._cached_locale = locale
        return self._cached

    def invalidate(self) -> None:
        self._cached_source = _UNSET
        self._cached_locale = None

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None


def use_safe_data(data: T, locale) -> T:
    return filter_chinese_content(data, locale)


def use_safe_text(text: str, locale, fallback: str = "[EN]") -> str:
    if parse_locale(locale) is Locale.ZH:
        return text
    filtered = filter_chinese_content(text, locale)
    return filtered if isinstance(filtered, str) else fallback
