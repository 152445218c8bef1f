"""Locale preference stores.

A store holds the user's chosen display locale and notifies subscribers when
it changes. Callers receive a store instead of reading ambient storage so the
filter and its consumers can be tested with the in-memory variant.
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from .lang import Locale, parse_locale

logger = logging.getLogger(__name__)

Listener = Callable[[Locale], None]


class PreferenceStore(ABC):
    """get/set/on_change contract shared by every store."""

    def __init__(self, default: Locale = Locale.EN):
        self.default = default
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @abstractmethod
    def _read(self) -> Optional[Locale]:
        ...

    @abstractmethod
    def _write(self, locale: Locale) -> None:
        ...

    @property
    def has_preference(self) -> bool:
        return self._read() is not None

    def get(self) -> Locale:
        return self._read() or self.default

    def set(self, locale) -> Locale:
        parsed = parse_locale(locale)
        if parsed is None:
            raise ValueError(f"Unsupported locale: {locale!r}")
        previous = self._read()
        self._write(parsed)
        if previous is not parsed:
            logger.info("Locale preference changed to %s", parsed.value)
            self._notify(parsed)
        return parsed

    def on_change(self, callback: Listener) -> Callable[[], None]:
        """Subscribe to changes; returns a function that unsubscribes."""
        with self._lock:
            self._listeners.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                try:
                    self._listeners.remove(callback)
                except ValueError:
                    pass

        return unsubscribe

    def _notify(self, locale: Locale) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for callback in listeners:
            callback(locale)


class MemoryPreferenceStore(PreferenceStore):
    def __init__(self, default: Locale = Locale.EN, initial: Optional[Locale] = None):
        super().__init__(default)
        self._locale = initial

    def _read(self) -> Optional[Locale]:
        return self._locale

    def _write(self, locale: Locale) -> None:
        self._locale = locale


class FilePreferenceStore(PreferenceStore):
    """Persists the preference as ``{"locale": "en"}`` in a JSON file."""

    def __init__(self, path: Path, default: Locale = Locale.EN):
        super().__init__(default)
        self.path = Path(path)

    def _read(self) -> Optional[Locale]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            logger.warning("Failed to read locale preference from %s", self.path)
            return None
        if not isinstance(data, dict):
            return None
        return parse_locale(data.get("locale"))

    def _write(self, locale: Locale) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"locale": locale.value}, indent=2),
            encoding="utf-8",
        )


_store: Optional[PreferenceStore] = None


def get_preference_store() -> PreferenceStore:
    global _store
    if _store is None:
        from .config import get_config, get_preferences_path

        default = parse_locale(get_config().default_locale, Locale.EN)
        _store = FilePreferenceStore(get_preferences_path(), default=default)
    return _store


def set_preference_store(store: Optional[PreferenceStore]) -> None:
    global _store
    _store = store
