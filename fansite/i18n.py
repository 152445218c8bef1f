"""Dict-based UI label catalogs, one JSON bundle per locale."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .lang import Locale, parse_locale

logger = logging.getLogger(__name__)

_locales_dir = Path(__file__).parent / "locales"
_cache: dict[str, dict[str, Any]] = {}

LANG_NAMES: dict[str, str] = {
    "en": "English",
    "zh": "中文",
}


class BundleLoadError(Exception):
    pass


def _load(lang: str) -> dict[str, Any]:
    if lang not in _cache:
        path = _locales_dir / f"{lang}.json"
        if not path.exists():
            raise BundleLoadError(f"No message bundle for locale '{lang}'")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            raise BundleLoadError(f"Cannot read message bundle {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise BundleLoadError(f"Message bundle {path} is not a JSON object")
        _cache[lang] = data
    return _cache[lang]


def get_messages(lang: str) -> dict[str, Any]:
    """Return the nested message bundle for ``lang`` (empty if unavailable)."""
    try:
        return _load(lang)
    except BundleLoadError as exc:
        logger.error("Failed to load messages: %s", exc)
        return {}


def _lookup(messages: dict[str, Any], key: str) -> Optional[str]:
    node: Any = messages
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def _format(key: str, text: str, kwargs: dict[str, Any]) -> str:
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        logger.warning("Bad format arguments for message %s", key)
        return text


def t(key: str, lang: str = "en", **kwargs: Any) -> str:
    """Look up a dotted message key such as ``nav.home``.

    A missing key returns the key itself so the gap is visible on the page.
    """
    text = _lookup(get_messages(lang), key)
    if text is None:
        logger.debug("Translation missing: %s (%s)", key, lang)
        text = key
    return _format(key, text, kwargs)


class MessageCatalog:
    """The active locale's bundle.

    Switching locale loads the new bundle first; if loading fails the error
    is logged and the previous bundle stays active.
    """

    def __init__(self, locale: Locale = Locale.EN):
        self.locale = locale
        self.messages: dict[str, Any] = get_messages(locale.value)

    def switch(self, locale) -> Locale:
        target = parse_locale(locale)
        if target is None:
            logger.error("Failed to change locale: unsupported locale %r", locale)
            return self.locale
        try:
            messages = _load(target.value)
        except BundleLoadError as exc:
            logger.error("Failed to change locale: %s", exc)
            return self.locale
        self.messages = messages
        self.locale = target
        return self.locale

    def t(self, key: str, **kwargs: Any) -> str:
        text = _lookup(self.messages, key)
        if text is None:
            return key
        return _format(key, text, kwargs)
