"""Locale filter for JSON-shaped fixture data.

In English mode every string that still contains Chinese is passed through
the phrase translator. The result always has the same shape as the input:
same keys in the same order, same list lengths, same nesting.
"""

from typing import Any, Callable, Optional

from .chinese import contains_chinese
from .lang import Locale, parse_locale
from .translator import translate

Transformer = Callable[[str, Any], Any]


def deep_clone(obj: Any, transformer: Optional[Transformer] = None, key: str = "") -> Any:
    """Clone a JSON-like value, applying ``transformer(key, value)`` to strings.

    ``key`` is the name of the dict entry holding ``obj``; list items inherit
    the key of the list that contains them.
    """
    if isinstance(obj, dict):
        return {k: deep_clone(v, transformer, str(k)) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [deep_clone(item, transformer, key) for item in obj]
    if isinstance(obj, str) and transformer is not None:
        return transformer(key, obj)
    return obj


def _translate_if_chinese(key: str, value: str) -> str:
    if contains_chinese(value):
        return translate(key, value)
    return value


def filter_chinese_content(data: Any, locale) -> Any:
    """Return ``data`` prepared for display in ``locale``.

    Chinese mode returns the input object itself. Any other locale, including
    unrecognised values, gets a translated deep copy.
    """
    if parse_locale(locale) is Locale.ZH:
        return data
    return deep_clone(data, _translate_if_chinese)
