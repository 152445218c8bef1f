"""Best-effort Chinese -> English translation for fixture strings."""

import logging
from typing import Optional

from .chinese import contains_chinese, strip_chinese
from .phrases import DEFAULT_PHRASES, PhraseDictionary

logger = logging.getLogger(__name__)

GENERIC_PLACEHOLDER = "[EN]"

# (field-name hint, placeholder). A None placeholder means "strip the
# remaining Chinese characters" instead of replacing the whole value.
FIELD_PLACEHOLDERS: list[tuple[str, Optional[str]]] = [
    ("name", "Yang Hansen"),
    ("team", "Portland Trail Blazers"),
    ("position", "Center"),
    ("date", None),
]


def _fallback(field: str, text: str) -> str:
    hint = (field or "").lower()
    for marker, placeholder in FIELD_PLACEHOLDERS:
        if marker not in hint:
            continue
        if placeholder is not None:
            return placeholder
        stripped = strip_chinese(text)
        if not contains_chinese(stripped):
            return stripped
        break
    return GENERIC_PLACEHOLDER


def translate(field: str, value: str, phrases: PhraseDictionary = DEFAULT_PHRASES) -> str:
    """Translate a fixture string for English display.

    ``field`` is the name of the key holding the value and is only used to
    pick a placeholder when the dictionary cannot cover the whole text.
    """
    if not contains_chinese(value):
        return value

    exact = phrases.get(value)
    if exact is not None:
        return exact

    result = phrases.substitute(value)
    if contains_chinese(result):
        logger.debug("No full translation for field %r: %r", field, value)
        return _fallback(field, result)
    return result
