"""Display locale and request-level locale detection."""

from enum import Enum
from typing import Optional

LOCALE_COOKIE = "locale"
LOCALE_COOKIE_MAX_AGE = 31536000  # one year


class Locale(str, Enum):
    ZH = "zh"
    EN = "en"

    @property
    def is_native(self) -> bool:
        """Fixtures are authored in Chinese; ``zh`` needs no filtering."""
        return self is Locale.ZH

    def toggled(self) -> "Locale":
        return Locale.EN if self is Locale.ZH else Locale.ZH


SUPPORTED_LOCALES: list[str] = [loc.value for loc in Locale]


def parse_locale(value, default: Optional[Locale] = None) -> Optional[Locale]:
    """Parse ``value`` into a Locale, returning ``default`` when unsupported.

    Accepts region-qualified tags such as ``zh-CN`` or ``en_US``.
    """
    if isinstance(value, Locale):
        return value
    if not isinstance(value, str) or not value.strip():
        return default
    primary = value.strip().replace("_", "-").split("-")[0].lower()
    try:
        return Locale(primary)
    except ValueError:
        return default


def parse_accept_language(header: Optional[str]) -> Optional[Locale]:
    """Return the highest-weighted supported locale from an Accept-Language header."""
    if not header:
        return None
    candidates: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        if not tag:
            continue
        weight = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                weight = float(params[2:])
            except ValueError:
                weight = 0.0
        candidates.append((-weight, index, tag))
    for neg_weight, _, tag in sorted(candidates):
        if neg_weight >= 0:
            break
        locale = parse_locale(tag)
        if locale is not None:
            return locale
    return None


def detect_locale(
    query: Optional[str] = None,
    cookie: Optional[str] = None,
    accept_language: Optional[str] = None,
    stored: Optional[Locale] = None,
    default: Locale = Locale.EN,
) -> Locale:
    """Resolve the display locale.

    Order: explicit query parameter, ``locale`` cookie, stored preference,
    browser language, then the configured default.
    """
    for candidate in (query, cookie):
        locale = parse_locale(candidate)
        if locale is not None:
            return locale
    if stored is not None:
        return stored
    locale = parse_accept_language(accept_language)
    if locale is not None:
        return locale
    return default
