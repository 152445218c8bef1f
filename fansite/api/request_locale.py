from typing import Any, Optional

from fastapi import Request

from ..config import get_config
from ..lang import LOCALE_COOKIE, Locale, detect_locale, parse_locale
from ..preferences import get_preference_store
from ..safe_data import SafeData

_views: dict[tuple[str, Locale], SafeData] = {}


def resolve_locale(request: Request, locale: Optional[str] = None) -> Locale:
    store = get_preference_store()
    return detect_locale(
        query=locale,
        cookie=request.cookies.get(LOCALE_COOKIE),
        accept_language=request.headers.get("accept-language"),
        stored=store.get() if store.has_preference else None,
        default=parse_locale(get_config().default_locale, Locale.EN),
    )


def filtered(name: str, source: Any, locale: Locale) -> Any:
    """Locale-filtered ``source``, reused until the fixture object changes."""
    key = (name, locale)
    view = _views.get(key)
    if view is None:
        view = SafeData(source, lambda: locale)
        _views[key] = view
    view.source = source
    return view.value


def clear_views() -> None:
    _views.clear()
