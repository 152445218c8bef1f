import logging
from typing import Literal, Optional

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from ..config import AppConfig, get_config, update_config
from ..fixtures import reset_fixture_store
from ..i18n import MessageCatalog
from ..lang import LOCALE_COOKIE, LOCALE_COOKIE_MAX_AGE, SUPPORTED_LOCALES, Locale
from ..preferences import get_preference_store, set_preference_store
from .request_locale import clear_views, resolve_locale
from .routes_videos import clear_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/settings", tags=["settings"])

_catalog: Optional[MessageCatalog] = None


def get_catalog() -> MessageCatalog:
    global _catalog
    if _catalog is None:
        _catalog = MessageCatalog(get_preference_store().get())
    return _catalog


def reset_catalog() -> None:
    global _catalog
    _catalog = None


@router.get("")
async def get_settings():
    return get_config().model_dump()


@router.put("")
async def update_settings(config: AppConfig):
    updated = update_config(config)
    # Data dir and default locale may have changed.
    reset_fixture_store()
    set_preference_store(None)
    reset_catalog()
    clear_views()
    clear_cache()
    return updated.model_dump()


class LocaleRequest(BaseModel):
    locale: Literal["zh", "en"]


def _locale_payload(locale: Locale, changed: bool) -> dict:
    return {
        "locale": locale.value,
        "supported": SUPPORTED_LOCALES,
        "changed": changed,
    }


def _apply_locale(target: Locale, response: Response) -> dict:
    catalog = get_catalog()
    previous = catalog.locale
    active = catalog.switch(target)
    if active is not target:
        # Bundle failed to load: keep showing the previous locale.
        return _locale_payload(active, changed=False)
    get_preference_store().set(active)
    response.set_cookie(LOCALE_COOKIE, active.value, max_age=LOCALE_COOKIE_MAX_AGE, path="/")
    return _locale_payload(active, changed=active is not previous)


@router.get("/locale")
async def get_locale(request: Request):
    locale = resolve_locale(request)
    return {"locale": locale.value, "supported": SUPPORTED_LOCALES}


@router.put("/locale")
async def set_locale(req: LocaleRequest, response: Response):
    return _apply_locale(Locale(req.locale), response)


@router.post("/locale/toggle")
async def toggle_locale(request: Request, response: Response):
    current = resolve_locale(request)
    return _apply_locale(current.toggled(), response)
