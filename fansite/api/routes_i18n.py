from fastapi import APIRouter, HTTPException

from ..i18n import LANG_NAMES, get_messages
from ..lang import parse_locale

router = APIRouter(prefix="/api/i18n", tags=["i18n"])


@router.get("")
async def list_languages():
    return {"languages": [{"code": code, "name": name} for code, name in LANG_NAMES.items()]}


@router.get("/{locale}")
async def get_bundle(locale: str):
    lang = parse_locale(locale)
    if lang is None:
        raise HTTPException(status_code=404, detail="Unsupported locale")
    messages = get_messages(lang.value)
    if not messages:
        raise HTTPException(status_code=503, detail="Message bundle unavailable")
    return {"locale": lang.value, "messages": messages}
