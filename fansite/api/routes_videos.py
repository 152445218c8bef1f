from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Request

from ..fixtures import VIDEOS, get_fixture_store
from ..lang import Locale
from ..videos import (
    category_display_name,
    filter_by_category,
    sanitize_videos,
    search_videos,
    sort_by_date,
    video_stats,
)
from .request_locale import filtered, resolve_locale

router = APIRouter(prefix="/api/videos", tags=["videos"])

# locale -> (raw fixture object, sanitized list)
_sanitized: dict[Locale, tuple[Any, list[dict]]] = {}


def _videos_for(locale: Locale) -> list[dict]:
    raw = get_fixture_store().videos()
    cached = _sanitized.get(locale)
    if cached is None or cached[0] is not raw:
        cached = (raw, sort_by_date(sanitize_videos(raw, locale)))
        _sanitized[locale] = cached
    return filtered(VIDEOS, cached[1], locale)


@router.get("")
async def list_videos(
    request: Request,
    locale: Optional[str] = None,
    category: str = "all",
    q: str = "",
):
    lang = resolve_locale(request, locale)
    videos = search_videos(filter_by_category(_videos_for(lang), category), q)
    return {
        "locale": lang.value,
        "category": category,
        "categoryName": category_display_name(category, lang) if category != "all" else None,
        "videos": videos,
        "total": len(videos),
    }


@router.get("/stats")
async def get_video_stats(request: Request, locale: Optional[str] = None):
    lang = resolve_locale(request, locale)
    return {"locale": lang.value, "stats": video_stats(_videos_for(lang))}


@router.get("/{video_id}")
async def get_video(video_id: str, request: Request, locale: Optional[str] = None):
    lang = resolve_locale(request, locale)
    for video in _videos_for(lang):
        if str(video.get("id")) == video_id or video.get("youtubeId") == video_id:
            return {
                "locale": lang.value,
                "video": video,
                "categoryName": category_display_name(video.get("category", ""), lang),
            }
    raise HTTPException(status_code=404, detail="Video not found")


def clear_cache() -> None:
    _sanitized.clear()
