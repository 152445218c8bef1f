from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from ..config import get_config
from ..date_utils import parse_date
from ..fixtures import NEWS, PLAYER, STATS, get_fixture_store
from .request_locale import filtered, resolve_locale

router = APIRouter(prefix="/api", tags=["content"])

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@router.get("/player")
async def get_player(request: Request, locale: Optional[str] = None):
    lang = resolve_locale(request, locale)
    store = get_fixture_store()
    source = store.player(lang)
    return {"locale": lang.value, "player": filtered(PLAYER, source, lang)}


@router.get("/stats")
async def get_stats(request: Request, locale: Optional[str] = None):
    lang = resolve_locale(request, locale)
    stats = get_fixture_store().stats()
    return {"locale": lang.value, "stats": filtered(STATS, stats, lang)}


def _newest_first(articles: list[dict]) -> list[dict]:
    return sorted(
        articles,
        key=lambda a: parse_date(a.get("date", "")) or _EPOCH,
        reverse=True,
    )


@router.get("/news")
async def list_news(
    request: Request,
    locale: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    lang = resolve_locale(request, locale)
    news = filtered(NEWS, get_fixture_store().news(), lang)
    articles = _newest_first(news.get("articles", []))
    page_size = limit or get_config().news_page_size
    page = articles[offset:offset + page_size]
    return {
        "locale": lang.value,
        "featured": news.get("featured"),
        "articles": page,
        "total": len(articles),
        "hasMore": offset + len(page) < len(articles),
    }


@router.get("/news/{slug}")
async def get_article(slug: str, request: Request, locale: Optional[str] = None):
    lang = resolve_locale(request, locale)
    article = get_fixture_store().find_article(slug)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return {"locale": lang.value, "article": filtered(f"{NEWS}:{slug}", article, lang)}
