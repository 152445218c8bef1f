"""Video fixture validation and per-locale cleanup."""

import logging
import re
from datetime import datetime, timezone
from typing import Any
from urllib.parse import parse_qs, urlparse, urlunparse

from .chinese import remove_ideographs
from .date_utils import is_valid_date, normalize_date, parse_date
from .lang import Locale, parse_locale

logger = logging.getLogger(__name__)

PLACEHOLDER_THUMBNAIL = "/images/video-placeholder.svg"
MAX_TAGS = 10
REQUIRED_FIELDS = ("id", "title", "thumbnail", "publishedAt")

ALLOWED_THUMBNAIL_DOMAINS = [
    "images.unsplash.com",
    "via.placeholder.com",
    "img.youtube.com",
    "i.ytimg.com",
    "i1.ytimg.com",
    "i2.ytimg.com",
    "i3.ytimg.com",
    "i4.ytimg.com",
]
YOUTUBE_DOMAINS = ("youtube.com", "ytimg.com")

CATEGORY_NAMES: dict[str, dict[str, str]] = {
    "highlights": {"en": "Highlights", "zh": "精彩集锦"},
    "draft": {"en": "Draft", "zh": "选秀"},
    "summer_league": {"en": "Summer League", "zh": "夏季联赛"},
    "interview": {"en": "Interview", "zh": "采访"},
    "training": {"en": "Training", "zh": "训练"},
    "news": {"en": "News", "zh": "新闻"},
    "skills": {"en": "Skills", "zh": "技巧"},
}
OTHER_CATEGORY = {"en": "Other", "zh": "其他"}

_CHINESE_PUNCTUATION = re.compile(r"[，。！？；：“”‘’（）【】]")
_PROMO_LINES = re.compile(r"(?:微博|B站|微信公众号|WeChat|Weibo)：[^\n]*\n?")
_EMPTY_BRACKETS = re.compile(r"\(\s*\)|\[\s*\]|\{\s*\}")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _host_matches(host: str, domains) -> bool:
    """Exact host or a subdomain of one of ``domains``."""
    host = host.lower().rstrip(".")
    return any(host == d or host.endswith("." + d) for d in domains)


def _clean_text(text: Any, locale: Locale) -> str:
    if not isinstance(text, str) or not text:
        return ""
    cleaned = _PROMO_LINES.sub("", text.strip())
    if locale is Locale.EN:
        cleaned = remove_ideographs(cleaned)
        cleaned = _CHINESE_PUNCTUATION.sub("", cleaned)
        cleaned = _EMPTY_BRACKETS.sub("", cleaned)
    return re.sub(r"\s+", " ", cleaned).strip()


def sanitize_text(text: Any, locale=Locale.EN) -> str:
    """Clean a title or description for display.

    English mode drops Chinese characters and punctuation. Promotional
    social-media lines are removed in both locales.
    """
    resolved = parse_locale(locale, Locale.EN)
    cleaned = _clean_text(text, resolved)
    if cleaned:
        return cleaned
    return "Video Content" if resolved is Locale.EN else "视频内容"


def sanitize_thumbnail_url(url: Any) -> str:
    if not isinstance(url, str) or not url:
        return PLACEHOLDER_THUMBNAIL
    if url.startswith("/images/"):
        return url
    parsed = urlparse(url)
    host = parsed.hostname or ""
    if parsed.scheme not in ("http", "https") or not host:
        if "placeholder" not in url:
            logger.warning("Invalid thumbnail URL detected: %s, using fallback", url)
        return PLACEHOLDER_THUMBNAIL
    if _host_matches(host, YOUTUBE_DOMAINS):
        return urlunparse(parsed._replace(scheme="https"))
    if _host_matches(host, ALLOWED_THUMBNAIL_DOMAINS):
        return url
    return PLACEHOLDER_THUMBNAIL


def sanitize_embed_url(url: Any) -> str:
    if not isinstance(url, str) or not url:
        return ""
    parsed = urlparse(url)
    if parsed.hostname == "www.youtube.com":
        if parsed.path.startswith("/embed/"):
            return urlunparse(parsed._replace(scheme="https"))
        if parsed.path == "/watch":
            video_id = parse_qs(parsed.query).get("v", [""])[0]
            if video_id:
                return f"https://www.youtube.com/embed/{video_id}"
    logger.warning("Invalid embed URL: %s", url)
    return ""


def sanitize_watch_url(url: Any) -> str:
    if not isinstance(url, str) or not url:
        return ""
    parsed = urlparse(url)
    if parsed.hostname == "www.youtube.com" and parsed.path == "/watch":
        return urlunparse(parsed._replace(scheme="https"))
    logger.warning("Invalid watch URL: %s", url)
    return ""


def sanitize_tags(tags: Any, locale=Locale.EN) -> list[str]:
    if not isinstance(tags, list):
        return []
    resolved = parse_locale(locale, Locale.EN)
    cleaned = [_clean_text(tag, resolved) for tag in tags]
    return [tag for tag in cleaned if tag][:MAX_TAGS]


def is_valid_video(video: Any) -> bool:
    if not isinstance(video, dict):
        return False
    for field in REQUIRED_FIELDS:
        value = video.get(field)
        if not value or not isinstance(value, str):
            logger.warning("Video missing required field %s: %s", field, video.get("id"))
            return False
    if not is_valid_date(video["publishedAt"]):
        logger.warning("Video has invalid publishedAt date: %s", video["publishedAt"])
        return False
    return True


def sanitize_video(video: dict, locale=Locale.EN) -> dict:
    title = sanitize_text(video.get("title"), locale)
    description = sanitize_text(video.get("description"), locale)
    thumbnail = sanitize_thumbnail_url(video.get("thumbnail"))
    published = normalize_date(video["publishedAt"])
    return {
        **video,
        "title": title,
        "description": description,
        "thumbnail": thumbnail,
        "publishedAt": published,
        "embedUrl": sanitize_embed_url(video.get("embedUrl")),
        "watchUrl": sanitize_watch_url(video.get("watchUrl")),
        "tags": sanitize_tags(video.get("tags"), locale),
        "sanitizedTitle": title,
        "sanitizedDescription": description,
        "validThumbnail": thumbnail,
        "normalizedDate": published,
        "qualityScore": video.get("qualityScore") or 0,
        "relevanceScore": video.get("relevanceScore") or 0,
    }


def sanitize_videos(videos: Any, locale=Locale.EN) -> list[dict]:
    if not isinstance(videos, list):
        logger.warning("Invalid videos data provided to sanitize_videos")
        return []
    return [sanitize_video(v, locale) for v in videos if is_valid_video(v)]


def category_display_name(category: str, locale=Locale.EN) -> str:
    lang = parse_locale(locale, Locale.EN).value
    return CATEGORY_NAMES.get(category, OTHER_CATEGORY)[lang]


def filter_by_category(videos: list[dict], category: str) -> list[dict]:
    if not category or category == "all":
        return videos
    return [v for v in videos if v.get("category") == category]


def search_videos(videos: list[dict], term: str) -> list[dict]:
    if not term or not term.strip():
        return videos
    needle = term.strip().lower()
    return [
        v for v in videos
        if needle in v.get("sanitizedTitle", "").lower()
        or needle in v.get("sanitizedDescription", "").lower()
        or any(needle in tag.lower() for tag in v.get("tags", []))
    ]


def sort_by_date(videos: list[dict]) -> list[dict]:
    """Newest first."""
    return sorted(videos, key=lambda v: parse_date(v.get("normalizedDate", "")) or _EPOCH, reverse=True)


def video_stats(videos: list[dict]) -> dict:
    total = len(videos)
    views = sum(v.get("viewCount") or 0 for v in videos)
    likes = sum(v.get("likeCount") or 0 for v in videos)
    categories: dict[str, int] = {}
    for v in videos:
        category = v.get("category", "")
        categories[category] = categories.get(category, 0) + 1
    return {
        "totalVideos": total,
        "totalViews": views,
        "totalLikes": likes,
        "categories": categories,
        "averageViews": round(views / total) if total else 0,
        "averageLikes": round(likes / total) if total else 0,
    }
