"""Date formatting that gives the same output wherever it runs (always UTC)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime]

_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# (unit, seconds), largest first
_INTERVALS = [
    ("year", 31536000),
    ("month", 2592000),
    ("week", 604800),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
]

_EN_PREVIOUS = {"year": "last year", "month": "last month", "week": "last week", "day": "yesterday"}
_ZH_PREVIOUS = {"year": "去年", "month": "上个月", "week": "上周", "day": "昨天"}
_ZH_UNITS = {"year": "年", "month": "个月", "week": "周", "day": "天", "hour": "小时", "minute": "分钟"}


def parse_date(value: DateLike) -> Optional[datetime]:
    """Parse an ISO-8601 string (or pass a datetime through) as aware UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def is_valid_date(value: DateLike) -> bool:
    return parse_date(value) is not None


def _is_zh(locale: str) -> bool:
    return (locale or "").lower().startswith("zh")


def _format_absolute(dt: datetime, locale: str, fmt: str, with_time: bool) -> str:
    if _is_zh(locale):
        if fmt == "short":
            text = f"{dt.year}/{dt.month:02d}/{dt.day:02d}"
        else:
            text = f"{dt.year}年{dt.month}月{dt.day}日"
        if with_time:
            text += f" {dt.hour:02d}:{dt.minute:02d}"
        return text

    if fmt == "short":
        text = f"{dt.month:02d}/{dt.day:02d}/{dt.year}"
    elif fmt == "medium":
        text = f"{_MONTHS[dt.month - 1][:3]} {dt.day}, {dt.year}"
    else:
        text = f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"
    if with_time:
        hour = dt.hour % 12 or 12
        suffix = "AM" if dt.hour < 12 else "PM"
        text += f", {hour:02d}:{dt.minute:02d} {suffix}"
    return text


def format_relative_date(dt: datetime, locale: str = "en-US", now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    diff = int((now - dt).total_seconds())
    zh = _is_zh(locale)
    for unit, seconds in _INTERVALS:
        count = diff // seconds
        if count < 1:
            continue
        if count == 1 and unit in _EN_PREVIOUS:
            return _ZH_PREVIOUS[unit] if zh else _EN_PREVIOUS[unit]
        if zh:
            return f"{count}{_ZH_UNITS[unit]}前"
        return f"{count} {unit}{'s' if count > 1 else ''} ago"
    return "刚刚" if zh else "just now"


def format_date_consistent(
    value: DateLike,
    locale: str = "en-US",
    fmt: str = "short",
    style: str = "date",
    now: Optional[datetime] = None,
) -> str:
    """Format a date identically on every host.

    ``fmt`` is short, medium or long; ``style`` is date, datetime or relative.
    """
    dt = parse_date(value)
    if dt is None:
        logger.warning("Invalid date provided to format_date_consistent: %r", value)
        return "Invalid Date"
    if style == "relative":
        return format_relative_date(dt, locale, now=now)
    return _format_absolute(dt, locale, fmt, with_time=(style == "datetime"))


def format_video_date(published_at: str, locale: str = "en-US") -> str:
    return format_date_consistent(published_at, locale, fmt="short", style="date")


def format_video_datetime(published_at: str, locale: str = "en-US") -> str:
    return format_date_consistent(published_at, locale, fmt="medium", style="datetime")


def normalize_date(value: DateLike) -> str:
    """Return a JavaScript-style ISO string (``2025-07-15T12:00:00.000Z``).

    Unparseable input is logged and replaced by the current time.
    """
    dt = parse_date(value)
    if dt is None:
        logger.error("Error normalizing date: %r", value)
        dt = datetime.now(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def calculate_age(birth_date: DateLike, today: Optional[datetime] = None) -> Optional[int]:
    born = parse_date(birth_date)
    if born is None:
        return None
    today = today or datetime.now(timezone.utc)
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age
