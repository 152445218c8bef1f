"""Read-only access to the bundled JSON fixtures."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .lang import Locale

logger = logging.getLogger(__name__)

PLAYER = "player"
PLAYER_EN = "player-en"
STATS = "stats"
NEWS = "news"
VIDEOS = "videos"


class FixtureStore:
    """Loads each fixture once and hands out the same object afterwards.

    Returned values must be treated as read-only; the locale filter and the
    memoized views rely on their identity staying stable.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._cache: dict[str, Any] = {}

    def load(self, name: str, default: Any = None) -> Any:
        if name in self._cache:
            return self._cache[name]
        path = self.data_dir / f"{name}.json"
        if not path.exists():
            logger.warning("Fixture %s not found in %s", name, self.data_dir)
            return default
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.error("Failed to load fixture %s: %s", path, exc)
            return default
        self._cache[name] = data
        return data

    def exists(self, name: str) -> bool:
        return name in self._cache or (self.data_dir / f"{name}.json").exists()

    def player(self, locale: Locale) -> dict:
        """Player bio; English mode prefers the hand-written English copy."""
        if locale is Locale.EN and self.exists(PLAYER_EN):
            data = self.load(PLAYER_EN)
            if data:
                return data
        return self.load(PLAYER, {})

    def stats(self) -> dict:
        return self.load(STATS, {})

    def news(self) -> dict:
        data = self.load(NEWS, {})
        if isinstance(data, list):
            # Keep one wrapper so callers see a stable object.
            data = {"articles": data}
            self._cache[NEWS] = data
        return data

    def articles(self) -> list[dict]:
        return self.news().get("articles", [])

    def find_article(self, slug: str) -> Optional[dict]:
        for article in self.articles():
            if article.get("slug") == slug or str(article.get("id")) == slug:
                return article
        return None

    def videos(self) -> list[dict]:
        data = self.load(VIDEOS, [])
        if isinstance(data, dict):
            return data.get("videos", [])
        return data

    def reload(self) -> None:
        self._cache.clear()


_store: Optional[FixtureStore] = None


def get_fixture_store() -> FixtureStore:
    global _store
    if _store is None:
        from .config import get_data_dir

        _store = FixtureStore(get_data_dir())
        logger.info("Serving fixtures from %s", _store.data_dir)
    return _store


def reset_fixture_store() -> None:
    global _store
    _store = None
