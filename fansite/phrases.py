"""Static Chinese -> English phrase dictionary used by the English-mode filter."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator

from .chinese import contains_chinese

_DEFAULT_PHRASES: dict[str, str] = {
    # Player
    "杨瀚森": "Yang Hansen",
    "中锋": "Center",
    "波特兰开拓者": "Portland Trail Blazers",
    "孟菲斯灰熊": "Memphis Grizzlies",
    "中国山东省淄博市": "Zibo, Shandong Province, China",
    "山东省淄博市": "Zibo, Shandong Province",
    "NBA新秀": "NBA Rookie",
    # Stats
    "场均得分": "PPG",
    "场均篮板": "RPG",
    "场均盖帽": "BPG",
    "场均助攻": "APG",
    "投篮命中率": "FG%",
    "出场比赛": "Games Played",
    "首发比赛": "Games Started",
    "场均时间": "Minutes/Game",
    # Seasons and games
    "赛季": "Season",
    "夏季联赛": "Summer League",
    "常规赛": "Regular Season",
    "季后赛": "Playoffs",
    "全明星赛": "All-Star Game",
    "选秀": "Draft",
    "职业首秀": "Professional Debut",
    # Teams and leagues
    "青岛雄鹰": "Qingdao Eagles",
    "青岛国信海天": "Qingdao Guoxin Haitian",
    "中国U17青少年篮球联赛": "China U17 Youth Basketball League",
    "中国U19国家队": "China U19 National Team",
    "中国国家队": "China National Team",
    # Honours
    "总冠军": "Champion",
    "最佳防守球员": "Best Defensive Player",
    "最有价值球员": "Most Valuable Player",
    "最佳新锐球员": "Rookie of the Year",
    "最佳二阵": "Second Team All-Star",
    "国内球员第一阵容": "Domestic Player First Team",
    "北区首发": "North All-Star Starter",
    # Personal
    "淄博体校": "Zibo Sports School",
    "中文（母语）": "Chinese (Native)",
    "英语（学习中）": "English (Learning)",
    "篮球训练": "Basketball Training",
    "音乐": "Music",
    "阅读": "Reading",
    "努力训练，追求卓越": "Train hard, pursue excellence",
    # Dates and schedule
    "年": "",
    "月": "/",
    "日": "",
    "对阵": "vs",
    "金州勇士": "Golden State Warriors",
    "不到": "Less than",
    "分钟": "minutes",
    "即将开始": "Coming Soon",
    "已完成": "Completed",
    "进入": "Entered",
    "国家队成员": "National Team Member",
    "新秀": "Rookie",
    # Misc
    "秒": "sec",
    "篮球": "Basketball",
    "北美篮球社": "North American Basketball",
    "微博": "Weibo",
    "微信公众号": "WeChat Official Account",
    "白带你看球": "Basketball Analysis",
    "中国男篮": "China Men's Basketball",
    "中国篮球": "Chinese Basketball",
}


class PhraseDictionary(Mapping):
    """Read-only phrase table.

    Lookups are exact. ``substitution_order`` lists keys longest first so a
    short key never breaks a longer phrase that contains it; keys of equal
    length keep their declaration order.
    """

    def __init__(self, phrases: Mapping[str, str]):
        for key, value in phrases.items():
            if not isinstance(key, str) or not key:
                raise ValueError("Phrase keys must be non-empty strings")
            if not contains_chinese(key):
                raise ValueError(f"Phrase key has no Chinese text: {key!r}")
            if not isinstance(value, str) or contains_chinese(value):
                raise ValueError(f"Translation for {key!r} must be plain English text")
        self._phrases = MappingProxyType(dict(phrases))
        self._order = tuple(sorted(self._phrases, key=len, reverse=True))

    def __getitem__(self, key: str) -> str:
        return self._phrases[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._phrases)

    def __len__(self) -> int:
        return len(self._phrases)

    @property
    def substitution_order(self) -> tuple[str, ...]:
        return self._order

    def substitute(self, text: str) -> str:
        """Replace every known phrase occurring in ``text``."""
        for chinese in self._order:
            if chinese in text:
                text = text.replace(chinese, self._phrases[chinese])
        return text


DEFAULT_PHRASES = PhraseDictionary(_DEFAULT_PHRASES)
