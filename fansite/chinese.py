"""Chinese (CJK ideograph) detection helpers."""

import re

# CJK Unified Ideographs, Extension A, Compatibility Ideographs
_CHINESE_RE = re.compile(r"[\u4e00-\u9fff\u3400-\u4dbf\uf900-\ufaff]")
_IDEOGRAPH_RE = re.compile(r"[\u4e00-\u9fff]")


def contains_chinese(text) -> bool:
    """Return True if ``text`` has at least one CJK ideograph."""
    if not isinstance(text, str):
        return False
    return _CHINESE_RE.search(text) is not None


def find_chinese(text: str) -> list[str]:
    if not isinstance(text, str):
        return []
    return _CHINESE_RE.findall(text)


def strip_chinese(text: str) -> str:
    # Only the basic ideograph block, matching the date-field fallback.
    return remove_ideographs(text).strip()


def remove_ideographs(text: str) -> str:
    return _IDEOGRAPH_RE.sub("", text)
