import pytest

from fansite.videos import (
    MAX_TAGS,
    PLACEHOLDER_THUMBNAIL,
    category_display_name,
    filter_by_category,
    is_valid_video,
    sanitize_embed_url,
    sanitize_tags,
    sanitize_text,
    sanitize_thumbnail_url,
    sanitize_video,
    sanitize_videos,
    search_videos,
    sort_by_date,
    video_stats,
)


def _video(**overrides):
    video = {
        "id": "v1",
        "title": "Highlights",
        "thumbnail": "https://i.ytimg.com/vi/x/hqdefault.jpg",
        "publishedAt": "2025-07-15T12:00:00Z",
    }
    video.update(overrides)
    return video


def test_sanitize_text_english_drops_chinese():
    assert sanitize_text("Yang Hansen 杨瀚森 集锦（精彩）", "en") == "Yang Hansen"
    assert sanitize_text("杨瀚森", "en") == "Video Content"
    assert sanitize_text(None, "zh") == "视频内容"


def test_sanitize_text_removes_promo_lines_in_both_locales():
    text = "Best blocks.\n微博：北美篮球社\nFollow for more."
    assert sanitize_text(text, "en") == "Best blocks. Follow for more."
    assert sanitize_text(text, "zh") == "Best blocks. Follow for more."
    assert sanitize_text("精彩集锦", "zh") == "精彩集锦"


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://i.ytimg.com/vi/x/hq.jpg", "https://i.ytimg.com/vi/x/hq.jpg"),
        ("https://images.unsplash.com/photo.jpg", "https://images.unsplash.com/photo.jpg"),
        ("/images/local.jpg", "/images/local.jpg"),
        ("https://example.com/thumb.jpg", PLACEHOLDER_THUMBNAIL),
        ("javascript:alert(1)", PLACEHOLDER_THUMBNAIL),
        ("", PLACEHOLDER_THUMBNAIL),
        (None, PLACEHOLDER_THUMBNAIL),
    ],
)
def test_sanitize_thumbnail_url(url, expected):
    assert sanitize_thumbnail_url(url) == expected


def test_sanitize_embed_url():
    assert sanitize_embed_url("https://www.youtube.com/watch?v=abc") == "https://www.youtube.com/embed/abc"
    assert sanitize_embed_url("http://www.youtube.com/embed/abc") == "https://www.youtube.com/embed/abc"
    assert sanitize_embed_url("https://evil.example/embed/abc") == ""


def test_sanitize_tags():
    assert sanitize_tags(["夏季联赛", "Yang Hansen", "", 3], "en") == ["Yang Hansen"]
    assert sanitize_tags(["夏季联赛"], "zh") == ["夏季联赛"]
    assert len(sanitize_tags([f"t{i}" for i in range(20)])) == MAX_TAGS
    assert sanitize_tags("nope") == []


def test_is_valid_video():
    assert is_valid_video(_video())
    assert not is_valid_video(_video(title=""))
    assert not is_valid_video(_video(publishedAt="not a date"))
    assert not is_valid_video("v1")


def test_sanitize_video_adds_display_fields():
    video = sanitize_video(_video(title="精彩 Highlights", thumbnail="https://example.com/x.jpg"), "en")
    assert video["sanitizedTitle"] == "Highlights"
    assert video["validThumbnail"] == PLACEHOLDER_THUMBNAIL
    assert video["normalizedDate"] == "2025-07-15T12:00:00.000Z"
    assert video["qualityScore"] == 0


def test_sanitize_videos_drops_invalid_entries():
    videos = sanitize_videos([_video(), _video(id="v2", publishedAt="bad"), "junk"], "en")
    assert [v["id"] for v in videos] == ["v1"]
    assert sanitize_videos(None) == []


def test_category_helpers():
    assert category_display_name("summer_league", "en") == "Summer League"
    assert category_display_name("summer_league", "zh") == "夏季联赛"
    assert category_display_name("unknown", "en") == "Other"
    videos = [{"category": "draft"}, {"category": "training"}]
    assert filter_by_category(videos, "all") == videos
    assert filter_by_category(videos, "draft") == [{"category": "draft"}]


def test_search_and_sort():
    videos = sanitize_videos(
        [
            _video(id="a", title="Draft night", publishedAt="2025-06-27T00:00:00Z", tags=["Interview"]),
            _video(id="b", title="Dunks", publishedAt="2025-08-01T00:00:00Z"),
        ],
        "en",
    )
    assert [v["id"] for v in sort_by_date(videos)] == ["b", "a"]
    assert [v["id"] for v in search_videos(videos, "interview")] == ["a"]
    assert search_videos(videos, "  ") == videos


def test_video_stats():
    stats = video_stats([
        {"viewCount": 100, "likeCount": 10, "category": "draft"},
        {"viewCount": 50, "likeCount": None, "category": "draft"},
        {"viewCount": 0, "likeCount": 5, "category": "training"},
    ])
    assert stats == {
        "totalVideos": 3,
        "totalViews": 150,
        "totalLikes": 15,
        "categories": {"draft": 2, "training": 1},
        "averageViews": 50,
        "averageLikes": 5,
    }
    assert video_stats([])["averageViews"] == 0


@pytest.mark.parametrize(
    "url",
    [
        "https://i.ytimg.com.attacker.example/x.jpg",
        "http://youtube.com.evil.example/x.jpg",
        "https://notytimg.com/x.jpg",
        "https://images.unsplash.com.evil.example/photo.jpg",
    ],
)
def test_lookalike_thumbnail_hosts_get_placeholder(url):
    assert sanitize_thumbnail_url(url) == PLACEHOLDER_THUMBNAIL


def test_thumbnail_subdomains_of_allowed_hosts_pass():
    assert sanitize_thumbnail_url("http://i9.ytimg.com/vi/x.jpg") == "https://i9.ytimg.com/vi/x.jpg"
    assert sanitize_thumbnail_url("https://I.YTIMG.COM/vi/x.jpg") == "https://I.YTIMG.COM/vi/x.jpg"
