"""
Tests for the helper utilities, mainly video ID extraction.
"""

import pytest

from app.utils.helpers import extract_video_id, estimate_read_minutes, truncate_text, embed_url


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://music.youtube.com/watch?v=dQw4w9WgXcQ&list=RD",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=-InVol0JhtWji-6R",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    "https://www.youtube.com/live/dQw4w9WgXcQ?feature=share",
    "www.youtube.com/watch?v=dQw4w9WgXcQ",
    "youtu.be/dQw4w9WgXcQ",
    "  https://youtu.be/dQw4w9WgXcQ  ",
    "dQw4w9WgXcQ",
])
def test_extract_video_id(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


def test_extract_video_id_truncates_long_candidate():
    assert extract_video_id("https://youtu.be/dQw4w9WgXcQextra") == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "not a url",
    "",
    "   ",
    None,
    12345,
    "https://vimeo.com/123456789",
    "https://www.youtube.com/",
    "https://www.youtube.com/watch?v=short",
    "https://www.youtube.com/watch?v=bad*chars!!",
    "https://youtu.be/",
    "https://example.com/watch?v=dQw4w9WgXcQ",
    "http://[::1",
])
def test_extract_video_id_not_found(url):
    """Anything without a recognizable ID returns None instead of raising."""
    assert extract_video_id(url) is None


def test_embed_url():
    assert embed_url("dQw4w9WgXcQ") == "https://www.youtube.com/embed/dQw4w9WgXcQ"


def test_estimate_read_minutes():
    assert estimate_read_minutes("") == 1
    assert estimate_read_minutes("a" * 1500) == 1
    assert estimate_read_minutes("a" * 1501) == 2


def test_truncate_text():
    assert truncate_text("short") == "short"
    assert truncate_text("a" * 20, max_length=10) == "aaaaaaa..."
