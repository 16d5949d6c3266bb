from __future__ import annotations

import pytest

from theme_preview.media.video import is_native_video, normalize_video_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.youtube.com/watch?v=abc123&t=5", "https://www.youtube.com/embed/abc123"),
        ("https://www.youtube.com/watch?v=abc123", "https://www.youtube.com/embed/abc123"),
        ("https://youtu.be/xyz789?si=1", "https://www.youtube.com/embed/xyz789"),
        ("https://vimeo.com/123456?foo=bar", "https://player.vimeo.com/video/123456"),
        ("https://cdn.example.com/clip.mp4", "https://cdn.example.com/clip.mp4"),
    ],
)
def test_normalize_video_url_examples(url: str, expected: str) -> None:
    assert normalize_video_url(url) == expected


@pytest.mark.parametrize("url", ["", None, 42])
def test_normalize_video_url_absent(url) -> None:
    assert normalize_video_url(url) is None


def test_normalize_video_url_falls_back_when_id_missing() -> None:
    url = "https://www.youtube.com/watch?list=PL1"
    assert normalize_video_url(url) == url
    assert normalize_video_url("https://youtu.be/") == "https://youtu.be/"


def test_youtube_watch_checked_before_short_links() -> None:
    # Both markers present: the watch rule wins.
    url = "https://www.youtube.com/watch?v=first&ref=https://youtu.be/second"
    assert normalize_video_url(url) == "https://www.youtube.com/embed/first"


def test_is_native_video_is_case_insensitive() -> None:
    assert is_native_video("https://cdn.example.com/clip.mp4")
    assert is_native_video("/media/CLIP.WEBM")
    assert not is_native_video("https://www.youtube.com/embed/abc123")
