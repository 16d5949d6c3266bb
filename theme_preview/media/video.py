"""Normalize third-party video links into embeddable URLs."""

from __future__ import annotations

from typing import Any

YOUTUBE_EMBED = "https://www.youtube.com/embed/{id}"
VIMEO_EMBED = "https://player.vimeo.com/video/{id}"

NATIVE_VIDEO_SUFFIXES: tuple[str, ...] = (".mp4", ".webm")


def normalize_video_url(url: Any) -> str | None:
    """Return an embeddable URL for ``url``, or ``None`` when there is none.

    Patterns are tried in order. When an id cannot be extracted the original
    URL is returned unchanged; unrecognized hosts pass through as-is.
    """
    if not url or not isinstance(url, str):
        return None

    if "youtube.com/watch" in url:
        video_id = _segment_after(url, "v=", "&")
        return YOUTUBE_EMBED.format(id=video_id) if video_id else url
    if "youtu.be/" in url:
        video_id = _segment_after(url, "youtu.be/", "?")
        return YOUTUBE_EMBED.format(id=video_id) if video_id else url
    if "vimeo.com/" in url:
        video_id = _segment_after(url, "vimeo.com/", "?")
        return VIMEO_EMBED.format(id=video_id) if video_id else url
    return url


def is_native_video(url: str) -> bool:
    """True when ``url`` points at a file a native player can stream."""
    return url.lower().endswith(NATIVE_VIDEO_SUFFIXES)


def _segment_after(url: str, marker: str, stop: str) -> str:
    _, found, rest = url.partition(marker)
    if not found:
        return ""
    return rest.split(stop, 1)[0]


__all__ = ["NATIVE_VIDEO_SUFFIXES", "is_native_video", "normalize_video_url"]
