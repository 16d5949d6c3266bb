"""Media reference resolution helpers."""

from .resolver import MediaResolver, resolve_media_url
from .video import is_native_video, normalize_video_url

__all__ = ["MediaResolver", "is_native_video", "normalize_video_url", "resolve_media_url"]
