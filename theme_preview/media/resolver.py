"""Rewrite remote media references to their locally served copies."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from theme_preview.models.media import MediaEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MediaResolver:
    """Registry lookup bound to the origin that serves local media.

    The origin is fixed once per render; lookups are exact string matches
    against an entry's original or CDN URL. Anything else passes through.
    """

    registry: tuple[MediaEntry, ...] = ()
    origin: str = ""

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[MediaEntry | Mapping[str, Any]] | None,
        *,
        origin: str = "",
    ) -> MediaResolver:
        registry = tuple(
            entry if isinstance(entry, MediaEntry) else MediaEntry.model_validate(entry)
            for entry in entries or ()
        )
        return cls(registry=registry, origin=origin.rstrip("/"))

    def lookup(self, url: str) -> MediaEntry | None:
        return next((entry for entry in self.registry if entry.matches(url)), None)

    def resolve(self, url: Any) -> Any:
        if not url or not isinstance(url, str) or not self.registry:
            return url
        entry = self.lookup(url)
        if entry is None or not entry.served_url:
            logger.debug("No media entry for %s", url)
            return url
        return _join_origin(self.origin, entry.served_url)


def resolve_media_url(url: Any, registry: Iterable[MediaEntry], origin: str = "") -> Any:
    """Resolve ``url`` against ``registry`` without building a resolver."""
    return MediaResolver.from_entries(registry, origin=origin).resolve(url)


def _join_origin(origin: str, served_url: str) -> str:
    if not origin or "://" in served_url:
        return served_url
    if served_url.startswith("/"):
        return f"{origin}{served_url}"
    return f"{origin}/{served_url}"


__all__ = ["MediaResolver", "resolve_media_url"]
