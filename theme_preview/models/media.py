"""Media registry entries."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class MediaEntry(BaseModel):
    """Maps a remotely referenced asset to its locally served copy.

    The served path travels as ``url`` in registry payloads.
    """

    original_url: str = Field(
        default="",
        validation_alias=AliasChoices("originalUrl", "original_url"),
    )
    cdn_url: str = Field(
        default="",
        validation_alias=AliasChoices("cdnUrl", "cdn_url"),
    )
    served_url: str = Field(
        default="",
        validation_alias=AliasChoices("url", "servedUrl", "served_url"),
    )

    model_config = ConfigDict(frozen=True)

    def matches(self, url: str) -> bool:
        return bool(url) and (self.original_url == url or self.cdn_url == url)


__all__ = ["MediaEntry"]
