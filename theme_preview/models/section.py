"""Section and block models for theme documents."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from theme_preview.settings import is_truthy


class ComponentType(str, Enum):
    HEADER = "Header"
    ANNOUNCEMENT_BAR = "AnnouncementBar"
    BANNER = "Banner"
    HERO = "Hero"
    FEATURED_COLLECTION = "FeaturedCollection"
    FEATURED_PRODUCT = "FeaturedProduct"
    PRODUCT_LIST = "ProductList"
    COLLECTION_LIST = "CollectionList"
    MULTI_COLUMN = "MultiColumn"
    RICH_TEXT = "RichText"
    FOOTER = "Footer"
    IMAGE_WITH_TEXT = "ImageWithText"
    VIDEO = "Video"
    NEWSLETTER = "Newsletter"


class BlockType(str, Enum):
    TEXT = "text"
    HEADING = "heading"
    BUTTON = "button"
    IMAGE = "image"
    VIDEO = "video"
    ROW = "row"


Settings = dict[str, Any]


def _empty_if_none(value: Any) -> Any:
    return {} if value is None else value


class Block(BaseModel):
    """A sub-element of a section; settings are free-form."""

    id: str = ""
    type: str = ""
    settings: Settings = Field(default_factory=dict)
    disabled: bool = False

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @field_validator("settings", mode="before")
    @classmethod
    def _settings_default(cls, value: Any) -> Any:
        return _empty_if_none(value)

    @field_validator("disabled", mode="before")
    @classmethod
    def _coerce_disabled(cls, value: Any) -> bool:
        return is_truthy(value)


class Section(BaseModel):
    """Top-level themed block as produced by the theme parser.

    The wire format names the specialized-renderer key ``component`` and the
    schema label ``type``; the settings map travels as ``props``. The
    canonical camelCase and snake_case names are accepted as well.
    """

    id: str = ""
    component_type: str = Field(
        default="",
        validation_alias=AliasChoices("componentType", "component", "component_type"),
    )
    schema_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("schemaType", "type", "schema_type"),
    )
    settings: Settings = Field(
        default_factory=dict,
        validation_alias=AliasChoices("settings", "props"),
    )
    blocks: tuple[Block, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @field_validator("settings", mode="before")
    @classmethod
    def _settings_default(cls, value: Any) -> Any:
        return _empty_if_none(value)

    @field_validator("blocks", mode="before")
    @classmethod
    def _blocks_default(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def label(self) -> str:
        return self.schema_type or self.component_type

    @property
    def is_disabled(self) -> bool:
        return is_truthy(self.settings.get("disabled"))


__all__ = ["Block", "BlockType", "ComponentType", "Section", "Settings"]
