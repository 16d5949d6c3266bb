"""Theme-data document consumed by the renderer."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .section import Section

DEFAULT_PAGE = "index"


class PageData(BaseModel):
    components: tuple[Section, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @field_validator("components", mode="before")
    @classmethod
    def _components_default(cls, value: Any) -> Any:
        return () if value is None else value


class ThemeDocument(BaseModel):
    """Synced theme snapshot: pages of ordered sections plus theme settings.

    ``components`` is the flat section list used when no page breakdown is
    available. ``raw_data`` is carried through untouched.
    """

    version: int | str | None = None
    theme: dict[str, Any] = Field(default_factory=dict)
    pages: dict[str, PageData] = Field(default_factory=dict)
    components: tuple[Section, ...] = Field(default_factory=tuple)
    raw_data: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("rawData", "raw_data"),
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("theme", "pages", mode="before")
    @classmethod
    def _mapping_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("components", mode="before")
    @classmethod
    def _components_default(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def colors(self) -> dict[str, Any]:
        colors = self.theme.get("colors")
        return colors if isinstance(colors, dict) else {}

    @property
    def page_names(self) -> list[str]:
        return list(self.pages)

    def sections_for(self, page: str | None = None) -> tuple[Section, ...]:
        """Return the ordered sections of ``page``.

        Without a page name the ``index`` page is preferred, then the flat
        ``components`` list. An unknown page yields no sections.
        """
        if page is not None:
            data = self.pages.get(page)
            return data.components if data is not None else ()
        index = self.pages.get(DEFAULT_PAGE)
        if index is not None and index.components:
            return index.components
        return self.components


__all__ = ["DEFAULT_PAGE", "PageData", "ThemeDocument"]
