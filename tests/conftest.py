from __future__ import annotations

from typing import Any, Callable

import pytest

from theme_preview.media.resolver import MediaResolver
from theme_preview.models.media import MediaEntry
from theme_preview.models.section import Block, Section
from theme_preview.renderers import BlockDispatcher, RenderOptions, ThemeRenderer

ORIGIN = "http://localhost:3000"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``THEME_PREVIEW_*`` settings out of the tests."""
    for name in ("THEME_PREVIEW_ORIGIN", "THEME_PREVIEW_MEDIA", "THEME_PREVIEW_THEME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def media_registry() -> list[MediaEntry]:
    return [
        MediaEntry.model_validate(
            {
                "originalUrl": "https://shop.example/files/hero.jpg",
                "cdnUrl": "https://cdn.shop.example/files/hero.jpg",
                "url": "/media/hero.jpg",
            }
        ),
        MediaEntry.model_validate(
            {
                "originalUrl": "https://shop.example/files/clip.mp4",
                "cdnUrl": "https://cdn.shop.example/files/clip.mp4",
                "url": "/media/clip.mp4",
            }
        ),
    ]


@pytest.fixture
def media(media_registry: list[MediaEntry]) -> MediaResolver:
    return MediaResolver.from_entries(media_registry, origin=ORIGIN)


@pytest.fixture
def block_dispatcher(media: MediaResolver) -> BlockDispatcher:
    return BlockDispatcher(media=media)


@pytest.fixture
def renderer(media_registry: list[MediaEntry]) -> ThemeRenderer:
    media = MediaResolver.from_entries(media_registry, origin=ORIGIN)
    return ThemeRenderer(media=media, options=RenderOptions())


@pytest.fixture
def block_factory() -> Callable[..., Block]:
    def _factory(
        block_type: str,
        *,
        block_id: str | None = None,
        disabled: bool = False,
        **settings: Any,
    ) -> Block:
        return Block(
            id=block_id or f"{block_type}-1",
            type=block_type,
            settings=settings,
            disabled=disabled,
        )

    return _factory


@pytest.fixture
def section_factory() -> Callable[..., Section]:
    def _factory(
        component_type: str = "",
        *,
        section_id: str = "section-1",
        schema_type: str | None = None,
        settings: dict[str, Any] | None = None,
        blocks: tuple[Block, ...] | list[Block] = (),
    ) -> Section:
        return Section(
            id=section_id,
            component_type=component_type,
            schema_type=schema_type,
            settings=settings or {},
            blocks=tuple(blocks),
        )

    return _factory
