"""Runtime configuration for preview rendering."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ORIGIN_ENV = "THEME_PREVIEW_ORIGIN"
MEDIA_ENV = "THEME_PREVIEW_MEDIA"
THEME_ENV = "THEME_PREVIEW_THEME"


@dataclass(slots=True)
class PreviewConfig:
    """Where local media is served from and where sample inputs live.

    Unset fields fall back to ``THEME_PREVIEW_*`` environment variables.
    """

    origin: str | None = None
    media_path: Path | None = None
    theme_path: Path | None = None

    def __post_init__(self) -> None:
        if self.origin is None:
            self.origin = os.getenv(ORIGIN_ENV, "")
        self.origin = self.origin.rstrip("/")
        if self.media_path is None and os.getenv(MEDIA_ENV):
            self.media_path = Path(os.environ[MEDIA_ENV]).expanduser()
        if self.theme_path is None and os.getenv(THEME_ENV):
            self.theme_path = Path(os.environ[THEME_ENV]).expanduser()


def load_config(dotenv_path: str | Path | None = None, **overrides: object) -> PreviewConfig:
    """Load ``.env`` (without overriding the environment) and build a config."""
    if dotenv_path is not None:
        load_dotenv(dotenv_path)
    else:
        load_dotenv()
    return PreviewConfig(**overrides)  # type: ignore[arg-type]


__all__ = ["MEDIA_ENV", "ORIGIN_ENV", "PreviewConfig", "THEME_ENV", "load_config"]
