"""Theme preview: storefront theme settings → presentation-agnostic render trees."""

__version__ = "0.1.0"

from .config import PreviewConfig, load_config  # noqa: E402
from .media import MediaResolver, normalize_video_url  # noqa: E402
from .models import Block, MediaEntry, PageRender, RenderNode, Section, ThemeDocument  # noqa: E402
from .renderers import RenderOptions, ThemeRenderer  # noqa: E402

__all__ = [
    "__version__",
    "Block",
    "MediaEntry",
    "MediaResolver",
    "PageRender",
    "PreviewConfig",
    "RenderNode",
    "RenderOptions",
    "Section",
    "ThemeDocument",
    "ThemeRenderer",
    "load_config",
    "normalize_video_url",
]
