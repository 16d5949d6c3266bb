"""Render a synced theme document into a preview tree.

Reads a theme-data JSON document (or a raw ``settings_data.json`` with
``--settings-data``), resolves media against an optional registry, and prints
the render tree as JSON. The media origin defaults to ``THEME_PREVIEW_ORIGIN``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

load_dotenv(PROJECT_ROOT / ".env")

from theme_preview.config import PreviewConfig
from theme_preview.parser import load_media_path, load_theme_path, parse_settings_data
from theme_preview.renderers import RenderOptions, ThemeRenderer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a theme document into a preview tree.")
    parser.add_argument("path", type=Path, nargs="?", help="Theme document JSON (defaults to THEME_PREVIEW_THEME).")
    parser.add_argument("--media", type=Path, default=None, help="Media registry JSON.")
    parser.add_argument("--origin", type=str, default=None, help="Origin prepended to served media URLs.")
    parser.add_argument("--page", type=str, default=None, help="Page to render (default: index / flat list).")
    parser.add_argument("--all-pages", action="store_true", help="Render every page in the document.")
    parser.add_argument(
        "--settings-data",
        action="store_true",
        help="Treat the input as a raw settings_data.json payload.",
    )
    parser.add_argument("--chrome", action="store_true", help="Add a default header/footer when missing.")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent for the output.")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("render_theme")

    config = PreviewConfig(origin=args.origin, media_path=args.media, theme_path=args.path)
    if config.theme_path is None:
        raise SystemExit("No theme document given (pass a path or set THEME_PREVIEW_THEME).")

    if args.settings_data:
        payload = json.loads(config.theme_path.read_text(encoding="utf-8"))
        document = parse_settings_data(payload)
    else:
        document = load_theme_path(config.theme_path)

    registry = load_media_path(config.media_path) if config.media_path else []
    logger.info("Loaded %d media entries (origin=%r)", len(registry), config.origin)

    renderer = ThemeRenderer.from_registry(
        registry,
        config=config,
        options=RenderOptions(ensure_chrome=args.chrome),
    )

    if args.all_pages:
        output = {name: page.to_dict() for name, page in renderer.render_document(document).items()}
    else:
        output = renderer.render_page(document, args.page).to_dict()

    json.dump(output, sys.stdout, indent=args.indent, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
