#!/usr/bin/env python3
"""
render_lesson.py - Write lessons out as standalone HTML pages.

Useful for previewing content without starting the Streamlit app.

Usage:
  python scripts/render_lesson.py b13 lesson-2
  python scripts/render_lesson.py --all --output-dir build/html
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from lessondeck.classroom import CatalogLoader, Navigator
from lessondeck.config import SITE_NAME
from lessondeck.errors import NotFound
from lessondeck.viewer import render_page

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def write_lesson(loader: CatalogLoader, navigator: Navigator, module_id: str, lesson_id: str, output_dir: Path) -> Path:
    """Render one lesson to {output_dir}/{module_id}/{lesson_id}.html."""
    lesson = loader.get_lesson(module_id, lesson_id)
    page = render_page(
        lesson,
        adjacency=navigator.compute_adjacency(module_id, lesson_id),
        back_link=navigator.module_link(module_id),
        site_name=SITE_NAME,
    )
    output_path = output_dir / module_id / f"{lesson_id}.html"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")
    logger.info(f"Wrote {output_path}")
    return output_path


def main():
    parser = argparse.ArgumentParser(
        description="Render lessons to standalone HTML files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/render_lesson.py b13 lesson-2
  python scripts/render_lesson.py --all --output-dir build/html
        """,
    )
    parser.add_argument("module_id", nargs="?", help="Module id, e.g. b13")
    parser.add_argument("lesson_id", nargs="?", help="Lesson id, e.g. lesson-2")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Render every lesson in the catalog",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Directory holding catalog.yaml and lessons/ (default: bundled content)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=PROJECT_ROOT / "build" / "html",
        help="Output directory (default: build/html)",
    )

    args = parser.parse_args()

    if not args.all and not (args.module_id and args.lesson_id):
        parser.error("give a module id and lesson id, or --all")

    loader = CatalogLoader(args.content_dir)
    navigator = Navigator(loader)

    if args.all:
        targets = [(lesson.module_id, lesson.id) for lesson in loader.get_all_lessons()]
    else:
        targets = [(args.module_id, args.lesson_id)]

    for module_id, lesson_id in targets:
        try:
            write_lesson(loader, navigator, module_id, lesson_id, args.output_dir)
        except NotFound as e:
            logger.error(str(e))
            sys.exit(1)

    print(f"\nRendered {len(targets)} lesson(s) to {args.output_dir}/")


if __name__ == "__main__":
    main()
