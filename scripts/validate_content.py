#!/usr/bin/env python3
"""
validate_content.py - Check the lesson catalog before deploying.

Loads catalog.yaml and every lesson file, then runs the integrity checks
(navigation links, module chains, snippet languages, orphan files).
Exits non-zero when any error is found.

Usage:
  python scripts/validate_content.py
  python scripts/validate_content.py --content-dir path/to/content --strict
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from lessondeck.classroom import CatalogLoader, Severity, has_errors, run_integrity_checks
from lessondeck.errors import ContentValidationError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def validate(content_dir: Path | None, strict: bool = False) -> int:
    """
    Validate content and log every issue found.

    Returns:
        Process exit code: 0 if clean, 1 on errors (or warnings with strict)
    """
    try:
        loader = CatalogLoader(content_dir)
    except (FileNotFoundError, ContentValidationError) as e:
        logger.error(f"Catalog failed to load: {e}")
        return 1

    issues = run_integrity_checks(loader)
    for issue in issues:
        if issue.severity == Severity.ERROR:
            logger.error(str(issue))
        else:
            logger.warning(str(issue))

    errors = sum(1 for issue in issues if issue.severity == Severity.ERROR)
    warnings = len(issues) - errors
    logger.info(
        f"Checked {loader.get_lesson_count()} lessons in "
        f"{len(loader.list_modules())} modules: {errors} errors, {warnings} warnings"
    )

    if has_errors(issues) or (strict and warnings):
        return 1
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Validate the lesson catalog and its navigation.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/validate_content.py
  python scripts/validate_content.py --content-dir lessondeck/content --strict
        """,
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Directory holding catalog.yaml and lessons/ (default: LESSONDECK_CONTENT_DIR or bundled content)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as failures",
    )

    args = parser.parse_args()
    sys.exit(validate(args.content_dir, strict=args.strict))


if __name__ == "__main__":
    main()
