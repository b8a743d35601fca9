"""Paths, defaults, and environment variable configuration."""

import os
from pathlib import Path

CONTENT_DIR = Path(os.environ.get(
    "LESSONDECK_CONTENT_DIR",
    Path(__file__).parent / "content",
))

CATALOG_FILENAME = "catalog.yaml"
LESSONS_DIRNAME = "lessons"

# URL prefix every track, module and lesson path hangs off
BASE_PATH = os.environ.get("LESSONDECK_BASE_PATH", "/learn").rstrip("/")

SITE_NAME = os.environ.get("LESSONDECK_SITE_NAME", "Next.js Mastery")
