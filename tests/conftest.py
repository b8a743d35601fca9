"""
Shared fixtures: a small catalog written to a temporary content directory.
"""

import copy
from pathlib import Path

import pytest
import yaml

from lessondeck.classroom import CatalogLoader, Navigator


def lesson_file(title, description, sections=(), summary=None):
    data = {"title": title, "description": description, "sections": list(sections)}
    if summary is not None:
        data["summary"] = summary
    return data


SAMPLE_CATALOG = {
    "version": 1,
    "title": "Test Course",
    "description": "Fixture catalog",
    "tracks": [
        {
            "id": "app-router",
            "title": "App Router",
            "description": "Modern routing",
            "modules": [
                {
                    "id": "b1",
                    "title": "B1: Foundation",
                    "next_module": "b13",
                    "lessons": [
                        {"id": "lesson-1", "nav_title": "Setup"},
                        {"id": "lesson-2"},
                    ],
                },
                {
                    "id": "b13",
                    "title": "B13: Interview Cheatsheet",
                    "description": "Questions and answers",
                    "lessons": [
                        {"id": "lesson-1", "topics": ["Rendering", "Caching"]},
                        {"id": "lesson-2"},
                        {"id": "lesson-3"},
                    ],
                },
            ],
        },
        {
            "id": "comparison",
            "title": "Comparison",
            "modules": [
                {
                    "id": "c1",
                    "title": "C1: Overview",
                    "lessons": [{"id": "lesson-1"}],
                },
            ],
        },
    ],
}

SAMPLE_LESSONS = {
    ("b1", "lesson-1"): lesson_file(
        "B1.1: Project Setup",
        "Create a project with create-next-app.",
        sections=[
            {
                "heading": "Install",
                "body": [
                    {"type": "prose", "text": "Run the installer."},
                    {"type": "code", "language": "bash", "code": "npx create-next-app@latest\n"},
                ],
            },
        ],
    ),
    ("b1", "lesson-2"): lesson_file(
        "B1.2: Folder Structure",
        "Where files go in a Next.js project.",
    ),
    ("b13", "lesson-1"): lesson_file(
        "B13.1: Core Questions",
        "Common interview questions.",
        summary="The questions that come up most.",
        sections=[
            {
                "heading": "Server Components",
                "body": [
                    {"type": "prose", "text": "Components are `server` by default."},
                    {"type": "code", "language": "javascript", "code": "const x = 1;\n"},
                ],
            },
        ],
    ),
    ("b13", "lesson-2"): lesson_file(
        "B13.2: Data Fetching",
        "Caching and revalidation answers.",
        sections=[
            {
                "heading": "Cache options",
                "body": [
                    {
                        "type": "table",
                        "columns": ["Need", "Option"],
                        "rows": [["Static", "force-cache"], ["Dynamic", "no-store"]],
                    },
                    {"type": "list", "items": ["First", "Second"]},
                ],
            },
        ],
    ),
    ("b13", "lesson-3"): lesson_file(
        "B13.3: Wrap Up",
        "Final review.",
        sections=[
            {
                "heading": "Review",
                "body": [{"type": "prose", "text": "You made it."}],
            },
        ],
    ),
    ("c1", "lesson-1"): lesson_file(
        "C1.1: Two Routers",
        "Pages Router versus App Router.",
    ),
}


def write_content(root: Path, catalog: dict, lessons: dict) -> Path:
    """Write catalog.yaml and lessons/<module>/<lesson>.yaml under root."""
    root.mkdir(parents=True, exist_ok=True)
    with open(root / "catalog.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump(catalog, f, sort_keys=False)
    for (module_id, lesson_id), data in lessons.items():
        lesson_dir = root / "lessons" / module_id
        lesson_dir.mkdir(parents=True, exist_ok=True)
        with open(lesson_dir / f"{lesson_id}.yaml", "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    return root


@pytest.fixture
def sample_catalog():
    """Deep copy of the fixture catalog, safe to mutate per test."""
    return copy.deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def sample_lessons():
    return copy.deepcopy(SAMPLE_LESSONS)


@pytest.fixture
def make_content(tmp_path):
    """Factory writing a content directory from (catalog, lessons) dicts."""
    def _make(catalog, lessons, name="content"):
        return write_content(tmp_path / name, catalog, lessons)
    return _make


@pytest.fixture
def content_dir(make_content, sample_catalog, sample_lessons):
    return make_content(sample_catalog, sample_lessons)


@pytest.fixture
def loader(content_dir):
    return CatalogLoader(content_dir, base_path="/learn")


@pytest.fixture
def navigator(loader):
    return Navigator(loader)


@pytest.fixture
def bundled_loader():
    """Loader over the content shipped with the package."""
    return CatalogLoader(base_path="/learn")
