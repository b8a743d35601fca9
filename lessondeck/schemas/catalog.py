"""
Catalog schemas for LessonDeck.

Defines Pydantic models for the course structure including:
- Authored file shapes (catalog.yaml entries, per-lesson files)
- Resolved tracks, modules and lesson summaries served at runtime
- Page references produced by reverse routing
"""

from pydantic import Field
from typing import Literal, Optional

from .lesson import FrozenModel, Section

# Slugs never contain "/", which keeps derived paths injective
SLUG_PATTERN = r'^[a-z0-9]+(?:-[a-z0-9]+)*$'


# -----------------------------------------------------------------------------
# Authored file shapes
# -----------------------------------------------------------------------------

class LessonEntry(FrozenModel):
    """A lesson's slot in catalog.yaml. Title/description live in the lesson file."""
    id: str = Field(..., pattern=SLUG_PATTERN)
    nav_title: Optional[str] = None  # short sidebar label
    topics: tuple[str, ...] = ()


class ModuleEntry(FrozenModel):
    id: str = Field(..., pattern=SLUG_PATTERN)
    title: str = Field(..., min_length=1)
    description: str = ""
    next_module: Optional[str] = None
    lessons: tuple[LessonEntry, ...] = ()


class TrackEntry(FrozenModel):
    id: str = Field(..., pattern=SLUG_PATTERN)
    title: str = Field(..., min_length=1)
    description: str = ""
    modules: tuple[ModuleEntry, ...] = ()


class CatalogFile(FrozenModel):
    """Top-level shape of catalog.yaml."""
    version: int = Field(1, ge=1)
    title: str = "Course"
    description: str = ""
    tracks: tuple[TrackEntry, ...] = ()


class LessonFile(FrozenModel):
    """Shape of lessons/<module_id>/<lesson_id>.yaml."""
    title: str
    description: str
    summary: Optional[str] = None
    sections: tuple[Section, ...] = ()


# -----------------------------------------------------------------------------
# Resolved catalog
# -----------------------------------------------------------------------------

class LessonSummary(FrozenModel):
    """Lightweight lesson info for navigation (without sections)."""
    id: str
    module_id: str
    position: int = Field(..., ge=1)  # 1-based order within the module
    title: str
    description: str
    nav_title: str
    topics: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.module_id}/{self.id}"


class Module(FrozenModel):
    id: str
    track_id: str
    title: str
    description: str = ""
    lessons: tuple[LessonSummary, ...] = ()
    next_module_id: Optional[str] = None

    @property
    def lesson_ids(self) -> list[str]:
        return [lesson.id for lesson in self.lessons]

    @property
    def label(self) -> str:
        """Short code used in link text, e.g. 'B13' for 'B13: Interview Cheatsheet'."""
        head, sep, _ = self.title.partition(":")
        return head.strip() if sep else self.id.upper()


class Track(FrozenModel):
    id: str
    title: str
    description: str = ""
    module_ids: tuple[str, ...] = ()


class PageRef(FrozenModel):
    """Result of mapping a request path back to catalog identity."""
    kind: Literal["catalog", "track", "module", "lesson"]
    track_id: Optional[str] = None
    module_id: Optional[str] = None
    lesson_id: Optional[str] = None
