"""
CatalogLoader - Load the course catalog and lesson content from YAML.

Provides read-only access to:
- Tracks and modules in authored order
- Lesson summaries and full lesson content
- Lesson metadata for document head tags
- Forward (id -> path) and reverse (path -> id) routing
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from lessondeck.config import BASE_PATH, CATALOG_FILENAME, CONTENT_DIR, LESSONS_DIRNAME
from lessondeck.errors import BrokenAdjacency, ContentValidationError, NotFound
from lessondeck.schemas import (
    CatalogFile,
    LessonContent,
    LessonFile,
    LessonMetadata,
    LessonSummary,
    Module,
    ModuleEntry,
    PageRef,
    Track,
)
from lessondeck.utils import load_yaml

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    In-memory catalog built once from the content directory.

    Every lookup is a dictionary read; nothing is mutated after __init__,
    so a single instance can be shared across requests.
    """

    def __init__(self, content_dir: str | Path | None = None, base_path: Optional[str] = None):
        """
        Initialize loader and read all content.

        Args:
            content_dir: Directory holding catalog.yaml and lessons/
            base_path: URL prefix for derived paths (default from config)

        Raises:
            FileNotFoundError: If the content directory is missing
            ContentValidationError: If the content breaks a catalog invariant
        """
        self.content_dir = Path(content_dir) if content_dir else CONTENT_DIR
        if not self.content_dir.exists():
            raise FileNotFoundError(f"Content directory not found: {self.content_dir}")
        self.base_path = (BASE_PATH if base_path is None else base_path).rstrip("/")

        self.title = ""
        self.description = ""
        self.version = 0
        self._tracks: dict[str, Track] = {}
        self._modules: dict[str, Module] = {}
        self._lessons: dict[tuple[str, str], LessonContent] = {}
        self._routes: dict[str, PageRef] = {}

        self._load()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def _load(self):
        catalog_path = self.content_dir / CATALOG_FILENAME
        catalog = self._parse(catalog_path, CatalogFile)
        self.title = catalog.title
        self.description = catalog.description
        self.version = catalog.version

        self._add_route(self.catalog_path(), PageRef(kind="catalog"))

        for track_entry in catalog.tracks:
            if track_entry.id in self._tracks:
                raise ContentValidationError(f"Duplicate track id: {track_entry.id}")
            self._add_route(self._join(track_entry.id), PageRef(kind="track", track_id=track_entry.id))
            for module_entry in track_entry.modules:
                self._load_module(track_entry.id, module_entry)
            self._tracks[track_entry.id] = Track(
                id=track_entry.id,
                title=track_entry.title,
                description=track_entry.description,
                module_ids=tuple(m.id for m in track_entry.modules),
            )

        self._check_module_chain()

        logger.info(
            f"Loaded catalog v{self.version}: {len(self._tracks)} tracks, "
            f"{len(self._modules)} modules, {len(self._lessons)} lessons"
        )

    def _load_module(self, track_id: str, entry: ModuleEntry):
        if entry.id in self._modules:
            raise ContentValidationError(f"Duplicate module id: {entry.id}")

        summaries = []
        seen: set[str] = set()
        for position, lesson_entry in enumerate(entry.lessons, 1):
            if lesson_entry.id in seen:
                raise ContentValidationError(
                    f"Duplicate lesson id in module '{entry.id}': {lesson_entry.id}"
                )
            seen.add(lesson_entry.id)

            lesson = self._load_lesson(entry.id, lesson_entry.id)
            self._lessons[(entry.id, lesson_entry.id)] = lesson
            summaries.append(LessonSummary(
                id=lesson_entry.id,
                module_id=entry.id,
                position=position,
                title=lesson.metadata.title,
                description=lesson.metadata.description,
                nav_title=lesson_entry.nav_title or lesson.metadata.title,
                topics=lesson_entry.topics,
            ))

        self._modules[entry.id] = Module(
            id=entry.id,
            track_id=track_id,
            title=entry.title,
            description=entry.description,
            lessons=tuple(summaries),
            next_module_id=entry.next_module,
        )

        self._add_route(
            self._join(track_id, entry.id),
            PageRef(kind="module", track_id=track_id, module_id=entry.id),
        )
        for summary in summaries:
            self._add_route(
                self._join(track_id, entry.id, summary.id),
                PageRef(kind="lesson", track_id=track_id, module_id=entry.id, lesson_id=summary.id),
            )

    def _load_lesson(self, module_id: str, lesson_id: str) -> LessonContent:
        lesson_path = self.content_dir / LESSONS_DIRNAME / module_id / f"{lesson_id}.yaml"
        if not lesson_path.exists():
            raise ContentValidationError(
                f"Lesson '{module_id}/{lesson_id}' is listed in the catalog "
                f"but has no content file: {lesson_path}"
            )
        raw = self._parse(lesson_path, LessonFile)
        try:
            return LessonContent(
                module_id=module_id,
                lesson_id=lesson_id,
                metadata=LessonMetadata(title=raw.title, description=raw.description),
                summary=raw.summary,
                sections=raw.sections,
            )
        except ValidationError as e:
            raise ContentValidationError(f"Invalid lesson metadata in {lesson_path}: {e}") from e

    def _parse(self, path: Path, model):
        try:
            data = load_yaml(path)
        except FileNotFoundError as e:
            raise ContentValidationError(str(e)) from e
        except yaml.YAMLError as e:
            raise ContentValidationError(f"Malformed YAML in {path}: {e}") from e
        try:
            return model.model_validate(data or {})
        except ValidationError as e:
            raise ContentValidationError(f"Invalid content in {path}: {e}") from e

    def _check_module_chain(self):
        for module in self._modules.values():
            target = module.next_module_id
            if target is None:
                continue
            if target not in self._modules:
                raise BrokenAdjacency(
                    f"Module '{module.id}' chains to unknown module '{target}'"
                )
            if target == module.id:
                raise BrokenAdjacency(f"Module '{module.id}' chains to itself")

    def _add_route(self, path: str, ref: PageRef):
        if path in self._routes:
            raise ContentValidationError(f"Two pages resolve to the same path: {path}")
        self._routes[path] = ref

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def _join(self, *parts: str) -> str:
        return "/".join([self.base_path, *parts]) or "/"

    def catalog_path(self) -> str:
        return self.base_path or "/"

    def track_path(self, track_id: str) -> str:
        self.get_track(track_id)
        return self._join(track_id)

    def module_path(self, module_id: str) -> str:
        module = self.get_module(module_id)
        return self._join(module.track_id, module.id)

    def lesson_path(self, module_id: str, lesson_id: str) -> str:
        """Derived page path of a lesson; injective over the catalog."""
        module = self.get_module(module_id)
        if lesson_id not in module.lesson_ids:
            raise NotFound("Lesson", f"{module_id}/{lesson_id}")
        return self._join(module.track_id, module.id, lesson_id)

    def resolve_path(self, path: str) -> PageRef:
        """
        Map a request path back to catalog identity.

        Query strings, fragments and a trailing slash are ignored.

        Raises:
            NotFound: If no catalog page lives at the path
        """
        clean = path.split("?", 1)[0].split("#", 1)[0]
        if len(clean) > 1:
            clean = clean.rstrip("/")
        ref = self._routes.get(clean)
        if ref is None:
            raise NotFound("Page", path)
        return ref

    def get_all_paths(self) -> list[str]:
        """All page paths in catalog order."""
        return list(self._routes)

    # -------------------------------------------------------------------------
    # Tracks
    # -------------------------------------------------------------------------

    def list_tracks(self) -> list[Track]:
        """Get all tracks in authored order."""
        return list(self._tracks.values())

    def get_track(self, track_id: str) -> Track:
        track = self._tracks.get(track_id)
        if track is None:
            raise NotFound("Track", track_id)
        return track

    # -------------------------------------------------------------------------
    # Modules
    # -------------------------------------------------------------------------

    def list_modules(self, track_id: Optional[str] = None) -> list[Module]:
        """Get modules in authored order, optionally for one track."""
        if track_id is None:
            return list(self._modules.values())
        track = self.get_track(track_id)
        return [self._modules[module_id] for module_id in track.module_ids]

    def get_module(self, module_id: str) -> Module:
        module = self._modules.get(module_id)
        if module is None:
            raise NotFound("Module", module_id)
        return module

    def has_module(self, module_id: str) -> bool:
        return module_id in self._modules

    # -------------------------------------------------------------------------
    # Lessons
    # -------------------------------------------------------------------------

    def lessons_of(self, module_id: str) -> list[LessonSummary]:
        """Get all lesson summaries for a module, ordered by position."""
        return list(self.get_module(module_id).lessons)

    def get_lesson_summary(self, module_id: str, lesson_id: str) -> LessonSummary:
        for summary in self.get_module(module_id).lessons:
            if summary.id == lesson_id:
                return summary
        raise NotFound("Lesson", f"{module_id}/{lesson_id}")

    def get_lesson(self, module_id: str, lesson_id: str) -> LessonContent:
        """Get full lesson content by identity."""
        self.get_module(module_id)
        lesson = self._lessons.get((module_id, lesson_id))
        if lesson is None:
            raise NotFound("Lesson", f"{module_id}/{lesson_id}")
        return lesson

    def get_metadata(self, module_id: str, lesson_id: str) -> LessonMetadata:
        """Head-tag record for a lesson; both fields are guaranteed non-empty."""
        return self.get_lesson(module_id, lesson_id).metadata

    def get_lesson_count(self) -> int:
        return len(self._lessons)

    def get_all_lessons(self) -> list[LessonSummary]:
        """Get all lesson summaries ordered by module then position."""
        return [lesson for module in self._modules.values() for lesson in module.lessons]
