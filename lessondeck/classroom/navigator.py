"""
Navigator - Lesson sequencing and page navigation.

Provides:
- Previous/next adjacency for the footer of each lesson
- Lesson position within its module
- Breadcrumbs from the catalog root to a page
- Catalog tree with the current page marked (sidebar)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lessondeck.errors import BrokenAdjacency, NotFound
from lessondeck.schemas import LessonSummary, Module, Track

from .loader import CatalogLoader


class LinkKind(str, Enum):
    """What a navigation link points at."""
    LESSON = "lesson"
    MODULE_INDEX = "module_index"
    TRACK_INDEX = "track_index"
    CATALOG_INDEX = "catalog_index"


@dataclass(frozen=True)
class Link:
    """Resolved navigation target."""
    kind: LinkKind
    href: str
    title: str
    module_id: Optional[str] = None
    lesson_id: Optional[str] = None
    track_id: Optional[str] = None
    label: Optional[str] = None  # short module code, e.g. "B13"

    @property
    def key(self) -> str:
        """Catalog identity: 'b13/lesson-1' for lessons, 'b13' for module pages."""
        if self.kind == LinkKind.LESSON:
            return f"{self.module_id}/{self.lesson_id}"
        if self.kind == LinkKind.MODULE_INDEX:
            return self.module_id or ""
        if self.kind == LinkKind.TRACK_INDEX:
            return self.track_id or ""
        return ""


@dataclass(frozen=True)
class Adjacency:
    previous: Optional[Link]
    next: Optional[Link]


@dataclass
class NavigationLesson:
    """Lesson with navigation metadata."""
    summary: LessonSummary
    href: str
    is_current: bool


@dataclass
class NavigationModule:
    module: Module
    href: str
    lessons: list[NavigationLesson]
    is_open: bool  # contains the current page


@dataclass
class NavigationTrack:
    track: Track
    href: str
    modules: list[NavigationModule]
    is_open: bool


class Navigator:
    """
    Navigate through the catalog.

    Adjacency is a pure function of catalog data: the order of a module's
    lessons plus the module's explicit next_module_id chain.
    """

    def __init__(self, loader: CatalogLoader):
        """
        Initialize navigator.

        Args:
            loader: CatalogLoader instance for content access
        """
        self.loader = loader

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------

    def lesson_link(self, module_id: str, lesson_id: str) -> Link:
        summary = self.loader.get_lesson_summary(module_id, lesson_id)
        return Link(
            kind=LinkKind.LESSON,
            href=self.loader.lesson_path(module_id, lesson_id),
            title=summary.title,
            module_id=module_id,
            lesson_id=lesson_id,
            track_id=self.loader.get_module(module_id).track_id,
        )

    def module_link(self, module_id: str) -> Link:
        module = self.loader.get_module(module_id)
        return Link(
            kind=LinkKind.MODULE_INDEX,
            href=self.loader.module_path(module_id),
            title=module.title,
            module_id=module_id,
            track_id=module.track_id,
            label=module.label,
        )

    def track_link(self, track_id: str) -> Link:
        track = self.loader.get_track(track_id)
        return Link(
            kind=LinkKind.TRACK_INDEX,
            href=self.loader.track_path(track_id),
            title=track.title,
            track_id=track_id,
        )

    def catalog_link(self) -> Link:
        return Link(
            kind=LinkKind.CATALOG_INDEX,
            href=self.loader.catalog_path(),
            title=self.loader.title,
        )

    # -------------------------------------------------------------------------
    # Adjacency
    # -------------------------------------------------------------------------

    def compute_adjacency(self, module_id: str, lesson_id: str) -> Adjacency:
        """
        Previous/next links for a lesson footer.

        - previous: lesson i-1, or the module index page for the first lesson
        - next: lesson i+1; after the last lesson, the index page of the
          chained next module; otherwise None

        Raises:
            NotFound: If the module or the lesson is unknown
        """
        module = self.loader.get_module(module_id)
        order = module.lesson_ids
        if lesson_id not in order:
            raise NotFound("Lesson", f"{module_id}/{lesson_id}")
        index = order.index(lesson_id)

        if index > 0:
            previous = self.lesson_link(module_id, order[index - 1])
        else:
            previous = self.module_link(module_id)

        if index + 1 < len(order):
            next_link = self.lesson_link(module_id, order[index + 1])
        elif module.next_module_id is not None:
            if not self.loader.has_module(module.next_module_id):
                raise BrokenAdjacency(
                    f"Module '{module_id}' chains to unknown module '{module.next_module_id}'"
                )
            next_link = self.module_link(module.next_module_id)
        else:
            next_link = None

        return Adjacency(previous=previous, next=next_link)

    def get_previous_lesson_id(self, module_id: str, lesson_id: str) -> Optional[str]:
        """ID of the previous lesson in the same module, if any."""
        link = self.compute_adjacency(module_id, lesson_id).previous
        return link.lesson_id if link and link.kind == LinkKind.LESSON else None

    def get_next_lesson_id(self, module_id: str, lesson_id: str) -> Optional[str]:
        """ID of the next lesson in the same module, if any."""
        link = self.compute_adjacency(module_id, lesson_id).next
        return link.lesson_id if link and link.kind == LinkKind.LESSON else None

    def get_lesson_position(self, module_id: str, lesson_id: str) -> tuple[int, int]:
        """Get lesson position as (current, total) within its module."""
        summary = self.loader.get_lesson_summary(module_id, lesson_id)
        return (summary.position, len(self.loader.get_module(module_id).lessons))

    def get_first_lesson_link(self, module_id: str) -> Optional[Link]:
        """Entry point of a module, or None for a module with no lessons."""
        module = self.loader.get_module(module_id)
        if not module.lessons:
            return None
        return self.lesson_link(module_id, module.lessons[0].id)

    # -------------------------------------------------------------------------
    # Breadcrumbs
    # -------------------------------------------------------------------------

    def get_breadcrumbs(self, module_id: str, lesson_id: Optional[str] = None) -> list[Link]:
        """Catalog root -> track -> module [-> lesson]."""
        module = self.loader.get_module(module_id)
        crumbs = [
            self.catalog_link(),
            self.track_link(module.track_id),
            self.module_link(module_id),
        ]
        if lesson_id is not None:
            crumbs.append(self.lesson_link(module_id, lesson_id))
        return crumbs

    # -------------------------------------------------------------------------
    # Catalog Tree
    # -------------------------------------------------------------------------

    def get_navigation_tree(
        self,
        current_module_id: Optional[str] = None,
        current_lesson_id: Optional[str] = None,
    ) -> list[NavigationTrack]:
        """
        Get full catalog tree for sidebar display.

        Returns list of tracks with modules and lessons, each annotated with
        its href and whether it contains the current page.
        """
        current_track_id = None
        if current_module_id is not None and self.loader.has_module(current_module_id):
            current_track_id = self.loader.get_module(current_module_id).track_id

        tree = []
        for track in self.loader.list_tracks():
            nav_modules = []
            for module in self.loader.list_modules(track.id):
                nav_lessons = [
                    NavigationLesson(
                        summary=lesson,
                        href=self.loader.lesson_path(module.id, lesson.id),
                        is_current=(
                            module.id == current_module_id
                            and lesson.id == current_lesson_id
                        ),
                    )
                    for lesson in module.lessons
                ]
                nav_modules.append(NavigationModule(
                    module=module,
                    href=self.loader.module_path(module.id),
                    lessons=nav_lessons,
                    is_open=module.id == current_module_id,
                ))
            tree.append(NavigationTrack(
                track=track,
                href=self.loader.track_path(track.id),
                modules=nav_modules,
                is_open=track.id == current_track_id,
            ))
        return tree
