"""
LessonDeck Classroom - Runtime components for loading and navigating lessons.

This module provides:
- CatalogLoader: Load the catalog and lesson content
- Navigator: Lesson adjacency, breadcrumbs and the sidebar tree
- run_integrity_checks: Build-time validation of navigation and content
"""

from .loader import CatalogLoader

from .navigator import (
    Navigator,
    Link,
    LinkKind,
    Adjacency,
    NavigationLesson,
    NavigationModule,
    NavigationTrack,
)

from .integrity import (
    IntegrityIssue,
    Severity,
    run_integrity_checks,
    has_errors,
)

__all__ = [
    # Loader
    "CatalogLoader",
    # Navigator
    "Navigator",
    "Link",
    "LinkKind",
    "Adjacency",
    "NavigationLesson",
    "NavigationModule",
    "NavigationTrack",
    # Integrity
    "IntegrityIssue",
    "Severity",
    "run_integrity_checks",
    "has_errors",
]
