"""
LessonDeck Schemas - Pydantic models for the course catalog.

This module exports all schema classes for:
- Catalog: authored file shapes, tracks, modules, lesson summaries
- Lesson: metadata, section blocks, lesson content
"""

# Lesson schemas
from .lesson import (
    FrozenModel,
    LessonMetadata,
    ProseBlock,
    ListBlock,
    CodeSnippet,
    ComparisonTable,
    Block,
    Section,
    LessonContent,
    validate_non_blank,
)

# Catalog schemas
from .catalog import (
    SLUG_PATTERN,
    LessonEntry,
    ModuleEntry,
    TrackEntry,
    CatalogFile,
    LessonFile,
    LessonSummary,
    Module,
    Track,
    PageRef,
)

__all__ = [
    # Lesson
    'FrozenModel',
    'LessonMetadata',
    'ProseBlock',
    'ListBlock',
    'CodeSnippet',
    'ComparisonTable',
    'Block',
    'Section',
    'LessonContent',
    'validate_non_blank',
    # Catalog
    'SLUG_PATTERN',
    'LessonEntry',
    'ModuleEntry',
    'TrackEntry',
    'CatalogFile',
    'LessonFile',
    'LessonSummary',
    'Module',
    'Track',
    'PageRef',
]
