"""
LessonDeck - Course catalog, lesson navigation and code-snippet rendering.

Subpackages:
- schemas: Pydantic models for the catalog and lesson content
- classroom: catalog loading, navigation and integrity checks
- viewer: HTML rendering for lessons, snippets and index pages
"""

__version__ = "0.1.0"
