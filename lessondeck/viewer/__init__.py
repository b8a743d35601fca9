"""
LessonDeck Viewer - Rendering components for lesson display.

This module provides:
- Code snippet rendering with highlighting and copy payloads
- Lesson rendering with sections and navigation footer
- Full HTML pages with document head tags
- Catalog, track and module index pages
"""

from .snippet import (
    SUPPORTED_LANGUAGES,
    LANGUAGE_ALIASES,
    DEFAULT_LANGUAGE,
    DisplayBlock,
    resolve_grammar,
    render_snippet,
    render_display_block,
    render_code_block,
    get_snippet_css,
    get_copy_script,
)

from .lesson import (
    get_lesson_css,
    render_inline,
    render_prose,
    render_list,
    render_comparison_table,
    render_block,
    render_section,
    render_back_link,
    previous_label,
    next_label,
    render_navigation_footer,
    render_lesson,
)

from .page import (
    render_head_tags,
    render_page,
)

from .index import (
    get_index_css,
    render_catalog_index,
    render_track_index,
    render_module_index,
)

__all__ = [
    # Snippets
    "SUPPORTED_LANGUAGES",
    "LANGUAGE_ALIASES",
    "DEFAULT_LANGUAGE",
    "DisplayBlock",
    "resolve_grammar",
    "render_snippet",
    "render_display_block",
    "render_code_block",
    "get_snippet_css",
    "get_copy_script",
    # Lesson rendering
    "get_lesson_css",
    "render_inline",
    "render_prose",
    "render_list",
    "render_comparison_table",
    "render_block",
    "render_section",
    "render_back_link",
    "previous_label",
    "next_label",
    "render_navigation_footer",
    "render_lesson",
    # Pages
    "render_head_tags",
    "render_page",
    # Index pages
    "get_index_css",
    "render_catalog_index",
    "render_track_index",
    "render_module_index",
]
