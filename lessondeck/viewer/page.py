"""
Page renderer - Standalone HTML documents with head tags.

The Streamlit shell sets its own page title; these helpers serve hosts that
write raw HTML (previews, static hosting).
"""

from typing import Optional
import html

from lessondeck.classroom.navigator import Adjacency, Link
from lessondeck.config import SITE_NAME
from lessondeck.schemas import LessonContent, LessonMetadata

from .lesson import get_lesson_css, render_lesson
from .snippet import get_copy_script, get_snippet_css


def render_head_tags(metadata: LessonMetadata, site_name: str = SITE_NAME) -> str:
    """Document head tags for one lesson's metadata record."""
    title = html.escape(metadata.document_title(site_name))
    description = html.escape(metadata.description, quote=True)
    return (
        f'<title>{title}</title>'
        f'<meta name="description" content="{description}">'
        f'<meta property="og:title" content="{title}">'
        f'<meta property="og:description" content="{description}">'
    )


def render_page(
    lesson: LessonContent,
    adjacency: Optional[Adjacency] = None,
    back_link: Optional[Link] = None,
    site_name: str = SITE_NAME,
) -> str:
    """Render a lesson as a complete HTML document."""
    return (
        '<!DOCTYPE html>'
        '<html lang="en"><head><meta charset="utf-8">'
        f'{render_head_tags(lesson.metadata, site_name)}'
        f'{get_lesson_css()}{get_snippet_css()}'
        '</head><body>'
        f'{render_lesson(lesson, adjacency=adjacency, back_link=back_link)}'
        f'{get_copy_script()}'
        '</body></html>'
    )
