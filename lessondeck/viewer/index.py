"""
Index renderer - Catalog, track and module listing pages.
"""

import html

from lessondeck.classroom.loader import CatalogLoader

from .lesson import render_inline


def get_index_css() -> str:
    """Get CSS styles for listing pages."""
    return """
    <style>
    .index-grid {
        display: grid;
        gap: 1.5em;
        grid-template-columns: repeat(auto-fill, minmax(16rem, 1fr));
    }
    .index-card {
        display: block;
        border: 2px solid #bfdbfe;
        border-radius: 8px;
        padding: 1.5em;
        color: inherit;
        text-decoration: none;
    }
    .index-card:hover {
        border-color: #3b82f6;
    }
    .index-card h2 {
        color: #2563eb;
        margin-bottom: 0.5em;
    }
    .index-count {
        font-size: 0.85em;
        color: #6b7280;
    }
    .lesson-topics {
        font-size: 0.9em;
        color: #4b5563;
    }
    </style>
    """


def _card(href: str, title: str, description: str, footer: str) -> str:
    return (
        f'<a class="index-card" href="{html.escape(href)}">'
        f'<h2>{html.escape(title)}</h2>'
        f'<p>{html.escape(description)}</p>'
        f'<div class="index-count">{html.escape(footer)}</div>'
        f'</a>'
    )


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def render_catalog_index(loader: CatalogLoader) -> str:
    """Top-level page listing every track."""
    parts = [f'<h1>{html.escape(loader.title)}</h1>']
    if loader.description:
        parts.append(f'<p class="lesson-lead">{html.escape(loader.description)}</p>')
    parts.append('<div class="index-grid">')
    for track in loader.list_tracks():
        parts.append(_card(
            loader.track_path(track.id),
            track.title,
            track.description,
            _plural(len(track.module_ids), "module"),
        ))
    parts.append('</div>')
    return ''.join(parts)


def render_track_index(loader: CatalogLoader, track_id: str) -> str:
    """Page listing the modules of one track."""
    track = loader.get_track(track_id)
    parts = [
        f'<a class="back-link" href="{html.escape(loader.catalog_path())}">'
        f'← Back to {html.escape(loader.title)}</a>',
        f'<h1>{html.escape(track.title)}</h1>',
    ]
    if track.description:
        parts.append(f'<p class="lesson-lead">{html.escape(track.description)}</p>')
    parts.append('<div class="index-grid">')
    for module in loader.list_modules(track_id):
        parts.append(_card(
            loader.module_path(module.id),
            module.title,
            module.description,
            _plural(len(module.lessons), "lesson"),
        ))
    parts.append('</div>')
    return ''.join(parts)


def render_module_index(loader: CatalogLoader, module_id: str) -> str:
    """Page listing the lessons of one module with their topics."""
    module = loader.get_module(module_id)
    track = loader.get_track(module.track_id)
    parts = [
        f'<a class="back-link" href="{html.escape(loader.track_path(track.id))}">'
        f'← Back to {html.escape(track.title)}</a>',
        f'<h1>{html.escape(module.title)}</h1>',
    ]
    if module.description:
        parts.append(f'<p class="lesson-lead">{html.escape(module.description)}</p>')

    if not module.lessons:
        parts.append('<p>No lessons yet.</p>')
        return ''.join(parts)

    parts.append('<div class="index-grid">')
    for lesson in module.lessons:
        topics = ''
        if lesson.topics:
            items = ''.join(f'<li>{render_inline(topic)}</li>' for topic in lesson.topics)
            topics = f'<ul class="lesson-topics">{items}</ul>'
        parts.append(
            f'<a class="index-card" href="{html.escape(loader.lesson_path(module.id, lesson.id))}">'
            f'<h2>{html.escape(lesson.title)}</h2>'
            f'<p>{html.escape(lesson.description)}</p>'
            f'{topics}'
            f'</a>'
        )
    parts.append('</div>')
    return ''.join(parts)
