"""
Lesson renderer - Generate HTML for lesson display.

Features:
- Section blocks: prose with inline code, bullet lists, code snippets,
  comparison tables
- Back link and previous/next navigation footer
- Deterministic output: the same lesson always renders to the same HTML
"""

from typing import Optional
import html
import re

from lessondeck.classroom.navigator import Adjacency, Link, LinkKind
from lessondeck.schemas import (
    Block,
    CodeSnippet,
    ComparisonTable,
    LessonContent,
    ListBlock,
    ProseBlock,
    Section,
)

from .snippet import render_code_block

INLINE_CODE = re.compile(r'`([^`]+)`')


def get_lesson_css() -> str:
    """Get CSS styles for lesson display."""
    return """
    <style>
    .lesson {
        max-width: 56rem;
        margin: 0 auto;
    }
    .lesson-title {
        font-size: 2.25em;
        font-weight: 700;
        margin-bottom: 0.5em;
    }
    .lesson-lead {
        font-size: 1.125em;
        color: #4b5563;
    }
    .back-link {
        display: inline-block;
        margin-bottom: 1em;
        color: #2563eb;
    }
    .lesson-section {
        background: #ffffff;
        border-radius: 8px;
        padding: 1.5em;
        margin: 2em 0;
        box-shadow: 0 1px 2px rgba(0,0,0,0.05);
    }
    .lesson-section h2 {
        font-size: 1.5em;
        font-weight: 600;
        margin-bottom: 1em;
    }
    .prose code {
        background: #f3f4f6;
        border-radius: 4px;
        padding: 0.1em 0.3em;
    }
    .comparison-table {
        width: 100%;
        border-collapse: collapse;
        margin: 1em 0;
    }
    .comparison-table th {
        background: #f9fafb;
        text-align: left;
        padding: 0.75em 1em;
        font-weight: 600;
    }
    .comparison-table td {
        padding: 0.75em 1em;
        border-top: 1px solid #e5e7eb;
    }
    .comparison-table td:first-child {
        font-weight: 500;
    }
    .lesson-nav {
        display: flex;
        justify-content: space-between;
        border-top: 1px solid #e5e7eb;
        padding-top: 2em;
        margin-top: 2em;
    }
    .nav-next {
        background: #2563eb;
        color: #ffffff;
        border-radius: 4px;
        padding: 0.5em 1em;
    }
    </style>
    """


# -----------------------------------------------------------------------------
# Blocks
# -----------------------------------------------------------------------------

def render_inline(text: str) -> str:
    """Escape text, turning `backtick` spans into <code> elements."""
    parts = []
    pos = 0
    for match in INLINE_CODE.finditer(text):
        parts.append(html.escape(text[pos:match.start()]))
        parts.append(f'<code>{html.escape(match.group(1))}</code>')
        pos = match.end()
    parts.append(html.escape(text[pos:]))
    return ''.join(parts)


def render_prose(block: ProseBlock) -> str:
    """Render a paragraph; blank lines split it into several <p> elements."""
    paragraphs = [p.strip() for p in re.split(r'\n\s*\n', block.text) if p.strip()]
    return ''.join(f'<p class="prose">{render_inline(p)}</p>' for p in paragraphs)


def render_list(block: ListBlock) -> str:
    tag = "ol" if block.ordered else "ul"
    items = ''.join(f'<li>{render_inline(item)}</li>' for item in block.items)
    return f'<{tag} class="prose">{items}</{tag}>'


def render_snippet_block(block: CodeSnippet) -> str:
    return render_code_block(block.code, block.language, title=block.title)


def render_comparison_table(block: ComparisonTable) -> str:
    """Render a comparison table with a header row."""
    parts = ['<table class="comparison-table">']
    if block.caption:
        parts.append(f'<caption>{html.escape(block.caption)}</caption>')
    parts.append('<thead><tr>')
    for column in block.columns:
        parts.append(f'<th>{html.escape(column)}</th>')
    parts.append('</tr></thead><tbody>')
    for row in block.rows:
        cells = ''.join(f'<td>{render_inline(cell)}</td>' for cell in row)
        parts.append(f'<tr>{cells}</tr>')
    parts.append('</tbody></table>')
    return ''.join(parts)


def render_block(block: Block) -> str:
    """Render any section block."""
    if isinstance(block, ProseBlock):
        return render_prose(block)
    elif isinstance(block, ListBlock):
        return render_list(block)
    elif isinstance(block, CodeSnippet):
        return render_snippet_block(block)
    elif isinstance(block, ComparisonTable):
        return render_comparison_table(block)
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_section(section: Section) -> str:
    """Render a titled section and its blocks in order."""
    parts = ['<section class="lesson-section">']
    parts.append(f'<h2>{html.escape(section.heading)}</h2>')
    for block in section.body:
        parts.append(render_block(block))
    parts.append('</section>')
    return ''.join(parts)


# -----------------------------------------------------------------------------
# Navigation
# -----------------------------------------------------------------------------

def render_back_link(link: Link) -> str:
    """'← Back to B13 Lessons' link shown above the lesson title."""
    return (
        f'<a class="back-link" href="{html.escape(link.href)}">'
        f'← Back to {html.escape(link.label or link.title)} Lessons</a>'
    )


def previous_label(link: Link) -> str:
    if link.kind == LinkKind.LESSON:
        return f"← Previous: {link.title}"
    return f"← Back to {link.label or link.title} Lessons"


def next_label(link: Link) -> str:
    return f"Next: {link.title} →"


def render_navigation_footer(adjacency: Adjacency) -> str:
    """Render previous/next links; a missing edge renders nothing on that side."""
    parts = ['<nav class="lesson-nav">']
    if adjacency.previous is not None:
        parts.append(
            f'<a class="nav-previous" rel="prev" href="{html.escape(adjacency.previous.href)}">'
            f'{html.escape(previous_label(adjacency.previous))}</a>'
        )
    else:
        parts.append('<span></span>')
    if adjacency.next is not None:
        parts.append(
            f'<a class="nav-next" rel="next" href="{html.escape(adjacency.next.href)}">'
            f'{html.escape(next_label(adjacency.next))}</a>'
        )
    parts.append('</nav>')
    return ''.join(parts)


# -----------------------------------------------------------------------------
# Lesson
# -----------------------------------------------------------------------------

def render_lesson(
    lesson: LessonContent,
    adjacency: Optional[Adjacency] = None,
    back_link: Optional[Link] = None,
) -> str:
    """
    Render complete lesson content as HTML.

    Args:
        lesson: LessonContent object
        adjacency: Footer links from Navigator.compute_adjacency
        back_link: Module index link shown above the title

    Returns:
        HTML string: title, lead, sections in order, navigation footer
    """
    parts = ['<article class="lesson">']

    if back_link is not None:
        parts.append(render_back_link(back_link))

    # Title and lead
    parts.append(f'<h1 class="lesson-title">{html.escape(lesson.title)}</h1>')
    parts.append(f'<p class="lesson-lead">{html.escape(lesson.lead)}</p>')

    for section in lesson.sections:
        parts.append(render_section(section))

    if adjacency is not None:
        parts.append(render_navigation_footer(adjacency))

    parts.append('</article>')
    return ''.join(parts)
