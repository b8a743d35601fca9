"""
LessonDeck - Course site shell

Streamlit application serving the lesson catalog: sidebar tree, index
pages, lessons with highlighted code and previous/next navigation.

Usage:
    streamlit run app.py
    (open ?page=/learn/app-router/b13/lesson-2 to deep-link a lesson)
"""

import logging
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent
load_dotenv(PROJECT_ROOT / ".env")

from lessondeck.classroom import CatalogLoader, Navigator, LinkKind
from lessondeck.config import SITE_NAME
from lessondeck.errors import NotFound
from lessondeck.schemas import CodeSnippet, LessonContent, PageRef
from lessondeck.viewer import (
    get_index_css,
    get_lesson_css,
    next_label,
    previous_label,
    render_back_link,
    render_block,
    render_catalog_index,
    render_module_index,
    render_snippet,
    render_track_index,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Catalog (loaded once per process)
# -----------------------------------------------------------------------------

@st.cache_resource
def get_loader() -> CatalogLoader:
    return CatalogLoader()


def get_navigator() -> Navigator:
    return Navigator(get_loader())


# -----------------------------------------------------------------------------
# Routing
# -----------------------------------------------------------------------------

def current_path() -> str:
    return st.query_params.get("page", get_loader().catalog_path())


def go_to(href: str):
    """Navigate to another catalog page."""
    st.query_params["page"] = href
    st.rerun()


def resolve_current_page() -> PageRef | None:
    path = current_path()
    try:
        return get_loader().resolve_path(path)
    except NotFound:
        logger.info(f"No page at {path}")
        return None


def page_title(ref: PageRef | None) -> str:
    """Document title for the page, from the lesson metadata where there is one."""
    loader = get_loader()
    if ref is None:
        return f"Not Found - {SITE_NAME}"
    if ref.kind == "lesson":
        return loader.get_metadata(ref.module_id, ref.lesson_id).document_title(SITE_NAME)
    if ref.kind == "module":
        return f"{loader.get_module(ref.module_id).title} - {SITE_NAME}"
    if ref.kind == "track":
        return f"{loader.get_track(ref.track_id).title} - {SITE_NAME}"
    return loader.title or SITE_NAME


# -----------------------------------------------------------------------------
# Sidebar: Catalog Tree
# -----------------------------------------------------------------------------

def render_sidebar(ref: PageRef | None):
    """Render the sidebar with the track/module/lesson tree."""
    loader = get_loader()
    st.sidebar.title(SITE_NAME)

    if st.sidebar.button("Learning Hub", width="stretch"):
        go_to(loader.catalog_path())

    current_module = ref.module_id if ref else None
    current_lesson = ref.lesson_id if ref else None
    tree = get_navigator().get_navigation_tree(current_module, current_lesson)

    for nav_track in tree:
        st.sidebar.divider()
        st.sidebar.subheader(nav_track.track.title)
        for nav_module in nav_track.modules:
            with st.sidebar.expander(nav_module.module.title, expanded=nav_module.is_open):
                if st.button("Overview", key=f"module_{nav_module.module.id}", width="stretch"):
                    go_to(nav_module.href)
                for nav_lesson in nav_module.lessons:
                    if st.button(
                        nav_lesson.summary.nav_title,
                        key=f"lesson_{nav_lesson.summary.key}",
                        type="primary" if nav_lesson.is_current else "secondary",
                        width="stretch",
                    ):
                        go_to(nav_lesson.href)


# -----------------------------------------------------------------------------
# Main Content
# -----------------------------------------------------------------------------

def render_lesson_view(lesson: LessonContent):
    """Render a lesson: header, sections, then the navigation footer."""
    nav = get_navigator()
    adjacency = nav.compute_adjacency(lesson.module_id, lesson.lesson_id)
    pos, total = nav.get_lesson_position(lesson.module_id, lesson.lesson_id)

    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    st.markdown(render_back_link(nav.module_link(lesson.module_id)), unsafe_allow_html=True)
    st.title(lesson.title)
    st.caption(f"Lesson {pos} of {total}")
    st.markdown(lesson.lead)

    for section in lesson.sections:
        st.header(section.heading)
        for block in section.body:
            if isinstance(block, CodeSnippet):
                # st.code carries its own copy button; feed it the exact source
                display = render_snippet(block.code, block.language)
                st.code(display.copy_text, language=display.grammar or "text")
            else:
                st.markdown(render_block(block), unsafe_allow_html=True)

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if adjacency.previous is not None:
            if st.button(previous_label(adjacency.previous), width="stretch"):
                go_to(adjacency.previous.href)
    with col2:
        if adjacency.next is not None:
            button_type = "primary" if adjacency.next.kind == LinkKind.LESSON else "secondary"
            if st.button(next_label(adjacency.next), type=button_type, width="stretch"):
                go_to(adjacency.next.href)


def render_index_view(ref: PageRef):
    loader = get_loader()
    st.markdown(get_lesson_css() + get_index_css(), unsafe_allow_html=True)
    if ref.kind == "module":
        st.markdown(render_module_index(loader, ref.module_id), unsafe_allow_html=True)
        first = get_navigator().get_first_lesson_link(ref.module_id)
        if first is not None and st.button("Start module →", type="primary"):
            go_to(first.href)
    elif ref.kind == "track":
        st.markdown(render_track_index(loader, ref.track_id), unsafe_allow_html=True)
    else:
        st.markdown(render_catalog_index(loader), unsafe_allow_html=True)


def render_not_found_view():
    st.title("Page not found")
    st.write(f"Nothing lives at `{current_path()}`.")
    if st.button("Back to the Learning Hub"):
        go_to(get_loader().catalog_path())


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    ref = resolve_current_page()

    st.set_page_config(
        page_title=page_title(ref),
        layout="wide",
        initial_sidebar_state="expanded",
    )

    render_sidebar(ref)

    if ref is None:
        render_not_found_view()
    elif ref.kind == "lesson":
        render_lesson_view(get_loader().get_lesson(ref.module_id, ref.lesson_id))
    else:
        render_index_view(ref)


if __name__ == "__main__":
    main()
