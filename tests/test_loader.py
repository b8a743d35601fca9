"""
CatalogLoader tests: loading, lookups, routing and content validation.
"""

import pytest

from lessondeck.classroom import CatalogLoader
from lessondeck.errors import BrokenAdjacency, ContentValidationError, NotFound


class TestLoading:
    """Test catalog loading from disk."""

    def test_counts(self, loader):
        assert loader.title == "Test Course"
        assert loader.version == 1
        assert [t.id for t in loader.list_tracks()] == ["app-router", "comparison"]
        assert [m.id for m in loader.list_modules()] == ["b1", "b13", "c1"]
        assert loader.get_lesson_count() == 6

    def test_modules_of_track(self, loader):
        assert [m.id for m in loader.list_modules("app-router")] == ["b1", "b13"]
        assert loader.get_module("b13").track_id == "app-router"

    def test_lesson_summaries_ordered(self, loader):
        lessons = loader.lessons_of("b13")
        assert [l.id for l in lessons] == ["lesson-1", "lesson-2", "lesson-3"]
        assert [l.position for l in lessons] == [1, 2, 3]
        assert lessons[0].title == "B13.1: Core Questions"
        assert lessons[0].topics == ("Rendering", "Caching")

    def test_nav_title_defaults_to_title(self, loader):
        b1 = loader.lessons_of("b1")
        assert b1[0].nav_title == "Setup"
        assert b1[1].nav_title == "B1.2: Folder Structure"

    def test_get_all_lessons_in_catalog_order(self, loader):
        keys = [lesson.key for lesson in loader.get_all_lessons()]
        assert keys == [
            "b1/lesson-1", "b1/lesson-2",
            "b13/lesson-1", "b13/lesson-2", "b13/lesson-3",
            "c1/lesson-1",
        ]

    def test_missing_content_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CatalogLoader(tmp_path / "nowhere")

    def test_bundled_content_loads(self, bundled_loader):
        assert bundled_loader.get_lesson_count() > 0
        assert bundled_loader.has_module("b13")

    def test_bundled_chain_skips_unshipped_modules(self, bundled_loader):
        assert [m.id for m in bundled_loader.list_modules("app-router")] == ["b1", "b13"]
        assert bundled_loader.get_module("b1").next_module_id == "b13"


class TestLookups:
    """Test lesson and metadata lookups."""

    def test_get_lesson(self, loader):
        lesson = loader.get_lesson("b13", "lesson-2")
        assert lesson.module_id == "b13"
        assert lesson.lesson_id == "lesson-2"
        assert lesson.sections[0].heading == "Cache options"

    def test_lesson_with_no_sections(self, loader):
        lesson = loader.get_lesson("c1", "lesson-1")
        assert lesson.sections == ()

    def test_get_metadata(self, loader):
        meta = loader.get_metadata("b13", "lesson-1")
        assert meta.title == "B13.1: Core Questions"
        assert meta.description == "Common interview questions."

    def test_unknown_module(self, loader):
        with pytest.raises(NotFound) as excinfo:
            loader.get_module("nonexistent")
        assert excinfo.value.kind == "Module"
        assert excinfo.value.key == "nonexistent"

    def test_unknown_lesson(self, loader):
        with pytest.raises(NotFound):
            loader.get_lesson("b13", "lesson-9")
        with pytest.raises(NotFound):
            loader.get_metadata("b13", "lesson-9")
        with pytest.raises(NotFound):
            loader.get_lesson_summary("b13", "lesson-9")

    def test_unknown_track(self, loader):
        with pytest.raises(NotFound):
            loader.get_track("pages-router")
        with pytest.raises(NotFound):
            loader.list_modules("pages-router")

    def test_not_found_is_lookup_error(self, loader):
        with pytest.raises(LookupError):
            loader.get_module("nonexistent")


class TestRouting:
    """Test forward and reverse path mapping."""

    def test_lesson_path(self, loader):
        assert loader.lesson_path("b13", "lesson-2") == "/learn/app-router/b13/lesson-2"
        assert loader.module_path("b13") == "/learn/app-router/b13"
        assert loader.track_path("comparison") == "/learn/comparison"
        assert loader.catalog_path() == "/learn"

    def test_lesson_path_unknown(self, loader):
        with pytest.raises(NotFound):
            loader.lesson_path("b13", "lesson-9")

    def test_resolve_round_trip(self, loader):
        for lesson in loader.get_all_lessons():
            ref = loader.resolve_path(loader.lesson_path(lesson.module_id, lesson.id))
            assert ref.kind == "lesson"
            assert (ref.module_id, ref.lesson_id) == (lesson.module_id, lesson.id)

    def test_resolve_ignores_query_and_trailing_slash(self, loader):
        ref = loader.resolve_path("/learn/app-router/b13/lesson-2/?tab=code#top")
        assert (ref.module_id, ref.lesson_id) == ("b13", "lesson-2")

    def test_resolve_index_pages(self, loader):
        assert loader.resolve_path("/learn").kind == "catalog"
        assert loader.resolve_path("/learn/app-router").kind == "track"
        module_ref = loader.resolve_path("/learn/app-router/b1")
        assert module_ref.kind == "module"
        assert module_ref.module_id == "b1"

    def test_resolve_unknown(self, loader):
        with pytest.raises(NotFound):
            loader.resolve_path("/learn/app-router/b13/lesson-9")
        with pytest.raises(NotFound):
            loader.resolve_path("/learn/comparison/b13")

    def test_paths_are_unique(self, loader):
        paths = loader.get_all_paths()
        assert len(paths) == len(set(paths))
        # catalog + 2 tracks + 3 modules + 6 lessons
        assert len(paths) == 12

    def test_empty_base_path(self, content_dir):
        loader = CatalogLoader(content_dir, base_path="")
        assert loader.catalog_path() == "/"
        assert loader.lesson_path("b1", "lesson-1") == "/app-router/b1/lesson-1"
        assert loader.resolve_path("/").kind == "catalog"


class TestContentValidation:
    """Structural defects fail at load time."""

    def test_duplicate_module_id(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][1]["modules"].append(
            {"id": "b13", "title": "Again", "lessons": []}
        )
        with pytest.raises(ContentValidationError, match="Duplicate module id"):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_duplicate_lesson_id(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][0]["modules"][1]["lessons"].append({"id": "lesson-1"})
        with pytest.raises(ContentValidationError, match="Duplicate lesson id"):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_duplicate_track_id(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"].append({"id": "comparison", "title": "Again"})
        with pytest.raises(ContentValidationError, match="Duplicate track id"):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_missing_lesson_file(self, make_content, sample_catalog, sample_lessons):
        del sample_lessons[("b13", "lesson-3")]
        with pytest.raises(ContentValidationError, match="has no content file"):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_blank_title(self, make_content, sample_catalog, sample_lessons):
        sample_lessons[("b13", "lesson-2")]["title"] = "   "
        with pytest.raises(ContentValidationError):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_missing_description(self, make_content, sample_catalog, sample_lessons):
        del sample_lessons[("b1", "lesson-2")]["description"]
        with pytest.raises(ContentValidationError):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_bad_slug(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][0]["modules"][0]["lessons"][0]["id"] = "Lesson One"
        with pytest.raises(ContentValidationError):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_malformed_yaml(self, make_content, sample_catalog, sample_lessons):
        content_dir = make_content(sample_catalog, sample_lessons)
        (content_dir / "lessons" / "b1" / "lesson-1.yaml").write_text("title: [unclosed\n")
        with pytest.raises(ContentValidationError, match="Malformed YAML"):
            CatalogLoader(content_dir)

    def test_missing_catalog_file(self, make_content, sample_catalog, sample_lessons):
        content_dir = make_content(sample_catalog, sample_lessons)
        (content_dir / "catalog.yaml").unlink()
        with pytest.raises(ContentValidationError, match="not found"):
            CatalogLoader(content_dir)

    def test_chain_to_unknown_module(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][0]["modules"][1]["next_module"] = "b99"
        with pytest.raises(BrokenAdjacency, match="b99"):
            CatalogLoader(make_content(sample_catalog, sample_lessons))

    def test_chain_to_itself(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][0]["modules"][1]["next_module"] = "b13"
        with pytest.raises(BrokenAdjacency, match="itself"):
            CatalogLoader(make_content(sample_catalog, sample_lessons))
