"""
Integrity check tests: module chains, navigation, snippets and stray files.
"""

from lessondeck.classroom import (
    CatalogLoader,
    IntegrityIssue,
    Severity,
    has_errors,
    run_integrity_checks,
)
from lessondeck.classroom.integrity import (
    check_lessons,
    check_module_chains,
    check_orphan_files,
)


def messages(issues, severity=None):
    return [str(issue) for issue in issues if severity is None or issue.severity == severity]


class TestFixtureCatalog:
    def test_clean_catalog(self, loader):
        issues = run_integrity_checks(loader)
        assert not has_errors(issues)
        assert issues == []

    def test_bundled_content_has_no_errors(self, bundled_loader):
        issues = run_integrity_checks(bundled_loader)
        assert not has_errors(issues), messages(issues, Severity.ERROR)


class TestModuleChains:
    def test_missing_next_module_warns(self, make_content, sample_catalog, sample_lessons):
        del sample_catalog["tracks"][0]["modules"][0]["next_module"]
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        issues = check_module_chains(loader)
        assert len(issues) == 1
        assert issues[0].severity == Severity.WARNING
        assert issues[0].location == "b1"

    def test_last_module_of_track_may_end(self, loader):
        assert check_module_chains(loader) == []

    def test_chain_loop_is_error(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][0]["modules"][1]["next_module"] = "b1"
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        issues = check_module_chains(loader)
        assert has_errors(issues)
        assert any("loops" in message for message in messages(issues, Severity.ERROR))

    def test_chain_across_tracks(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][0]["modules"][1]["next_module"] = "c1"
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        assert run_integrity_checks(loader) == []


class TestLessons:
    def test_unsupported_language_warns(self, make_content, sample_catalog, sample_lessons):
        sample_lessons[("b13", "lesson-1")]["sections"][0]["body"][1]["language"] = "brainfuck"
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        issues = check_lessons(loader)
        assert len(issues) == 1
        assert issues[0].severity == Severity.WARNING
        assert issues[0].location == "b13/lesson-1"
        assert "brainfuck" in issues[0].message

    def test_repeated_title_warns(self, make_content, sample_catalog, sample_lessons):
        sample_lessons[("b13", "lesson-3")]["title"] = "B13.2: Data Fetching"
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        issues = check_lessons(loader)
        assert [issue.location for issue in issues] == ["b13/lesson-3"]

    def test_empty_module_warns(self, make_content, sample_catalog, sample_lessons):
        sample_catalog["tracks"][1]["modules"].append({"id": "c9", "title": "C9: Soon"})
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        issues = check_lessons(loader)
        assert [issue.location for issue in issues] == ["c9"]


class TestOrphanFiles:
    def test_unlisted_lesson_file(self, make_content, sample_catalog, sample_lessons):
        sample_lessons[("b13", "lesson-4")] = {"title": "Draft", "description": "Not yet listed"}
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        issues = check_orphan_files(loader)
        assert [issue.location for issue in issues] == ["b13/lesson-4"]

    def test_unknown_module_directory(self, make_content, sample_catalog, sample_lessons):
        sample_lessons[("z1", "lesson-1")] = {"title": "Stray", "description": "Stray file"}
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        assert [issue.location for issue in check_orphan_files(loader)] == ["z1/lesson-1"]


class TestReporting:
    def test_errors_sorted_first(self, make_content, sample_catalog, sample_lessons):
        modules = sample_catalog["tracks"][0]["modules"]
        del modules[0]["next_module"]
        modules[1]["next_module"] = "c1"
        sample_catalog["tracks"][1]["modules"][0]["next_module"] = "b13"
        loader = CatalogLoader(make_content(sample_catalog, sample_lessons))
        issues = run_integrity_checks(loader)
        severities = [issue.severity for issue in issues]
        assert severities[0] == Severity.ERROR
        assert severities[-1] == Severity.WARNING
        assert severities == sorted(severities, key=lambda s: s != Severity.ERROR)

    def test_has_errors(self):
        warning = IntegrityIssue(Severity.WARNING, "a", "w")
        error = IntegrityIssue(Severity.ERROR, "b", "e")
        assert has_errors([warning, error])
        assert not has_errors([warning])

    def test_str(self):
        issue = IntegrityIssue(Severity.WARNING, "b13/lesson-1", "Check this")
        assert str(issue) == "[warning] b13/lesson-1: Check this"
