"""
Integrity checks over a loaded catalog.

Structural defects (duplicate ids, missing files) already fail in
CatalogLoader. These checks cover what the loader cannot decide alone:
navigation edges that do not resolve, module chains, and authoring slips
that only deserve a warning.
"""

from dataclasses import dataclass
from enum import Enum

from lessondeck.config import LESSONS_DIRNAME
from lessondeck.errors import BrokenAdjacency, NotFound
from lessondeck.utils import get_available_files
from lessondeck.viewer.snippet import resolve_grammar

from .loader import CatalogLoader
from .navigator import Navigator


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class IntegrityIssue:
    severity: Severity
    location: str  # module id or module/lesson key
    message: str

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.location}: {self.message}"


def check_adjacency(loader: CatalogLoader, navigator: Navigator) -> list[IntegrityIssue]:
    """Every footer link of every lesson must resolve to a catalog page."""
    issues = []
    for module in loader.list_modules():
        for lesson in module.lessons:
            try:
                adjacency = navigator.compute_adjacency(module.id, lesson.id)
            except (BrokenAdjacency, NotFound) as e:
                issues.append(IntegrityIssue(Severity.ERROR, lesson.key, str(e)))
                continue
            for link in (adjacency.previous, adjacency.next):
                if link is None:
                    continue
                try:
                    loader.resolve_path(link.href)
                except NotFound:
                    issues.append(IntegrityIssue(
                        Severity.ERROR, lesson.key, f"Navigation link does not resolve: {link.href}"
                    ))
    return issues


def check_module_chains(loader: CatalogLoader) -> list[IntegrityIssue]:
    """Chained modules must exist and must not loop; open chain ends are warnings."""
    issues = []
    for track in loader.list_tracks():
        last_module_id = track.module_ids[-1] if track.module_ids else None
        for module_id in track.module_ids:
            module = loader.get_module(module_id)
            if module.next_module_id is None and module_id != last_module_id:
                issues.append(IntegrityIssue(
                    Severity.WARNING, module_id,
                    "Module has no next_module; its last lesson has no forward link",
                ))

    for module in loader.list_modules():
        seen = [module.id]
        current = module.next_module_id
        while current is not None:
            if not loader.has_module(current):
                issues.append(IntegrityIssue(
                    Severity.ERROR, module.id, f"Chain reaches unknown module '{current}'"
                ))
                break
            if current in seen:
                issues.append(IntegrityIssue(
                    Severity.ERROR, module.id,
                    f"Module chain loops: {' -> '.join(seen + [current])}",
                ))
                break
            seen.append(current)
            current = loader.get_module(current).next_module_id
    return issues


def check_lessons(loader: CatalogLoader) -> list[IntegrityIssue]:
    """Empty modules, repeated titles, and snippet languages without a grammar."""
    issues = []
    for module in loader.list_modules():
        if not module.lessons:
            issues.append(IntegrityIssue(Severity.WARNING, module.id, "Module has no lessons"))

        titles: dict[str, str] = {}
        for lesson in module.lessons:
            if lesson.title in titles:
                issues.append(IntegrityIssue(
                    Severity.WARNING, lesson.key,
                    f"Title '{lesson.title}' repeats {titles[lesson.title]}",
                ))
            else:
                titles[lesson.title] = lesson.key

            content = loader.get_lesson(module.id, lesson.id)
            for section_index, snippet in content.iter_snippets():
                if resolve_grammar(snippet.language) is None:
                    issues.append(IntegrityIssue(
                        Severity.WARNING, lesson.key,
                        f"Section {section_index + 1}: language '{snippet.language}' "
                        "has no grammar, rendered as plain text",
                    ))
    return issues


def check_orphan_files(loader: CatalogLoader) -> list[IntegrityIssue]:
    """Lesson files on disk that no catalog entry points at."""
    issues = []
    lessons_dir = loader.content_dir / LESSONS_DIRNAME
    if not lessons_dir.exists():
        return issues
    for module_dir in sorted(p for p in lessons_dir.iterdir() if p.is_dir()):
        listed = set(loader.get_module(module_dir.name).lesson_ids) if loader.has_module(module_dir.name) else set()
        for stem in get_available_files(module_dir):
            if stem not in listed:
                issues.append(IntegrityIssue(
                    Severity.WARNING, f"{module_dir.name}/{stem}",
                    "Lesson file is not listed in the catalog",
                ))
    return issues


def run_integrity_checks(loader: CatalogLoader) -> list[IntegrityIssue]:
    """Run all checks; errors first, then warnings, each in catalog order."""
    navigator = Navigator(loader)
    issues = (
        check_adjacency(loader, navigator)
        + check_module_chains(loader)
        + check_lessons(loader)
        + check_orphan_files(loader)
    )
    return sorted(issues, key=lambda issue: issue.severity != Severity.ERROR)


def has_errors(issues: list[IntegrityIssue]) -> bool:
    return any(issue.severity == Severity.ERROR for issue in issues)
