"""
Lesson content schemas for LessonDeck.

Defines Pydantic models for lesson content including:
- Lesson metadata consumed by the page shell (title, description)
- Section blocks: prose, bullet lists, code snippets, comparison tables
- The full lesson record
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Annotated, Literal, Optional, Union


def validate_non_blank(v: str) -> str:
    """Shared check for display strings that must carry text."""
    if not v.strip():
        raise ValueError('must be a non-empty string')
    return v


class FrozenModel(BaseModel):
    """Base for authored content: immutable once loaded."""
    model_config = ConfigDict(frozen=True, extra="forbid")


# -----------------------------------------------------------------------------
# Metadata
# -----------------------------------------------------------------------------

class LessonMetadata(FrozenModel):
    """Fixed-shape head-tag record for one lesson."""
    title: str
    description: str

    @field_validator('title', 'description')
    @classmethod
    def not_blank(cls, v):
        return validate_non_blank(v)

    def document_title(self, site_name: str) -> str:
        """Title as written into the document head, e.g. 'B13.2: ... - Next.js Mastery'."""
        if not site_name:
            return self.title
        return f"{self.title} - {site_name}"


# -----------------------------------------------------------------------------
# Section blocks
# -----------------------------------------------------------------------------

class ProseBlock(FrozenModel):
    """Paragraph text. `backtick` spans render as inline code."""
    type: Literal["prose"] = "prose"
    text: str


class ListBlock(FrozenModel):
    type: Literal["list"] = "list"
    items: tuple[str, ...] = Field(..., min_length=1)
    ordered: bool = False


class CodeSnippet(FrozenModel):
    """
    Source text plus the language tag selecting a highlighting grammar.
    `code` is opaque: it is never stripped, re-indented or normalized.
    """
    type: Literal["code"] = "code"
    code: str
    language: str = "javascript"
    title: Optional[str] = None  # e.g. a file name shown in the header


class ComparisonTable(FrozenModel):
    type: Literal["table"] = "table"
    columns: tuple[str, ...] = Field(..., min_length=1)
    rows: tuple[tuple[str, ...], ...] = ()
    caption: Optional[str] = None

    @model_validator(mode='after')
    def rows_match_columns(self):
        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(
                    f'Table row {index} has {len(row)} cells, expected {width}'
                )
        return self


Block = Annotated[
    Union[ProseBlock, ListBlock, CodeSnippet, ComparisonTable],
    Field(discriminator="type"),
]


class Section(FrozenModel):
    heading: str
    body: tuple[Block, ...] = ()

    @field_validator('heading')
    @classmethod
    def heading_not_blank(cls, v):
        return validate_non_blank(v)

    @property
    def snippets(self) -> list[CodeSnippet]:
        return [block for block in self.body if isinstance(block, CodeSnippet)]


# -----------------------------------------------------------------------------
# Lesson record
# -----------------------------------------------------------------------------

class LessonContent(FrozenModel):
    """
    One addressable lesson page.

    `module_id` and `lesson_id` come from the catalog, not from the lesson
    file, so the page path can never drift from the catalog entry.
    """
    module_id: str
    lesson_id: str
    metadata: LessonMetadata
    summary: Optional[str] = None  # lead paragraph; falls back to description
    sections: tuple[Section, ...] = ()

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def lead(self) -> str:
        return self.summary or self.metadata.description

    @property
    def key(self) -> str:
        return f"{self.module_id}/{self.lesson_id}"

    def iter_snippets(self):
        """Yield (section_index, snippet) pairs in document order."""
        for index, section in enumerate(self.sections):
            for snippet in section.snippets:
                yield index, snippet
