"""Shared enums for the story configuration models."""

from enum import Enum


class ContextMode(str, Enum):
    """Which catalog feeds the story's context field."""

    GENRE = "genre"
    EDUCATIONAL_CONTEXT = "educational_context"


class PageLengthMode(str, Enum):
    """Which catalog feeds the page length field."""

    PAGE_COUNT = "page_count"
    SINGLE_PAGE = "single_page"


class FieldKind(str, Enum):
    """Enumerated fields of the story configuration."""

    CONTEXT = "context"
    PAGE_LENGTH = "page_length"
    GRADE_LEVEL = "grade_level"
    COMPETENCE = "competence"
    TRANSVERSAL_APPROACH = "transversal_approach"


class Skill(str, Enum):
    """Reading comprehension and vocabulary skills a story can target."""

    LITERAL_COMPREHENSION = "literal_comprehension"
    INFERENTIAL_COMPREHENSION = "inferential_comprehension"
    CRITICAL_COMPREHENSION = "critical_comprehension"
    THEMATIC_VOCABULARY = "thematic_vocabulary"
    READING_STRATEGIES = "reading_strategies"


class ValidationFailure(str, Enum):
    """Completeness rule that a configuration did not satisfy."""

    MISSING_GRADE_LEVEL = "missing_grade_level"
    MISSING_PAGE_LENGTH = "missing_page_length"
    MISSING_CONTEXT = "missing_context"
    MISSING_PRIMARY_COMPETENCE = "missing_primary_competence"
    MISSING_TITLE_OR_CONTEXT = "missing_title_or_context"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    ValidationFailure.MISSING_GRADE_LEVEL: "A grade level is required",
    ValidationFailure.MISSING_PAGE_LENGTH: "A page length is required",
    ValidationFailure.MISSING_CONTEXT: "A genre or educational context is required",
    ValidationFailure.MISSING_PRIMARY_COMPETENCE: "A primary competence is required",
    ValidationFailure.MISSING_TITLE_OR_CONTEXT: "Provide a title or a context for the story",
}
