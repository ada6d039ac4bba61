"""Pydantic models for finalized story generation requests."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import ContextMode, PageLengthMode, Skill


class SkillSelection(BaseModel):
    """Snapshot of the five skill flags."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    literal_comprehension: bool = False
    inferential_comprehension: bool = False
    critical_comprehension: bool = False
    thematic_vocabulary: bool = False
    reading_strategies: bool = False

    @property
    def enabled(self) -> tuple[Skill, ...]:
        """Skills switched on, in catalog order."""
        return tuple(skill for skill in Skill if getattr(self, skill.value))


class GenerationRequest(BaseModel):
    """Validated story configuration handed to the story generator.

    Built only by ``build_request``; every enumerated field is a member of
    the catalog set named by ``context_mode`` and ``page_length_mode``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    context_mode: ContextMode
    page_length_mode: PageLengthMode

    title: str = Field(default="", description="Title or short summary of the story")
    context: str = Field(..., min_length=1, description="Genre or educational context")
    page_length: str = Field(..., min_length=1)
    grade_level: str = Field(..., min_length=1)
    characters: Optional[str] = Field(
        default=None,
        description="Free-text character descriptions (character-driven form only)",
    )
    skills: SkillSelection = Field(default_factory=SkillSelection)
    primary_competence: str = Field(..., min_length=1)
    secondary_competences: tuple[str, ...] = ()
    transversal_approaches: tuple[str, ...] = ()

    @computed_field
    @property
    def targeted_skills(self) -> tuple[str, ...]:
        return tuple(skill.value for skill in self.skills.enabled)
