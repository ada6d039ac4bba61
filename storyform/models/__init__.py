"""Enums and pydantic models for story configuration."""

from .enums import ContextMode, FieldKind, PageLengthMode, Skill, ValidationFailure
from .requests import GenerationRequest, SkillSelection

__all__ = [
    "ContextMode",
    "FieldKind",
    "PageLengthMode",
    "Skill",
    "ValidationFailure",
    "GenerationRequest",
    "SkillSelection",
]
