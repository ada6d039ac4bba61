"""
Configuration module for the story configurator.

Re-exports catalog literals and environment settings.
"""

from .catalogs import (
    COMPETENCES,
    EDUCATIONAL_CONTEXTS,
    GENRES,
    GRADE_LEVELS,
    PAGE_COUNT_BUCKETS,
    SINGLE_PAGE_BUCKETS,
    SKILL_LABELS,
    TRANSVERSAL_APPROACHES,
)
from .settings import Settings, load_settings

__all__ = [
    # Catalog literals
    "COMPETENCES",
    "EDUCATIONAL_CONTEXTS",
    "GENRES",
    "GRADE_LEVELS",
    "PAGE_COUNT_BUCKETS",
    "SINGLE_PAGE_BUCKETS",
    "SKILL_LABELS",
    "TRANSVERSAL_APPROACHES",
    # Settings
    "Settings",
    "load_settings",
]
