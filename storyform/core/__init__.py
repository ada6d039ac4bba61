"""Story configuration core: catalogs, mutable state and the request builder."""

from .catalogs import Catalog, CatalogSet, get_catalog_set
from .errors import (
    ConfigurationError,
    ConflictsWithPrimary,
    FieldNotAvailable,
    InvalidEnumValue,
    InvalidFlagValue,
    RequestValidationError,
    UnknownSkill,
)
from .request_builder import BuildResult, build_request, validate
from .state import ConfigurationState
from .types import SkillFlags

__all__ = [
    "Catalog",
    "CatalogSet",
    "get_catalog_set",
    "ConfigurationError",
    "ConflictsWithPrimary",
    "FieldNotAvailable",
    "InvalidEnumValue",
    "InvalidFlagValue",
    "RequestValidationError",
    "UnknownSkill",
    "BuildResult",
    "build_request",
    "validate",
    "ConfigurationState",
    "SkillFlags",
]
