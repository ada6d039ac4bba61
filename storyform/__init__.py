"""storyform: pedagogical story configuration and request building."""

from .core import (
    BuildResult,
    CatalogSet,
    ConfigurationState,
    build_request,
    get_catalog_set,
)
from .models import ContextMode, GenerationRequest, PageLengthMode, ValidationFailure

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "CatalogSet",
    "ConfigurationState",
    "build_request",
    "get_catalog_set",
    "ContextMode",
    "GenerationRequest",
    "PageLengthMode",
    "ValidationFailure",
    "__version__",
]
