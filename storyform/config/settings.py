"""
Environment-driven settings for story configuration sessions.

Values come from the process environment, with a .env file (found by
searching parent directories) filling in anything unset.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from ..models.enums import ContextMode, PageLengthMode

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv(usecwd=True))

CONTEXT_MODE_VAR = "STORYFORM_CONTEXT_MODE"
PAGE_LENGTH_MODE_VAR = "STORYFORM_PAGE_LENGTH_MODE"
LOG_FORMAT_VAR = "STORYFORM_LOG_FORMAT"
LOG_LEVEL_VAR = "STORYFORM_LOG_LEVEL"

LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one process."""

    context_mode: ContextMode = ContextMode.GENRE
    page_length_mode: PageLengthMode = PageLengthMode.PAGE_COUNT
    log_format: str = "json"
    log_level: int = logging.INFO

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"

    def catalog_set(self):
        """The CatalogSet these settings select."""
        # Import here to avoid circular imports
        from ..core.catalogs import get_catalog_set

        return get_catalog_set(self.context_mode, self.page_length_mode)


def _read_choice(var: str, enum_cls, default):
    raw = os.getenv(var, "").strip().lower()
    if not raw:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"{var}={raw!r} is not one of: {choices}") from None


def _read_log_level() -> int:
    raw = os.getenv(LOG_LEVEL_VAR, "").strip().upper()
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_VAR}={raw!r} is not a logging level")
    return level


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Raises:
        ValueError: if a variable holds an unknown mode, format or level
    """
    log_format = os.getenv(LOG_FORMAT_VAR, "json").strip().lower() or "json"
    if log_format not in LOG_FORMATS:
        raise ValueError(f"{LOG_FORMAT_VAR}={log_format!r} is not one of: {', '.join(LOG_FORMATS)}")

    return Settings(
        context_mode=_read_choice(CONTEXT_MODE_VAR, ContextMode, ContextMode.GENRE),
        page_length_mode=_read_choice(PAGE_LENGTH_MODE_VAR, PageLengthMode, PageLengthMode.PAGE_COUNT),
        log_format=log_format,
        log_level=_read_log_level(),
    )
