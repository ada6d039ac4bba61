"""Root pytest configuration shared across test directories."""

import pytest

from storyform.config import settings


@pytest.fixture(autouse=True)
def clean_storyform_env(monkeypatch):
    """Keep developer .env values from leaking into tests."""
    for var in (
        settings.CONTEXT_MODE_VAR,
        settings.PAGE_LENGTH_MODE_VAR,
        settings.LOG_FORMAT_VAR,
        settings.LOG_LEVEL_VAR,
    ):
        monkeypatch.delenv(var, raising=False)
