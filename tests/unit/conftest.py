"""Pytest fixtures for story configuration tests."""

import pytest

from storyform.core import ConfigurationState, get_catalog_set
from storyform.models import ContextMode, PageLengthMode

from tests.unit.catalog_values import GENRE, GRADE, PAGES, READING


@pytest.fixture
def genre_catalogs():
    return get_catalog_set(ContextMode.GENRE, PageLengthMode.PAGE_COUNT)


@pytest.fixture
def educational_catalogs():
    return get_catalog_set(ContextMode.EDUCATIONAL_CONTEXT, PageLengthMode.SINGLE_PAGE)


@pytest.fixture
def state(genre_catalogs):
    """Empty genre-mode configuration."""
    return ConfigurationState(genre_catalogs)


@pytest.fixture
def educational_state(educational_catalogs):
    """Empty educational-context configuration."""
    return ConfigurationState(educational_catalogs)


@pytest.fixture
def complete_state(state):
    """Genre-mode configuration that passes every completeness rule."""
    state.set_title("El zorro viajero")
    state.set_grade_level(GRADE)
    state.set_page_length(PAGES)
    state.set_context(GENRE)
    state.set_primary_competence(READING)
    return state
