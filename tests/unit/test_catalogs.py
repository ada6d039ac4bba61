"""Tests for storyform/core/catalogs.py."""

import pytest

from storyform.config import catalogs as literals
from storyform.core.catalogs import Catalog, CatalogSet, get_catalog_set
from storyform.models import ContextMode, FieldKind, PageLengthMode

from tests.unit.catalog_values import GRADE


# =============================================================================
# Catalog
# =============================================================================


class TestCatalog:
    """Tests for the Catalog value list."""

    def test_preserves_order(self):
        """Values should come back in the order they were given."""
        catalog = Catalog(["b", "a", "c"])
        assert catalog.values == ("b", "a", "c")
        assert list(catalog) == ["b", "a", "c"]

    def test_membership(self):
        """Membership should be exact and case-sensitive."""
        catalog = Catalog(["Aventura", "Misterio"])
        assert "Aventura" in catalog
        assert "aventura" not in catalog
        assert "" not in catalog
        assert None not in catalog

    def test_unhashable_value_is_not_a_member(self):
        """Unhashable input should report False instead of raising."""
        catalog = Catalog(["Aventura"])
        assert ["Aventura"] not in catalog

    def test_drops_duplicates(self):
        """Repeated values should collapse to their first position."""
        catalog = Catalog(["a", "b", "a"])
        assert catalog.values == ("a", "b")
        assert len(catalog) == 2

    def test_values_are_read_only(self):
        """The values property should not be assignable."""
        catalog = Catalog(["a"])
        with pytest.raises(AttributeError):
            catalog.values = ("b",)


# =============================================================================
# CatalogSet
# =============================================================================


class TestGetCatalogSet:
    """Tests for catalog set selection."""

    def test_default_is_genre_with_page_count_buckets(self):
        """Defaults should select genres and page-count buckets."""
        catalogs = get_catalog_set()
        assert catalogs.context_mode is ContextMode.GENRE
        assert catalogs.page_length_mode is PageLengthMode.PAGE_COUNT
        assert catalogs.values(FieldKind.CONTEXT) == literals.GENRES
        assert catalogs.values(FieldKind.PAGE_LENGTH) == literals.PAGE_COUNT_BUCKETS

    def test_educational_single_page(self):
        """Educational mode with single pages should swap both catalogs."""
        catalogs = get_catalog_set(ContextMode.EDUCATIONAL_CONTEXT, PageLengthMode.SINGLE_PAGE)
        assert catalogs.values(FieldKind.CONTEXT) == literals.EDUCATIONAL_CONTEXTS
        assert catalogs.values(FieldKind.PAGE_LENGTH) == literals.SINGLE_PAGE_BUCKETS

    def test_accepts_mode_names(self):
        """Plain mode strings should resolve to the same shared set."""
        assert get_catalog_set("educational_context", "single_page") is get_catalog_set(
            ContextMode.EDUCATIONAL_CONTEXT, PageLengthMode.SINGLE_PAGE
        )

    def test_sets_are_shared(self):
        """Repeated lookups should return the same instance."""
        assert get_catalog_set() is get_catalog_set()

    def test_unknown_mode_raises(self):
        """Unknown mode names should raise ValueError."""
        with pytest.raises(ValueError):
            get_catalog_set("poetry")

    def test_shared_catalogs_identical_across_modes(self):
        """Grade, competence and approach catalogs should not vary by mode."""
        genre = get_catalog_set(ContextMode.GENRE)
        educational = get_catalog_set(ContextMode.EDUCATIONAL_CONTEXT)
        for kind in (FieldKind.GRADE_LEVEL, FieldKind.COMPETENCE, FieldKind.TRANSVERSAL_APPROACH):
            assert genre.catalog(kind) is educational.catalog(kind)

    def test_character_driven_follows_context_mode(self):
        """Only genre mode should carry the character fields."""
        assert get_catalog_set(ContextMode.GENRE).character_driven is True
        assert get_catalog_set(ContextMode.EDUCATIONAL_CONTEXT).character_driven is False

    def test_contains_by_field_kind(self):
        """contains() should accept enum members or their string values."""
        catalogs = get_catalog_set()
        assert catalogs.contains(FieldKind.GRADE_LEVEL, GRADE)
        assert catalogs.contains("competence", "Resuelve problemas de cantidad")
        assert not catalogs.contains(FieldKind.CONTEXT, "Convivencia escolar")

    def test_catalog_set_is_frozen(self):
        """Catalog sets should reject attribute assignment."""
        catalogs = get_catalog_set()
        assert isinstance(catalogs, CatalogSet)
        with pytest.raises(AttributeError):
            catalogs.context = Catalog(["x"])
