"""
In-progress story configuration for one form session.

Every field changes only through a named mutator. A mutator validates its
input first and raises before touching anything, so a rejected change
leaves the state exactly as it was.
"""

import uuid
from typing import Optional, Union

from ..models.enums import FieldKind, Skill
from ..models.requests import SkillSelection
from .catalogs import CatalogSet, get_catalog_set
from .errors import ConflictsWithPrimary, FieldNotAvailable, InvalidEnumValue
from .types import SkillFlags


class ConfigurationState:
    """Mutable story configuration bound to one CatalogSet."""

    def __init__(self, catalogs: Optional[CatalogSet] = None, session_id: Optional[str] = None):
        self._catalogs = catalogs or get_catalog_set()
        self.session_id = session_id or str(uuid.uuid4())
        self._skills = SkillFlags()
        self.reset()

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def catalogs(self) -> CatalogSet:
        """Catalog set fixed for the whole session."""
        return self._catalogs

    @property
    def character_driven(self) -> bool:
        return self._catalogs.character_driven

    @property
    def title(self) -> str:
        return self._title

    @property
    def context_value(self) -> Optional[str]:
        return self._context_value

    @property
    def page_length(self) -> Optional[str]:
        return self._page_length

    @property
    def grade_level(self) -> Optional[str]:
        return self._grade_level

    @property
    def characters(self) -> Optional[str]:
        """Character descriptions, or None outside the character-driven form."""
        return self._characters if self.character_driven else None

    @property
    def skills(self) -> dict[str, bool]:
        return self._skills.as_dict()

    @property
    def primary_competence(self) -> Optional[str]:
        return self._primary_competence

    @property
    def secondary_competences(self) -> tuple[str, ...]:
        return tuple(self._secondary_competences)

    @property
    def transversal_approaches(self) -> tuple[str, ...]:
        return tuple(self._transversal_approaches)

    def skill_snapshot(self) -> SkillSelection:
        """Frozen copy of the current skill flags."""
        return self._skills.snapshot()

    # =========================================================================
    # Free text
    # =========================================================================

    def set_title(self, text: str) -> None:
        self._title = text

    def set_characters(self, text: str) -> None:
        self._require_character_driven("characters")
        self._characters = text

    # =========================================================================
    # Single-select fields
    # =========================================================================

    def set_context(self, value: str) -> None:
        self._context_value = self._checked(FieldKind.CONTEXT, value)

    def set_page_length(self, value: str) -> None:
        self._page_length = self._checked(FieldKind.PAGE_LENGTH, value)

    def set_grade_level(self, value: str) -> None:
        self._grade_level = self._checked(FieldKind.GRADE_LEVEL, value)

    def set_primary_competence(self, value: str) -> None:
        """Make ``value`` the primary competence.

        A competence cannot be primary and secondary at once, so it is
        dropped from the secondary competences if it was there.
        """
        self._primary_competence = self._checked(FieldKind.COMPETENCE, value)
        self._secondary_competences.pop(value, None)

    # =========================================================================
    # Flags and multi-select fields
    # =========================================================================

    def set_skill_flag(self, name: Union[Skill, str], enabled: bool) -> None:
        self._skills.set(name, enabled)

    def toggle_secondary_competence(self, value: str, included: bool) -> None:
        """Add or remove a secondary competence.

        Raises:
            InvalidEnumValue: if ``value`` is not a competence
            ConflictsWithPrimary: if including the current primary competence
            FieldNotAvailable: outside the character-driven form
        """
        self._require_character_driven("secondary_competences")
        self._checked(FieldKind.COMPETENCE, value)
        if included and value == self._primary_competence:
            raise ConflictsWithPrimary(value)
        self._toggle(self._secondary_competences, value, included)

    def toggle_transversal_approach(self, value: str, included: bool) -> None:
        self._checked(FieldKind.TRANSVERSAL_APPROACH, value)
        self._toggle(self._transversal_approaches, value, included)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self) -> None:
        """Return every field to its default."""
        self._title = ""
        self._context_value: Optional[str] = None
        self._page_length: Optional[str] = None
        self._grade_level: Optional[str] = None
        self._characters = ""
        self._primary_competence: Optional[str] = None
        # dicts keep insertion order and double as ordered sets
        self._secondary_competences: dict[str, None] = {}
        self._transversal_approaches: dict[str, None] = {}
        self._skills.clear()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _checked(self, kind: FieldKind, value: str) -> str:
        if not self._catalogs.contains(kind, value):
            raise InvalidEnumValue(kind, value)
        return value

    def _require_character_driven(self, field_name: str) -> None:
        if not self.character_driven:
            raise FieldNotAvailable(field_name)

    @staticmethod
    def _toggle(selected: dict[str, None], value: str, included: bool) -> None:
        if included:
            selected.setdefault(value, None)
        else:
            selected.pop(value, None)

    def __repr__(self) -> str:
        return (
            f"ConfigurationState(context_mode={self._catalogs.context_mode.value!r}, "
            f"page_length_mode={self._catalogs.page_length_mode.value!r}, "
            f"title={self._title!r}, context={self._context_value!r}, "
            f"grade_level={self._grade_level!r}, page_length={self._page_length!r}, "
            f"primary_competence={self._primary_competence!r})"
        )
