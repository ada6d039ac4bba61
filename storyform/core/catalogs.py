"""
Catalogs of legal values for the enumerated story fields.

A CatalogSet bundles the catalogs active for one form session. The four
possible sets (context mode x page length mode) are built once at import
and shared; nothing mutates them afterwards.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

from ..config import catalogs as literals
from ..models.enums import ContextMode, FieldKind, PageLengthMode


class Catalog:
    """Ordered, read-only list of permitted values with set-backed lookup."""

    __slots__ = ("_values", "_members")

    def __init__(self, values: Iterable[str]):
        self._values = tuple(dict.fromkeys(values))
        self._members = frozenset(self._values)

    @property
    def values(self) -> tuple[str, ...]:
        return self._values

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._members
        except TypeError:
            # Unhashable input is never a member
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Catalog({list(self._values)!r})"


@dataclass(frozen=True)
class CatalogSet:
    """The catalogs active for one configuration session."""

    context_mode: ContextMode
    page_length_mode: PageLengthMode
    context: Catalog
    page_length: Catalog
    grade_level: Catalog
    competence: Catalog
    transversal_approach: Catalog
    _by_kind: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_kind", {
            FieldKind.CONTEXT: self.context,
            FieldKind.PAGE_LENGTH: self.page_length,
            FieldKind.GRADE_LEVEL: self.grade_level,
            FieldKind.COMPETENCE: self.competence,
            FieldKind.TRANSVERSAL_APPROACH: self.transversal_approach,
        })

    @property
    def character_driven(self) -> bool:
        """Genre stories carry characters and secondary competences."""
        return self.context_mode is ContextMode.GENRE

    def catalog(self, kind: FieldKind) -> Catalog:
        return self._by_kind[FieldKind(kind)]

    def values(self, kind: FieldKind) -> tuple[str, ...]:
        """Ordered values for one field, as shown to the user."""
        return self.catalog(kind).values

    def contains(self, kind: FieldKind, value: object) -> bool:
        return value in self.catalog(kind)


# Shared catalogs (identical across every form variant)
GRADE_LEVEL_CATALOG = Catalog(literals.GRADE_LEVELS)
COMPETENCE_CATALOG = Catalog(literals.COMPETENCES)
TRANSVERSAL_APPROACH_CATALOG = Catalog(literals.TRANSVERSAL_APPROACHES)

CONTEXT_CATALOGS: dict[ContextMode, Catalog] = {
    ContextMode.GENRE: Catalog(literals.GENRES),
    ContextMode.EDUCATIONAL_CONTEXT: Catalog(literals.EDUCATIONAL_CONTEXTS),
}

PAGE_LENGTH_CATALOGS: dict[PageLengthMode, Catalog] = {
    PageLengthMode.PAGE_COUNT: Catalog(literals.PAGE_COUNT_BUCKETS),
    PageLengthMode.SINGLE_PAGE: Catalog(literals.SINGLE_PAGE_BUCKETS),
}

_CATALOG_SETS: dict[tuple[ContextMode, PageLengthMode], CatalogSet] = {
    (context_mode, page_length_mode): CatalogSet(
        context_mode=context_mode,
        page_length_mode=page_length_mode,
        context=CONTEXT_CATALOGS[context_mode],
        page_length=PAGE_LENGTH_CATALOGS[page_length_mode],
        grade_level=GRADE_LEVEL_CATALOG,
        competence=COMPETENCE_CATALOG,
        transversal_approach=TRANSVERSAL_APPROACH_CATALOG,
    )
    for context_mode in ContextMode
    for page_length_mode in PageLengthMode
}


def get_catalog_set(
    context_mode: Union[ContextMode, str] = ContextMode.GENRE,
    page_length_mode: Union[PageLengthMode, str] = PageLengthMode.PAGE_COUNT,
) -> CatalogSet:
    """
    Return the shared CatalogSet for a mode combination.

    Raises:
        ValueError: if either mode name is unknown
    """
    return _CATALOG_SETS[(ContextMode(context_mode), PageLengthMode(page_length_mode))]
