"""
Turn a ConfigurationState into a GenerationRequest.

Completeness rules run in a fixed order and every failing rule is reported,
so a form can show all problems after a single submit.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from ..models.enums import ValidationFailure
from ..models.requests import GenerationRequest
from .errors import RequestValidationError
from .state import ConfigurationState


@dataclass(frozen=True)
class BuildResult:
    """Either a built request or the ordered failures that prevented it."""

    request: Optional[GenerationRequest] = None
    failures: tuple[ValidationFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return self.request is not None

    def raise_for_failures(self) -> GenerationRequest:
        """Return the request, or raise RequestValidationError with the failures."""
        if self.request is None:
            raise RequestValidationError(self.failures)
        return self.request


def _has_title_or_context(state: ConfigurationState) -> bool:
    return bool(state.title.strip()) or state.context_value is not None


# (rule, failure) pairs in reporting order
COMPLETENESS_RULES: tuple[tuple[Callable[[ConfigurationState], bool], ValidationFailure], ...] = (
    (lambda state: state.grade_level is not None, ValidationFailure.MISSING_GRADE_LEVEL),
    (lambda state: state.page_length is not None, ValidationFailure.MISSING_PAGE_LENGTH),
    (lambda state: state.context_value is not None, ValidationFailure.MISSING_CONTEXT),
    (lambda state: state.primary_competence is not None, ValidationFailure.MISSING_PRIMARY_COMPETENCE),
    (_has_title_or_context, ValidationFailure.MISSING_TITLE_OR_CONTEXT),
)


def validate(state: ConfigurationState) -> tuple[ValidationFailure, ...]:
    """Return every completeness failure for ``state``, in rule order."""
    return tuple(failure for rule, failure in COMPLETENESS_RULES if not rule(state))


def build_request(state: ConfigurationState) -> BuildResult:
    """
    Validate ``state`` and snapshot it into an immutable GenerationRequest.

    The request copies every value (sequences become tuples), so later
    mutation of ``state`` never reaches a request that was already built.
    Failures are returned as data; nothing is raised for an incomplete form.
    """
    failures = validate(state)
    if failures:
        return BuildResult(failures=failures)

    catalogs = state.catalogs
    request = GenerationRequest(
        context_mode=catalogs.context_mode,
        page_length_mode=catalogs.page_length_mode,
        title=state.title,
        context=state.context_value,
        page_length=state.page_length,
        grade_level=state.grade_level,
        characters=state.characters,
        skills=state.skill_snapshot(),
        primary_competence=state.primary_competence,
        secondary_competences=state.secondary_competences,
        transversal_approaches=state.transversal_approaches,
    )
    return BuildResult(request=request)
