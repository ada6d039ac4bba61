"""Hand finished story configurations to a story generator."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

from ..config.settings import Settings, load_settings
from ..core.catalogs import CatalogSet
from ..core.request_builder import BuildResult, build_request
from ..core.state import ConfigurationState
from ..logging import RequestLogger, request_logger
from ..models.requests import GenerationRequest

logger = logging.getLogger(__name__)


class StoryGenerator(Protocol):
    """Collaborator that turns a request into a story (outside this package)."""

    def submit(self, request: GenerationRequest) -> Any:
        ...


class LoggingStoryGenerator:
    """Placeholder generator that only records what it was asked to generate."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def submit(self, request: GenerationRequest) -> dict:
        payload = request.model_dump(mode="json")
        self.log.info("Generating story with data: %s", payload)
        return payload


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submit that passed validation."""

    session_id: str
    request: GenerationRequest
    result: Any


class StoryRequestService:
    """Creates form sessions and submits their requests to a generator."""

    def __init__(
        self,
        generator: StoryGenerator,
        settings: Optional[Settings] = None,
        events: Optional[RequestLogger] = None,
    ):
        self.generator = generator
        self.settings = settings or load_settings()
        self.events = events or request_logger

    def start_session(self, catalogs: Optional[CatalogSet] = None) -> ConfigurationState:
        """Create an empty configuration using ``catalogs`` or the configured set."""
        return ConfigurationState(catalogs or self.settings.catalog_set())

    def submit(self, state: ConfigurationState) -> Union[BuildResult, SubmissionResult]:
        """
        Build the request for ``state`` and pass it to the generator.

        Returns the failing BuildResult when the configuration is incomplete
        (the generator is not called), otherwise a SubmissionResult. The
        state is left as is; resetting it is up to the caller.

        Raises:
            Exception: whatever the generator raises, after logging it
        """
        session_id = state.session_id
        built = build_request(state)
        if not built.ok:
            self.events.validation_failed(session_id, [failure.value for failure in built.failures])
            return built

        request = built.request
        self.events.request_built(session_id, request.context_mode.value, request.page_length_mode.value)
        try:
            result = self.generator.submit(request)
        except Exception as e:
            self.events.submission_failed(session_id, e)
            raise

        self.events.request_submitted(session_id)
        return SubmissionResult(session_id=session_id, request=request, result=result)
