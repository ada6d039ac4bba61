"""Services built on top of the story configuration core."""

from .generation import (
    LoggingStoryGenerator,
    StoryGenerator,
    StoryRequestService,
    SubmissionResult,
)

__all__ = [
    "LoggingStoryGenerator",
    "StoryGenerator",
    "StoryRequestService",
    "SubmissionResult",
]
