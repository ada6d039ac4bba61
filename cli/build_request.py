#!/usr/bin/env python3
"""
CLI for building a story generation request from form parameters.

Usage:
    python cli/build_request.py --grade "Primaria 3° (8 años)" --pages "6-10 páginas" \
        --context Aventura --primary "Lee diversos tipos de textos escritos en su lengua materna"
    python cli/build_request.py --list-catalogs --context-mode educational_context
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storyform.config import SKILL_LABELS, load_settings  # noqa: E402
from storyform.core import BuildResult, ConfigurationError, ConfigurationState, get_catalog_set  # noqa: E402
from storyform.logging import configure_logging  # noqa: E402
from storyform.models import ContextMode, FieldKind, PageLengthMode, Skill  # noqa: E402
from storyform.services import LoggingStoryGenerator, StoryRequestService  # noqa: E402

EXIT_OK = 0
EXIT_INCOMPLETE = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a validated story generation request from form parameters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/build_request.py --title "El zorro viajero" --context Aventura \\
        --grade "Primaria 3° (8 años)" --pages "6-10 páginas" \\
        --primary "Lee diversos tipos de textos escritos en su lengua materna"
    python cli/build_request.py ... --skill literal_comprehension --approach "Enfoque Ambiental"
    python cli/build_request.py --list-catalogs
        """,
    )

    parser.add_argument("--title", type=str, default=None, help="Title or short summary of the story")
    parser.add_argument("--context", type=str, default=None, help="Genre or educational context")
    parser.add_argument("--pages", type=str, default=None, help="Page length bucket")
    parser.add_argument("--grade", type=str, default=None, help="Grade level")
    parser.add_argument(
        "--characters",
        type=str,
        default=None,
        help="Main characters (genre mode only)",
    )
    parser.add_argument(
        "--skill",
        action="append",
        default=[],
        choices=[skill.value for skill in Skill],
        help="Skill to develop (repeatable)",
    )
    parser.add_argument("--primary", type=str, default=None, help="Primary competence")
    parser.add_argument(
        "--secondary",
        action="append",
        default=[],
        help="Secondary competence (repeatable, genre mode only)",
    )
    parser.add_argument(
        "--approach",
        action="append",
        default=[],
        help="Transversal approach (repeatable)",
    )

    parser.add_argument(
        "--context-mode",
        choices=[mode.value for mode in ContextMode],
        default=None,
        help="Context catalog to use (default: STORYFORM_CONTEXT_MODE or genre)",
    )
    parser.add_argument(
        "--page-length-mode",
        choices=[mode.value for mode in PageLengthMode],
        default=None,
        help="Page length catalog to use (default: STORYFORM_PAGE_LENGTH_MODE or page_count)",
    )
    parser.add_argument(
        "--list-catalogs",
        action="store_true",
        help="Print the active catalogs and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log submission events to stderr",
    )
    return parser


def apply_arguments(state: ConfigurationState, args: argparse.Namespace) -> None:
    """Apply parsed arguments through the state's mutators."""
    if args.title is not None:
        state.set_title(args.title)
    if args.context is not None:
        state.set_context(args.context)
    if args.pages is not None:
        state.set_page_length(args.pages)
    if args.grade is not None:
        state.set_grade_level(args.grade)
    if args.characters is not None:
        state.set_characters(args.characters)
    for skill in args.skill:
        state.set_skill_flag(skill, True)
    if args.primary is not None:
        state.set_primary_competence(args.primary)
    for competence in args.secondary:
        state.toggle_secondary_competence(competence, True)
    for approach in args.approach:
        state.toggle_transversal_approach(approach, True)


def print_catalogs(state: ConfigurationState) -> None:
    catalogs = state.catalogs
    print(f"Context mode: {catalogs.context_mode.value}")
    print(f"Page length mode: {catalogs.page_length_mode.value}")
    for kind in FieldKind:
        print(f"\n[{kind.value}]")
        for value in catalogs.values(kind):
            print(f"  {value}")
    print("\n[skills]")
    for name, label in SKILL_LABELS.items():
        print(f"  {name}: {label}")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(
        json_format=settings.json_logs,
        level=settings.log_level if args.verbose else max(settings.log_level, logging.WARNING),
    )

    service = StoryRequestService(LoggingStoryGenerator(), settings=settings)
    catalogs = get_catalog_set(
        args.context_mode or settings.context_mode,
        args.page_length_mode or settings.page_length_mode,
    )
    state = service.start_session(catalogs)

    if args.list_catalogs:
        print_catalogs(state)
        return EXIT_OK

    try:
        apply_arguments(state, args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    outcome = service.submit(state)
    if isinstance(outcome, BuildResult):
        for failure in outcome.failures:
            print(f"Missing: {failure.message}", file=sys.stderr)
        return EXIT_INCOMPLETE

    print(json.dumps(outcome.request.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
