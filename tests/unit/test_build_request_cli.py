"""Tests for cli/build_request.py."""

import importlib.util
import json
from pathlib import Path

import pytest

from tests.unit.catalog_values import GRADE, PAGES, READING, WRITING

CLI_PATH = Path(__file__).resolve().parents[2] / "cli" / "build_request.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("build_request_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def restore_root_logger():
    import logging

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _complete_args():
    return [
        "--title", "El zorro viajero",
        "--context", "Aventura",
        "--grade", GRADE,
        "--pages", PAGES,
        "--primary", READING,
    ]


class TestBuildRequestCli:
    """Tests for the build_request CLI."""

    def test_prints_request_json(self, cli, capsys):
        """A complete form should print the request as JSON."""
        code = cli.main(_complete_args() + [
            "--skill", "literal_comprehension",
            "--secondary", WRITING,
            "--approach", "Enfoque Ambiental",
            "--characters", "Un zorro curioso",
        ])

        assert code == cli.EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload["title"] == "El zorro viajero"
        assert payload["grade_level"] == GRADE
        assert payload["targeted_skills"] == ["literal_comprehension"]
        assert payload["secondary_competences"] == [WRITING]
        assert payload["transversal_approaches"] == ["Enfoque Ambiental"]
        assert payload["characters"] == "Un zorro curioso"

    def test_reports_all_missing_fields(self, cli, capsys):
        """Every missing field should be reported on stderr."""
        code = cli.main(["--title", "El zorro viajero"])

        assert code == cli.EXIT_INCOMPLETE
        err = capsys.readouterr().err
        assert err.count("Missing:") == 4
        assert "grade level" in err

    def test_invalid_value(self, cli, capsys):
        """A value outside its catalog should exit with the invalid code."""
        code = cli.main(_complete_args() + ["--approach", "Enfoque Gastronómico"])

        assert code == cli.EXIT_INVALID
        assert "Enfoque Gastronómico" in capsys.readouterr().err

    def test_primary_as_secondary_conflicts(self, cli, capsys):
        """Repeating the primary competence as secondary should be rejected."""
        code = cli.main(_complete_args() + ["--secondary", READING])

        assert code == cli.EXIT_INVALID
        assert "primary competence" in capsys.readouterr().err

    def test_characters_rejected_in_educational_mode(self, cli, capsys):
        """Characters should be rejected in educational mode."""
        code = cli.main([
            "--context-mode", "educational_context",
            "--page-length-mode", "single_page",
            "--characters", "Un zorro",
        ])

        assert code == cli.EXIT_INVALID
        assert "character-driven" in capsys.readouterr().err

    def test_list_catalogs(self, cli, capsys):
        """Listing catalogs should show the active mode's values and skills."""
        code = cli.main(["--list-catalogs", "--context-mode", "educational_context"])

        assert code == cli.EXIT_OK
        out = capsys.readouterr().out
        assert "Convivencia escolar" in out
        assert "Aventura" not in out
        assert "Comprensión literal" in out
