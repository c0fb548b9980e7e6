"""Tests for studygen/main.py module."""

import json
from unittest.mock import patch

import litellm
import pytest

from studygen.llm.client import MalformedResponseError
from studygen.main import build_parser, main


@pytest.fixture
def course_file(tmp_path):
    """A course content file on disk."""
    path = tmp_path / "cours.txt"
    path.write_text("La photosynthèse convertit la lumière en énergie.", encoding="utf-8")
    return path


class TestArgumentParsing:
    """Tests for argument parsing."""

    def test_synthesis_defaults(self):
        args = build_parser().parse_args(["synthesis", "cours.txt"])

        assert args.command == "synthesis"
        assert args.style == "Standard"
        assert args.words == 500

    def test_quiz_options(self):
        args = build_parser().parse_args(
            ["quiz", "cours.txt", "--count", "5", "--type", "Flashcards"]
        )

        assert args.count == 5
        assert args.item_type == "Flashcards"
        assert args.validate is False

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])

        assert exc_info.value.code == 2


class TestMainExecution:
    """Tests for main() execution."""

    def test_missing_file_returns_error(self, tmp_path, capsys):
        code = main(["synthesis", str(tmp_path / "absent.txt")])

        assert code == 1
        assert "file not found" in capsys.readouterr().err

    def test_non_utf8_file_returns_error(self, tmp_path, capsys):
        path = tmp_path / "cours.txt"
        path.write_bytes(b"\xff\xfe\xfa not utf-8")

        with patch("studygen.main.generate_synthesis") as mock:
            code = main(["synthesis", str(path)])

        assert code == 1
        assert "is not valid UTF-8" in capsys.readouterr().err
        mock.assert_not_called()

    def test_invalid_settings_return_error(
        self, course_file, tmp_path, monkeypatch, capsys
    ):
        """Test that a bad LLM_API_BASE is reported instead of a traceback."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LLM_API_BASE", "not-a-url")

        with patch("studygen.main.generate_quiz_or_flashcards") as mock:
            code = main(["quiz", str(course_file)])

        assert code == 1
        assert "invalid LLM_* settings" in capsys.readouterr().err
        mock.assert_not_called()

    def test_synthesis_prints_html(self, course_file, capsys):
        with patch(
            "studygen.main.generate_synthesis", return_value="<h2>Résumé</h2>"
        ) as mock:
            code = main(["synthesis", str(course_file), "--style", "Bullet Points"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "<h2>Résumé</h2>"
        args = mock.call_args.args
        assert args[0].startswith("La photosynthèse")
        assert args[1:3] == ("Bullet Points", 500)

    def test_quiz_prints_json(self, course_file, capsys):
        payload = {"flashcards": [{"term": "Chlorophylle", "definition": "Pigment vert."}]}
        with patch(
            "studygen.main.generate_quiz_or_flashcards", return_value=payload
        ):
            code = main(["quiz", str(course_file), "--type", "Flashcards"])

        assert code == 0
        out = capsys.readouterr().out
        assert json.loads(out) == payload
        assert "Chlorophylle" in out

    def test_validate_rejects_wrong_shape(self, course_file, capsys):
        payload = {"quiz": [{"question": "Q?"}]}
        with patch(
            "studygen.main.generate_quiz_or_flashcards", return_value=payload
        ):
            code = main(["quiz", str(course_file), "--validate"])

        assert code == 1
        assert "unexpected item shape" in capsys.readouterr().err

    def test_malformed_response_returns_error(self, course_file, capsys):
        with patch(
            "studygen.main.generate_quiz_or_flashcards",
            side_effect=MalformedResponseError("quiz", "Response is not valid JSON", "{"),
        ):
            code = main(["quiz", str(course_file)])

        assert code == 1
        assert "[quiz] Response is not valid JSON" in capsys.readouterr().err

    def test_provider_error_returns_error(self, course_file, capsys):
        error = litellm.exceptions.APIError(
            status_code=401,
            message="Invalid API key",
            llm_provider="gemini",
            model="gemini-2.5-flash",
        )
        with patch("studygen.main.generate_synthesis", side_effect=error):
            code = main(["synthesis", str(course_file)])

        assert code == 1
        assert "APIError" in capsys.readouterr().err
