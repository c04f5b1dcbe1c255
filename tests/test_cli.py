"""
Tests for bibleref/cli.py - Command-Line Interface.
"""
import json

import pytest
from typer.testing import CliRunner

from bibleref import config as config_module
from bibleref.cli import app
from bibleref.observability import shutdown_logging

pytestmark = pytest.mark.cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """Fresh config per test; remove handlers bound to the runner's streams."""
    for key in ("BIBLEREF_ENV", "BIBLEREF_OUTPUT", "DEBUG", "LOG_LEVEL",
                "LOG_TO_FILE", "LOG_FILE", "LOG_FORMAT", "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    yield
    shutdown_logging()


class TestParse:
    """Tests for the parse command."""

    def test_text_output(self):
        result = runner.invoke(app, ["parse", "gen 1:1 - exod 5", "--output", "text"])
        assert result.exit_code == 0
        assert result.output.strip() == "Genesis 1:1 - Exodus 5:23"

    def test_json_output(self):
        result = runner.invoke(app, ["parse", "Jude 3-5", "-o", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["reference"] == "Jude 3-5"
        assert data["start_book"] == "Jude"
        assert data["end_verse"] == 5
        assert data["encoded"] == {"start": 65001003, "end": 65001005}

    def test_table_output(self):
        result = runner.invoke(app, ["parse", "John 3:16"])
        assert result.exit_code == 0
        assert "John 3:16" in result.output
        assert "43003016" in result.output

    def test_default_output_from_environment(self, monkeypatch):
        monkeypatch.setenv("BIBLEREF_OUTPUT", "text")
        result = runner.invoke(app, ["parse", "rev 22:21"])
        assert result.exit_code == 0
        assert result.output.strip() == "Revelation 22:21"

    def test_bad_output_setting_falls_back_to_table(self, monkeypatch):
        monkeypatch.setenv("BIBLEREF_OUTPUT", "yaml")
        result = runner.invoke(app, ["parse", "John 3:16"])
        assert result.exit_code == 0
        assert "Config warning" in result.output
        assert "43003016" in result.output

    @pytest.mark.parametrize("text, message", [
        ("Jude 32", "Jude only has 25 verses"),
        ("Mark 2-1", "End chapter must come after start chapter"),
        ("hello", "No valid reference found"),
    ])
    def test_invalid_reference(self, text, message):
        result = runner.invoke(app, ["parse", text])
        assert result.exit_code == 1
        assert f"Error: {message}" in result.output


class TestEncodeDecode:
    """Tests for the encode and decode commands."""

    def test_encode(self):
        result = runner.invoke(app, ["encode", "Gen 1:1"])
        assert result.exit_code == 0
        assert result.output.strip() == "1001001 1001001"

    def test_encode_invalid(self):
        result = runner.invoke(app, ["encode", "Gen 51"])
        assert result.exit_code == 1
        assert "Genesis only has 50 chapters" in result.output

    def test_decode(self):
        result = runner.invoke(app, ["decode", "1001001", "66005014", "-o", "text"])
        assert result.exit_code == 0
        assert result.output.strip() == "Genesis 1:1 - Revelation 5:14"

    def test_decode_invalid_book(self):
        result = runner.invoke(app, ["decode", "67001001", "67001001"])
        assert result.exit_code == 1
        assert "Invalid book number" in result.output


class TestBooks:
    """Tests for the books command."""

    def test_lists_every_book(self):
        result = runner.invoke(app, ["books"])
        assert result.exit_code == 0
        assert "Genesis" in result.output
        assert "Song of Solomon" in result.output
        assert "Revelation" in result.output


class TestConfiguration:
    """Tests for configuration problems at startup."""

    def test_unknown_environment(self, monkeypatch):
        monkeypatch.setenv("BIBLEREF_ENV", "staging")
        result = runner.invoke(app, ["parse", "John 3:16"])
        assert result.exit_code == 2
        assert "Config error: Unknown environment 'staging'" in result.output
        assert "Traceback" not in result.output

    def test_failure_is_logged_with_context(self, monkeypatch, tmp_path):
        log_file = tmp_path / "bibleref.log"
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_TO_FILE", "true")
        monkeypatch.setenv("LOG_FILE", str(log_file))

        result = runner.invoke(app, ["parse", "Jude 32"])
        assert result.exit_code == 1
        shutdown_logging()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        failed = [r for r in records if r["event"] == "Command failed"]
        assert len(failed) == 1
        assert failed[0]["error_code"] == "BOUNDS_ERROR"
        assert failed[0]["reason"] == "Jude only has 25 verses"
        assert failed[0]["context"]["input_text"] == "Jude 32"
        assert failed[0]["context"]["metadata"] == {"command": "parse"}
