"""Tests for the iiif-request CLI."""

from __future__ import annotations

import json
import re

import pytest
from typer.testing import CliRunner

from iiif_request import __version__
from iiif_request.config import settings
from iiif_request.cli.main import app

runner = CliRunner()


# =============================================================================
# Version Command
# =============================================================================


class TestVersionCommand:
    """Tests for `iiif-request version`."""

    def test_version_outputs_version_string(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"iiif-request {__version__}" in result.stdout

    def test_version_json_output(self) -> None:
        result = runner.invoke(app, ["version", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["version"] == __version__


# =============================================================================
# Canonicalize Command
# =============================================================================


class TestCanonicalizeCommand:
    """Tests for `iiif-request canonicalize`."""

    def test_requires_dimensions(self) -> None:
        result = runner.invoke(app, ["canonicalize", "full/full/0/default.jpg"])
        assert result.exit_code != 0

    def test_rejects_non_positive_dimensions(self) -> None:
        result = runner.invoke(
            app,
            ["canonicalize", "full/full/0/default.jpg", "-W", "0", "-H", "10"],
        )
        assert result.exit_code != 0

    def test_valid_request(self) -> None:
        result = runner.invoke(
            app,
            [
                "canonicalize",
                "pct:50,50,100,100/max/!90.0/gray.png",
                "--width",
                "101",
                "--height",
                "101",
                "--id",
                "moomin",
            ],
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "moomin/50,50,51,51/full/!90/gray.png"

    def test_lenient_invalid_request_exits_nonzero(self) -> None:
        result = runner.invoke(
            app,
            [
                "canonicalize",
                "110,110,100,100/full/0/default.jpg",
                "-W",
                "101",
                "-H",
                "101",
                "--lenient",
            ],
        )
        assert result.exit_code == 1
        assert result.stdout.splitlines()[0] == "image/110,110,0,0/full/0/default.jpg"

    def test_strict_invalid_request_reports_error(self) -> None:
        result = runner.invoke(
            app,
            [
                "canonicalize",
                "full/full/361/default.jpg",
                "-W",
                "10",
                "-H",
                "10",
                "--strict",
                "--json",
            ],
        )
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert "Invalid rotation parameter" in data["error"]

    def test_malformed_path_reports_error(self) -> None:
        result = runner.invoke(
            app, ["canonicalize", "full/full", "-W", "10", "-H", "10", "--json"]
        )
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert "path segments" in data["error"]

    def test_json_output(self) -> None:
        result = runner.invoke(
            app,
            ["canonicalize", "0,0,10,10/5,/0/default.jpg", "-W", "10", "-H", "10", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["valid"] is True
        assert data["canonical_path"] == "image/full/5,/0/default.jpg"
        assert data["parameters"]["size"]["raw_value"] == "5,"


    @pytest.fixture
    def json_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Render CLI log events as JSON lines."""
        monkeypatch.setattr(settings, "LOG_FORMAT", "json")

    @staticmethod
    def _log_events(stdout: str) -> list[dict[str, object]]:
        return [json.loads(line) for line in stdout.splitlines() if line.startswith("{")]

    @pytest.mark.usefixtures("json_logging")
    def test_log_events_carry_request_id(self) -> None:
        result = runner.invoke(
            app,
            [
                "canonicalize",
                "full/full/0/default.jpg",
                "-W",
                "10",
                "-H",
                "10",
                "--id",
                "moomin",
                "--request-id",
                "req-42",
                "-v",
            ],
        )
        assert result.exit_code == 0
        events = [
            event
            for event in self._log_events(result.stdout)
            if event["event"] == "Request canonicalized"
        ]
        assert events
        assert events[-1]["request_id"] == "req-42"
        assert events[-1]["identifier"] == "moomin"

    @pytest.mark.usefixtures("json_logging")
    def test_request_id_generated_per_invocation(self) -> None:
        args = ["canonicalize", "full/full/0/default.jpg", "-W", "10", "-H", "10", "-v"]
        request_ids = []
        for _ in range(2):
            result = runner.invoke(app, args)
            assert result.exit_code == 0
            events = self._log_events(result.stdout)
            assert events
            request_ids.append(events[-1]["request_id"])
        assert all(re.fullmatch(r"[0-9a-f]{32}", str(rid)) for rid in request_ids)
        assert request_ids[0] != request_ids[1]


def test_no_command_shows_help() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "canonicalize" in result.stdout
